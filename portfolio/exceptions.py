"""
Errors raised while turning content files into posts.
"""


class PostError(Exception):
    """A content file could not be turned into a post."""


class InvalidFrontMatter(PostError):
    """The file does not have a delimited metadata block."""

    def __init__(self, message: str = "invalid frontmatter format"):
        super().__init__(message)


class MalformedMetadata(PostError):
    """The metadata block is not valid YAML or has the wrong shape."""


class InvalidDate(PostError):
    """The date field is missing or is not a YYYY-MM-DD calendar date."""


class ConversionError(PostError):
    """The markdown body could not be converted to HTML."""


class DuplicatePostError(ValueError):
    """Two posts share the same identifier."""


class PostNotFound(LookupError):
    """No post with the requested identifier."""

    def __init__(self, identifier: str):
        super().__init__(identifier)
        self.identifier = identifier
