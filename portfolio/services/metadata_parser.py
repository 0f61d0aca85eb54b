import datetime
import re
from typing import Tuple

import yaml
from frontmatter.default_handlers import YAMLHandler
from pydantic import ValidationError

from portfolio.exceptions import InvalidDate, InvalidFrontMatter, MalformedMetadata
from portfolio.schemas.blog import PostMetadata

DATE_FORMAT = "%Y-%m-%d"
_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")

_handler = YAMLHandler()

# Scalars that YAML 1.1 would turn into dates or booleans stay text; pydantic
# does the typing, so `title: Yes` is a title and `date: 2024-13-40` reaches
# date validation.
_TEXT_SCALAR_TAGS = {"tag:yaml.org,2002:timestamp", "tag:yaml.org,2002:bool"}


class FrontMatterLoader(yaml.SafeLoader):
    pass


FrontMatterLoader.yaml_implicit_resolvers = {
    first: [
        (tag, regexp) for tag, regexp in resolvers if tag not in _TEXT_SCALAR_TAGS
    ]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def split_front_matter(text: str) -> Tuple[str, str]:
    """Split a content file into its metadata block and its markdown body.

    Anything before the first ``---`` line is discarded, and the body keeps
    any later ``---`` lines untouched.
    """
    try:
        block, body = _handler.split(text)
    except ValueError:
        raise InvalidFrontMatter() from None
    return block, body


def parse_metadata(block: str, *, require_title: bool = False) -> PostMetadata:
    """Decode a YAML metadata block into a validated PostMetadata."""
    try:
        raw = _handler.load(block, Loader=FrontMatterLoader)
    except (yaml.YAMLError, ValueError) as e:
        raise MalformedMetadata(f"error parsing frontmatter: {e}") from e

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise MalformedMetadata(
            f"error parsing frontmatter: expected a mapping, got {type(raw).__name__}"
        )

    try:
        metadata = PostMetadata.model_validate(raw)
    except ValidationError as e:
        raise MalformedMetadata(f"error parsing frontmatter: {e}") from e

    if require_title and not metadata.title.strip():
        raise MalformedMetadata("error parsing frontmatter: title is empty")

    parse_post_date(metadata.date)
    return metadata


def parse_post_date(value: str) -> datetime.date:
    if not value:
        raise InvalidDate("error parsing date: date is missing")
    if not _DATE_PATTERN.match(value):
        raise InvalidDate(f"error parsing date: {value!r} is not YYYY-MM-DD")
    try:
        return datetime.datetime.strptime(value, DATE_FORMAT).date()
    except ValueError as e:
        raise InvalidDate(f"error parsing date: {e}") from e
