import os
from collections import Counter
from typing import Iterable, Iterator, Tuple, Union

from portfolio.exceptions import DuplicatePostError, PostNotFound
from portfolio.schemas.blog import Post
from portfolio.services.post_loader import DEFAULT_EXTENSION, load_all


class PostStore:
    """
    Read-only collection of published posts, built once at startup.

    Posts are frozen models, so handing them out needs no copying and
    concurrent readers need no locking.
    """

    def __init__(self, posts: Iterable[Post] = ()):
        self._posts: Tuple[Post, ...] = tuple(posts)

        duplicates = sorted(
            slug for slug, count in Counter(p.slug for p in self._posts).items()
            if count > 1
        )
        if duplicates:
            raise DuplicatePostError(f"Duplicate post identifiers: {duplicates}")

    @classmethod
    def from_directory(
        cls,
        directory: Union[str, os.PathLike],
        *,
        extension: str = DEFAULT_EXTENSION,
        require_title: bool = False,
    ) -> "PostStore":
        return cls(
            load_all(directory, extension=extension, require_title=require_title)
        )

    def list_all(self) -> Tuple[Post, ...]:
        return self._posts

    def find_by_identifier(self, identifier: str) -> Post:
        for post in self._posts:
            if post.slug == identifier:
                return post
        raise PostNotFound(identifier)

    def __len__(self) -> int:
        return len(self._posts)

    def __iter__(self) -> Iterator[Post]:
        return iter(self._posts)
