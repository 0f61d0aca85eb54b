import logging
import os
from pathlib import Path
from typing import List, Union

from portfolio.exceptions import PostError
from portfolio.schemas.blog import Post
from portfolio.services.body_converter import convert_body
from portfolio.services.metadata_parser import parse_metadata, split_front_matter

logger = logging.getLogger(__name__)

DEFAULT_EXTENSION = ".md"


def load_all(
    directory: Union[str, os.PathLike],
    *,
    extension: str = DEFAULT_EXTENSION,
    require_title: bool = False,
) -> List[Post]:
    """
    Load every published post from a content directory, newest first.

    A file that cannot be read or parsed is logged and skipped; it never
    aborts the load. Files are visited in name order, so posts sharing a date
    keep that order after the (stable) sort.
    """
    directory = Path(directory)
    try:
        names = sorted(os.listdir(directory))
    except OSError as e:
        logger.error(f"Error reading blog directory {directory}: {e}")
        return []

    candidates = [directory / name for name in names if name.endswith(extension)]

    posts = []
    for path in candidates:
        try:
            post = parse_post_file(
                path, extension=extension, require_title=require_title
            )
        except (PostError, OSError, UnicodeDecodeError) as e:
            logger.warning(f"Error parsing blog post {path.name}: {e}")
            continue

        if not post.published:
            logger.debug(f"Skipping unpublished post {post.slug}")
            continue
        posts.append(post)

    posts.sort(key=lambda p: p.date, reverse=True)
    logger.info(
        f"Loaded {len(posts)} published posts from {len(candidates)} files in {directory}"
    )
    return posts


def parse_post_file(
    path: Union[str, os.PathLike],
    *,
    extension: str = DEFAULT_EXTENSION,
    require_title: bool = False,
) -> Post:
    """Parse one content file into a Post, published or not."""
    path = Path(path)
    text = path.read_text(encoding="utf-8")

    block, body = split_front_matter(text)
    metadata = parse_metadata(block, require_title=require_title)
    content = convert_body(body)
    slug = slug_from_filename(path.name, extension)

    return Post(
        id=slug,
        slug=slug,
        title=metadata.title,
        excerpt=metadata.excerpt,
        content=content,
        author=metadata.author,
        date=metadata.date,  # already checked as YYYY-MM-DD
        tags=tuple(metadata.tags),
        category=metadata.category,
        read_time=metadata.read_time,
        published=metadata.published,
        has_mermaid=metadata.has_mermaid,
        has_code_blocks=metadata.has_code_blocks,
    )


def slug_from_filename(filename: str, extension: str = DEFAULT_EXTENSION) -> str:
    return filename.removesuffix(extension)
