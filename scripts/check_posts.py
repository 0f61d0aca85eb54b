import logging
import sys
from pathlib import Path

from portfolio.exceptions import PostError
from portfolio.services.post_loader import parse_post_file
from portfolio.settings import settings

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def check_posts(directory: Path, extension: str) -> int:
    """Parse every content file and report it. Returns the number of failures."""
    failures = 0
    for path in sorted(directory.glob(f"*{extension}")):
        try:
            post = parse_post_file(
                path,
                extension=extension,
                require_title=settings.BLOG_REQUIRE_TITLE,
            )
        except (PostError, OSError, UnicodeDecodeError) as e:
            logger.error(f"{path.name}: {e}")
            failures += 1
            continue
        state = "published" if post.published else "draft"
        logger.info(f"{path.name}: {post.date} [{state}] {post.title!r}")
    return failures


if __name__ == "__main__":
    directory = Path(sys.argv[1]) if len(sys.argv) > 1 else settings.content_path
    failures = check_posts(directory, settings.BLOG_EXTENSION)
    if failures:
        logger.error(f"{failures} file(s) would be skipped")
        sys.exit(1)
    logger.info("All posts parsed successfully.")
