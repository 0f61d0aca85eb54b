import datetime
from pathlib import Path

from portfolio.schemas.blog import Post

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "web" / "templates"


def write_post(
    directory: Path,
    name: str,
    *,
    title: str = "A Post",
    date: str = "2024-01-01",
    published: bool = True,
    body: str = "Body text.",
    extra: str = "",
) -> Path:
    """Write a content file with a YAML header into directory."""
    text = (
        "---\n"
        f"title: {title}\n"
        f"date: {date}\n"
        f"published: {str(published).lower()}\n"
        f"{extra}"
        "---\n"
        f"{body}\n"
    )
    path = directory / name
    path.write_text(text, encoding="utf-8")
    return path


def make_post(slug: str = "hello", **overrides) -> Post:
    data = {
        "id": slug,
        "slug": slug,
        "title": slug.replace("-", " ").title(),
        "date": datetime.date(2024, 1, 1),
        "content": "<p>hi</p>",
        "published": True,
    }
    data.update(overrides)
    return Post(**data)


class BoomStore:
    """
    Post store stand-in that fails on every query.
    """

    def list_all(self):
        raise RuntimeError("boom")

    def find_by_identifier(self, identifier: str):
        raise RuntimeError("boom")
