import datetime
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator


class PostMetadata(BaseModel):
    """Front-matter block of a content file, as written by the author."""

    model_config = ConfigDict(coerce_numbers_to_str=True, extra="ignore")

    title: str = ""
    excerpt: Optional[str] = None
    author: Optional[str] = None
    date: str = ""
    tags: List[str] = Field(default_factory=list)
    category: Optional[str] = None
    read_time: Optional[int] = None
    published: bool = False
    has_mermaid: bool = False
    has_code_blocks: bool = False

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data):
        # "key:" with no value decodes to None; treat it as absent
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class PostSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    slug: str
    title: str
    excerpt: Optional[str] = None
    author: Optional[str] = None
    date: datetime.date
    tags: Tuple[str, ...] = ()
    category: Optional[str] = None
    read_time: Optional[int] = None
    published: bool = False
    has_mermaid: bool = False
    has_code_blocks: bool = False


class Post(PostSummary):
    content: str  # rendered HTML, trusted

    def summary(self) -> PostSummary:
        return PostSummary(**self.model_dump(exclude={"content"}))
