"""Post Schemas — request and response DTOs for posts.

Invariants:
    - PostRequest.title: 1-55 chars, PostRequest.text: 1-5000 chars, both stripped
    - tag_ids are de-duplicated, order preserved
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from forum.models.post import TEXT_MAX_LENGTH, TITLE_MAX_LENGTH
from forum.schemas.tag import TagResponse


class PostRequest(BaseModel):
    """Body of create/edit post requests."""
    title: str = Field(min_length=1, max_length=TITLE_MAX_LENGTH)
    text: str = Field(min_length=1, max_length=TEXT_MAX_LENGTH)
    tag_ids: list[int] = []

    @field_validator("title", "text")
    @classmethod
    def strip_value(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("value cannot be empty or whitespace")
        return v

    @field_validator("tag_ids")
    @classmethod
    def dedupe_tag_ids(cls, v: list[int]) -> list[int]:
        return list(dict.fromkeys(v))


class PostResponse(BaseModel):
    """Post as returned by the API."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    text: str
    author_id: int
    date_created: datetime
    date_edited: datetime | None = None
    tags: list[TagResponse] = []
    reply_count: int = 0


class PostListResponse(BaseModel):
    posts: list[PostResponse]
    limit: int
    offset: int
