"""Reply Schemas — request and response DTOs for replies.

Invariants:
    - ReplyRequest.text: 1-5000 chars after stripping
    - ReplyRequest.post_id must echo the post id of the route (checked by the route)
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from forum.models.reply import TEXT_MAX_LENGTH


class ReplyRequest(BaseModel):
    """Body of create/edit reply requests."""
    post_id: int
    text: str = Field(min_length=1, max_length=TEXT_MAX_LENGTH)

    @field_validator("text")
    @classmethod
    def strip_text(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("text cannot be empty or whitespace")
        return v


class ReplyResponse(BaseModel):
    """Reply as returned by the API."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    post_id: int
    author_id: int
    text: str
    date_created: datetime
    date_edited: datetime | None = None
