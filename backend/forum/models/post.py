"""Post ORM — aggregate root of a discussion thread.

Invariants:
    - title is non-nullable, max 55 chars; text is non-nullable, max 5000 chars
    - author_id references the user who created the post
    - Deleting a post deletes its replies (ORM cascade) and its post_tags rows
    - date_edited is None until the first edit

Design Decisions:
    - replies/tags loaded with selectin: async sessions cannot lazy-load on attribute access
"""

from datetime import datetime, timezone

from sqlalchemy import String, Text, Integer, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from forum.db.base import Base
from forum.models.tag import post_tags

TITLE_MAX_LENGTH = 55
TEXT_MAX_LENGTH = 5000


class Post(Base):
    """Post entity — owns its replies."""
    __tablename__ = "posts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(TITLE_MAX_LENGTH), nullable=False)
    text: Mapped[str] = mapped_column(Text, nullable=False)
    author_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    date_created: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    date_edited: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )

    # Relationships
    replies: Mapped[list["Reply"]] = relationship(
        "Reply", back_populates="post",
        cascade="all, delete-orphan", lazy="selectin",
        order_by="Reply.id",
    )
    tags: Mapped[list["Tag"]] = relationship(
        "Tag", secondary=post_tags, lazy="selectin", order_by="Tag.name",
    )

    @property
    def reply_count(self) -> int:
        return len(self.replies)
