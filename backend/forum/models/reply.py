"""Reply ORM — a message posted under a Post.

Invariants:
    - Always belongs to a Post (post_id FK) and a User (author_id FK)
    - text is non-nullable, max 5000 chars
    - date_edited is stamped by the edit route, never by the DB
"""

from datetime import datetime, timezone

from sqlalchemy import Text, Integer, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from forum.db.base import Base

TEXT_MAX_LENGTH = 5000


class Reply(Base):
    """Reply entity."""
    __tablename__ = "replies"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    post_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("posts.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    author_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    text: Mapped[str] = mapped_column(Text, nullable=False)
    date_created: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    date_edited: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )

    # Relationships
    post: Mapped["Post"] = relationship("Post", back_populates="replies")
