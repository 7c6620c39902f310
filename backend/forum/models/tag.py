"""Tag ORM — named label attached to posts through post_tags.

Invariants:
    - name is unique
    - post_tags rows are removed by TagManager.delete_tag before the tag itself
"""

from sqlalchemy import Column, ForeignKey, Integer, String, Table
from sqlalchemy.orm import Mapped, mapped_column

from forum.db.base import Base


post_tags = Table(
    "post_tags",
    Base.metadata,
    Column(
        "post_id", Integer,
        ForeignKey("posts.id", ondelete="CASCADE"), primary_key=True,
    ),
    Column(
        "tag_id", Integer,
        ForeignKey("tags.id", ondelete="CASCADE"), primary_key=True,
    ),
)


class Tag(Base):
    """Tag entity."""
    __tablename__ = "tags"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)
