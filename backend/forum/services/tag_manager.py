"""Tag Manager — SQLAlchemy implementation of the TagManager protocol.

Invariants:
    - get_tag_by_name compares case-insensitively
    - delete_tag removes post_tags rows first (no ORM collection on Tag to cascade through)
"""

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from forum.models.tag import Tag, post_tags


class SqlTagManager:
    """Tag persistence over an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_all_tags(self) -> list[Tag]:
        result = await self.db.execute(select(Tag).order_by(Tag.name))
        return list(result.scalars().all())

    async def get_tag(self, tag_id: int) -> Tag | None:
        result = await self.db.execute(select(Tag).where(Tag.id == tag_id))
        return result.scalar_one_or_none()

    async def get_tags(self, tag_ids: list[int]) -> list[Tag]:
        if not tag_ids:
            return []
        result = await self.db.execute(
            select(Tag).where(Tag.id.in_(tag_ids)).order_by(Tag.name),
        )
        return list(result.scalars().all())

    async def get_tag_by_name(self, name: str) -> Tag | None:
        result = await self.db.execute(
            select(Tag).where(func.lower(Tag.name) == name.lower()),
        )
        return result.scalar_one_or_none()

    def add_tag(self, tag: Tag) -> None:
        self.db.add(tag)

    async def delete_tag(self, tag: Tag) -> None:
        await self.db.execute(
            delete(post_tags).where(post_tags.c.tag_id == tag.id),
        )
        await self.db.delete(tag)

    async def save_changes(self) -> None:
        await self.db.commit()
