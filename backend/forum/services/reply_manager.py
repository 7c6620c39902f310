"""Reply Manager — SQLAlchemy implementation of the ReplyManager protocol."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from forum.models.reply import Reply


class SqlReplyManager:
    """Reply persistence over an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_reply(self, reply_id: int) -> Reply | None:
        result = await self.db.execute(select(Reply).where(Reply.id == reply_id))
        return result.scalar_one_or_none()

    async def get_replies_for_post(self, post_id: int) -> list[Reply]:
        result = await self.db.execute(
            select(Reply).where(Reply.post_id == post_id).order_by(Reply.id),
        )
        return list(result.scalars().all())

    def add_reply(self, reply: Reply) -> None:
        self.db.add(reply)

    async def remove_reply(self, reply: Reply) -> None:
        await self.db.delete(reply)

    async def save_changes(self) -> None:
        await self.db.commit()
