"""Post Manager — SQLAlchemy implementation of the PostManager protocol.

Invariants:
    - get_all_posts orders newest first (date_created desc, id desc)
    - remove_post relies on the Post.replies ORM cascade and the post_tags secondary
"""

from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from forum.models.post import Post
from forum.models.tag import Tag


class SqlPostManager:
    """Post persistence over an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_all_posts(
        self, limit: int = 20, offset: int = 0, tag_id: int | None = None,
    ) -> list[Post]:
        query = select(Post).order_by(Post.date_created.desc(), Post.id.desc())
        if tag_id is not None:
            query = query.where(Post.tags.any(Tag.id == tag_id))
        query = query.limit(limit).offset(offset)
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def get_post(self, post_id: int) -> Post | None:
        result = await self.db.execute(select(Post).where(Post.id == post_id))
        return result.scalar_one_or_none()

    async def get_post_with_replies(self, post_id: int) -> Post | None:
        # Post.replies is selectin-loaded, so the plain lookup already carries them
        return await self.get_post(post_id)

    async def post_exists(self, post_id: int) -> bool:
        result = await self.db.execute(
            select(exists().where(Post.id == post_id)),
        )
        return bool(result.scalar())

    def add_post(self, post: Post) -> None:
        self.db.add(post)

    async def remove_post(self, post: Post) -> None:
        await self.db.delete(post)

    async def save_changes(self) -> None:
        await self.db.commit()
