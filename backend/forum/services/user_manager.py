"""User Manager — accounts, credential checks, and account removal.

Invariants:
    - create_user returns False (no exception) when the username is taken
    - Passwords are hashed before the User is added to the session
    - delete removes the user's replies, posts (with all their replies and tag links), then the user
"""

import logging

from sqlalchemy import delete, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from forum.core.passwords import DEFAULT_ITERATIONS, hash_password, verify_password
from forum.models.post import Post
from forum.models.reply import Reply
from forum.models.tag import post_tags
from forum.models.user import User

logger = logging.getLogger(__name__)


class SqlUserManager:
    """User persistence over an AsyncSession."""

    def __init__(self, db: AsyncSession, hash_iterations: int = DEFAULT_ITERATIONS):
        self.db = db
        self.hash_iterations = hash_iterations

    async def authenticate(self, username: str, password: str) -> User | None:
        """Return the user when the credentials match, otherwise None."""
        user = await self.get_by_username(username)
        if user is None or not verify_password(password, user.password_hash):
            logger.info("Authentication failed for username=%s", username)
            return None
        return user

    async def get_all(self) -> list[User]:
        result = await self.db.execute(select(User).order_by(User.id))
        return list(result.scalars().all())

    async def get_by_id(self, user_id: int) -> User | None:
        return await self.db.get(User, user_id)

    async def get_by_username(self, username: str) -> User | None:
        result = await self.db.execute(
            select(User).where(User.username == username),
        )
        return result.scalar_one_or_none()

    async def create_user(self, user: User, password: str) -> bool:
        if await self.get_by_username(user.username) is not None:
            return False
        user.password_hash = hash_password(password, self.hash_iterations)
        self.db.add(user)
        return True

    async def delete(self, user: User) -> None:
        authored_posts = select(Post.id).where(Post.author_id == user.id)
        await self.db.execute(
            delete(Reply)
            .where(or_(Reply.author_id == user.id, Reply.post_id.in_(authored_posts)))
            .execution_options(synchronize_session="fetch"),
        )
        await self.db.execute(
            delete(post_tags).where(post_tags.c.post_id.in_(authored_posts)),
        )
        await self.db.execute(
            delete(Post)
            .where(Post.author_id == user.id)
            .execution_options(synchronize_session="fetch"),
        )
        await self.db.delete(user)

    async def save_changes(self) -> None:
        await self.db.commit()
