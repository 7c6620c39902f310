"""API Dependencies — manager providers and bearer-token authentication.

Invariants:
    - Every manager in one request is built on the same AsyncSession (get_db is cached per request)
    - get_current_user raises AuthenticationError (401) for a missing, invalid, or orphaned token

Design Decisions:
    - Routes depend on manager Protocols; overriding get_*_manager swaps implementations in tests
    - auto_error=False on the bearer scheme: the 401 body uses the ForumError envelope
"""

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.ext.asyncio import AsyncSession

from forum.config import get_settings
from forum.core.errors import AuthenticationError
from forum.core.manager_protocols import (
    PostManager, ReplyManager, TagManager, UserManager,
)
from forum.infrastructure.database import get_db
from forum.infrastructure.tokens import user_id_from_token
from forum.models.user import User
from forum.services.post_manager import SqlPostManager
from forum.services.reply_manager import SqlReplyManager
from forum.services.tag_manager import SqlTagManager
from forum.services.user_manager import SqlUserManager

oauth2_scheme = OAuth2PasswordBearer(
    tokenUrl="/api/v1/users/authenticate", auto_error=False,
)


def get_post_manager(db: AsyncSession = Depends(get_db)) -> PostManager:
    return SqlPostManager(db)


def get_reply_manager(db: AsyncSession = Depends(get_db)) -> ReplyManager:
    return SqlReplyManager(db)


def get_tag_manager(db: AsyncSession = Depends(get_db)) -> TagManager:
    return SqlTagManager(db)


def get_user_manager(db: AsyncSession = Depends(get_db)) -> UserManager:
    return SqlUserManager(db, get_settings().password_hash_iterations)


async def get_current_user(
    token: str | None = Depends(oauth2_scheme),
    users: UserManager = Depends(get_user_manager),
) -> User:
    """Resolve the authenticated user from the Authorization header."""
    if not token:
        raise AuthenticationError()
    try:
        user_id = user_id_from_token(token)
    except ValueError:
        raise AuthenticationError("Invalid authentication credentials") from None

    user = await users.get_by_id(user_id)
    if user is None:
        raise AuthenticationError("User not found")
    return user
