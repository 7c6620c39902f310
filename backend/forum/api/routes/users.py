"""Users Routes — registration, authentication, lookup, and account deletion.

Invariants:
    - register and authenticate are anonymous; everything else requires a bearer token
    - Failed authentication is a 401 with a message that does not reveal which field was wrong
    - A user may only delete their own account
"""

import logging

from fastapi import APIRouter, Depends, status

from forum.api.dependencies import get_current_user, get_user_manager
from forum.core.errors import (
    AuthenticationError, ConflictError, ErrorContext, ResourceNotFoundError,
)
from forum.core.manager_protocols import UserManager
from forum.core.ownership import ensure_self
from forum.infrastructure.tokens import create_user_token
from forum.models.user import User
from forum.schemas.user import (
    AuthenticateRequest, RegisterRequest, TokenResponse, UserResponse,
)
from forum.services import mapper

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/users", tags=["users"])


@router.post(
    "/register", response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    body: RegisterRequest, users: UserManager = Depends(get_user_manager),
):
    user = User(username=body.username)
    if not await users.create_user(user, body.password):
        raise ConflictError(
            "Username is already taken", ErrorContext(resource_type="User"),
        )
    await users.save_changes()
    logger.info("User registered", extra={"user_id": user.id})
    return mapper.to_user_response(user)


@router.post("/authenticate", response_model=TokenResponse)
async def authenticate(
    body: AuthenticateRequest, users: UserManager = Depends(get_user_manager),
):
    """Exchange username and password for a bearer token."""
    user = await users.authenticate(body.username, body.password)
    if user is None:
        raise AuthenticationError("Username or password is incorrect")
    return TokenResponse(
        access_token=create_user_token(user.id),
        user=mapper.to_user_response(user),
    )


@router.get("", response_model=list[UserResponse])
async def get_all_users(
    users: UserManager = Depends(get_user_manager),
    current_user: User = Depends(get_current_user),
):
    return [mapper.to_user_response(u) for u in await users.get_all()]


@router.get("/me", response_model=UserResponse)
async def get_me(current_user: User = Depends(get_current_user)):
    return mapper.to_user_response(current_user)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: int,
    users: UserManager = Depends(get_user_manager),
    current_user: User = Depends(get_current_user),
):
    user = await users.get_by_id(user_id)
    if user is None:
        raise ResourceNotFoundError("User", user_id)
    return mapper.to_user_response(user)


@router.delete("/{user_id}", status_code=status.HTTP_200_OK)
async def delete_user(
    user_id: int,
    users: UserManager = Depends(get_user_manager),
    current_user: User = Depends(get_current_user),
):
    """Delete the caller's account along with their posts and replies."""
    ensure_self(user_id, current_user.id)
    await users.delete(current_user)
    await users.save_changes()
    logger.info("User deleted", extra={"user_id": user_id})
