"""Replies Routes — read, create, edit, and delete replies under a post.

Invariants:
    - GET endpoints are anonymous; mutations require a bearer token
    - edit_reply: 400 route/body mismatch → 404 post → 404 reply → 403 not author
    - delete_reply: 404 reply → 400 reply/route mismatch → 403 not author
    - A reply that exists under a different post is "Reply does not exist" for reads and edits
    - date_edited stamped here, after mapping, before save_changes()
"""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, status

from forum.api.dependencies import (
    get_current_user, get_post_manager, get_reply_manager,
)
from forum.core.errors import ResourceNotFoundError
from forum.core.manager_protocols import PostManager, ReplyManager
from forum.core.ownership import ensure_author, ensure_route_matches
from forum.models.reply import Reply
from forum.models.user import User
from forum.schemas.reply import ReplyRequest, ReplyResponse
from forum.services import mapper

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/posts", tags=["replies"])


async def _require_post(posts: PostManager, post_id: int) -> None:
    if not await posts.post_exists(post_id):
        raise ResourceNotFoundError("Post", post_id)


async def _get_reply_in_post_or_404(
    replies: ReplyManager, post_id: int, reply_id: int,
) -> Reply:
    reply = await replies.get_reply(reply_id)
    if reply is None or reply.post_id != post_id:
        raise ResourceNotFoundError("Reply", reply_id)
    return reply


@router.get("/{post_id}/replies", response_model=list[ReplyResponse])
async def get_all_replies(
    post_id: int, posts: PostManager = Depends(get_post_manager),
):
    """List every reply of a post."""
    post = await posts.get_post_with_replies(post_id)
    if post is None:
        raise ResourceNotFoundError("Post", post_id)
    return mapper.to_reply_responses(post.replies)


@router.get("/{post_id}/replies/{reply_id}", response_model=ReplyResponse)
async def get_reply(
    post_id: int,
    reply_id: int,
    posts: PostManager = Depends(get_post_manager),
    replies: ReplyManager = Depends(get_reply_manager),
):
    await _require_post(posts, post_id)
    reply = await _get_reply_in_post_or_404(replies, post_id, reply_id)
    return mapper.to_reply_response(reply)


@router.post(
    "/{post_id}/replies", response_model=ReplyResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_reply(
    post_id: int,
    body: ReplyRequest,
    posts: PostManager = Depends(get_post_manager),
    replies: ReplyManager = Depends(get_reply_manager),
    current_user: User = Depends(get_current_user),
):
    """Reply to a post as the authenticated user."""
    ensure_route_matches(post_id, body.post_id)
    await _require_post(posts, post_id)

    reply = mapper.new_reply(body, current_user.id)
    replies.add_reply(reply)
    await replies.save_changes()
    logger.info(
        "Reply created",
        extra={"post_id": post_id, "reply_id": reply.id, "user_id": current_user.id},
    )
    return mapper.to_reply_response(reply)


@router.put("/{post_id}/replies/{reply_id}", response_model=ReplyResponse)
async def edit_reply(
    post_id: int,
    reply_id: int,
    body: ReplyRequest,
    posts: PostManager = Depends(get_post_manager),
    replies: ReplyManager = Depends(get_reply_manager),
    current_user: User = Depends(get_current_user),
):
    """Edit a reply. Only its author may do so."""
    ensure_route_matches(post_id, body.post_id)
    await _require_post(posts, post_id)
    reply = await _get_reply_in_post_or_404(replies, post_id, reply_id)
    ensure_author("Reply", reply.author_id, current_user.id)

    mapper.apply_reply_request(body, reply)
    reply.date_edited = datetime.now(timezone.utc)
    await replies.save_changes()
    logger.info(
        "Reply edited",
        extra={"post_id": post_id, "reply_id": reply_id, "user_id": current_user.id},
    )
    return mapper.to_reply_response(reply)


@router.delete("/{post_id}/replies/{reply_id}", status_code=status.HTTP_200_OK)
async def delete_reply(
    post_id: int,
    reply_id: int,
    replies: ReplyManager = Depends(get_reply_manager),
    current_user: User = Depends(get_current_user),
):
    """Delete a reply. Only its author may do so."""
    reply = await replies.get_reply(reply_id)
    if reply is None:
        raise ResourceNotFoundError("Reply", reply_id, message="Reply not found")
    ensure_route_matches(post_id, reply.post_id)
    ensure_author("Reply", reply.author_id, current_user.id)

    await replies.remove_reply(reply)
    await replies.save_changes()
    logger.info(
        "Reply deleted",
        extra={"post_id": post_id, "reply_id": reply_id, "user_id": current_user.id},
    )
