"""Posts Routes — list, read, create, edit, and delete posts.

Invariants:
    - GET endpoints are anonymous; mutations require a bearer token
    - Every tag id in a request must exist (404 "Tag does not exist" otherwise)
    - Only the author may edit or delete a post; deleting a post deletes its replies
"""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Query, status

from forum.api.dependencies import (
    get_current_user, get_post_manager, get_tag_manager,
)
from forum.core.errors import ResourceNotFoundError
from forum.core.manager_protocols import PostManager, TagManager
from forum.core.ownership import ensure_author
from forum.models.post import Post
from forum.models.tag import Tag
from forum.models.user import User
from forum.schemas.post import PostListResponse, PostRequest, PostResponse
from forum.services import mapper

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/posts", tags=["posts"])


async def get_post_or_404(posts: PostManager, post_id: int) -> Post:
    post = await posts.get_post(post_id)
    if post is None:
        raise ResourceNotFoundError("Post", post_id)
    return post


async def _resolve_tags(tags: TagManager, tag_ids: list[int]) -> list[Tag]:
    found = await tags.get_tags(tag_ids)
    missing = set(tag_ids) - {t.id for t in found}
    if missing:
        raise ResourceNotFoundError("Tag", min(missing))
    return found


@router.get("", response_model=PostListResponse)
async def list_posts(
    limit: int = Query(20, ge=1, le=100),
    offset: int = Query(0, ge=0),
    tag_id: int | None = Query(None),
    posts: PostManager = Depends(get_post_manager),
):
    """List posts, newest first, optionally filtered by tag."""
    found = await posts.get_all_posts(limit=limit, offset=offset, tag_id=tag_id)
    return PostListResponse(
        posts=[mapper.to_post_response(p) for p in found],
        limit=limit,
        offset=offset,
    )


@router.get("/{post_id}", response_model=PostResponse)
async def get_post(
    post_id: int, posts: PostManager = Depends(get_post_manager),
):
    return mapper.to_post_response(await get_post_or_404(posts, post_id))


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    body: PostRequest,
    posts: PostManager = Depends(get_post_manager),
    tags: TagManager = Depends(get_tag_manager),
    current_user: User = Depends(get_current_user),
):
    """Start a new thread as the authenticated user."""
    post = mapper.new_post(
        body, current_user.id, await _resolve_tags(tags, body.tag_ids),
    )
    posts.add_post(post)
    await posts.save_changes()
    logger.info(
        "Post created", extra={"post_id": post.id, "user_id": current_user.id},
    )
    return mapper.to_post_response(post)


@router.put("/{post_id}", response_model=PostResponse)
async def edit_post(
    post_id: int,
    body: PostRequest,
    posts: PostManager = Depends(get_post_manager),
    tags: TagManager = Depends(get_tag_manager),
    current_user: User = Depends(get_current_user),
):
    post = await get_post_or_404(posts, post_id)
    ensure_author("Post", post.author_id, current_user.id)

    mapper.apply_post_request(body, post, await _resolve_tags(tags, body.tag_ids))
    post.date_edited = datetime.now(timezone.utc)
    await posts.save_changes()
    logger.info(
        "Post edited", extra={"post_id": post_id, "user_id": current_user.id},
    )
    return mapper.to_post_response(post)


@router.delete("/{post_id}", status_code=status.HTTP_200_OK)
async def delete_post(
    post_id: int,
    posts: PostManager = Depends(get_post_manager),
    current_user: User = Depends(get_current_user),
):
    post = await get_post_or_404(posts, post_id)
    ensure_author("Post", post.author_id, current_user.id)

    await posts.remove_post(post)
    await posts.save_changes()
    logger.info(
        "Post deleted", extra={"post_id": post_id, "user_id": current_user.id},
    )
