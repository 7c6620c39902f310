"""Tags Routes — list, read, add, and delete tags.

Invariants:
    - Tag names are unique case-insensitively (409 on duplicates)
    - Deleting a tag detaches it from every post
"""

import logging

from fastapi import APIRouter, Depends, status

from forum.api.dependencies import get_current_user, get_tag_manager
from forum.core.errors import ConflictError, ErrorContext, ResourceNotFoundError
from forum.core.manager_protocols import TagManager
from forum.models.tag import Tag
from forum.models.user import User
from forum.schemas.tag import TagRequest, TagResponse
from forum.services import mapper

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/tags", tags=["tags"])


async def get_tag_or_404(tags: TagManager, tag_id: int) -> Tag:
    tag = await tags.get_tag(tag_id)
    if tag is None:
        raise ResourceNotFoundError("Tag", tag_id)
    return tag


@router.get("", response_model=list[TagResponse])
async def get_all_tags(tags: TagManager = Depends(get_tag_manager)):
    return [mapper.to_tag_response(t) for t in await tags.get_all_tags()]


@router.get("/{tag_id}", response_model=TagResponse)
async def get_tag(tag_id: int, tags: TagManager = Depends(get_tag_manager)):
    return mapper.to_tag_response(await get_tag_or_404(tags, tag_id))


@router.post("", response_model=TagResponse, status_code=status.HTTP_201_CREATED)
async def add_tag(
    body: TagRequest,
    tags: TagManager = Depends(get_tag_manager),
    current_user: User = Depends(get_current_user),
):
    if await tags.get_tag_by_name(body.name) is not None:
        raise ConflictError(
            f"Tag '{body.name}' already exists",
            ErrorContext(user_id=current_user.id, resource_type="Tag"),
        )
    tag = mapper.new_tag(body)
    tags.add_tag(tag)
    await tags.save_changes()
    logger.info("Tag added", extra={"tag_id": tag.id, "user_id": current_user.id})
    return mapper.to_tag_response(tag)


@router.delete("/{tag_id}", status_code=status.HTTP_200_OK)
async def delete_tag(
    tag_id: int,
    tags: TagManager = Depends(get_tag_manager),
    current_user: User = Depends(get_current_user),
):
    tag = await get_tag_or_404(tags, tag_id)
    await tags.delete_tag(tag)
    await tags.save_changes()
    logger.info("Tag deleted", extra={"tag_id": tag_id, "user_id": current_user.id})
