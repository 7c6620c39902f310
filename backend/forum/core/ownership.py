"""Ownership & Consistency Checks — the authorization rules of the forum.

Invariants:
    - Pure: no IO, no DB, no async; raise typed errors from core/errors.py
    - Route ids are authoritative; a body or entity id that disagrees is a 400
    - Only the author of a post or reply may edit or delete it (403 otherwise)
"""

from forum.core.errors import (
    ErrorContext, ForbiddenError, NotAuthorError, RouteMismatchError,
)


def ensure_route_matches(route_post_id: int, other_post_id: int) -> None:
    """Raise RouteMismatchError when the post id in the route and the body/entity differ."""
    if route_post_id != other_post_id:
        raise RouteMismatchError(
            context=ErrorContext(
                resource_type="Post",
                resource_id=route_post_id,
                debug_info={"other_post_id": other_post_id},
            ),
        )


def ensure_author(resource_type: str, author_id: int, user_id: int) -> None:
    """Raise NotAuthorError unless user_id wrote the resource."""
    if author_id != user_id:
        raise NotAuthorError(
            resource_type, ErrorContext(user_id=user_id, resource_type=resource_type),
        )


def ensure_self(target_user_id: int, user_id: int) -> None:
    """Account-level operations are only allowed on the caller's own account."""
    if target_user_id != user_id:
        raise ForbiddenError(
            "You can only delete your own account",
            context=ErrorContext(
                user_id=user_id, resource_type="User", resource_id=target_user_id,
            ),
        )
