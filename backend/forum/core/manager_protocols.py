"""Manager Protocols — data-access contracts between routes and persistence.

Invariants:
    - Routes depend on these Protocols, never on SQLAlchemy directly
    - add_*/remove_* stage changes; nothing is written until save_changes()
    - Lookups return None for missing rows (routes decide on 404)

Design Decisions:
    - Protocol over ABC: structural subtyping, tests can pass fakes (ADR: no inheritance hierarchy)
    - Async in Protocol: implementations do IO
"""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from forum.models.post import Post
    from forum.models.reply import Reply
    from forum.models.tag import Tag
    from forum.models.user import User


class Manager(Protocol):
    """Unit-of-work boundary shared by every manager."""
    async def save_changes(self) -> None: ...


class PostManager(Manager, Protocol):
    """Contract for post persistence."""
    async def get_all_posts(
        self, limit: int = 20, offset: int = 0, tag_id: int | None = None,
    ) -> list["Post"]: ...
    async def get_post(self, post_id: int) -> "Post | None": ...
    async def get_post_with_replies(self, post_id: int) -> "Post | None": ...
    async def post_exists(self, post_id: int) -> bool: ...
    def add_post(self, post: "Post") -> None: ...
    async def remove_post(self, post: "Post") -> None: ...


class ReplyManager(Manager, Protocol):
    """Contract for reply persistence."""
    async def get_reply(self, reply_id: int) -> "Reply | None": ...
    async def get_replies_for_post(self, post_id: int) -> list["Reply"]: ...
    def add_reply(self, reply: "Reply") -> None: ...
    async def remove_reply(self, reply: "Reply") -> None: ...


class TagManager(Manager, Protocol):
    """Contract for tag persistence."""
    async def get_all_tags(self) -> list["Tag"]: ...
    async def get_tag(self, tag_id: int) -> "Tag | None": ...
    async def get_tags(self, tag_ids: list[int]) -> list["Tag"]: ...
    async def get_tag_by_name(self, name: str) -> "Tag | None": ...
    def add_tag(self, tag: "Tag") -> None: ...
    async def delete_tag(self, tag: "Tag") -> None: ...


class UserManager(Manager, Protocol):
    """Contract for user persistence and credential checks."""
    async def authenticate(self, username: str, password: str) -> "User | None": ...
    async def get_all(self) -> list["User"]: ...
    async def get_by_id(self, user_id: int) -> "User | None": ...
    async def get_by_username(self, username: str) -> "User | None": ...
    async def create_user(self, user: "User", password: str) -> bool: ...
    async def delete(self, user: "User") -> None: ...
