"""Entity/DTO Mapper — converts ORM entities to response DTOs and applies requests to entities.

Invariants:
    - Response DTOs are built with from_attributes; no ORM object leaks past a route
    - apply_reply_request never copies post_id (a reply cannot move between posts)
    - Mapping functions do not stamp timestamps; routes own date_edited
"""

from forum.models.post import Post
from forum.models.reply import Reply
from forum.models.tag import Tag
from forum.models.user import User
from forum.schemas.post import PostRequest, PostResponse
from forum.schemas.reply import ReplyRequest, ReplyResponse
from forum.schemas.tag import TagRequest, TagResponse
from forum.schemas.user import UserResponse

_REPLY_IMMUTABLE_FIELDS = {"post_id"}


def to_reply_response(reply: Reply) -> ReplyResponse:
    return ReplyResponse.model_validate(reply)


def to_reply_responses(replies: list[Reply]) -> list[ReplyResponse]:
    return [to_reply_response(r) for r in replies]


def to_post_response(post: Post) -> PostResponse:
    return PostResponse.model_validate(post)


def to_tag_response(tag: Tag) -> TagResponse:
    return TagResponse.model_validate(tag)


def to_user_response(user: User) -> UserResponse:
    return UserResponse.model_validate(user)


def new_reply(request: ReplyRequest, author_id: int) -> Reply:
    return Reply(post_id=request.post_id, author_id=author_id, text=request.text)


def apply_reply_request(request: ReplyRequest, reply: Reply) -> Reply:
    """Copy editable request fields onto an existing reply."""
    for name, value in request.model_dump(exclude=_REPLY_IMMUTABLE_FIELDS).items():
        setattr(reply, name, value)
    return reply


def new_post(request: PostRequest, author_id: int, tags: list[Tag]) -> Post:
    # replies=[] initializes the collection so it never lazy-loads after commit
    return Post(
        title=request.title, text=request.text, author_id=author_id,
        tags=list(tags), replies=[],
    )


def apply_post_request(request: PostRequest, post: Post, tags: list[Tag]) -> Post:
    post.title = request.title
    post.text = request.text
    post.tags = list(tags)
    return post


def new_tag(request: TagRequest) -> Tag:
    return Tag(name=request.name)
