"""Manager implementations — SQLAlchemy persistence behind the manager protocols.

Invariants:
    - Lookups return None for missing rows
    - Removing a post removes its replies; deleting a tag detaches it from posts
    - create_user refuses duplicate usernames and never stores plaintext
"""

from sqlalchemy import func, select

from forum.models import Post, Reply, Tag, User, post_tags
from forum.services.post_manager import SqlPostManager
from forum.services.reply_manager import SqlReplyManager
from forum.services.tag_manager import SqlTagManager
from forum.services.user_manager import SqlUserManager


async def _count(db, model) -> int:
    return (await db.execute(select(func.count()).select_from(model))).scalar_one()


# ─── SqlPostManager ──────────────────────────────────────────────

async def test_post_exists(test_db, seed_post):
    posts = SqlPostManager(test_db)
    assert await posts.post_exists(seed_post.id) is True
    assert await posts.post_exists(seed_post.id + 100) is False


async def test_get_post_missing_returns_none(test_db):
    assert await SqlPostManager(test_db).get_post(999) is None


async def test_get_post_with_replies(test_db, seed_reply):
    post = await SqlPostManager(test_db).get_post_with_replies(seed_reply.post_id)
    assert [r.id for r in post.replies] == [seed_reply.id]


async def test_get_all_posts_newest_first_and_paginated(test_db, author):
    posts = SqlPostManager(test_db)
    for i in range(3):
        posts.add_post(Post(title=f"P{i}", text="t", author_id=author.id, replies=[], tags=[]))
        await posts.save_changes()

    page = await posts.get_all_posts(limit=2, offset=0)
    assert [p.title for p in page] == ["P2", "P1"]
    rest = await posts.get_all_posts(limit=2, offset=2)
    assert [p.title for p in rest] == ["P0"]


async def test_get_all_posts_filters_by_tag(test_db, author, seed_tag):
    posts = SqlPostManager(test_db)
    posts.add_post(Post(title="Tagged", text="t", author_id=author.id, replies=[], tags=[seed_tag]))
    posts.add_post(Post(title="Plain", text="t", author_id=author.id, replies=[], tags=[]))
    await posts.save_changes()

    found = await posts.get_all_posts(tag_id=seed_tag.id)
    assert [p.title for p in found] == ["Tagged"]


async def test_remove_post_removes_replies(test_db, seed_reply):
    posts = SqlPostManager(test_db)
    post = await posts.get_post(seed_reply.post_id)
    await posts.remove_post(post)
    await posts.save_changes()

    assert await _count(test_db, Post) == 0
    assert await _count(test_db, Reply) == 0


# ─── SqlReplyManager ─────────────────────────────────────────────

async def test_get_reply(test_db, seed_reply):
    replies = SqlReplyManager(test_db)
    assert (await replies.get_reply(seed_reply.id)).text == "First reply"
    assert await replies.get_reply(seed_reply.id + 1) is None


async def test_get_replies_for_post_ordered(test_db, seed_post, author):
    replies = SqlReplyManager(test_db)
    for text in ("a", "b", "c"):
        replies.add_reply(Reply(post_id=seed_post.id, author_id=author.id, text=text))
    await replies.save_changes()

    found = await replies.get_replies_for_post(seed_post.id)
    assert [r.text for r in found] == ["a", "b", "c"]


async def test_remove_reply(test_db, seed_reply):
    replies = SqlReplyManager(test_db)
    await replies.remove_reply(seed_reply)
    await replies.save_changes()
    assert await replies.get_reply(seed_reply.id) is None


# ─── SqlTagManager ───────────────────────────────────────────────

async def test_get_tag_by_name_is_case_insensitive(test_db, seed_tag):
    tags = SqlTagManager(test_db)
    assert (await tags.get_tag_by_name("PYTHON")).id == seed_tag.id
    assert await tags.get_tag_by_name("rust") is None


async def test_get_all_tags_sorted_by_name(test_db):
    tags = SqlTagManager(test_db)
    for name in ("web", "async", "orm"):
        tags.add_tag(Tag(name=name))
    await tags.save_changes()
    assert [t.name for t in await tags.get_all_tags()] == ["async", "orm", "web"]


async def test_get_tags_empty_list(test_db):
    assert await SqlTagManager(test_db).get_tags([]) == []


async def test_delete_tag_detaches_posts(test_db, author, seed_tag):
    post = Post(title="Tagged", text="t", author_id=author.id, replies=[], tags=[seed_tag])
    test_db.add(post)
    await test_db.commit()

    tags = SqlTagManager(test_db)
    await tags.delete_tag(seed_tag)
    await tags.save_changes()

    assert await _count(test_db, Tag) == 0
    assert await _count(test_db, post_tags) == 0
    assert await _count(test_db, Post) == 1


# ─── SqlUserManager ──────────────────────────────────────────────

async def test_create_user_hashes_password(test_db):
    users = SqlUserManager(test_db, hash_iterations=1000)
    user = User(username="newbie")
    assert await users.create_user(user, "plain-password") is True
    await users.save_changes()

    assert user.id is not None
    assert user.password_hash != "plain-password"
    assert user.password_hash.startswith("pbkdf2_sha256$1000$")


async def test_create_user_rejects_duplicate(test_db, author):
    users = SqlUserManager(test_db, hash_iterations=1000)
    assert await users.create_user(User(username="author"), "whatever-pass") is False


async def test_authenticate(test_db, author, test_password):
    users = SqlUserManager(test_db)
    assert (await users.authenticate("author", test_password)).id == author.id
    assert await users.authenticate("author", "wrong-password") is None
    assert await users.authenticate("nobody", test_password) is None


async def test_get_all_and_get_by_id(test_db, author, other_user):
    users = SqlUserManager(test_db)
    assert [u.username for u in await users.get_all()] == ["author", "stranger"]
    assert (await users.get_by_id(other_user.id)).username == "stranger"
    assert await users.get_by_id(999) is None


async def test_delete_user_removes_their_content(test_db, seed_reply, other_user):
    # stranger replies on author's post, and writes a post of their own
    test_db.add(Reply(post_id=seed_reply.post_id, author_id=other_user.id, text="hi"))
    test_db.add(Post(title="Own", text="t", author_id=other_user.id, replies=[], tags=[]))
    await test_db.commit()

    users = SqlUserManager(test_db)
    author = await users.get_by_username("author")
    await users.delete(author)
    await users.save_changes()

    assert [u.username for u in await users.get_all()] == ["stranger"]
    assert [p.title for p in (await test_db.execute(select(Post))).scalars()] == ["Own"]
    assert await _count(test_db, Reply) == 0
