"""Root conftest — shared test configuration, async DB, and an authenticated test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test DB session factory
    - Users are created with a low PBKDF2 iteration count to keep tests fast

Design Decisions:
    - SQLite in-memory over PostgreSQL: no external dependency, sufficient for route tests
    - StaticPool: the seeding session and the request sessions see the same in-memory DB
"""

import os

# Ensure tests never pick up real secrets or databases
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-that-is-long-enough-for-hs256")
os.environ.setdefault("PASSWORD_HASH_ITERATIONS", "1000")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from forum.core.passwords import hash_password  # noqa: E402
from forum.db.base import Base  # noqa: E402
from forum.infrastructure.database import get_db  # noqa: E402
from forum.infrastructure.tokens import create_user_token  # noqa: E402
from forum.main import app  # noqa: E402
from forum.models import Post, Reply, Tag, User  # noqa: E402

TEST_PASSWORD = "correct-horse-battery"


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
def make_user(test_db):
    """Factory: insert a user with TEST_PASSWORD and return it."""
    async def _make(username: str) -> User:
        user = User(
            username=username,
            password_hash=hash_password(TEST_PASSWORD, iterations=1000),
        )
        test_db.add(user)
        await test_db.commit()
        await test_db.refresh(user)
        return user

    return _make


@pytest.fixture
async def author(make_user):
    return await make_user("author")


@pytest.fixture
async def other_user(make_user):
    return await make_user("stranger")


@pytest.fixture
def author_headers(author):
    return {"Authorization": f"Bearer {create_user_token(author.id)}"}


@pytest.fixture
def other_headers(other_user):
    return {"Authorization": f"Bearer {create_user_token(other_user.id)}"}


@pytest.fixture
async def seed_tag(test_db):
    tag = Tag(name="python")
    test_db.add(tag)
    await test_db.commit()
    await test_db.refresh(tag)
    return tag


@pytest.fixture
async def seed_post(test_db, author):
    post = Post(
        title="First thread", text="Hello forum", author_id=author.id,
        replies=[], tags=[],
    )
    test_db.add(post)
    await test_db.commit()
    return post


@pytest.fixture
async def seed_reply(test_db, seed_post, author):
    reply = Reply(author_id=author.id, text="First reply")
    seed_post.replies.append(reply)
    await test_db.commit()
    return reply


@pytest.fixture
def test_password():
    return TEST_PASSWORD
