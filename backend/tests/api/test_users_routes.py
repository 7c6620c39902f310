"""Users routes — registration, authentication, lookup, and self-deletion."""

from forum.infrastructure.tokens import user_id_from_token


async def test_register(client):
    res = await client.post(
        "/api/v1/users/register",
        json={"username": "newcomer", "password": "a-good-password"},
    )
    assert res.status_code == 201
    body = res.json()
    assert body["username"] == "newcomer"
    assert "password" not in body
    assert "password_hash" not in body


async def test_register_duplicate_username_returns_409(client, author):
    res = await client.post(
        "/api/v1/users/register",
        json={"username": "author", "password": "a-good-password"},
    )
    assert res.status_code == 409
    assert res.json()["error"]["message"] == "Username is already taken"


async def test_register_invalid_username_is_400(client):
    res = await client.post(
        "/api/v1/users/register", json={"username": "no spaces", "password": "a-good-password"},
    )
    assert res.status_code == 400


async def test_register_then_authenticate_then_post(client):
    await client.post(
        "/api/v1/users/register", json={"username": "flow", "password": "flow-password"},
    )
    auth = await client.post(
        "/api/v1/users/authenticate", json={"username": "flow", "password": "flow-password"},
    )
    assert auth.status_code == 200
    token = auth.json()["access_token"]
    assert auth.json()["token_type"] == "bearer"
    assert user_id_from_token(token) == auth.json()["user"]["id"]

    res = await client.post(
        "/api/v1/posts", json={"title": "Hi", "text": "first"},
        headers={"Authorization": f"Bearer {token}"},
    )
    assert res.status_code == 201


async def test_authenticate_wrong_password_returns_401(client, author):
    res = await client.post(
        "/api/v1/users/authenticate", json={"username": "author", "password": "nope-nope"},
    )
    assert res.status_code == 401
    assert res.json()["error"]["message"] == "Username or password is incorrect"


async def test_authenticate_unknown_user_returns_401(client):
    res = await client.post(
        "/api/v1/users/authenticate", json={"username": "ghost", "password": "whatever"},
    )
    assert res.status_code == 401


async def test_get_me(client, author, author_headers):
    res = await client.get("/api/v1/users/me", headers=author_headers)
    assert res.status_code == 200
    assert res.json()["id"] == author.id


async def test_get_all_users_requires_auth(client, author):
    assert (await client.get("/api/v1/users")).status_code == 401


async def test_get_all_users(client, author, other_user, author_headers):
    res = await client.get("/api/v1/users", headers=author_headers)
    assert [u["username"] for u in res.json()] == ["author", "stranger"]


async def test_get_user(client, other_user, author_headers):
    res = await client.get(f"/api/v1/users/{other_user.id}", headers=author_headers)
    assert res.status_code == 200
    assert res.json()["username"] == "stranger"


async def test_get_missing_user(client, author_headers):
    res = await client.get("/api/v1/users/999", headers=author_headers)
    assert res.status_code == 404


async def test_delete_other_user_returns_403(client, other_user, author_headers):
    res = await client.delete(f"/api/v1/users/{other_user.id}", headers=author_headers)
    assert res.status_code == 403


async def test_delete_self_removes_content_and_token(client, author, seed_reply, author_headers):
    res = await client.delete(f"/api/v1/users/{author.id}", headers=author_headers)
    assert res.status_code == 200

    assert (await client.get(f"/api/v1/posts/{seed_reply.post_id}")).status_code == 404
    # the token now points at a deleted user
    assert (await client.get("/api/v1/users/me", headers=author_headers)).status_code == 401
