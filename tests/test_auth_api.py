import pytest

from helpers import auth_headers


@pytest.mark.asyncio
async def test_signup_returns_user_and_token(client):
    resp = await client.post(
        "/api/auth/signup",
        json={"name": "Ann", "email": "a@x.com", "password": "pw123"},
    )

    assert resp.status_code == 201
    body = resp.json()
    assert set(body) == {"user", "token"}
    assert body["user"]["name"] == "Ann"
    assert body["user"]["email"] == "a@x.com"
    assert set(body["user"]) == {"id", "name", "email"}
    assert body["token"]


@pytest.mark.asyncio
@pytest.mark.parametrize("payload", [
    {},
    {"email": "a@x.com", "password": "pw123"},
    {"name": "Ann", "password": "pw123"},
    {"name": "Ann", "email": "a@x.com"},
    {"name": "", "email": "a@x.com", "password": "pw123"},
    {"name": "Ann", "email": "a@x.com", "password": ""},
])
async def test_signup_requires_all_fields(client, payload):
    resp = await client.post("/api/auth/signup", json=payload)

    assert resp.status_code == 400
    assert resp.json() == {"message": "All fields required"}


@pytest.mark.asyncio
async def test_signup_with_existing_email_conflicts(client, signup):
    await signup(email="a@x.com", password="pw123")

    resp = await client.post(
        "/api/auth/signup",
        json={"name": "Other", "email": "a@x.com", "password": "different"},
    )

    assert resp.status_code == 400
    assert resp.json() == {"message": "User exists"}


@pytest.mark.asyncio
async def test_password_hash_is_never_returned_or_stored_in_plain(client, signup, database):
    body = await signup(password="pw123")

    assert "password" not in str(body)
    stored = await database.get_collection("users").find_one({"email": "a@x.com"})
    assert stored["password_hash"] != "pw123"
    assert stored["password_hash"].startswith("$2b$10$")


@pytest.mark.asyncio
async def test_login_after_signup_returns_token_accepted_by_gate(client, signup):
    created = await signup(name="Ann", email="a@x.com", password="pw123")

    resp = await client.post("/api/auth/login", json={"email": "a@x.com", "password": "pw123"})

    assert resp.status_code == 200
    body = resp.json()
    assert body["user"] == created["user"]

    tasks = await client.get("/api/tasks", headers=auth_headers(body["token"]))
    assert tasks.status_code == 200
    assert tasks.json() == []


@pytest.mark.asyncio
@pytest.mark.parametrize("payload", [
    {},
    {"email": "a@x.com"},
    {"password": "pw123"},
    {"email": "", "password": "pw123"},
])
async def test_login_requires_email_and_password(client, payload):
    resp = await client.post("/api/auth/login", json=payload)

    assert resp.status_code == 400
    assert resp.json() == {"message": "Email & password required"}


@pytest.mark.asyncio
async def test_wrong_password_and_unknown_email_are_indistinguishable(client, signup):
    await signup(email="a@x.com", password="pw123")

    wrong_password = await client.post("/api/auth/login", json={"email": "a@x.com", "password": "nope"})
    unknown_email = await client.post("/api/auth/login", json={"email": "b@x.com", "password": "pw123"})

    assert wrong_password.status_code == unknown_email.status_code == 401
    assert wrong_password.json() == unknown_email.json() == {"message": "Invalid credentials"}


@pytest.mark.asyncio
async def test_login_form_returns_oauth2_token(client, signup):
    await signup(email="a@x.com", password="pw123")

    resp = await client.post("/api/auth/login/form", data={"username": "a@x.com", "password": "pw123"})

    assert resp.status_code == 200
    assert resp.json()["token_type"] == "bearer"
    me = await client.get("/api/auth/me", headers=auth_headers(resp.json()["access_token"]))
    assert me.status_code == 200


@pytest.mark.asyncio
async def test_login_form_rejects_bad_credentials(client):
    resp = await client.post("/api/auth/login/form", data={"username": "a@x.com", "password": "pw123"})

    assert resp.status_code == 401
    assert resp.json() == {"message": "Invalid credentials"}


@pytest.mark.asyncio
async def test_me_returns_public_profile(client, signup):
    created = await signup(name="Ann", email="a@x.com")

    resp = await client.get("/api/auth/me", headers=auth_headers(created["token"]))

    assert resp.status_code == 200
    assert resp.json() == created["user"]


@pytest.mark.asyncio
async def test_me_for_deleted_user_is_unauthenticated(client, signup, database):
    created = await signup()
    await database.get_collection("users").delete_many({})

    resp = await client.get("/api/auth/me", headers=auth_headers(created["token"]))

    assert resp.status_code == 401
    assert resp.json() == {"message": "Invalid or expired token"}
