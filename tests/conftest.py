# tests/conftest.py

from uuid import uuid4

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient

from app import create_app
from config.database import Database
from config.settings import Settings
from services.stores import TaskStore, UserStore


TEST_SECRET = "test-signing-secret"


@pytest.fixture()
def settings() -> Settings:
    """
    Settings isolated from the environment and any local .env file.

    mongomock shares data between clients, so each test gets its own
    database name.
    """
    return Settings(
        _env_file=None,
        JWT_SECRET=TEST_SECRET,
        BCRYPT_ROUNDS=10,
        DATABASE_NAME=f"taskflow_test_{uuid4().hex}",
    )


@pytest_asyncio.fixture()
async def database(settings: Settings) -> Database:
    """Database manager wired to an in-memory MongoDB with indexes in place."""
    db = Database(settings)
    await db.connect(client=AsyncMongoMockClient())
    await UserStore(db).create_indexes()
    await TaskStore(db).create_indexes()
    return db


@pytest.fixture()
def app(settings: Settings, database: Database):
    return create_app(settings, database)


@pytest_asyncio.fixture()
async def client(app):
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture()
def signup(client: AsyncClient):
    """Register a user through the API and return the response body."""

    async def _signup(name: str = "Ann", email: str = "a@x.com", password: str = "pw123") -> dict:
        resp = await client.post(
            "/api/auth/signup",
            json={"name": name, "email": email, "password": password},
        )
        assert resp.status_code == 201, resp.text
        return resp.json()

    return _signup
