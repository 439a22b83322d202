"""Shared pytest fixtures configured to use SQLite in-memory for tests."""

import logging
import os
import tempfile
from uuid import uuid4

# Settings are read at import time by the app module; set the env first.
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="jotter-logs-"))
os.environ["SKIP_LIFESPAN_DB"] = "1"

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from jotter.config import Settings, get_settings  # noqa: E402
from jotter.database import create_tables, get_db_session  # noqa: E402
from jotter.main import app  # noqa: E402

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"
TEST_SECRET = "test-secret-key"

# Silence extremely verbose DEBUG logs from aiosqlite to keep test output readable
logging.getLogger("aiosqlite").setLevel(logging.WARNING)


@pytest.fixture
def test_settings():
    """Settings used by the app under test."""
    return Settings(
        database_url=TEST_DATABASE_URL,
        secret_key=TEST_SECRET,
        debug=True,
    )


@pytest.fixture
async def test_engine():
    """Fresh in-memory database per test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,  # keep the same memory DB across connections
        connect_args={"check_same_thread": False},
    )
    await create_tables(engine)

    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
def session_factory(test_engine):
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def test_session(session_factory):
    """A session for arranging and inspecting data directly."""
    async with session_factory() as session:
        yield session


@pytest.fixture
def test_app(session_factory, test_settings):
    """App with DB and settings dependencies pointed at the test fixtures."""

    async def _override_get_db():
        # new session per request, like production
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db_session] = _override_get_db
    app.dependency_overrides[get_settings] = lambda: test_settings
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def client(test_app):
    """Async HTTP client bound to the app."""
    async with AsyncClient(transport=ASGITransport(app=test_app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
def user_data():
    """Sample registration payload."""
    return {
        "name": "Test User",
        "email": f"user_{uuid4().hex[:8]}@example.com",
        "password": "password123",
    }


@pytest.fixture
def register(client):
    """Register an account through the API and return its token."""

    async def _register(name="Test User", email=None, password="password123"):
        payload = {
            "name": name,
            "email": email or f"user_{uuid4().hex[:8]}@example.com",
            "password": password,
        }
        resp = await client.post("/api/auth/register", json=payload)
        assert resp.status_code == 200, resp.text
        return resp.json()["token"]

    return _register


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
async def auth_headers(register):
    """Headers for a freshly registered account."""
    return bearer(await register())
