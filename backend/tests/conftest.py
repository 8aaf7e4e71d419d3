"""
Shared test fixtures for the Yobo API test suite.

This module provides:
  - engine / session: in-memory SQLite (aiosqlite) with the schema created
  - test_settings: Settings with a fixed key and a cheap bcrypt cost
  - client: httpx AsyncClient bound to the real FastAPI app, with get_db and
    get_settings overridden
  - register: helper that registers a user through the API and returns a token

Design: every test gets a fresh in-memory database. StaticPool keeps a single
connection alive so the schema survives between sessions. pysqlite's own
transaction handling is switched off and BEGIN is emitted explicitly, which
is what makes SAVEPOINTs (session.begin_nested()) work on SQLite.

Environment variables must be set before any src import: Settings and the
module-level engine are built at import time.
"""

import os

# CRITICAL: configure the environment before importing anything from src
os.environ["APP_ENV"] = "testing"
os.environ["SECRET_KEY"] = "test-secret-key-for-yobo-suite-0123456789"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["LOG_LEVEL"] = "WARNING"

from typing import AsyncGenerator, Awaitable, Callable

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from src.api.dependencies.database import get_db
from src.api.main import app
from src.config.settings import Settings, get_settings
from src.shared.models import Base

TEST_PASSWORD = "Secret123!"


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------


@pytest.fixture
def test_settings() -> Settings:
    """Settings used by services and injected into the app."""
    return get_settings()


# ---------------------------------------------------------------------------
# Database
# ---------------------------------------------------------------------------


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Fresh in-memory database with all tables created."""
    test_engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    @event.listens_for(test_engine.sync_engine, "connect")
    def _disable_pysqlite_transactions(dbapi_connection, _connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(test_engine.sync_engine, "begin")
    def _emit_begin(conn):
        conn.exec_driver_sql("BEGIN")

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield test_engine

    await test_engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest.fixture
async def session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    """A single session for service and repository tests."""
    async with session_factory() as db:
        yield db


# ---------------------------------------------------------------------------
# HTTP client
# ---------------------------------------------------------------------------


@pytest.fixture
async def client(
    session_factory: async_sessionmaker[AsyncSession],
    test_settings: Settings,
) -> AsyncGenerator[AsyncClient, None]:
    """AsyncClient wired to the real app, one database session per request.

    ASGITransport does not run the lifespan, so the production database is
    never touched.
    """

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as db:
            try:
                yield db
                await db.commit()
            except Exception:
                await db.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_settings] = lambda: test_settings

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def register(client: AsyncClient) -> Callable[..., Awaitable[str]]:
    """Return a coroutine that registers a user and yields its bearer token."""

    async def _register(
        email: str,
        password: str = TEST_PASSWORD,
        full_name: str = "Test User",
    ) -> str:
        response = await client.post(
            "/api/auth/register",
            json={"email": email, "password": password, "fullName": full_name},
        )
        assert response.status_code == 201, response.text
        return response.json()["token"]

    return _register
