"""Integration test fixtures for database and HTTP client operations.

Each test gets its own in-memory SQLite database, injected as the engine
singleton so the app's request sessions use it too.
Uses polyfactory for type-safe test data generation.
"""

from collections.abc import AsyncGenerator

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel

import src.budget.models  # noqa: F401 - registers tables on the metadata
from src.budget.client.api import BudgetApiClient
from src.budget.core import db
from src.budget.core.health import reset_health_cache
from src.budget.main import create_app
from src.budget.models import User
from tests.factories import UserFactory
from tests.helpers import bearer


@pytest.fixture(scope="function")
async def engine() -> AsyncGenerator[AsyncEngine]:
    """Create an in-memory database with all tables and install it as the app engine."""
    await db.dispose_engine()

    # StaticPool: every session shares the single in-memory connection
    test_engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with test_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    db.set_engine(test_engine)
    reset_health_cache()

    yield test_engine

    db.set_engine(None)
    reset_health_cache()
    await test_engine.dispose()


@pytest.fixture
async def db_session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """Provide an async session for database operations.

    IMPORTANT: The AsyncSession context manager only closes the session on exit;
    it does NOT auto-commit. Tests must explicitly call `await session.commit()`
    before making requests that should see the data.
    """
    async with AsyncSession(engine, expire_on_commit=False) as session:
        yield session


@pytest.fixture
def app(engine: AsyncEngine) -> FastAPI:
    return create_app()


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    """HTTP client against the app.

    Unhandled exceptions are rendered by the app's 500 handler; Starlette
    re-raises them afterwards, so the transport must not propagate them.
    """
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as client:
        yield client


@pytest.fixture
async def api_client(app: FastAPI) -> AsyncGenerator[BudgetApiClient]:
    """Budget API client talking to the app in-process."""
    async with BudgetApiClient(
        "http://test",
        transport=ASGITransport(app=app, raise_app_exceptions=False),
    ) as api:
        yield api


async def _persist_user(session: AsyncSession, **kwargs) -> User:
    user = UserFactory.build(**kwargs)
    session.add(user)
    await session.commit()
    await session.refresh(user)
    return user


@pytest.fixture
async def test_user(db_session: AsyncSession) -> User:
    return await _persist_user(db_session, name="Alice")


@pytest.fixture
async def other_user(db_session: AsyncSession) -> User:
    return await _persist_user(db_session, name="Bob")


@pytest.fixture
def auth_headers(test_user: User) -> dict[str, str]:
    return bearer(test_user)


@pytest.fixture
def other_auth_headers(other_user: User) -> dict[str, str]:
    return bearer(other_user)


@pytest.fixture
def authed_api_client(api_client: BudgetApiClient, auth_headers: dict[str, str]) -> BudgetApiClient:
    api_client.token = auth_headers["Authorization"].removeprefix("Bearer ")
    return api_client
