"""Pytest configuration and shared fixtures.

Every test gets its own in-memory SQLite database. The application's
``get_db`` dependency is overridden to open sessions on that database,
so HTTP requests and fixtures see the same data.
"""

import os


os.environ.setdefault("SECRET_KEY", "test-secret-key-that-is-long-enough-for-hs256")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("PASSWORD_HASH_ROUNDS", "4")
os.environ.setdefault("SEED_DEMO_DATA", "false")
os.environ.setdefault("FREE_PLAN_NOTE_LIMIT", "3")

from collections.abc import AsyncGenerator, Awaitable, Callable  # noqa: E402

import pytest  # noqa: E402
from fastapi import FastAPI  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from tenantnotes.core.auth.backend import create_access_token  # noqa: E402
from tenantnotes.core.database import create_tables, get_db  # noqa: E402
from tenantnotes.main import create_app  # noqa: E402
from tenantnotes.modules.users.models import User  # noqa: E402
from tenantnotes.modules.users.repos import UserRepository  # noqa: E402
from tenantnotes.seed import DEMO_PASSWORD, seed_demo_data  # noqa: E402


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create a fresh in-memory database with all tables."""
    test_engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    await create_tables(test_engine)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to the test database."""
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest.fixture
async def db(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    """Database session for arranging and inspecting test data.

    Fixtures commit what they create so that request sessions see it.
    """
    async with session_factory() as session:
        yield session


@pytest.fixture
def app(session_factory: async_sessionmaker[AsyncSession]) -> FastAPI:
    """Application wired to the test database."""
    application = create_app()

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    application.dependency_overrides[get_db] = override_get_db
    return application


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client for the application."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as test_client:
        yield test_client


@pytest.fixture
async def demo_data(db: AsyncSession) -> dict[str, int]:
    """Seed the acme and globex tenants with their admins and members."""
    return await seed_demo_data(db)


@pytest.fixture
def demo_password() -> str:
    return DEMO_PASSWORD


@pytest.fixture
def get_user(db: AsyncSession) -> Callable[[str], Awaitable[User]]:
    """Look up a seeded user by email."""

    async def _get_user(email: str) -> User:
        user = await UserRepository(db).get_by_email_system(email)
        assert user is not None, f"unknown user {email}"
        return user

    return _get_user


@pytest.fixture
def auth_headers(
    demo_data: dict[str, int],  # noqa: ARG001
    get_user: Callable[[str], Awaitable[User]],
) -> Callable[[str], Awaitable[dict[str, str]]]:
    """Build an Authorization header for a seeded user."""

    async def _auth_headers(email: str) -> dict[str, str]:
        user = await get_user(email)
        return {"Authorization": f"Bearer {create_access_token(user)}"}

    return _auth_headers
