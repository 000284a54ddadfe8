"""
Shared pytest fixtures.

Every test gets its own in-memory SQLite database; the app's get_db
dependency is overridden to hand out sessions bound to it.
"""
import os

# Override settings BEFORE any application import
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["JWT_SECRET"] = "test-jwt-secret-not-for-production"
os.environ["BCRYPT_ROUNDS"] = "4"  # Fast hashing in tests
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["APP_ENV"] = "test"

from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from feedback_api.database import Base, get_db
from feedback_api.models import User, SearchHistory  # noqa: F401


@pytest_asyncio.fixture
async def db_engine():
    """Fresh in-memory database with all tables."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def mock_db_session():
    """
    Mock async session for failure paths.

    Usage:
        mock_db_session.execute.side_effect = OperationalError("...", {}, None)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.commit = AsyncMock()
    session.refresh = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest_asyncio.fixture
async def client(session_factory):
    """HTTPX AsyncClient talking to the app through ASGITransport."""
    from feedback_api.main import app

    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def register(client):
    """Register a user through the API and return its Authorization header."""
    async def _register(email: str = "alice@example.com", password: str = "s3cret-pass") -> dict:
        response = await client.post("/api/register", json={"email": email, "password": password})
        assert response.status_code == 201, response.text
        return {"Authorization": f"Bearer {response.json()['token']}"}

    return _register


@pytest_asyncio.fixture
async def failing_client(mock_db_session):
    """Client whose database session fails on every statement and commit."""
    from feedback_api.main import app

    failure = OperationalError("SELECT 1", {}, Exception("connection refused by db-host:5432"))
    mock_db_session.execute.side_effect = failure
    mock_db_session.commit.side_effect = failure

    async def override_get_db():
        yield mock_db_session

    app.dependency_overrides[get_db] = override_get_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
