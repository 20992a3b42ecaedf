"""Shared fixtures: a fresh app on an in-memory database per test."""
import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.database import Base, get_db
from app.main import create_app

# Test database URL
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def session_factory():
    """Session factory over a throwaway in-memory database."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Create tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def app(session_factory):
    """Create an application bound to the test database."""

    # Override database dependency
    async def override_get_db():
        async with session_factory() as session:
            yield session

    application = create_app()
    application.dependency_overrides[get_db] = override_get_db

    yield application

    application.dependency_overrides.clear()


@pytest.fixture
async def client(app):
    """Create test client."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac


async def create_book(client: AsyncClient, **overrides) -> dict:
    """Save a draft and return the response body."""
    payload = {
        "title": "The Lighthouse",
        "content": ["Page 1", "Page 2"],
        "playerId": "player-1",
        "author": "Ada",
        "genres": ["Mystery"],
    }
    payload.update(overrides)
    response = await client.post("/api/books", json=payload)
    assert response.status_code in (200, 201), response.text
    return response.json()


async def publish(client: AsyncClient, book_id: str, player_id: str = "player-1", **flags) -> dict:
    response = await client.post(
        f"/api/books/{book_id}/publish",
        json={"playerId": player_id, **flags},
    )
    assert response.status_code == 200, response.text
    return response.json()
