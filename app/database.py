"""Database connection and session management."""
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, AsyncGenerator, Iterable

from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from app.config import settings

# Create data directory if it doesn't exist
if settings.database_url.startswith("sqlite") and ":memory:" not in settings.database_url:
    Path("./data").mkdir(parents=True, exist_ok=True)

# Create async engine
engine = create_async_engine(
    settings.database_url,
    echo=settings.debug,
    connect_args={"check_same_thread": False} if "sqlite" in settings.database_url else {},
)

# Create async session factory
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """Base class for all database models."""
    pass


def utcnow() -> datetime:
    """Return a timezone-aware UTC timestamp."""
    return datetime.now(timezone.utc)


def dialect_insert(db: AsyncSession, model: type[Base]):
    """Build an INSERT that supports ON CONFLICT clauses for the session's dialect.

    SQLite and PostgreSQL share the ``on_conflict_do_nothing`` /
    ``on_conflict_do_update`` API, which is what the uniqueness rules rely on.
    """
    name = db.get_bind().dialect.name
    if name == "postgresql":
        return postgresql.insert(model)
    if name == "sqlite":
        return sqlite.insert(model)
    raise RuntimeError(f"Unsupported database dialect for conflict-aware inserts: {name}")


async def insert_if_absent(
    db: AsyncSession,
    model: type[Base],
    values: dict[str, Any],
    index_elements: Iterable[str],
) -> bool:
    """Insert a row unless one with the same unique key exists.

    Returns:
        bool: True if a new row was written
    """
    stmt = dialect_insert(db, model).values(**values)
    stmt = stmt.on_conflict_do_nothing(index_elements=list(index_elements))
    result = await db.execute(stmt)
    return result.rowcount == 1


async def upsert(
    db: AsyncSession,
    model: type[Base],
    values: dict[str, Any],
    index_elements: Iterable[str],
    update: dict[str, Any],
) -> None:
    """Insert a row, or apply ``update`` to the row holding the same unique key."""
    stmt = dialect_insert(db, model).values(**values)
    stmt = stmt.on_conflict_do_update(index_elements=list(index_elements), set_=update)
    await db.execute(stmt)


async def init_db(bind: AsyncEngine | None = None) -> None:
    """Initialize database tables."""
    import app.models  # noqa: F401

    async with (bind or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def drop_db(bind: AsyncEngine | None = None) -> None:
    """Drop all database tables."""
    import app.models  # noqa: F401

    async with (bind or engine).begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Get database session.

    Yields:
        AsyncSession: Database session
    """
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
