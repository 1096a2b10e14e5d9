"""
Database Session Management Module

Provides asynchronous database session management, supporting SQLite and PostgreSQL.
"""

from typing import AsyncGenerator

from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from hotel_listing.config import get_settings

# Get configuration
settings = get_settings()

# Create asynchronous database engine
# echo=True prints SQL statements in DEBUG mode
engine = create_async_engine(
    settings.DATABASE_URL,
    echo=settings.DEBUG,
    # SQLite specific configuration
    connect_args={"check_same_thread": False}
    if settings.DATABASE_TYPE == "sqlite"
    else {},
)


def enable_sqlite_foreign_keys(sync_engine: Engine) -> None:
    """SQLite leaves foreign keys off per connection; hotels rely on them for CASCADE deletes."""

    @event.listens_for(sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


if settings.DATABASE_TYPE == "sqlite":
    enable_sqlite_foreign_keys(engine.sync_engine)

# Create asynchronous session factory
AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,  # Do not expire objects after commit, avoids lazy loads after save
    autoflush=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Get database session (for dependency injection)

    One session per request; it is the unit of work every repository in the request shares.

    Yields:
        AsyncSession: Async database session
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


async def init_db() -> None:
    """
    Initialize Database

    Creates all defined table structures and seeds roles (and sample data when enabled).
    Called on application startup.
    """
    from hotel_listing.db.models import Base
    from hotel_listing.db.seed import seed_database

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with AsyncSessionLocal() as session:
        await seed_database(session, sample_data=settings.SEED_SAMPLE_DATA)
