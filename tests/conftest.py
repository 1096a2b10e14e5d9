"""
Test Configuration Module
"""

from datetime import timedelta
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from hotel_listing.db.models import Base
from hotel_listing.db.seed import seed_database
from hotel_listing.db.session import enable_sqlite_foreign_keys
from hotel_listing.mapping import build_mapper
from hotel_listing.repositories.sqlalchemy import (
    SQLAlchemyCountryRepository,
    SQLAlchemyHotelRepository,
    SQLAlchemyUserRepository,
)
from hotel_listing.services import AuthManager, JwtSettings, UserManager


# Use in-memory database for testing
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

TEST_JWT_SETTINGS = JwtSettings(
    key="test-signing-key-that-is-long-enough-for-hs256",
    issuer="HotelListingAPI",
    audience="HotelListingAPIClient",
    duration_minutes=10,
)


@pytest_asyncio.fixture
async def async_engine():
    """Create async database engine for testing"""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
    )
    enable_sqlite_foreign_keys(engine.sync_engine)

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    # Clean up
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(async_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create database session for testing, with roles seeded"""
    async_session = async_sessionmaker(
        async_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        await seed_database(session, sample_data=False)
        yield session


@pytest.fixture
def mapper():
    return build_mapper()


@pytest.fixture
def country_repo(db_session, mapper):
    return SQLAlchemyCountryRepository(db_session, mapper)


@pytest.fixture
def hotel_repo(db_session, mapper):
    return SQLAlchemyHotelRepository(db_session, mapper)


@pytest.fixture
def user_manager(db_session):
    return UserManager(SQLAlchemyUserRepository(db_session), token_lifespan=timedelta(days=1))


@pytest.fixture
def auth_manager(user_manager, mapper):
    return AuthManager(user_manager, mapper, TEST_JWT_SETTINGS)


@pytest_asyncio.fixture
async def client(db_session) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client bound to the app, sharing the test session"""
    from hotel_listing.api.deps import get_db
    from hotel_listing.main import app

    app.dependency_overrides[get_db] = lambda: db_session

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    # Clean up overrides
    app.dependency_overrides = {}
