"""
Optimistic concurrency tests

Two sessions on one file database stand in for two concurrent requests.
"""

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from hotel_listing.common.errors import ConcurrencyConflictError, NotFoundError
from hotel_listing.db.models import Base, Country, Hotel
from hotel_listing.db.session import enable_sqlite_foreign_keys
from hotel_listing.domain.catalog import HotelUpdate
from hotel_listing.repositories.sqlalchemy import (
    SQLAlchemyCountryRepository,
    SQLAlchemyHotelRepository,
)
from hotel_listing.services import HotelService


@pytest_asyncio.fixture
async def session_factory(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'concurrency.db'}")
    enable_sqlite_foreign_keys(engine.sync_engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    await engine.dispose()


@pytest_asyncio.fixture
async def hotel_id(session_factory):
    async with session_factory() as session:
        country = Country(name="Jamaica", short_name="JM")
        session.add(country)
        await session.flush()
        hotel = Hotel(name="Sandals", address="Negril", rating=4.5, country_id=country.id)
        session.add(hotel)
        await session.commit()
        return hotel.id


@pytest.mark.asyncio
async def test_stale_update_raises_conflict(session_factory, mapper, hotel_id):
    async with session_factory() as session_a, session_factory() as session_b:
        repo_a = SQLAlchemyHotelRepository(session_a, mapper)
        repo_b = SQLAlchemyHotelRepository(session_b, mapper)

        hotel = await repo_a.entities.get(hotel_id)
        await session_a.commit()

        await repo_b.entities.update_from(hotel_id, HotelUpdate(rating=3.0))

        hotel.rating = 5.0
        with pytest.raises(ConcurrencyConflictError) as exc_info:
            await repo_a.entities.update(hotel)
        assert exc_info.value.entity_name == "Hotel"
        assert exc_info.value.status_code == 500

    async with session_factory() as session:
        stored = await session.get(Hotel, hotel_id)
        assert stored.rating == 3.0


@pytest.mark.asyncio
async def test_stale_delete_raises_conflict(session_factory, mapper, hotel_id):
    async with session_factory() as session_a, session_factory() as session_b:
        repo_a = SQLAlchemyHotelRepository(session_a, mapper)
        repo_b = SQLAlchemyHotelRepository(session_b, mapper)

        hotel = await repo_a.entities.get(hotel_id)
        await session_a.commit()

        await repo_b.entities.update_from(hotel_id, HotelUpdate(name="Sandals Royal"))

        with pytest.raises(ConcurrencyConflictError):
            await repo_a.entities.delete(hotel.id)


@pytest.mark.asyncio
async def test_service_reports_not_found_when_row_deleted_concurrently(
    session_factory, mapper, hotel_id
):
    async with session_factory() as session_a, session_factory() as session_b:
        hotels_a = SQLAlchemyHotelRepository(session_a, mapper)
        service_a = HotelService(hotels_a, SQLAlchemyCountryRepository(session_a, mapper), mapper)

        # Load into session A's identity map, then let B delete the row
        await hotels_a.entities.get(hotel_id)
        await session_a.commit()
        await SQLAlchemyHotelRepository(session_b, mapper).entities.delete(hotel_id)

        # A still holds the old version; its write conflicts and the row is gone
        with pytest.raises(NotFoundError):
            await service_a.update(hotel_id, HotelUpdate(rating=2.0))


@pytest.mark.asyncio
async def test_service_reraises_conflict_when_row_still_exists(
    session_factory, mapper, hotel_id
):
    async with session_factory() as session_a, session_factory() as session_b:
        hotels_a = SQLAlchemyHotelRepository(session_a, mapper)
        service_a = HotelService(hotels_a, SQLAlchemyCountryRepository(session_a, mapper), mapper)

        # Load into session A's identity map, then let B bump the version
        await hotels_a.entities.get(hotel_id)
        await session_a.commit()
        await SQLAlchemyHotelRepository(session_b, mapper).entities.update_from(
            hotel_id, HotelUpdate(rating=3.5)
        )

        with pytest.raises(ConcurrencyConflictError):
            await service_a.update(hotel_id, HotelUpdate(rating=2.0))
