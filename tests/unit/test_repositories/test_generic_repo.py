"""
SQLAlchemyGenericRepository unit tests
"""

import pytest
from sqlalchemy.exc import IntegrityError

from hotel_listing.common.errors import NotFoundError
from hotel_listing.db.models import Country, Hotel
from hotel_listing.domain.catalog import (
    CountryCreate,
    CountryResponse,
    CountryUpdate,
    HotelCreate,
    HotelDetail,
    HotelResponse,
)
from hotel_listing.domain.paging import QueryParameters
from hotel_listing.repositories.sqlalchemy import SQLAlchemyGenericRepository


@pytest.fixture
def countries(db_session, mapper):
    return SQLAlchemyGenericRepository(db_session, Country, mapper)


@pytest.fixture
def hotels(db_session, mapper):
    return SQLAlchemyGenericRepository(db_session, Hotel, mapper)


async def _add_countries(countries, n):
    for i in range(n):
        await countries.add(Country(name=f"Country {i}", short_name=f"C{i}"))


@pytest.mark.asyncio
async def test_add_assigns_id_and_get_returns_entity(countries):
    country = await countries.add(Country(name="Jamaica", short_name="JM"))
    assert country.id is not None

    loaded = await countries.get(country.id)
    assert loaded is not None
    assert loaded.name == "Jamaica"


@pytest.mark.asyncio
async def test_get_none_id_returns_none(countries):
    assert await countries.get(None) is None


@pytest.mark.asyncio
async def test_get_missing_returns_none(countries):
    assert await countries.get(999) is None


@pytest.mark.asyncio
async def test_get_as_projects_columns(countries):
    country = await countries.add(Country(name="Jamaica", short_name="JM"))

    result = await countries.get_as(country.id, CountryResponse)
    assert result == CountryResponse(id=country.id, name="Jamaica", short_name="JM")


@pytest.mark.asyncio
async def test_get_as_without_key_raises_not_found(countries):
    with pytest.raises(NotFoundError) as exc_info:
        await countries.get_as(None, CountryResponse)
    assert exc_info.value.key == "No Key Provided"
    assert exc_info.value.message == "Country with id (No Key Provided) was not found"


@pytest.mark.asyncio
async def test_get_as_missing_raises_not_found(countries):
    with pytest.raises(NotFoundError) as exc_info:
        await countries.get_as(42, CountryResponse)
    assert exc_info.value.entity_name == "Country"
    assert exc_info.value.key == 42


@pytest.mark.asyncio
async def test_get_as_loads_relationship(countries, hotels):
    country = await countries.add(Country(name="Bahamas", short_name="BS"))
    hotel = await hotels.add(Hotel(name="Grand", address="Nassau", rating=4.0, country_id=country.id))

    detail = await hotels.get_as(hotel.id, HotelDetail)
    assert detail.country.name == "Bahamas"
    assert detail.country.id == country.id


@pytest.mark.asyncio
async def test_get_all_and_get_all_as(countries):
    await _add_countries(countries, 3)

    entities = await countries.get_all()
    assert len(entities) == 3

    results = await countries.get_all_as(CountryResponse)
    assert [r.name for r in results] == ["Country 0", "Country 1", "Country 2"]


@pytest.mark.asyncio
async def test_get_all_as_empty(countries):
    assert await countries.get_all_as(CountryResponse) == []


@pytest.mark.asyncio
async def test_get_paged_skips_by_start_index(countries):
    await _add_countries(countries, 20)

    page = await countries.get_paged(
        QueryParameters(start_index=5, page_number=2, page_size=10), CountryResponse
    )
    assert page.total_count == 20
    assert page.page_number == 2
    assert page.record_number == 10
    assert [item.name for item in page.items] == [f"Country {i}" for i in range(5, 15)]


@pytest.mark.asyncio
async def test_get_paged_past_end_is_empty(countries):
    await _add_countries(countries, 20)

    page = await countries.get_paged(
        QueryParameters(start_index=40, page_number=0, page_size=10), CountryResponse
    )
    assert page.items == []
    assert page.total_count == 20


@pytest.mark.asyncio
async def test_get_paged_default_page_size(countries):
    await _add_countries(countries, 20)

    page = await countries.get_paged(QueryParameters(), CountryResponse)
    assert len(page.items) == 15
    assert page.record_number == 15


@pytest.mark.asyncio
async def test_get_paged_zero_page_size(countries):
    await _add_countries(countries, 3)

    page = await countries.get_paged(QueryParameters(page_size=0), CountryResponse)
    assert page.items == []
    assert page.total_count == 3


@pytest.mark.asyncio
async def test_add_from_returns_projection(countries):
    result = await countries.add_from(CountryCreate(name="Cayman Island", short_name="CI"), CountryResponse)
    assert result.id is not None
    assert result.name == "Cayman Island"
    assert await countries.exists(result.id)


@pytest.mark.asyncio
async def test_add_from_hotel(countries, hotels):
    country = await countries.add(Country(name="Jamaica", short_name="JM"))

    result = await hotels.add_from(
        HotelCreate(name="Sandals", address="Negril", rating=4.5, country_id=country.id),
        HotelResponse,
    )
    assert result.country_id == country.id
    assert result.rating == 4.5


@pytest.mark.asyncio
async def test_delete_removes_entity(countries):
    country = await countries.add(Country(name="Jamaica", short_name="JM"))

    await countries.delete(country.id)
    assert await countries.exists(country.id) is False


@pytest.mark.asyncio
async def test_delete_missing_raises_not_found(countries):
    with pytest.raises(NotFoundError):
        await countries.delete(999)


@pytest.mark.asyncio
async def test_update_commits_loaded_entity(countries):
    country = await countries.add(Country(name="Jamaica", short_name="JM"))
    country.name = "Jamaica Updated"
    await countries.update(country)

    result = await countries.get_as(country.id, CountryResponse)
    assert result.name == "Jamaica Updated"


@pytest.mark.asyncio
async def test_update_from_merges_only_sent_fields(countries):
    country = await countries.add(Country(name="Jamaica", short_name="JM"))

    await countries.update_from(country.id, CountryUpdate(short_name="JA"))

    result = await countries.get_as(country.id, CountryResponse)
    assert result.name == "Jamaica"
    assert result.short_name == "JA"


@pytest.mark.asyncio
async def test_update_from_never_changes_key(countries):
    country = await countries.add(Country(name="Jamaica", short_name="JM"))

    await countries.update_from(country.id, CountryUpdate(id=77, name="Renamed"))

    assert await countries.exists(77) is False
    result = await countries.get_as(country.id, CountryResponse)
    assert result.name == "Renamed"


@pytest.mark.asyncio
async def test_update_from_missing_raises_not_found(countries):
    with pytest.raises(NotFoundError):
        await countries.update_from(999, CountryUpdate(name="Nowhere"))


@pytest.mark.asyncio
async def test_update_bumps_version(countries):
    country = await countries.add(Country(name="Jamaica", short_name="JM"))
    first_version = country.version

    await countries.update_from(country.id, CountryUpdate(name="Jamaica 2"))
    assert country.version == first_version + 1


@pytest.mark.asyncio
async def test_failed_commit_rolls_back_session(countries, hotels):
    country = await countries.add(Country(name="Jamaica", short_name="JM"))
    hotel = await hotels.add(Hotel(name="Sandals", address="Negril", rating=4.5, country_id=country.id))
    country_id, hotel_id = country.id, hotel.id

    hotel.name = None
    with pytest.raises(IntegrityError):
        await hotels.update(hotel)

    # The session is not left pending a rollback
    assert await countries.exists(country_id)
    stored = await hotels.get_as(hotel_id, HotelResponse)
    assert stored.name == "Sandals"
    await countries.add(Country(name="Bahamas", short_name="BS"))
