"""
Country Management Service Module

Provides business logic processing for Countries.
"""

from hotel_listing.common.errors import BadRequestError, ConcurrencyConflictError, NotFoundError
from hotel_listing.domain.catalog import CountryCreate, CountryDetail, CountryResponse, CountryUpdate
from hotel_listing.domain.paging import PagedResult, QueryParameters
from hotel_listing.mapping.mapper import Mapper
from hotel_listing.repositories.country_repo import CountryRepository


class CountryService:
    """
    Country Management Service

    Handles business logic related to countries, including CRUD operations and business rule validation.
    """

    def __init__(self, repo: CountryRepository, mapper: Mapper):
        """
        Initialize Service

        Args:
            repo: Country Repository
            mapper: Object mapper
        """
        self.repo = repo
        self.mapper = mapper

    async def list_all(self) -> list[CountryResponse]:
        """Get all countries"""
        return await self.repo.entities.get_all_as(CountryResponse)

    async def list_paged(self, query: QueryParameters) -> PagedResult[CountryResponse]:
        """Get one page of countries"""
        return await self.repo.entities.get_paged(query, CountryResponse)

    async def get(self, id: int) -> CountryDetail:
        """
        Get Country with its hotels

        Raises:
            NotFoundError: Country not found
        """
        country = await self.repo.get_details(id)
        if country is None:
            raise NotFoundError("Country", id)
        return self.mapper.map(country, CountryDetail)

    async def create(self, data: CountryCreate) -> CountryResponse:
        """Create Country"""
        return await self.repo.entities.add_from(data, CountryResponse)

    async def update(self, id: int, data: CountryUpdate) -> None:
        """
        Update Country

        Args:
            id: Country ID
            data: Update data (only sent fields are applied)

        Raises:
            BadRequestError: Payload id differs from id
            NotFoundError: Country not found, including deleted concurrently
            ConcurrencyConflictError: Country changed concurrently and still exists
        """
        if data.id is not None and data.id != id:
            raise BadRequestError("Invalid record id", code="invalid_record_id")

        try:
            await self.repo.entities.update_from(id, data)
        except ConcurrencyConflictError:
            if not await self.repo.country_exists(id):
                raise NotFoundError("Country", id)
            raise

    async def delete(self, id: int) -> None:
        """
        Delete Country and its hotels

        Raises:
            NotFoundError: Country not found
        """
        await self.repo.entities.delete(id)
