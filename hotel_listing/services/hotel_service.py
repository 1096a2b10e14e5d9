"""
Hotel Management Service Module

Provides business logic processing for Hotels.
"""

from hotel_listing.common.errors import BadRequestError, ConcurrencyConflictError, NotFoundError
from hotel_listing.domain.catalog import HotelCreate, HotelDetail, HotelResponse, HotelUpdate
from hotel_listing.domain.paging import PagedResult, QueryParameters
from hotel_listing.mapping.mapper import Mapper
from hotel_listing.repositories.country_repo import CountryRepository
from hotel_listing.repositories.hotel_repo import HotelRepository


class HotelService:
    """
    Hotel Management Service

    Handles business logic related to hotels. Every hotel must belong to an existing country.
    """

    def __init__(self, repo: HotelRepository, country_repo: CountryRepository, mapper: Mapper):
        """
        Initialize Service

        Args:
            repo: Hotel Repository
            country_repo: Country Repository (for country reference validation)
            mapper: Object mapper
        """
        self.repo = repo
        self.country_repo = country_repo
        self.mapper = mapper

    async def _check_country(self, country_id: int) -> None:
        if not await self.country_repo.country_exists(country_id):
            raise BadRequestError("Country does not exist", code="country_not_found")

    async def list_all(self) -> list[HotelResponse]:
        """Get all hotels"""
        return await self.repo.entities.get_all_as(HotelResponse)

    async def list_paged(self, query: QueryParameters) -> PagedResult[HotelResponse]:
        """Get one page of hotels"""
        return await self.repo.entities.get_paged(query, HotelResponse)

    async def get(self, id: int) -> HotelDetail:
        """
        Get Hotel with its country

        Raises:
            NotFoundError: Hotel not found
        """
        hotel = await self.repo.get_details(id)
        if hotel is None:
            raise NotFoundError("Hotel", id)
        return self.mapper.map(hotel, HotelDetail)

    async def create(self, data: HotelCreate) -> HotelResponse:
        """
        Create Hotel

        Raises:
            BadRequestError: Country does not exist
        """
        await self._check_country(data.country_id)
        return await self.repo.entities.add_from(data, HotelResponse)

    async def update(self, id: int, data: HotelUpdate) -> None:
        """
        Update Hotel

        Raises:
            BadRequestError: Payload id differs from id, or the new country does not exist
            NotFoundError: Hotel not found, including deleted concurrently
            ConcurrencyConflictError: Hotel changed concurrently and still exists
        """
        if data.id is not None and data.id != id:
            raise BadRequestError("Invalid record id", code="invalid_record_id")
        if data.country_id is not None:
            await self._check_country(data.country_id)

        try:
            await self.repo.entities.update_from(id, data)
        except ConcurrencyConflictError:
            if not await self.repo.entities.exists(id):
                raise NotFoundError("Hotel", id)
            raise

    async def delete(self, id: int) -> None:
        """
        Delete Hotel

        Raises:
            NotFoundError: Hotel not found
        """
        await self.repo.entities.delete(id)
