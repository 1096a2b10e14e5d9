"""
Country Repository SQLAlchemy Implementation

Provides concrete database operation implementation for Countries.
"""

from typing import Optional

from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from hotel_listing.db.models import Country
from hotel_listing.mapping.mapper import Mapper
from hotel_listing.repositories.country_repo import CountryRepository
from hotel_listing.repositories.sqlalchemy.generic_repo import SQLAlchemyGenericRepository


class SQLAlchemyCountryRepository(CountryRepository):
    """
    Country Repository SQLAlchemy Implementation

    Holds a generic repository for the standard operations and adds relationship-aware reads.
    """

    def __init__(self, session: AsyncSession, mapper: Mapper):
        """
        Initialize Repository

        Args:
            session: Async database session
            mapper: Object mapper
        """
        self.session = session
        self.entities = SQLAlchemyGenericRepository(session, Country, mapper)

    async def get_details(self, id: int) -> Optional[Country]:
        """Get Country with hotels (single joined query)"""
        result = await self.session.execute(
            select(Country)
            .options(joinedload(Country.hotels))
            .where(Country.id == id)
        )
        return result.unique().scalar_one_or_none()

    async def country_exists(self, id: int) -> bool:
        """Check if Country exists"""
        result = await self.session.execute(select(exists().where(Country.id == id)))
        return bool(result.scalar())
