"""
Hotel Repository SQLAlchemy Implementation

Provides concrete database operation implementation for Hotels.
"""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from hotel_listing.db.models import Hotel
from hotel_listing.mapping.mapper import Mapper
from hotel_listing.repositories.hotel_repo import HotelRepository
from hotel_listing.repositories.sqlalchemy.generic_repo import SQLAlchemyGenericRepository


class SQLAlchemyHotelRepository(HotelRepository):
    """Hotel Repository SQLAlchemy Implementation"""

    def __init__(self, session: AsyncSession, mapper: Mapper):
        self.session = session
        self.entities = SQLAlchemyGenericRepository(session, Hotel, mapper)

    async def get_details(self, id: int) -> Optional[Hotel]:
        """Get Hotel with its country (single joined query)"""
        result = await self.session.execute(
            select(Hotel)
            .options(joinedload(Hotel.country))
            .where(Hotel.id == id)
        )
        return result.scalar_one_or_none()
