"""
Hotel Repository Interface

Defines the data access interface for Hotels.
"""

from abc import ABC, abstractmethod
from typing import Optional

from hotel_listing.db.models import Hotel
from hotel_listing.repositories.base import GenericRepository


class HotelRepository(ABC):
    """Hotel Repository Interface"""

    entities: GenericRepository[Hotel]

    @abstractmethod
    async def get_details(self, id: int) -> Optional[Hotel]:
        """Get Hotel with its country loaded in the same query"""
        pass
