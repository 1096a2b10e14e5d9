"""
Country Repository Interface

Defines the data access interface for Countries.
"""

from abc import ABC, abstractmethod
from typing import Optional

from hotel_listing.db.models import Country
from hotel_listing.repositories.base import GenericRepository


class CountryRepository(ABC):
    """
    Country Repository Interface

    Generic operations are reached through ``entities``; relationship-aware reads are added here.
    """

    entities: GenericRepository[Country]

    @abstractmethod
    async def get_details(self, id: int) -> Optional[Country]:
        """Get Country with its hotels loaded in the same query"""
        pass

    @abstractmethod
    async def country_exists(self, id: int) -> bool:
        """Check existence without loading the row"""
        pass
