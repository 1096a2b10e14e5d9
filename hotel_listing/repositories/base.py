"""
Base Repository Interface Module

Defines the generic interface for data access, decoupling business logic from specific database implementations.
"""

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel

from hotel_listing.domain.paging import PagedResult, QueryParameters

# Entity type
T = TypeVar("T")
# Result (projection) type
R = TypeVar("R", bound=BaseModel)


class GenericRepository(ABC, Generic[T]):
    """
    Generic Repository Interface

    Standard CRUD, paging and projection operations over one entity type with an integer key.
    Bare-entity reads encode absence as None; projected reads, deletes and
    source-based updates raise NotFoundError.
    """

    @abstractmethod
    async def get(self, id: Optional[int]) -> Optional[T]:
        """Get entity by primary key, None when absent or when no key is given"""
        pass

    @abstractmethod
    async def get_as(self, id: Optional[int], result_type: type[R]) -> R:
        """
        Get entity by primary key projected to result_type

        Raises:
            NotFoundError: No row with that key
        """
        pass

    @abstractmethod
    async def get_all(self) -> list[T]:
        """Get every row, unfiltered and unpaged"""
        pass

    @abstractmethod
    async def get_all_as(self, result_type: type[R]) -> list[R]:
        """Get every row projected to result_type"""
        pass

    @abstractmethod
    async def get_paged(self, query: QueryParameters, result_type: type[R]) -> PagedResult[R]:
        """
        Get one page of rows projected to result_type

        Args:
            query: start_index rows are skipped, page_size rows are taken
            result_type: Projection model

        Returns:
            PagedResult: Page items and the total row count
        """
        pass

    @abstractmethod
    async def add(self, entity: T) -> T:
        """Insert entity and return it with its generated key"""
        pass

    @abstractmethod
    async def add_from(self, source: BaseModel, result_type: type[R]) -> R:
        """Map source to an entity, insert it, and map the stored entity to result_type"""
        pass

    @abstractmethod
    async def delete(self, id: int) -> None:
        """
        Delete entity by primary key

        Raises:
            NotFoundError: No row with that key
        """
        pass

    @abstractmethod
    async def update(self, entity: T) -> None:
        """Commit changes made to an already loaded entity"""
        pass

    @abstractmethod
    async def update_from(self, id: int, source: BaseModel) -> None:
        """
        Merge the fields set on source onto the stored entity

        Raises:
            NotFoundError: No row with that key
        """
        pass

    @abstractmethod
    async def exists(self, id: int) -> bool:
        """Check whether a row with that key exists"""
        pass
