"""
Generic Repository SQLAlchemy Implementation

One implementation of CRUD, paging and projection reused for every entity with an integer key.
"""

import logging
from typing import Any, Optional

from pydantic import BaseModel
from sqlalchemy import func, inspect, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm.exc import StaleDataError

from hotel_listing.common.errors import ConcurrencyConflictError, NotFoundError
from hotel_listing.domain.paging import PagedResult, QueryParameters
from hotel_listing.mapping.mapper import Mapper
from hotel_listing.repositories.base import GenericRepository, R, T

logger = logging.getLogger(__name__)


class SQLAlchemyGenericRepository(GenericRepository[T]):
    """
    Generic Repository SQLAlchemy Implementation

    Every write commits the session it was given. A commit that loses an
    optimistic concurrency check is rolled back and raised as ConcurrencyConflictError;
    any other failed commit is rolled back and re-raised, leaving the session usable.
    """

    def __init__(self, session: AsyncSession, entity_type: type[T], mapper: Mapper):
        """
        Initialize Repository

        Args:
            session: Async database session
            entity_type: ORM entity class
            mapper: Object mapper used for projection and source mapping
        """
        self.session = session
        self.entity_type = entity_type
        self.mapper = mapper
        self.entity_name = entity_type.__name__
        self._primary_key = inspect(entity_type).primary_key[0]

    def _key_of(self, entity: T) -> Any:
        identity = inspect(entity).identity
        return identity[0] if identity else None

    async def _save_changes(self, key: Any = None) -> None:
        try:
            await self.session.commit()
        except StaleDataError as e:
            await self.session.rollback()
            logger.warning(
                "Concurrent write conflict on %s with id (%s): %s", self.entity_name, key, e
            )
            raise ConcurrencyConflictError(self.entity_name, key) from e
        except SQLAlchemyError:
            await self.session.rollback()
            raise

    async def get(self, id: Optional[int]) -> Optional[T]:
        """Get entity by primary key"""
        if id is None:
            return None
        return await self.session.get(self.entity_type, id)

    async def get_as(self, id: Optional[int], result_type: type[R]) -> R:
        """Get entity by primary key, projected"""
        if id is None:
            raise NotFoundError(self.entity_name, "No Key Provided")

        projection = self.mapper.project(self.entity_type, result_type)
        result = await self.session.execute(
            projection.statement.where(self._primary_key == id)
        )
        items = projection.to_results(result)
        if not items:
            raise NotFoundError(self.entity_name, id)
        return items[0]

    async def get_all(self) -> list[T]:
        """Get all entities"""
        result = await self.session.execute(select(self.entity_type))
        return list(result.scalars().all())

    async def get_all_as(self, result_type: type[R]) -> list[R]:
        """Get all entities, projected"""
        projection = self.mapper.project(self.entity_type, result_type)
        result = await self.session.execute(projection.statement.order_by(self._primary_key))
        return projection.to_results(result)

    async def get_paged(self, query: QueryParameters, result_type: type[R]) -> PagedResult[R]:
        """Get one page of entities, projected"""
        count_query = select(func.count()).select_from(self.entity_type)
        total_result = await self.session.execute(count_query)
        total = total_result.scalar() or 0

        projection = self.mapper.project(self.entity_type, result_type)
        statement = (
            projection.statement.order_by(self._primary_key)
            .offset(query.start_index)
            .limit(query.page_size)
        )
        result = await self.session.execute(statement)

        return PagedResult[result_type](
            items=projection.to_results(result),
            total_count=total,
            page_number=query.page_number,
            record_number=query.page_size,
        )

    async def add(self, entity: T) -> T:
        """Insert entity"""
        self.session.add(entity)
        await self._save_changes()
        return entity

    async def add_from(self, source: BaseModel, result_type: type[R]) -> R:
        """Insert an entity built from source"""
        entity = self.mapper.map(source, self.entity_type)
        await self.add(entity)

        # Relationship-bearing results are re-read so the relationships get loaded
        if self.mapper.project(self.entity_type, result_type).selects_entity:
            return await self.get_as(self._key_of(entity), result_type)
        return self.mapper.map(entity, result_type)

    async def delete(self, id: int) -> None:
        """Delete entity by primary key"""
        entity = await self.get(id)
        if entity is None:
            raise NotFoundError(self.entity_name, id)

        await self.session.delete(entity)
        await self._save_changes(id)

    async def update(self, entity: T) -> None:
        """Commit changes on a loaded entity"""
        self.session.add(entity)
        await self._save_changes(self._key_of(entity))

    async def update_from(self, id: int, source: BaseModel) -> None:
        """Merge source onto the stored entity"""
        entity = await self.get(id)
        if entity is None:
            raise NotFoundError(self.entity_name, id)

        self.mapper.map_into(source, entity)
        await self._save_changes(id)

    async def exists(self, id: int) -> bool:
        """Check if entity exists"""
        return await self.get(id) is not None
