"""
Object Mapper

Converts between ORM entities and pydantic transfer models over statically registered type pairs:
- map: construct a new destination object from a source
- map_into: merge a source's explicitly set fields onto an existing object
- project: build a SELECT that only fetches what a result model needs
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel
from sqlalchemy import Select, inspect, select
from sqlalchemy.engine import Result
from sqlalchemy.orm import selectinload

D = TypeVar("D")
R = TypeVar("R", bound=BaseModel)


class MappingError(Exception):
    """Raised when a type pair was never registered"""
    pass


@dataclass
class Projection(Generic[R]):
    """
    A SELECT shaped for a result model, and how to turn its rows into results.

    Plain-column results select only those columns; results that include relationships
    select the entity with the relationships eagerly loaded.
    """

    statement: Select
    result_type: type[R]
    selects_entity: bool

    def to_results(self, result: Result) -> list[R]:
        if self.selects_entity:
            return [
                self.result_type.model_validate(entity, from_attributes=True)
                for entity in result.scalars().all()
            ]
        return [self.result_type.model_validate(dict(row._mapping)) for row in result.all()]


def _is_entity(cls: type) -> bool:
    return inspect(cls, raiseerr=False) is not None


def _column_keys(entity_type: type) -> set[str]:
    return {attr.key for attr in inspect(entity_type).column_attrs}


def _primary_keys(entity_type: type) -> set[str]:
    mapper = inspect(entity_type)
    return {mapper.get_property_by_column(col).key for col in mapper.primary_key}


def _version_key(entity_type: type) -> Optional[str]:
    mapper = inspect(entity_type)
    if mapper.version_id_col is None:
        return None
    return mapper.get_property_by_column(mapper.version_id_col).key


def _source_values(source: Any, exclude_unset: bool = False) -> dict[str, Any]:
    if isinstance(source, BaseModel):
        return source.model_dump(exclude_unset=exclude_unset)
    if _is_entity(type(source)):
        return {key: getattr(source, key) for key in _column_keys(type(source))}
    raise MappingError(f"Cannot read values from {type(source).__name__}")


class Mapper:
    """Registry of mappable type pairs"""

    def __init__(self):
        self._pairs: set[tuple[type, type]] = set()

    def create_map(self, source_type: type, destination_type: type, reverse: bool = False) -> "Mapper":
        """Register source -> destination (and destination -> source when reverse)."""
        self._pairs.add((source_type, destination_type))
        if reverse:
            self._pairs.add((destination_type, source_type))
        return self

    def is_registered(self, source_type: type, destination_type: type) -> bool:
        return any((base, destination_type) in self._pairs for base in source_type.__mro__)

    def _require(self, source_type: type, destination_type: type) -> None:
        if not self.is_registered(source_type, destination_type):
            raise MappingError(
                f"Missing map configuration: {source_type.__name__} -> {destination_type.__name__}"
            )

    def map(self, source: Any, destination_type: type[D]) -> D:
        """
        Construct a destination object from source.

        Args:
            source: Entity or transfer model
            destination_type: Target class

        Returns:
            A new destination_type instance
        """
        self._require(type(source), destination_type)

        if issubclass(destination_type, BaseModel):
            return destination_type.model_validate(source, from_attributes=True)

        if _is_entity(destination_type):
            columns = _column_keys(destination_type)
            primary_keys = _primary_keys(destination_type)
            version_key = _version_key(destination_type)
            values = {
                key: value
                for key, value in _source_values(source).items()
                if key in columns
                and key != version_key
                # A key is only copied when the source actually carries one
                and not (key in primary_keys and value is None)
            }
            return destination_type(**values)

        raise MappingError(f"Unsupported destination type {destination_type.__name__}")

    def map_into(self, source: Any, destination: Any) -> Any:
        """
        Merge source onto an existing destination object.

        Only fields explicitly set on a pydantic source are copied; everything else keeps its value.
        Keys and concurrency tokens are never overwritten.
        """
        destination_type = type(destination)
        self._require(type(source), destination_type)

        if _is_entity(destination_type):
            writable = _column_keys(destination_type) - _primary_keys(destination_type)
            writable.discard(_version_key(destination_type))
        elif isinstance(destination, BaseModel):
            writable = set(type(destination).model_fields)
        else:
            raise MappingError(f"Unsupported destination type {destination_type.__name__}")

        for key, value in _source_values(source, exclude_unset=True).items():
            if key in writable:
                setattr(destination, key, value)
        return destination

    def project(self, entity_type: type, result_type: type[R]) -> Projection[R]:
        """
        Build a query that selects only what result_type needs from entity_type.

        Args:
            entity_type: ORM entity class
            result_type: Pydantic result model

        Returns:
            Projection: statement plus row conversion
        """
        self._require(entity_type, result_type)

        entity_mapper = inspect(entity_type)
        relationship_keys = set(entity_mapper.relationships.keys())
        column_keys = _column_keys(entity_type)
        fields = list(result_type.model_fields)

        related = [name for name in fields if name in relationship_keys]
        if related:
            statement = select(entity_type).options(
                *(selectinload(getattr(entity_type, name)) for name in related)
            )
            return Projection(statement, result_type, selects_entity=True)

        columns = [getattr(entity_type, name) for name in fields if name in column_keys]
        return Projection(select(*columns), result_type, selects_entity=False)
