"""Generic repository base interface.

Repository[T] is the root abstraction for data access in this package.
The SQLAlchemy implementation lives in
datafiltering/infrastructure/persistence/ and is wired at the application
boundary via dependency injection.

Design notes:
  - All methods are async to accommodate async database drivers (asyncpg / SQLAlchemy async).
  - T is the entity type managed by the store; the interface never looks inside it.
  - list() takes a FilterRequest; what the filter keys mean is up to the entity.
  - get() raises NotFoundError, find() returns None.  Callers pick the contract.
  - update/delete take an id; the *_entity variants take an already loaded entity.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Generic, TypeVar

from datafiltering.domain.errors import NotFoundError
from datafiltering.domain.models.filtering import FilterRequest
from datafiltering.domain.models.pagination import SimplePage

T = TypeVar("T")


class Repository(ABC, Generic[T]):
    """Abstract CRUD + filtered-listing interface for one entity type."""

    @property
    def entity_name(self) -> str:
        """Human-readable entity name used in error messages."""
        return type(self).__name__

    @abstractmethod
    async def find(self, id: Any) -> T | None:
        """Return the entity with the given primary key, or None if not found."""

    async def get(self, id: Any) -> T:
        """Return the entity with the given primary key; raise NotFoundError if absent."""
        entity = await self.find(id)
        if entity is None:
            raise NotFoundError(self.entity_name, id)
        return entity

    @abstractmethod
    async def list(
        self,
        request: FilterRequest,
        actor: Any | None = None,
        query: Any | None = None,
        extras: Mapping[str, Any] | None = None,
    ) -> SimplePage[T]:
        """Return one page of entities matching the request.

        The page is a LengthAwarePage when total counts were requested,
        otherwise a SimplePage.  An empty match yields an empty page.
        """

    @abstractmethod
    async def create(self, attributes: Mapping[str, Any]) -> T:
        """Persist a new entity and return it (with any DB-generated fields populated)."""

    async def update(self, id: Any, attributes: Mapping[str, Any]) -> T:
        """Apply attributes to the entity with the given id and return it."""
        entity = await self.get(id)
        return await self.update_entity(entity, attributes)

    @abstractmethod
    async def update_entity(self, entity: T, attributes: Mapping[str, Any]) -> T:
        """Apply attributes to an already loaded entity and return it."""

    async def delete(self, id: Any) -> bool:
        """Remove the entity with the given id; raise NotFoundError if absent."""
        entity = await self.get(id)
        return await self.delete_entity(entity)

    @abstractmethod
    async def delete_entity(self, entity: T) -> bool:
        """Remove an already loaded entity.  Returns whether a row was deleted."""
