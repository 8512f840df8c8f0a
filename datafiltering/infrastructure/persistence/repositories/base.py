"""SQLAlchemy implementation of Repository[T].

SqlRepository binds one AsyncSession to one mapped model.  Subclasses pick
their model with a ``model`` class attribute (or by naming convention) and
customise behaviour by overriding the lifecycle hooks:

    class UserRepository(SqlRepository[User]):
        async def before_create(self, attributes):
            return {**attributes, "email": attributes["email"].lower()}

Hooks can also be injected without subclassing via RepositoryHooks.
Transactions belong to the caller: the repository flushes but never commits.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from typing import Any, TypeVar

from sqlalchemy import Select, inspect
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from datafiltering.domain.errors import ConfigurationError, StoreError, ValidationError
from datafiltering.domain.models.enums import PaginationMode
from datafiltering.domain.models.filtering import FilterRequest
from datafiltering.domain.models.pagination import SimplePage
from datafiltering.domain.repositories.base import Repository
from datafiltering.domain.repositories.hooks import RepositoryHooks, hook_attributes
from datafiltering.infrastructure.database import Settings, get_settings
from datafiltering.infrastructure.persistence.pagination import paginate, simple_paginate

from .resolution import resolve_model

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")


class SqlRepository(Repository[ModelT]):
    model: Any = None

    def __init__(
        self,
        session: AsyncSession,
        model: type[ModelT] | str | None = None,
        hooks: RepositoryHooks | None = None,
        settings: Settings | None = None,
    ) -> None:
        self._session = session
        self._settings = settings or get_settings()
        self._hooks = hooks or RepositoryHooks()
        self.model = resolve_model(type(self), self._settings.models_module, model)

    @property
    def entity_name(self) -> str:
        return self.model.__name__

    @contextmanager
    def _store_errors(self, operation: str) -> Iterator[None]:
        try:
            yield
        except SQLAlchemyError as exc:
            logger.warning("%s %s failed: %s", operation, self.entity_name, exc)
            raise StoreError(f"{operation} {self.entity_name} failed: {exc}") from exc

    def _check_attributes(self, attributes: Mapping[str, Any]) -> None:
        known = {prop.key for prop in inspect(self.model).attrs}
        unknown = sorted(set(attributes) - known)
        if unknown:
            raise ValidationError(
                f"Unknown field(s) for {self.entity_name}: {', '.join(unknown)}",
                fields=unknown,
            )

    # --- listing ---

    def pagination_mode(self, with_pages: bool | None = None) -> PaginationMode:
        """Explicit per-call flag wins; otherwise the process-wide default."""
        if with_pages is None:
            with_pages = self._settings.pagination_with_pages
        return PaginationMode.for_flag(with_pages)

    def filter(
        self,
        request: FilterRequest,
        actor: Any | None = None,
        query: Select | None = None,
        extras: Mapping[str, Any] | None = None,
    ) -> Select:
        """Build the filtered statement by delegating to the model's filter()."""
        model_filter = getattr(self.model, "filter", None)
        if not callable(model_filter):
            raise ConfigurationError(
                f"{self.entity_name} has no filter(); mix in FilterableMixin or define one"
            )
        return model_filter(request, actor, query, extras)

    async def list(
        self,
        request: FilterRequest,
        actor: Any | None = None,
        query: Select | None = None,
        extras: Mapping[str, Any] | None = None,
    ) -> SimplePage[ModelT]:
        mode = self.pagination_mode(request.with_pages)
        per_page = request.per_page or self._settings.pagination_per_page
        stmt = self.filter(request, actor, query, extras)
        logger.debug(
            "list %s mode=%s page=%d per_page=%d filters=%s",
            self.entity_name,
            mode.value,
            request.page,
            per_page,
            sorted(request.filters),
        )
        with self._store_errors("list"):
            if mode is PaginationMode.PAGINATE:
                return await paginate(self._session, stmt, per_page, request.page)
            return await simple_paginate(self._session, stmt, per_page, request.page)

    # --- lookup ---

    async def find(self, id: Any) -> ModelT | None:
        logger.debug("find %s id=%r", self.entity_name, id)
        with self._store_errors("find"):
            return await self._session.get(self.model, id)

    # --- writes ---

    async def create(self, attributes: Mapping[str, Any]) -> ModelT:
        attrs = dict(attributes)
        attrs = hook_attributes(await self.before_create(attrs), attrs)
        self._check_attributes(attrs)
        logger.debug("create %s fields=%s", self.entity_name, sorted(attrs))
        entity = self.model(**attrs)
        with self._store_errors("create"):
            self._session.add(entity)
            await self._session.flush()
            await self._session.refresh(entity)
        await self.after_created(entity, attrs)
        return entity

    async def update_entity(self, entity: ModelT, attributes: Mapping[str, Any]) -> ModelT:
        attrs = dict(attributes)
        attrs = hook_attributes(await self.before_update(entity, attrs), attrs)
        self._check_attributes(attrs)
        logger.debug("update %s fields=%s", self.entity_name, sorted(attrs))
        for key, value in attrs.items():
            setattr(entity, key, value)
        with self._store_errors("update"):
            await self._session.flush()
            await self._session.refresh(entity)
        await self.after_updated(entity, attrs)
        return entity

    async def delete_entity(self, entity: ModelT) -> bool:
        logger.debug("delete %s", self.entity_name)
        with self._store_errors("delete"):
            await self._session.delete(entity)
            await self._session.flush()
        return True

    # --- lifecycle hooks (no-ops unless overridden or injected) ---

    async def before_create(self, attributes: dict[str, Any]) -> dict[str, Any]:
        """Return the attributes to persist.  May normalise or reject them."""
        return await self._hooks.run_before_create(attributes)

    async def after_created(self, entity: ModelT, attributes: dict[str, Any]) -> None:
        """Side effects once the entity has been flushed (events, emails, …)."""
        await self._hooks.run_after_created(entity, attributes)

    async def before_update(self, entity: ModelT, attributes: dict[str, Any]) -> dict[str, Any]:
        """Return the attributes to apply to entity."""
        return await self._hooks.run_before_update(entity, attributes)

    async def after_updated(self, entity: ModelT, attributes: dict[str, Any]) -> None:
        await self._hooks.run_after_updated(entity, attributes)
