"""Reusable ORM mixins: the default filtering capability and timestamps."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Any, Optional

from sqlalchemy import DateTime, Select, func, inspect, select
from sqlalchemy.orm import Mapped, mapped_column

from datafiltering.domain.models.filtering import FilterRequest


class FilterableMixin:
    """Default filter() for mapped classes used with SqlRepository.

    filter() turns a FilterRequest into a Select:
      - starts from the caller's query, or select(cls);
      - narrows it with actor_scope() for permission-scoped listings;
      - matches every filters key that names a mapped column
        (lists, tuples and sets become IN, None becomes IS NULL);
      - orders by sort, then by primary key so pages are stable.

    Keys and sort fields that do not name a column are ignored.  Models with
    richer filtering override filter() or actor_scope().
    """

    @classmethod
    def filterable_columns(cls) -> set[str]:
        return {prop.key for prop in inspect(cls).column_attrs}

    @classmethod
    def actor_scope(cls, stmt: Select, actor: Any | None) -> Select:
        """Restrict stmt to rows visible to actor.  Identity by default."""
        return stmt

    @classmethod
    def filter(
        cls,
        request: FilterRequest,
        actor: Any | None = None,
        query: Select | None = None,
        extras: Mapping[str, Any] | None = None,
    ) -> Select:
        stmt = query if query is not None else select(cls)
        stmt = cls.actor_scope(stmt, actor)
        columns = cls.filterable_columns()

        for key, value in request.filters.items():
            if key not in columns:
                continue
            column = getattr(cls, key)
            if value is None:
                stmt = stmt.where(column.is_(None))
            elif isinstance(value, (list, tuple, set, frozenset)):
                stmt = stmt.where(column.in_(list(value)))
            else:
                stmt = stmt.where(column == value)

        for key, descending in request.sort_fields():
            if key not in columns:
                continue
            column = getattr(cls, key)
            stmt = stmt.order_by(column.desc() if descending else column.asc())

        return stmt.order_by(*inspect(cls).primary_key)


class TimestampMixin:
    """created_at set by the database on insert; updated_at on every update."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), onupdate=func.now(), nullable=True
    )
