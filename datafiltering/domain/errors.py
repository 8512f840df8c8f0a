"""Repository error kinds.

Every error raised by the data layer derives from RepositoryError so callers
(HTTP handlers, CLI commands) can translate them with a single except clause.
"""

from __future__ import annotations

from typing import Any


class RepositoryError(Exception):
    """Base class for all data-layer errors."""


class ConfigurationError(RepositoryError):
    """The repository could not resolve the model it manages.

    Raised at construction time; never recovered from.
    """


class NotFoundError(RepositoryError, LookupError):
    """No entity exists for the requested primary key."""

    def __init__(self, model: str, id: Any) -> None:
        super().__init__(f"{model} {id!r} not found")
        self.model = model
        self.id = id


class ValidationError(RepositoryError, ValueError):
    """Attributes were rejected before reaching the store.

    Hook overrides raise this to veto a create or update.
    """

    def __init__(self, message: str, fields: list[str] | None = None) -> None:
        super().__init__(message)
        self.fields = fields or []


class StoreError(RepositoryError):
    """The underlying store failed (constraint violation, connectivity, …).

    The original SQLAlchemy exception is kept as __cause__.
    """
