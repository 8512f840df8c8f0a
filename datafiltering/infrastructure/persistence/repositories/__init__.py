"""Concrete SQLAlchemy repository implementation.

Exports SqlRepository and the get_repositories() factory for wiring at the
application boundary (FastAPI dependency injection).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

from datafiltering.domain.repositories.hooks import RepositoryHooks
from datafiltering.infrastructure.database import Settings

from .base import SqlRepository
from .resolution import guess_model_name, resolve_model

R = TypeVar("R", bound=SqlRepository)


@dataclass
class Repositories:
    """Repository instances bound to a single AsyncSession.

    Each repository class is constructed once per session and reused for the
    rest of the request; only the resolved model is held, never entities.
    """

    session: AsyncSession
    settings: Settings | None = None
    _instances: dict[Any, SqlRepository] = field(default_factory=dict, repr=False)

    def get(self, repository_cls: type[R], hooks: RepositoryHooks | None = None) -> R:
        key = (repository_cls, hooks)
        if key not in self._instances:
            self._instances[key] = repository_cls(
                self.session, hooks=hooks, settings=self.settings
            )
        return self._instances[key]  # type: ignore[return-value]

    def for_model(self, model: type) -> SqlRepository:
        """A plain SqlRepository for a model that needs no custom hooks."""
        key = (SqlRepository, model)
        if key not in self._instances:
            self._instances[key] = SqlRepository(self.session, model=model, settings=self.settings)
        return self._instances[key]


def get_repositories(session: AsyncSession, settings: Settings | None = None) -> Repositories:
    """Construct a repository registry bound to the given session.

    Intended for use as a FastAPI dependency:

        async def handler(
            session: AsyncSession = Depends(get_session),
        ) -> ...:
            repos = get_repositories(session)
            user = await repos.get(UserRepository).get(user_id)
    """
    return Repositories(session=session, settings=settings)


__all__ = [
    "SqlRepository",
    "Repositories",
    "get_repositories",
    "guess_model_name",
    "resolve_model",
]
