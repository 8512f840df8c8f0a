"""Persistence package.

Exports the ORM mixins, SQL pagination helpers, the SqlRepository
implementation and the DI factory.
"""

from datafiltering.infrastructure.persistence.models import FilterableMixin, TimestampMixin
from datafiltering.infrastructure.persistence.pagination import paginate, simple_paginate
from datafiltering.infrastructure.persistence.repositories import (
    Repositories,
    SqlRepository,
    get_repositories,
)

__all__ = [
    "FilterableMixin",
    "TimestampMixin",
    "paginate",
    "simple_paginate",
    "Repositories",
    "SqlRepository",
    "get_repositories",
]
