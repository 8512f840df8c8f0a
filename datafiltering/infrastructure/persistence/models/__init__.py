"""ORM building blocks shared by application models.

Application models subclass datafiltering.infrastructure.database.Base and
mix in FilterableMixin (required by SqlRepository.list) and, optionally,
TimestampMixin.
"""

from datafiltering.infrastructure.persistence.models.mixins import (
    FilterableMixin,
    TimestampMixin,
)

__all__ = [
    "FilterableMixin",
    "TimestampMixin",
]
