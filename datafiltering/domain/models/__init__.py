"""Domain model package.

All domain objects are pure Python / Pydantic models with no ORM or
infrastructure dependencies.  Import from this package to avoid coupling
application code to individual module paths.
"""

from .enums import PaginationMode
from .filtering import FilterRequest
from .pagination import LengthAwarePage, Page, SimplePage

__all__ = [
    "FilterRequest",
    "LengthAwarePage",
    "Page",
    "PaginationMode",
    "SimplePage",
]
