"""Page value objects returned by filtered listings.

LengthAwarePage knows the size of the whole result set (an extra COUNT was
run).  SimplePage only knows whether a further page exists.  Both are
immutable; items are whatever entity type the repository manages.
"""

from __future__ import annotations

import math
from typing import Generic, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, computed_field

T = TypeVar("T")


class SimplePage(BaseModel, Generic[T]):
    """A slice of results without a total count.

    A page is always truthy; use is_empty to test for results.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    items: list[T] = Field(default_factory=list)
    per_page: int = Field(gt=0)
    current_page: int = Field(default=1, ge=1)
    has_more: bool = False

    @property
    def is_empty(self) -> bool:
        return not self.items


class LengthAwarePage(SimplePage[T], Generic[T]):
    """A slice of results plus the total size of the filtered set."""

    total: int = Field(ge=0)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def last_page(self) -> int:
        return max(1, math.ceil(self.total / self.per_page))


Page = Union[LengthAwarePage[T], SimplePage[T]]
