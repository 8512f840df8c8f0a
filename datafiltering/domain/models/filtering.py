"""Filter request value object.

A FilterRequest carries everything a caller asks of a listing: pagination
directives, sorting, and arbitrary filter keys.  The repository reads only
the pagination fields; the request itself is handed to the model's
filter() untouched.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# Keys lifted out of a flat query mapping; everything else lands in filters.
RESERVED_KEYS = frozenset({"per_page", "with_pages", "page", "sort"})


class FilterRequest(BaseModel):
    """Filtering, sorting and pagination parameters for a listing.

    per_page and with_pages are optional: None defers to the process-wide
    defaults in Settings.  sort is a comma-separated list of column names,
    each optionally prefixed with "-" for descending order.  filters is the
    passthrough bag interpreted only by the model's filter().
    """

    model_config = ConfigDict(frozen=True)

    per_page: int | None = Field(default=None, gt=0)
    with_pages: bool | None = None
    page: int = Field(default=1, ge=1)
    sort: str | None = None
    filters: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_query(cls, params: Mapping[str, Any]) -> FilterRequest:
        """Split a flat mapping (e.g. HTTP query params) into known keys and filters."""
        known = {k: v for k, v in params.items() if k in RESERVED_KEYS and v is not None}
        filters = {k: v for k, v in params.items() if k not in RESERVED_KEYS}
        return cls(**known, filters=filters)

    def sort_fields(self) -> list[tuple[str, bool]]:
        """Return (column, descending) pairs parsed from sort."""
        if not self.sort:
            return []
        fields: list[tuple[str, bool]] = []
        for part in self.sort.split(","):
            part = part.strip()
            if not part:
                continue
            if part.startswith("-"):
                fields.append((part[1:], True))
            else:
                fields.append((part.lstrip("+"), False))
        return fields
