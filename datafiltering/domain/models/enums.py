"""Domain enumerations for the data-filtering layer.

String-valued enums use the str mixin so they serialize cleanly to JSON
and remain comparable to plain strings (FastAPI / Pydantic default behaviour).
"""

from enum import Enum


class PaginationMode(str, Enum):
    """How a filtered listing is sliced into pages.

    PAGINATE runs an extra COUNT query and reports the total.
    SIMPLE_PAGINATE only reports whether another page exists.
    """

    PAGINATE = "paginate"
    SIMPLE_PAGINATE = "simple_paginate"

    @classmethod
    def for_flag(cls, with_pages: bool) -> "PaginationMode":
        return cls.PAGINATE if with_pages else cls.SIMPLE_PAGINATE
