"""SQL pagination over a Select.

paginate() issues a COUNT over the filtered statement and then fetches one
LIMIT/OFFSET slice.  simple_paginate() skips the COUNT and fetches one row
more than requested to learn whether another page exists.

Entity rows are de-duplicated with unique(), so statements that joinedload a
collection page by parent row.
"""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from datafiltering.domain.models.pagination import LengthAwarePage, SimplePage

logger = logging.getLogger(__name__)


def _offset(page: int, per_page: int) -> int:
    return (page - 1) * per_page


async def count(session: AsyncSession, stmt: Select) -> int:
    """Number of rows stmt would return, ignoring its ordering."""
    count_stmt = select(func.count()).select_from(stmt.order_by(None).subquery())
    result = await session.execute(count_stmt)
    return int(result.scalar_one())


async def paginate(
    session: AsyncSession,
    stmt: Select,
    per_page: int,
    page: int = 1,
) -> LengthAwarePage[Any]:
    total = await count(session, stmt)
    items: list[Any] = []
    if total > _offset(page, per_page):
        result = await session.execute(stmt.limit(per_page).offset(_offset(page, per_page)))
        items = list(result.scalars().unique().all())
    logger.debug("paginate page=%d per_page=%d total=%d", page, per_page, total)
    return LengthAwarePage(
        items=items,
        total=total,
        per_page=per_page,
        current_page=page,
        has_more=page * per_page < total,
    )


async def simple_paginate(
    session: AsyncSession,
    stmt: Select,
    per_page: int,
    page: int = 1,
) -> SimplePage[Any]:
    result = await session.execute(stmt.limit(per_page + 1).offset(_offset(page, per_page)))
    rows = list(result.scalars().unique().all())
    logger.debug("simple_paginate page=%d per_page=%d fetched=%d", page, per_page, len(rows))
    return SimplePage(
        items=rows[:per_page],
        per_page=per_page,
        current_page=page,
        has_more=len(rows) > per_page,
    )
