"""Pagination normalization and the concurrent list+count helper.

Query-string ``limit``/``page`` values are untrusted: anything missing,
non-numeric, non-finite or not positive silently falls back to the default,
so a malformed value never reaches the query.
"""

import asyncio
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from sqlalchemy import Select, func, select

if TYPE_CHECKING:
    from inventario_api.database import Database

DEFAULT_LIMIT = 10
MAX_LIMIT = 50
MAX_PAGE = 10_000


@dataclass(frozen=True, slots=True)
class PageRequest:
    limit: int
    page: int

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit


def _positive_number(raw: Any) -> float | None:
    if raw is None or isinstance(raw, bool):
        return None
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(value) or value <= 0:
        return None
    return value


def parse_pagination(
    limit: Any = None,
    page: Any = None,
    *,
    default_limit: int = DEFAULT_LIMIT,
    max_limit: int = MAX_LIMIT,
    max_page: int = MAX_PAGE,
) -> PageRequest:
    """Derive a :class:`PageRequest` from raw ``limit``/``page`` input.

    Args:
        limit: Page size as a string, number or ``None``.
        page: 1-based page number as a string, number or ``None``.
        default_limit: Page size used when *limit* is unusable.
        max_limit: Upper bound for the page size.
        max_page: Upper bound for the page number.

    Returns:
        A request whose ``limit`` lies in ``[1, max_limit]`` and whose ``page``
        lies in ``[1, max_page]``.  Fractional values are truncated.
    """
    raw_limit = _positive_number(limit)
    raw_page = _positive_number(page)

    limit_value = default_limit if raw_limit is None else min(max(int(raw_limit), 1), max_limit)
    page_value = 1 if raw_page is None else min(max(int(raw_page), 1), max_page)
    return PageRequest(limit=limit_value, page=page_value)


def total_pages(total: int, limit: int) -> int:
    return math.ceil(total / limit) if total > 0 else 0


async def paginate(database: "Database", query: Select[Any], page: PageRequest) -> tuple[list[Any], int]:
    """Run the page query and its COUNT concurrently on two sessions.

    The two statements may observe different snapshots; a total that moves
    between them is returned as-is.
    """
    # Wrap in a subquery so the ORDER BY and loader options of *query* do not
    # interfere with the COUNT.
    count_query = select(func.count()).select_from(query.order_by(None).subquery())

    async def _rows() -> list[Any]:
        async with database.session() as session:
            result = await session.execute(query.offset(page.skip).limit(page.limit))
            return list(result.scalars().all())

    async def _total() -> int:
        async with database.session() as session:
            return (await session.execute(count_query)).scalar_one()

    rows, total = await asyncio.gather(_rows(), _total())
    return rows, total
