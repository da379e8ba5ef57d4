"""FastAPI dependencies: database handle, DB session, count source, pagination.

Everything shared across requests lives on ``app.state`` and is created by
:func:`inventario_api.main.create_app`; handlers receive it through these
dependencies, which is also the seam tests override.
"""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends, HTTPException, Query, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from inventario_api.database import Database
from inventario_api.services.counts import CountSource
from inventario_api.utils.pagination import PageRequest, parse_pagination

__all__ = ["get_database", "get_db", "get_count_source", "get_page_request", "parse_numeric_id"]


def get_database(request: Request) -> Database:
    return request.app.state.database


async def get_db(
    database: Annotated[Database, Depends(get_database)],
) -> AsyncGenerator[AsyncSession]:
    async with database.session() as session:
        yield session


def get_count_source(request: Request) -> CountSource:
    return request.app.state.count_source


def get_page_request(
    limit: Annotated[str | None, Query(description="Page size, 1-50 (default 10)")] = None,
    page: Annotated[str | None, Query(description="1-based page number (default 1)")] = None,
) -> PageRequest:
    """Read ``limit``/``page`` as raw strings so malformed values fall back to defaults."""
    return parse_pagination(limit, page)


def parse_numeric_id(raw: str, name: str) -> int:
    """Return *raw* as an int or raise HTTP 400 naming the parameter.

    Only plain ASCII decimal digits with an optional leading ``-`` are accepted.
    """
    digits = raw.removeprefix("-")
    if not (digits.isascii() and digits.isdigit()):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"{name} debe ser numérico",
        )
    return int(raw)
