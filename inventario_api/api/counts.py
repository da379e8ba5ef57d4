"""Inventory-count schedules, paginated and filtered by status."""

from typing import Annotated

from fastapi import APIRouter, Depends

from inventario_api.dependencies import get_count_source, get_page_request
from inventario_api.models import CountStatus
from inventario_api.schemas import PaginatedEnvelope, ProgramacionConteoOut
from inventario_api.services.counts import CountSource
from inventario_api.utils.pagination import PageRequest, total_pages

router = APIRouter(prefix="/inventario", tags=["Inventario"])

_CountPage = PaginatedEnvelope[ProgramacionConteoOut]


async def _count_page(
    source: CountSource, status: CountStatus | None, page: PageRequest
) -> PaginatedEnvelope[ProgramacionConteoOut]:
    schedules, total = await source.fetch_page(status, page)
    return _CountPage(
        data=schedules,
        total_pages=total_pages(total, page.limit),
        current_page=page.page,
        total_documents=total,
    )


@router.get("/conteos-pendientes", response_model=_CountPage)
async def pending_counts(
    source: Annotated[CountSource, Depends(get_count_source)],
    page: Annotated[PageRequest, Depends(get_page_request)],
) -> PaginatedEnvelope[ProgramacionConteoOut]:
    """Counts still scheduled (``Programado``)."""
    return await _count_page(source, CountStatus.scheduled, page)


@router.get("/conteos-finalizados", response_model=_CountPage)
async def finished_counts(
    source: Annotated[CountSource, Depends(get_count_source)],
    page: Annotated[PageRequest, Depends(get_page_request)],
) -> PaginatedEnvelope[ProgramacionConteoOut]:
    """Counts already completed (``Completado``)."""
    return await _count_page(source, CountStatus.completed, page)


@router.get("/conteos-todos", response_model=_CountPage)
async def all_counts(
    source: Annotated[CountSource, Depends(get_count_source)],
    page: Annotated[PageRequest, Depends(get_page_request)],
) -> PaginatedEnvelope[ProgramacionConteoOut]:
    return await _count_page(source, None, page)
