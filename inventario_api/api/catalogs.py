"""Paginated catalog search: brands and the subcategories of one brand."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from inventario_api.database import Database
from inventario_api.dependencies import get_database, get_page_request, parse_numeric_id
from inventario_api.schemas import ErrorResponse, MarcaOut, PaginatedEnvelope, SubCategoriaOut
from inventario_api.services.catalog import list_brand_subcategories, search_brands
from inventario_api.services.dto import brand_to_dto, subcategory_to_dto
from inventario_api.utils.pagination import PageRequest, total_pages

router = APIRouter(prefix="/catalogos", tags=["Catálogos"])


@router.get("/marcas/buscar", response_model=PaginatedEnvelope[MarcaOut])
async def search_brand_catalog(
    database: Annotated[Database, Depends(get_database)],
    page: Annotated[PageRequest, Depends(get_page_request)],
    q: Annotated[str | None, Query(description="Case-insensitive fragment of the name")] = None,
) -> PaginatedEnvelope[MarcaOut]:
    """Search brands by name; an empty ``q`` lists every brand."""
    brands, total = await search_brands(database, q, page)
    return PaginatedEnvelope[MarcaOut](
        data=[brand_to_dto(b) for b in brands],
        total_pages=total_pages(total, page.limit),
        current_page=page.page,
        total_documents=total,
    )


@router.get(
    "/marcas/{marca_id}/subcategorias",
    response_model=PaginatedEnvelope[SubCategoriaOut],
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}},
)
async def list_subcategories_for_brand(
    marca_id: str,
    database: Annotated[Database, Depends(get_database)],
    page: Annotated[PageRequest, Depends(get_page_request)],
) -> PaginatedEnvelope[SubCategoriaOut]:
    """Return the active subcategories of one brand.  A non-numeric id is a 400."""
    brand_id = parse_numeric_id(marca_id, "marcaId")
    subcategories, total = await list_brand_subcategories(database, brand_id, page)
    return PaginatedEnvelope[SubCategoriaOut](
        data=[subcategory_to_dto(s) for s in subcategories],
        total_pages=total_pages(total, page.limit),
        current_page=page.page,
        total_documents=total,
    )
