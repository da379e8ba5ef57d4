from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from inventario_api.dependencies import get_db
from inventario_api.schemas import Envelope, SubCategoriaConMarcaOut
from inventario_api.services.catalog import list_subcategories
from inventario_api.services.dto import subcategory_with_brand_to_dto

router = APIRouter(prefix="/subcategorias", tags=["Catálogos"])


@router.get("", response_model=Envelope[list[SubCategoriaConMarcaOut]])
async def list_all_subcategories(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> Envelope[list[SubCategoriaConMarcaOut]]:
    """Return up to 50 subcategories with their brand, ordered by name."""
    subcategories = await list_subcategories(db)
    return Envelope[list[SubCategoriaConMarcaOut]](
        data=[subcategory_with_brand_to_dto(s) for s in subcategories]
    )
