"""Item endpoints: newest items, lookup by sku, creation."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from inventario_api.dependencies import get_db
from inventario_api.schemas import ArticuloCreate, ArticuloOut, Envelope, ErrorResponse
from inventario_api.services.catalog import create_item, get_item_by_sku, list_recent_items
from inventario_api.services.dto import item_to_dto

router = APIRouter(prefix="/articulos", tags=["Artículos"])


@router.get("", response_model=Envelope[list[ArticuloOut]])
async def list_items(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> Envelope[list[ArticuloOut]]:
    """Return the 50 most recently created items with brand, department and subcategory."""
    items = await list_recent_items(db)
    return Envelope[list[ArticuloOut]](data=[item_to_dto(i) for i in items])


@router.get(
    "/{sku}",
    response_model=Envelope[ArticuloOut],
    responses={status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}},
)
async def get_item(
    sku: str,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> Envelope[ArticuloOut]:
    item = await get_item_by_sku(db, sku)
    if item is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No se encontró el artículo {sku}",
        )
    return Envelope[ArticuloOut](data=item_to_dto(item))


@router.post(
    "",
    response_model=Envelope[ArticuloOut],
    status_code=status.HTTP_201_CREATED,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_409_CONFLICT: {"model": ErrorResponse},
    },
)
async def post_item(
    body: ArticuloCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> Envelope[ArticuloOut]:
    """Create an item.

    Returns 400 if a referenced brand, department or subcategory does not
    exist and 409 if the sku is already in use.
    """
    item = await create_item(db, body)
    return Envelope[ArticuloOut](data=item_to_dto(item))
