"""Warehouse listing."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from inventario_api.dependencies import get_db
from inventario_api.schemas import AlmacenOut, Envelope
from inventario_api.services.catalog import list_active_warehouses
from inventario_api.services.dto import warehouse_to_dto

router = APIRouter(prefix="/almacenes", tags=["Almacenes"])


@router.get("", response_model=Envelope[list[AlmacenOut]])
async def list_warehouses(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> Envelope[list[AlmacenOut]]:
    """Return active warehouses with their branch, ordered by name."""
    warehouses = await list_active_warehouses(db)
    return Envelope[list[AlmacenOut]](data=[warehouse_to_dto(w) for w in warehouses])
