"""Main API router; routes are mounted at the root and the function prefix is stripped by middleware."""

from fastapi import APIRouter

from inventario_api.api.catalogs import router as catalogs_router
from inventario_api.api.counts import router as counts_router
from inventario_api.api.health import router as health_router
from inventario_api.api.items import router as items_router
from inventario_api.api.subcategories import router as subcategories_router
from inventario_api.api.warehouses import router as warehouses_router

api_router = APIRouter()
api_router.include_router(health_router)
api_router.include_router(warehouses_router)
api_router.include_router(items_router)
api_router.include_router(subcategories_router)
api_router.include_router(catalogs_router)
api_router.include_router(counts_router)
