"""Liveness endpoint; does not touch the database."""

from fastapi import APIRouter

from inventario_api.schemas.health import HealthResponse

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(ok=True)
