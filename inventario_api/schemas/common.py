from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class Envelope(BaseModel, Generic[T]):
    ok: bool = True
    data: T
    message: str | None = None


class PaginatedEnvelope(BaseModel, Generic[T]):
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "ok": True,
                "data": [],
                "message": None,
                "totalPaginas": 3,
                "paginaActual": 1,
                "totalDocumentos": 42,
            }
        },
    )

    ok: bool = True
    data: list[T]
    message: str | None = None
    total_pages: int = Field(alias="totalPaginas")
    current_page: int = Field(alias="paginaActual")
    total_documents: int = Field(alias="totalDocumentos")


class ErrorDetail(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "sku",
                "message": "Field required",
            }
        }
    )

    field: str
    message: str


class ErrorResponse(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "ok": False,
                "data": None,
                "message": "No se encontró el artículo ZZZ-404",
            }
        }
    )

    ok: bool = False
    data: Any = None
    message: str
