"""Item DTOs and the creation payload for ``POST /articulos``."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from inventario_api.schemas.catalog import DepartamentoOut, MarcaOut, SubCategoriaOut


class ArticuloCreate(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "sku": "TRU-MAR-001",
                "descripcion": "Martillo de uña 16 oz mango de fibra",
                "id_marca": 1,
                "id_departamento": 2,
                "id_subcategoria": 4,
            }
        }
    )

    sku: str = Field(..., max_length=50)
    descripcion: str | None = None
    id_marca: int
    id_departamento: int
    id_subcategoria: int | None = None

    @field_validator("sku")
    @classmethod
    def strip_and_require(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Field must not be empty")
        return v


class ArticuloOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id_articulo: int
    sku: str
    descripcion: str | None = None
    id_marca: int | None = None
    id_departamento: int | None = None
    id_subcategoria: int | None = None
    fecha_creacion: datetime
    activo: bool
    marca: MarcaOut | None = Field(None, alias="Marca")
    departamento: DepartamentoOut | None = Field(None, alias="Departamento")
    subcategoria: SubCategoriaOut | None = Field(None, alias="SubCategoria")
