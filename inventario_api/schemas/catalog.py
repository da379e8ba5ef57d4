"""Catalog DTOs: brands, departments and subcategories."""

from pydantic import BaseModel, ConfigDict, Field


class MarcaOut(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            "example": {"id_marca": 1, "nombre": "Truper", "activo": True, "codigo": None}
        }
    )

    id_marca: int
    nombre: str
    activo: bool
    codigo: int | None = None


class DepartamentoOut(BaseModel):
    id_departamento: int
    nombre: str
    activo: bool


class SubCategoriaOut(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id_subcategoria": 4,
                "nombre": "Herramienta manual",
                "id_marca": 1,
                "activo": True,
            }
        }
    )

    id_subcategoria: int
    nombre: str
    id_marca: int
    activo: bool


class SubCategoriaConMarcaOut(SubCategoriaOut):
    """Subcategory with its brand embedded under ``Marca``."""

    model_config = ConfigDict(populate_by_name=True)

    marca: MarcaOut | None = Field(None, alias="Marca")
