"""Inventory-count DTOs: schedules, their details and stock locations."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from inventario_api.models.count import CountStatus
from inventario_api.schemas.item import ArticuloOut


class UbicacionOut(BaseModel):
    id_ubicacion: int
    id_articulo: int
    zona: str
    pasillo: str
    columna: str
    nivel: str
    posicion: str
    cantidad_stock: int
    activo: bool
    predeterminado: bool
    sucursal: int | None = None


class DetalleConteoOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id_detalle: int
    id_programacion: int
    id_articulo: int
    id_ubicacion: int
    cantidad_sistema: int
    cantidad_contada: int
    diferencia: int | None = None
    id_usuario_conteo: int | None = None
    fecha_conteo: datetime
    observaciones: str | None = None
    articulo: ArticuloOut | None = Field(None, alias="Articulo")
    ubicacion: UbicacionOut | None = Field(None, alias="Ubicacion")


class ProgramacionConteoOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id_programacion: int
    fecha_programada: datetime
    descripcion: str | None = None
    estado: CountStatus
    fecha_creacion: datetime
    fecha_finalizacion: datetime | None = None
    detalles: list[DetalleConteoOut] = Field(default_factory=list, alias="Detalle_Conteo")
