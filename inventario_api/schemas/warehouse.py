from pydantic import BaseModel, ConfigDict, Field


class SucursalOut(BaseModel):
    id_sucursal: int
    nombre: str
    direccion: str | None = None
    telefono: str | None = None
    ciudad: str | None = None
    activo: bool


class AlmacenOut(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id_almacen": 1,
                "nombre": "Almacén Central",
                "id_sucursal": 1,
                "activo": True,
                "Sucursal": {
                    "id_sucursal": 1,
                    "nombre": "Matriz",
                    "direccion": "Av. Juárez 120",
                    "telefono": "3312345678",
                    "ciudad": "Guadalajara",
                    "activo": True,
                },
            }
        },
    )

    id_almacen: int
    nombre: str
    id_sucursal: int
    activo: bool
    sucursal: SucursalOut | None = Field(None, alias="Sucursal")
