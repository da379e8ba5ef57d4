"""Placeholder inventory counts derived from item rows.

These records are not business data.  Every value is a function of the item's
position in the id-ordered item list and of the generation time, so the same
items always produce the same set for a given ``now``.
"""

from datetime import datetime, timedelta

from inventario_api.models import CountStatus, Item
from inventario_api.schemas import DetalleConteoOut, ProgramacionConteoOut, UbicacionOut
from inventario_api.services.dto import item_to_dto

STATUS_CYCLE: tuple[CountStatus, ...] = (
    CountStatus.scheduled,
    CountStatus.completed,
    CountStatus.cancelled,
)

_ZONES = "ABCD"


def status_for_index(index: int) -> CountStatus:
    return STATUS_CYCLE[index % len(STATUS_CYCLE)]


def synthesize_location(item: Item, index: int, stock_quantity: int) -> UbicacionOut:
    return UbicacionOut(
        id_ubicacion=item.id,
        id_articulo=item.id,
        zona=_ZONES[index % len(_ZONES)],
        pasillo=f"{index // 10 + 1:02d}",
        columna=f"{index % 10 + 1:02d}",
        nivel=str(index % 4 + 1),
        posicion=str(index % 3 + 1),
        cantidad_stock=stock_quantity,
        activo=True,
        predeterminado=True,
    )


def synthesize_count(item: Item, index: int, now: datetime) -> ProgramacionConteoOut:
    """Build one schedule with a single detail and location for *item*.

    Scheduled counts land ``index + 1`` days after *now*; completed and
    cancelled ones the same distance before it.  Only completed counts carry
    a counted quantity, a difference and a finish time.  *item* must have its
    brand, department and subcategory loaded.
    """
    status = status_for_index(index)
    offset = timedelta(days=index + 1)
    scheduled_date = now + offset if status is CountStatus.scheduled else now - offset
    finished_at = scheduled_date + timedelta(hours=4) if status is CountStatus.completed else None

    system_quantity = 20 + (index * 7) % 80
    if status is CountStatus.completed:
        counted_quantity = system_quantity + (index % 5) - 2
        difference: int | None = counted_quantity - system_quantity
    else:
        counted_quantity = 0
        difference = None

    location = synthesize_location(item, index, system_quantity)
    detail = DetalleConteoOut(
        id_detalle=item.id,
        id_programacion=item.id,
        id_articulo=item.id,
        id_ubicacion=location.id_ubicacion,
        cantidad_sistema=system_quantity,
        cantidad_contada=counted_quantity,
        diferencia=difference,
        fecha_conteo=finished_at or scheduled_date,
        articulo=item_to_dto(item),
        ubicacion=location,
    )
    return ProgramacionConteoOut(
        id_programacion=item.id,
        fecha_programada=scheduled_date,
        descripcion=f"Conteo de {item.sku}",
        estado=status,
        fecha_creacion=scheduled_date - timedelta(days=7),
        fecha_finalizacion=finished_at,
        detalles=[detail],
    )
