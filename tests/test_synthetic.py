"""Tests for inventario_api/services/synthetic.py.

Items are built in memory; no database is involved.
"""

from datetime import UTC, datetime, timedelta

import pytest

from inventario_api.models import Brand, CountStatus, Item
from inventario_api.services.synthetic import STATUS_CYCLE, status_for_index, synthesize_count

NOW = datetime(2024, 5, 1, 12, 0, tzinfo=UTC)


def _item(item_id: int = 7, sku: str = "TRU-MAR-16") -> Item:
    item = Item(
        id=item_id,
        sku=sku,
        description="Martillo de uña 16 oz",
        active=True,
        created_at=datetime(2024, 1, 1, tzinfo=UTC),
    )
    item.brand = Brand(id=1, name="Truper", active=True)
    return item


# ---------------------------------------------------------------------------
# Status cycle
# ---------------------------------------------------------------------------


def test_status_cycle_order():
    assert STATUS_CYCLE == (CountStatus.scheduled, CountStatus.completed, CountStatus.cancelled)


@pytest.mark.parametrize(
    ("index", "expected"),
    [
        (0, CountStatus.scheduled),
        (1, CountStatus.completed),
        (2, CountStatus.cancelled),
        (3, CountStatus.scheduled),
        (44, CountStatus.cancelled),
    ],
)
def test_status_for_index(index, expected):
    assert status_for_index(index) is expected


# ---------------------------------------------------------------------------
# Generated record
# ---------------------------------------------------------------------------


def test_scheduled_count_is_in_the_future():
    count = synthesize_count(_item(), 0, NOW)
    assert count.estado is CountStatus.scheduled
    assert count.fecha_programada == NOW + timedelta(days=1)
    assert count.fecha_finalizacion is None
    detail = count.detalles[0]
    assert detail.cantidad_contada == 0
    assert detail.diferencia is None


def test_completed_count_has_difference_and_finish_time():
    count = synthesize_count(_item(), 1, NOW)
    assert count.estado is CountStatus.completed
    assert count.fecha_programada == NOW - timedelta(days=2)
    assert count.fecha_finalizacion == count.fecha_programada + timedelta(hours=4)
    detail = count.detalles[0]
    assert detail.cantidad_sistema == 27
    assert detail.cantidad_contada == 26
    assert detail.diferencia == detail.cantidad_contada - detail.cantidad_sistema


def test_cancelled_count_is_in_the_past_without_result():
    count = synthesize_count(_item(), 2, NOW)
    assert count.estado is CountStatus.cancelled
    assert count.fecha_programada == NOW - timedelta(days=3)
    assert count.fecha_finalizacion is None
    assert count.detalles[0].diferencia is None


def test_identifiers_follow_the_item():
    item = _item(item_id=42, sku="URR-LLA-COMB")
    count = synthesize_count(item, 5, NOW)
    detail = count.detalles[0]
    assert count.id_programacion == 42
    assert detail.id_detalle == 42
    assert detail.id_programacion == 42
    assert detail.id_articulo == 42
    assert detail.ubicacion.id_ubicacion == 42
    assert count.descripcion == "Conteo de URR-LLA-COMB"


def test_detail_embeds_item_and_location():
    count = synthesize_count(_item(), 0, NOW)
    assert len(count.detalles) == 1
    detail = count.detalles[0]
    assert detail.articulo.sku == "TRU-MAR-16"
    assert detail.articulo.marca.nombre == "Truper"
    assert detail.ubicacion.zona == "A"
    assert detail.ubicacion.cantidad_stock == detail.cantidad_sistema
    assert detail.ubicacion.predeterminado is True


def test_created_a_week_before_schedule():
    count = synthesize_count(_item(), 3, NOW)
    assert count.fecha_creacion == count.fecha_programada - timedelta(days=7)


def test_output_is_deterministic():
    assert synthesize_count(_item(), 4, NOW) == synthesize_count(_item(), 4, NOW)


def test_serialized_with_legacy_keys():
    payload = synthesize_count(_item(), 1, NOW).model_dump(by_alias=True, mode="json")
    assert payload["estado"] == "Completado"
    detail = payload["Detalle_Conteo"][0]
    assert detail["Articulo"]["Marca"]["nombre"] == "Truper"
    assert detail["Ubicacion"]["zona"] == "B"
