"""Map ORM rows onto the response shape the front end consumes.

Only relationships that the calling query eager-loaded may be touched here;
the rows are detached from their session by the time they are adapted.
"""

from inventario_api.models import (
    Branch,
    Brand,
    CountDetail,
    CountSchedule,
    Department,
    Item,
    StockLocation,
    SubCategory,
    Warehouse,
)
from inventario_api.schemas import (
    AlmacenOut,
    ArticuloOut,
    DepartamentoOut,
    DetalleConteoOut,
    MarcaOut,
    ProgramacionConteoOut,
    SubCategoriaConMarcaOut,
    SubCategoriaOut,
    SucursalOut,
    UbicacionOut,
)


def brand_to_dto(brand: Brand) -> MarcaOut:
    return MarcaOut(id_marca=brand.id, nombre=brand.name, activo=brand.active, codigo=brand.code)


def department_to_dto(department: Department) -> DepartamentoOut:
    return DepartamentoOut(
        id_departamento=department.id,
        nombre=department.name,
        activo=department.active,
    )


def subcategory_to_dto(subcategory: SubCategory) -> SubCategoriaOut:
    return SubCategoriaOut(
        id_subcategoria=subcategory.id,
        nombre=subcategory.name,
        id_marca=subcategory.brand_id,
        activo=subcategory.active,
    )


def subcategory_with_brand_to_dto(subcategory: SubCategory) -> SubCategoriaConMarcaOut:
    """Requires ``SubCategory.brand`` to be loaded."""
    return SubCategoriaConMarcaOut(
        **subcategory_to_dto(subcategory).model_dump(),
        marca=brand_to_dto(subcategory.brand) if subcategory.brand else None,
    )


def branch_to_dto(branch: Branch) -> SucursalOut:
    return SucursalOut(
        id_sucursal=branch.id,
        nombre=branch.name,
        direccion=branch.address,
        telefono=branch.phone,
        ciudad=branch.city,
        activo=branch.active,
    )


def warehouse_to_dto(warehouse: Warehouse) -> AlmacenOut:
    """Requires ``Warehouse.branch`` to be loaded."""
    return AlmacenOut(
        id_almacen=warehouse.id,
        nombre=warehouse.name,
        id_sucursal=warehouse.branch_id,
        activo=warehouse.active,
        sucursal=branch_to_dto(warehouse.branch) if warehouse.branch else None,
    )


def item_to_dto(item: Item) -> ArticuloOut:
    """Requires ``brand``, ``department`` and ``subcategory`` to be loaded."""
    return ArticuloOut(
        id_articulo=item.id,
        sku=item.sku,
        descripcion=item.description,
        id_marca=item.brand_id,
        id_departamento=item.department_id,
        id_subcategoria=item.subcategory_id,
        fecha_creacion=item.created_at,
        activo=item.active,
        marca=brand_to_dto(item.brand) if item.brand else None,
        departamento=department_to_dto(item.department) if item.department else None,
        subcategoria=subcategory_to_dto(item.subcategory) if item.subcategory else None,
    )


def location_to_dto(location: StockLocation) -> UbicacionOut:
    return UbicacionOut(
        id_ubicacion=location.id,
        id_articulo=location.item_id,
        zona=location.zone,
        pasillo=location.aisle,
        columna=location.column,
        nivel=location.level,
        posicion=location.position,
        cantidad_stock=location.stock_quantity,
        activo=location.active,
        predeterminado=location.is_default,
        sucursal=location.branch,
    )


def count_detail_to_dto(detail: CountDetail) -> DetalleConteoOut:
    return DetalleConteoOut(
        id_detalle=detail.id,
        id_programacion=detail.schedule_id,
        id_articulo=detail.item_id,
        id_ubicacion=detail.location_id,
        cantidad_sistema=detail.system_quantity,
        cantidad_contada=detail.counted_quantity,
        diferencia=detail.difference,
        id_usuario_conteo=detail.counted_by,
        fecha_conteo=detail.counted_at,
        observaciones=detail.notes,
        articulo=item_to_dto(detail.item) if detail.item else None,
        ubicacion=location_to_dto(detail.location) if detail.location else None,
    )


def count_schedule_to_dto(schedule: CountSchedule) -> ProgramacionConteoOut:
    return ProgramacionConteoOut(
        id_programacion=schedule.id,
        fecha_programada=schedule.scheduled_date,
        descripcion=schedule.description,
        estado=schedule.status,
        fecha_creacion=schedule.created_at,
        fecha_finalizacion=schedule.finished_at,
        detalles=[count_detail_to_dto(d) for d in schedule.details],
    )
