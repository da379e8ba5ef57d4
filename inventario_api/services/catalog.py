"""Catalog queries: warehouses, items, brands and subcategories."""

from fastapi import HTTPException, status
from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from inventario_api.database import Database
from inventario_api.models import Brand, Department, Item, SubCategory, Warehouse
from inventario_api.schemas import ArticuloCreate
from inventario_api.utils.pagination import PageRequest, paginate

ITEM_LIST_LIMIT = 50
SUBCATEGORY_LIST_LIMIT = 50


def item_with_relations() -> Select[tuple[Item]]:
    """Return a base select for Item with brand, department and subcategory eager-loaded."""
    return select(Item).options(
        selectinload(Item.brand),
        selectinload(Item.department),
        selectinload(Item.subcategory),
    )


async def list_active_warehouses(db: AsyncSession) -> list[Warehouse]:
    result = await db.execute(
        select(Warehouse)
        .where(Warehouse.active.is_(True))
        .options(selectinload(Warehouse.branch))
        .order_by(Warehouse.name.asc())
    )
    return list(result.scalars().all())


async def list_recent_items(db: AsyncSession) -> list[Item]:
    """Return the newest items, capped at :data:`ITEM_LIST_LIMIT`."""
    result = await db.execute(
        item_with_relations()
        .order_by(Item.created_at.desc(), Item.id.desc())
        .limit(ITEM_LIST_LIMIT)
    )
    return list(result.scalars().all())


async def get_item_by_sku(db: AsyncSession, sku: str) -> Item | None:
    result = await db.execute(item_with_relations().where(Item.sku == sku))
    return result.scalar_one_or_none()


async def create_item(db: AsyncSession, body: ArticuloCreate) -> Item:
    """Insert an item and return it reloaded with its relations.

    Raises HTTP 400 when a referenced brand, department or subcategory does
    not exist.  A duplicate sku surfaces as ``IntegrityError`` from the commit.
    """
    references = [
        (Brand, body.id_marca, "id_marca"),
        (Department, body.id_departamento, "id_departamento"),
    ]
    if body.id_subcategoria is not None:
        references.append((SubCategory, body.id_subcategoria, "id_subcategoria"))

    for model, ref_id, field in references:
        if await db.get(model, ref_id) is None:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"{field} {ref_id} no existe",
            )

    item = Item(
        sku=body.sku,
        description=body.descripcion,
        brand_id=body.id_marca,
        department_id=body.id_departamento,
        subcategory_id=body.id_subcategoria,
    )
    db.add(item)
    await db.commit()

    # Reload with relationships for the response schema
    result = await db.execute(item_with_relations().where(Item.id == item.id))
    return result.scalar_one()


async def list_subcategories(db: AsyncSession) -> list[SubCategory]:
    result = await db.execute(
        select(SubCategory)
        .options(selectinload(SubCategory.brand))
        .order_by(SubCategory.name.asc(), SubCategory.id.asc())
        .limit(SUBCATEGORY_LIST_LIMIT)
    )
    return list(result.scalars().all())


async def search_brands(
    database: Database, q: str | None, page: PageRequest
) -> tuple[list[Brand], int]:
    """Case-insensitive substring search on brand name; blank *q* matches everything."""
    query = select(Brand).order_by(Brand.name.asc(), Brand.id.asc())
    term = (q or "").strip()
    if term:
        query = query.where(Brand.name.icontains(term, autoescape=True))
    return await paginate(database, query, page)


async def list_brand_subcategories(
    database: Database, brand_id: int, page: PageRequest
) -> tuple[list[SubCategory], int]:
    query = (
        select(SubCategory)
        .where(SubCategory.brand_id == brand_id, SubCategory.active.is_(True))
        .order_by(SubCategory.name.asc(), SubCategory.id.asc())
    )
    return await paginate(database, query, page)
