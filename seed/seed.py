"""Seed script: load the catalog from a JSON document.

Run as:
    python -m seed.seed [path/to/seed.json]

Requires the DATABASE_URL environment variable (or a .env file).  Every step
is keyed by a natural key, so running the script twice leaves the database
unchanged.  Any error aborts the whole transaction and exits non-zero after
the engine has been disposed.
"""

import asyncio
import json
import sys
from pathlib import Path
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from inventario_api.config import get_settings
from inventario_api.database import Database
from inventario_api.models import Branch, Brand, Department, Item, SubCategory, Warehouse

SEED_FILE = Path(__file__).parent / "data" / "seed.json"


def _boolean(value: Any, fallback: bool = True) -> bool:
    return value if isinstance(value, bool) else fallback


def load_seed_file(path: Path = SEED_FILE) -> dict[str, list[dict[str, Any]]]:
    with path.open(encoding="utf-8") as fh:
        return json.load(fh)


# ---------------------------------------------------------------------------
# Per-entity steps
# ---------------------------------------------------------------------------


async def seed_branches(session: AsyncSession, rows: list[dict[str, Any]]) -> dict[str, Branch]:
    """Find each branch by name, then update it or create it."""
    branches: dict[str, Branch] = {}
    for row in rows:
        values = {
            "city": row.get("ciudad"),
            "address": row.get("direccion"),
            "phone": row.get("telefono"),
            "active": _boolean(row.get("activo")),
        }
        result = await session.execute(
            select(Branch).where(Branch.name == row["nombre"]).order_by(Branch.id).limit(1)
        )
        branch = result.scalar_one_or_none()
        if branch is None:
            branch = Branch(name=row["nombre"], **values)
            session.add(branch)
        else:
            for field, value in values.items():
                setattr(branch, field, value)
        branches[branch.name] = branch

    await session.flush()
    print(f"  ✓ {len(branches)} sucursales")
    return branches


async def seed_warehouses(
    session: AsyncSession, rows: list[dict[str, Any]], branches: dict[str, Branch]
) -> int:
    """Create warehouses missing for their (name, branch); unknown branches are skipped."""
    count = 0
    for row in rows:
        branch = branches.get(row["sucursal"])
        if branch is None:
            continue
        result = await session.execute(
            select(Warehouse).where(
                Warehouse.name == row["nombre"],
                Warehouse.branch_id == branch.id,
            )
        )
        warehouse = result.scalar_one_or_none()
        active = _boolean(row.get("activo"))
        if warehouse is None:
            session.add(Warehouse(name=row["nombre"], branch_id=branch.id, active=active))
        else:
            warehouse.active = active
        count += 1

    await session.flush()
    print(f"  ✓ {count} almacenes")
    return count


async def _get_or_create_by_name(session: AsyncSession, model: type, name: str) -> Any:
    result = await session.execute(select(model).where(model.name == name))
    instance = result.scalar_one_or_none()
    if instance is None:
        instance = model(name=name)
        session.add(instance)
        await session.flush()
    return instance


async def seed_brands(session: AsyncSession, rows: list[dict[str, Any]]) -> dict[str, Brand]:
    brands: dict[str, Brand] = {}
    for row in rows:
        brands[row["nombre"]] = await _get_or_create_by_name(session, Brand, row["nombre"])
    print(f"  ✓ {len(brands)} marcas")
    return brands


async def seed_departments(
    session: AsyncSession, rows: list[dict[str, Any]]
) -> dict[str, Department]:
    departments: dict[str, Department] = {}
    for row in rows:
        departments[row["nombre"]] = await _get_or_create_by_name(session, Department, row["nombre"])
    print(f"  ✓ {len(departments)} departamentos")
    return departments


async def seed_subcategories(
    session: AsyncSession, rows: list[dict[str, Any]], brands: dict[str, Brand]
) -> dict[tuple[str, int], SubCategory]:
    """Create subcategories by (name, brand); rows naming an unknown brand are skipped."""
    subcategories: dict[tuple[str, int], SubCategory] = {}
    for row in rows:
        brand = brands.get(row["marca"])
        if brand is None:
            continue
        result = await session.execute(
            select(SubCategory).where(
                SubCategory.name == row["nombre"],
                SubCategory.brand_id == brand.id,
            )
        )
        subcategory = result.scalar_one_or_none()
        if subcategory is None:
            subcategory = SubCategory(name=row["nombre"], brand_id=brand.id)
            session.add(subcategory)
            await session.flush()
        subcategories[(subcategory.name, brand.id)] = subcategory

    print(f"  ✓ {len(subcategories)} subcategorías")
    return subcategories


async def seed_items(
    session: AsyncSession,
    rows: list[dict[str, Any]],
    brands: dict[str, Brand],
    departments: dict[str, Department],
    subcategories: dict[tuple[str, int], SubCategory],
) -> int:
    """Upsert items by sku; rows whose brand, department or subcategory is unknown are skipped."""
    count = 0
    for row in rows:
        brand = brands.get(row["marca"])
        department = departments.get(row["departamento"])
        subcategory = subcategories.get((row["subcategoria"], brand.id)) if brand else None
        if brand is None or department is None or subcategory is None:
            continue

        values = {
            "description": row.get("descripcion"),
            "brand_id": brand.id,
            "department_id": department.id,
            "subcategory_id": subcategory.id,
            "active": _boolean(row.get("activo")),
        }
        result = await session.execute(select(Item).where(Item.sku == row["sku"]))
        item = result.scalar_one_or_none()
        if item is None:
            session.add(Item(sku=row["sku"], **values))
        else:
            for field, value in values.items():
                setattr(item, field, value)
        count += 1

    await session.flush()
    print(f"  ✓ {count} artículos")
    return count


async def seed_catalog(session: AsyncSession, data: dict[str, list[dict[str, Any]]]) -> None:
    """Apply every section of *data* in dependency order within *session*."""
    print("\n[1/6] Sucursales...")
    branches = await seed_branches(session, data.get("sucursales", []))

    print("\n[2/6] Almacenes...")
    await seed_warehouses(session, data.get("almacenes", []), branches)

    print("\n[3/6] Marcas...")
    brands = await seed_brands(session, data.get("marcas", []))

    print("\n[4/6] Departamentos...")
    departments = await seed_departments(session, data.get("departamentos", []))

    print("\n[5/6] Subcategorías...")
    subcategories = await seed_subcategories(session, data.get("subcategorias", []), brands)

    print("\n[6/6] Artículos...")
    await seed_items(session, data.get("articulos", []), brands, departments, subcategories)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


async def main(path: Path = SEED_FILE) -> None:
    settings = get_settings()
    data = load_seed_file(path)

    print("Inventario seed")
    print("=" * 50)

    database = Database(settings.database_url)
    try:
        async with database.session() as session, session.begin():
            await seed_catalog(session, data)
    finally:
        await database.dispose()
    print("\n✓ Seed listo")


if __name__ == "__main__":
    asyncio.run(main(Path(sys.argv[1]) if len(sys.argv) > 1 else SEED_FILE))
