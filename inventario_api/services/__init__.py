from inventario_api.services.catalog import (
    create_item,
    get_item_by_sku,
    list_active_warehouses,
    list_brand_subcategories,
    list_recent_items,
    list_subcategories,
    search_brands,
)
from inventario_api.services.counts import CountSource, DatabaseCountSource, SyntheticCountSource
from inventario_api.services.synthetic import synthesize_count

__all__ = [
    # catalog
    "create_item",
    "get_item_by_sku",
    "list_active_warehouses",
    "list_brand_subcategories",
    "list_recent_items",
    "list_subcategories",
    "search_brands",
    # counts
    "CountSource",
    "DatabaseCountSource",
    "SyntheticCountSource",
    "synthesize_count",
]
