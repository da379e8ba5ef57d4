from inventario_api.models.branch import Branch
from inventario_api.models.brand import Brand
from inventario_api.models.count import CountDetail, CountSchedule, CountStatus
from inventario_api.models.department import Department
from inventario_api.models.item import Item
from inventario_api.models.stock_location import StockLocation
from inventario_api.models.subcategory import SubCategory
from inventario_api.models.warehouse import Warehouse

__all__ = [
    "Branch",
    "Brand",
    "CountDetail",
    "CountSchedule",
    "CountStatus",
    "Department",
    "Item",
    "StockLocation",
    "SubCategory",
    "Warehouse",
]
