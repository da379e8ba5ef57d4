from typing import TYPE_CHECKING

from sqlalchemy import Boolean, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from inventario_api.models.base import ActiveMixin, Base

if TYPE_CHECKING:
    from inventario_api.models.item import Item


class StockLocation(ActiveMixin, Base):
    __tablename__ = "Ubicacion"

    id: Mapped[int] = mapped_column("id_ubicacion", Integer, primary_key=True)
    item_id: Mapped[int] = mapped_column(
        "id_articulo",
        ForeignKey("Articulo.id_articulo"),
        nullable=False,
    )
    zone: Mapped[str] = mapped_column("zona", String(20), nullable=False)
    aisle: Mapped[str] = mapped_column("pasillo", String(20), nullable=False)
    column: Mapped[str] = mapped_column("columna", String(20), nullable=False)
    level: Mapped[str] = mapped_column("nivel", String(20), nullable=False)
    position: Mapped[str] = mapped_column("posicion", String(20), nullable=False)
    stock_quantity: Mapped[int] = mapped_column("cantidad_stock", Integer, nullable=False, default=0)
    is_default: Mapped[bool] = mapped_column(
        "predeterminado", Boolean, nullable=False, default=False
    )
    branch: Mapped[int | None] = mapped_column("sucursal", Integer, nullable=True)

    item: Mapped["Item"] = relationship("Item")

    def __repr__(self) -> str:
        return f"<StockLocation id={self.id!r} item_id={self.item_id!r} zone={self.zone!r}>"
