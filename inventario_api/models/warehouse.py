from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from inventario_api.models.base import ActiveMixin, Base

if TYPE_CHECKING:
    from inventario_api.models.branch import Branch


class Warehouse(ActiveMixin, Base):
    __tablename__ = "Almacen"

    id: Mapped[int] = mapped_column("id_almacen", Integer, primary_key=True)
    name: Mapped[str] = mapped_column("nombre", String(100), nullable=False)
    branch_id: Mapped[int] = mapped_column(
        "id_sucursal",
        ForeignKey("Sucursal.id_sucursal"),
        nullable=False,
    )

    branch: Mapped["Branch"] = relationship("Branch", back_populates="warehouses")

    def __repr__(self) -> str:
        return f"<Warehouse id={self.id!r} name={self.name!r}>"
