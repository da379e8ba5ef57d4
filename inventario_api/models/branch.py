from typing import TYPE_CHECKING

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from inventario_api.models.base import ActiveMixin, Base

if TYPE_CHECKING:
    from inventario_api.models.warehouse import Warehouse


class Branch(ActiveMixin, Base):
    __tablename__ = "Sucursal"

    id: Mapped[int] = mapped_column("id_sucursal", Integer, primary_key=True)
    name: Mapped[str] = mapped_column("nombre", String(100), nullable=False)
    address: Mapped[str | None] = mapped_column("direccion", String(200), nullable=True)
    phone: Mapped[str | None] = mapped_column("telefono", String(30), nullable=True)
    city: Mapped[str | None] = mapped_column("ciudad", String(100), nullable=True)

    warehouses: Mapped[list["Warehouse"]] = relationship("Warehouse", back_populates="branch")

    def __repr__(self) -> str:
        return f"<Branch id={self.id!r} name={self.name!r}>"
