from typing import TYPE_CHECKING

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from inventario_api.models.base import ActiveMixin, Base

if TYPE_CHECKING:
    from inventario_api.models.item import Item


class Department(ActiveMixin, Base):
    __tablename__ = "Departamento"

    id: Mapped[int] = mapped_column("id_departamento", Integer, primary_key=True)
    name: Mapped[str] = mapped_column("nombre", String(100), nullable=False, unique=True)

    items: Mapped[list["Item"]] = relationship("Item", back_populates="department")

    def __repr__(self) -> str:
        return f"<Department id={self.id!r} name={self.name!r}>"
