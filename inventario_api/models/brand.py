from typing import TYPE_CHECKING

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from inventario_api.models.base import ActiveMixin, Base

if TYPE_CHECKING:
    from inventario_api.models.item import Item
    from inventario_api.models.subcategory import SubCategory


class Brand(ActiveMixin, Base):
    __tablename__ = "Marca"

    id: Mapped[int] = mapped_column("id_marca", Integer, primary_key=True)
    name: Mapped[str] = mapped_column("nombre", String(100), nullable=False, unique=True)
    code: Mapped[int | None] = mapped_column("codigo", Integer, nullable=True)

    subcategories: Mapped[list["SubCategory"]] = relationship(
        "SubCategory",
        back_populates="brand",
    )
    items: Mapped[list["Item"]] = relationship("Item", back_populates="brand")

    def __repr__(self) -> str:
        return f"<Brand id={self.id!r} name={self.name!r}>"
