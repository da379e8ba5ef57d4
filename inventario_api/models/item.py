from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from inventario_api.models.base import ActiveMixin, Base, CreatedAtMixin

if TYPE_CHECKING:
    from inventario_api.models.brand import Brand
    from inventario_api.models.department import Department
    from inventario_api.models.subcategory import SubCategory


class Item(ActiveMixin, CreatedAtMixin, Base):
    __tablename__ = "Articulo"

    id: Mapped[int] = mapped_column("id_articulo", Integer, primary_key=True)
    sku: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)
    description: Mapped[str | None] = mapped_column("descripcion", Text, nullable=True)
    brand_id: Mapped[int | None] = mapped_column(
        "id_marca",
        ForeignKey("Marca.id_marca"),
        nullable=True,
    )
    department_id: Mapped[int | None] = mapped_column(
        "id_departamento",
        ForeignKey("Departamento.id_departamento"),
        nullable=True,
    )
    subcategory_id: Mapped[int | None] = mapped_column(
        "id_subcategoria",
        ForeignKey("SubCategoria.id_subcategoria"),
        nullable=True,
    )

    brand: Mapped["Brand | None"] = relationship("Brand", back_populates="items")
    department: Mapped["Department | None"] = relationship("Department", back_populates="items")
    subcategory: Mapped["SubCategory | None"] = relationship("SubCategory")

    def __repr__(self) -> str:
        return f"<Item id={self.id!r} sku={self.sku!r}>"
