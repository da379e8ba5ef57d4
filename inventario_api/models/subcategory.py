from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from inventario_api.models.base import ActiveMixin, Base

if TYPE_CHECKING:
    from inventario_api.models.brand import Brand


class SubCategory(ActiveMixin, Base):
    __tablename__ = "SubCategoria"
    __table_args__ = (
        UniqueConstraint("nombre", "id_marca", name="SubCategoria_nombre_id_marca_key"),
    )

    id: Mapped[int] = mapped_column("id_subcategoria", Integer, primary_key=True)
    name: Mapped[str] = mapped_column("nombre", String(100), nullable=False)
    brand_id: Mapped[int] = mapped_column(
        "id_marca",
        ForeignKey("Marca.id_marca"),
        nullable=False,
    )

    brand: Mapped["Brand"] = relationship("Brand", back_populates="subcategories")

    def __repr__(self) -> str:
        return f"<SubCategory id={self.id!r} name={self.name!r} brand_id={self.brand_id!r}>"
