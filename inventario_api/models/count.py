from datetime import datetime
from enum import StrEnum
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, Enum, ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from inventario_api.models.base import Base, CreatedAtMixin

if TYPE_CHECKING:
    from inventario_api.models.item import Item
    from inventario_api.models.stock_location import StockLocation


class CountStatus(StrEnum):
    scheduled = "Programado"
    completed = "Completado"
    cancelled = "Cancelado"


class CountSchedule(CreatedAtMixin, Base):
    __tablename__ = "Programacion_Conteo"

    id: Mapped[int] = mapped_column("id_programacion", Integer, primary_key=True)
    scheduled_date: Mapped[datetime] = mapped_column(
        "fecha_programada", DateTime(timezone=True), nullable=False
    )
    description: Mapped[str | None] = mapped_column("descripcion", Text, nullable=True)
    status: Mapped[CountStatus] = mapped_column(
        "estado",
        Enum(
            CountStatus,
            name="EstadoConteo",
            values_callable=lambda statuses: [s.value for s in statuses],
        ),
        nullable=False,
        default=CountStatus.scheduled,
    )
    finished_at: Mapped[datetime | None] = mapped_column(
        "fecha_finalizacion", DateTime(timezone=True), nullable=True
    )

    details: Mapped[list["CountDetail"]] = relationship(
        "CountDetail",
        back_populates="schedule",
        order_by="CountDetail.id",
    )

    def __repr__(self) -> str:
        return f"<CountSchedule id={self.id!r} status={self.status!r}>"


class CountDetail(Base):
    __tablename__ = "Detalle_Conteo"

    id: Mapped[int] = mapped_column("id_detalle", Integer, primary_key=True)
    schedule_id: Mapped[int] = mapped_column(
        "id_programacion",
        ForeignKey("Programacion_Conteo.id_programacion"),
        nullable=False,
    )
    item_id: Mapped[int] = mapped_column(
        "id_articulo",
        ForeignKey("Articulo.id_articulo"),
        nullable=False,
    )
    location_id: Mapped[int] = mapped_column(
        "id_ubicacion",
        ForeignKey("Ubicacion.id_ubicacion"),
        nullable=False,
    )
    system_quantity: Mapped[int] = mapped_column("cantidad_sistema", Integer, nullable=False)
    counted_quantity: Mapped[int] = mapped_column(
        "cantidad_contada", Integer, nullable=False, default=0
    )
    # Only set once the parent schedule is completed.
    difference: Mapped[int | None] = mapped_column("diferencia", Integer, nullable=True)
    counted_by: Mapped[int | None] = mapped_column("id_usuario_conteo", Integer, nullable=True)
    counted_at: Mapped[datetime] = mapped_column(
        "fecha_conteo", DateTime(timezone=True), nullable=False
    )
    notes: Mapped[str | None] = mapped_column("observaciones", Text, nullable=True)

    schedule: Mapped["CountSchedule"] = relationship("CountSchedule", back_populates="details")
    item: Mapped["Item"] = relationship("Item")
    location: Mapped["StockLocation"] = relationship("StockLocation")

    def __repr__(self) -> str:
        return f"<CountDetail id={self.id!r} schedule_id={self.schedule_id!r}>"
