from datetime import datetime

from sqlalchemy import Boolean, DateTime, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class ActiveMixin:
    active: Mapped[bool] = mapped_column("activo", Boolean, nullable=False, default=True)


class CreatedAtMixin:
    created_at: Mapped[datetime] = mapped_column(
        "fecha_creacion",
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
