from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, DateTime, Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from arambo.database import Base, new_id, utcnow

if TYPE_CHECKING:
    from arambo.models.trip import Trip


class Truck(Base):
    __tablename__ = "trucks"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_id)
    model_number: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    height: Mapped[float] = mapped_column(Float, nullable=False, index=True)
    is_open: Mapped[bool] = mapped_column(Boolean, nullable=False, index=True)
    revision: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow
    )

    trips: Mapped[list["Trip"]] = relationship(back_populates="truck_details")
