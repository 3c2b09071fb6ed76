from datetime import datetime
from enum import StrEnum
from typing import TYPE_CHECKING, Optional

from sqlalchemy import DateTime, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from arambo.database import Base, new_id, utcnow

if TYPE_CHECKING:
    from arambo.models.truck import Truck


class ProductType(StrEnum):
    PERISHABLE = "Perishable Goods"
    NON_PERISHABLE = "Non-Perishable Goods"
    FRAGILE = "Fragile"
    OTHER = "Other"


class TimeSlot(StrEnum):
    MORNING = "Morning (8AM - 12PM)"
    AFTERNOON = "Afternoon (12PM - 4PM)"
    EVENING = "Evening (4PM - 8PM)"


class Trip(Base):
    __tablename__ = "trips"
    __table_args__ = (
        Index("ix_trips_name_email", "name", "email"),
        Index("ix_trips_date_slot", "preferred_date", "preferred_time_slot"),
        Index("ix_trips_truck_date", "truck_id", "preferred_date"),
    )

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_id)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    phone: Mapped[str] = mapped_column(String(15), nullable=False, index=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    product_type: Mapped[str] = mapped_column(String(30), nullable=False, index=True)
    pickup_location: Mapped[str] = mapped_column(String(300), nullable=False)
    drop_off_location: Mapped[str] = mapped_column(String(300), nullable=False)
    preferred_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False
    )
    preferred_time_slot: Mapped[str] = mapped_column(String(30), nullable=False)
    additional_notes: Mapped[Optional[str]] = mapped_column(Text, default="")
    truck: Mapped[Optional[str]] = mapped_column(String(100), default="")
    truck_id: Mapped[Optional[str]] = mapped_column(
        ForeignKey("trucks.id"), nullable=True
    )
    revision: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow
    )

    truck_details: Mapped[Optional["Truck"]] = relationship(back_populates="trips")
