from datetime import datetime
from enum import StrEnum
from typing import Optional

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from arambo.database import Base, new_id, utcnow


class FurnitureType(StrEnum):
    COMMERCIAL = "Commercial Furniture"
    RESIDENTIAL = "Residential Furniture"


class PaymentType(StrEnum):
    EMI_PLAN = "EMI Plan"
    LEASE = "Lease"
    INSTANT_PAY = "Instant Pay"


class FurnitureCondition(StrEnum):
    NEW = "New Furniture"
    USED = "Used Furniture"


class Furniture(Base):
    __tablename__ = "furniture"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_id)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    phone: Mapped[str] = mapped_column(String(50), nullable=False)
    furniture_type: Mapped[str] = mapped_column(String(30), nullable=False, index=True)
    payment_type: Mapped[Optional[str]] = mapped_column(
        String(20), nullable=True, index=True
    )
    furniture_condition: Mapped[Optional[str]] = mapped_column(
        String(20), nullable=True, index=True
    )
    revision: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, index=True
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow
    )
