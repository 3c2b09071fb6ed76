from __future__ import annotations

from datetime import datetime, timezone
from typing import Annotated, Any

from pydantic import EmailStr, Field, field_validator, model_validator

from arambo.models.trip import ProductType, TimeSlot
from arambo.schemas.common import CamelModel, reject_null
from arambo.schemas.truck import TruckResponse
from arambo.utils.normalization import normalize_fields

Name = Annotated[str, Field(min_length=1, max_length=100)]
Phone = Annotated[str, Field(min_length=10, max_length=15)]
Pickup = Annotated[str, Field(min_length=1, max_length=300)]
DropOff = Annotated[str, Field(min_length=1, max_length=200)]
Notes = Annotated[str, Field(max_length=300)]


class _TripPayload(CamelModel):
    @model_validator(mode="before")
    @classmethod
    def normalize(cls, data: Any) -> Any:
        return normalize_fields(data)

    @field_validator("preferred_date", check_fields=False)
    @classmethod
    def to_utc(cls, value: datetime | None) -> datetime | None:
        if value is None:
            return value
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)


class TripCreate(_TripPayload):
    name: Name
    phone: Phone
    email: EmailStr
    product_type: ProductType
    pickup_location: Pickup
    drop_off_location: DropOff
    preferred_date: datetime
    preferred_time_slot: TimeSlot
    additional_notes: Notes | None = None
    truck: str | None = None
    truck_id: str | None = None


class TripUpdate(_TripPayload):
    name: Name | None = None
    phone: Phone | None = None
    email: EmailStr | None = None
    product_type: ProductType | None = None
    pickup_location: Pickup | None = None
    drop_off_location: DropOff | None = None
    preferred_date: datetime | None = None
    preferred_time_slot: TimeSlot | None = None
    additional_notes: Notes | None = None
    truck: str | None = None
    truck_id: str | None = None

    @field_validator(
        "name",
        "phone",
        "email",
        "product_type",
        "pickup_location",
        "drop_off_location",
        "preferred_date",
        "preferred_time_slot",
        mode="before",
    )
    @classmethod
    def required_not_null(cls, value: Any) -> Any:
        return reject_null(value)


class TripResponse(CamelModel):
    id: str
    name: str
    phone: str
    email: str
    product_type: str
    pickup_location: str
    drop_off_location: str
    preferred_date: str
    preferred_time_slot: str
    additional_notes: str | None = None
    truck: str | None = None
    truck_id: str | None = None
    truck_details: TruckResponse | None = None
    created_at: str | None = None
    updated_at: str | None = None
