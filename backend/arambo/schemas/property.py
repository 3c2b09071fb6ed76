from __future__ import annotations

from datetime import date, datetime
from typing import Annotated, Any, Literal

from pydantic import ConfigDict, EmailStr, Field, field_validator, model_validator

from arambo.models.property import (
    Category,
    FurnishingStatus,
    InventoryStatus,
    ListingType,
    PropertyCategory,
    PropertyType,
    TenantType,
)
from arambo.schemas.common import CamelModel, PaginationMeta, drop_empty_params, reject_null
from arambo.utils.normalization import normalize_fields

MAX_OTHER_IMAGES = 20

Name = Annotated[str, Field(min_length=1, max_length=100)]
Phone = Annotated[str, Field(min_length=10, max_length=15)]
PropertyName = Annotated[str, Field(min_length=1, max_length=200)]
Size = Annotated[float, Field(ge=1, le=100_000)]
Location = Annotated[str, Field(min_length=1, max_length=300)]
RoomCount = Annotated[int, Field(ge=0, le=50)]
Score = Annotated[int, Field(ge=1, le=10)]


class PropertyFields(CamelModel):
    """Optional listing attributes shared by create and update payloads."""

    listing_type: ListingType | None = None
    property_type: PropertyType | None = None
    apartment_type: Annotated[str, Field(max_length=100)] | None = None
    baranda: Annotated[int, Field(ge=0)] | None = None
    notes: Annotated[str, Field(max_length=1000)] | None = None

    first_owner: bool | None = None
    paperwork_updated: bool | None = None
    on_loan: bool | None = None
    lift: bool | None = None
    is_confirmed: bool | None = None
    is_verified: bool | None = None

    house_id: Annotated[str, Field(max_length=50)] | None = None
    street_address: Annotated[str, Field(max_length=500)] | None = None
    landmark: Annotated[str, Field(max_length=300)] | None = None
    area: Annotated[str, Field(max_length=200)] | None = None
    listing_id: Annotated[str, Field(max_length=50)] | None = None
    latitude: Annotated[float, Field(ge=-90, le=90)] | None = None
    longitude: Annotated[float, Field(ge=-180, le=180)] | None = None

    inventory_status: InventoryStatus | None = None
    tenant_type: TenantType | None = None
    property_category: PropertyCategory | None = None
    furnishing_status: FurnishingStatus | None = None
    available_from: datetime | None = None

    floor: Annotated[int, Field(ge=0, le=200)] | None = None
    total_floor: Annotated[int, Field(ge=1, le=200)] | None = None
    year_of_construction: Annotated[int, Field(ge=1800)] | None = None

    rent: Annotated[float, Field(ge=0, le=10_000_000)] | None = None
    service_charge: Annotated[float, Field(ge=0, le=1_000_000)] | None = None
    advance_months: Annotated[int, Field(ge=0, le=24)] | None = None

    clean_hygiene_score: Score | None = None
    sunlight_score: Score | None = None
    bathroom_conditions_score: Score | None = None

    cctv: bool | None = None
    community_hall: bool | None = None
    gym: bool | None = None
    masjid: bool | None = None
    parking: bool | None = None
    pets_allowed: bool | None = None
    swimming_pool: bool | None = None
    trained_guard: bool | None = None

    cover_image: Annotated[str, Field(max_length=500)] | None = None
    other_images: Annotated[list[str], Field(max_length=MAX_OTHER_IMAGES)] | None = None

    @model_validator(mode="before")
    @classmethod
    def normalize(cls, data: Any) -> Any:
        return normalize_fields(data)

    @field_validator("year_of_construction")
    @classmethod
    def check_year(cls, value: int | None) -> int | None:
        if value is not None and value > date.today().year + 5:
            raise ValueError("Year of construction cannot be too far in future")
        return value

    @field_validator(
        "first_owner",
        "paperwork_updated",
        "on_loan",
        "lift",
        "is_confirmed",
        "is_verified",
        "cctv",
        "community_hall",
        "gym",
        "masjid",
        "parking",
        "pets_allowed",
        "swimming_pool",
        "trained_guard",
        mode="before",
    )
    @classmethod
    def flags_not_null(cls, value: Any) -> Any:
        return reject_null(value)


class PropertyCreate(PropertyFields):
    name: Name
    email: EmailStr
    phone: Phone
    property_name: PropertyName
    size: Size
    location: Location
    bedrooms: RoomCount
    bathroom: RoomCount
    category: Category


class PropertyUpdate(PropertyFields):
    name: Name | None = None
    email: EmailStr | None = None
    phone: Phone | None = None
    property_name: PropertyName | None = None
    size: Size | None = None
    location: Location | None = None
    bedrooms: RoomCount | None = None
    bathroom: RoomCount | None = None
    category: Category | None = None

    @field_validator(
        "name",
        "email",
        "phone",
        "property_name",
        "size",
        "location",
        "bedrooms",
        "bathroom",
        "category",
        mode="before",
    )
    @classmethod
    def required_not_null(cls, value: Any) -> Any:
        return reject_null(value)


class CountFilter(CamelModel):
    """``3`` matches exactly three, ``3+`` matches three or more."""

    type: Literal["exact", "min"]
    value: RoomCount


class PropertyFilterParams(CamelModel):
    """Query-string filters for the listing endpoint.

    Every value arrives as a string; parsing happens here so the filter
    compiler only ever sees typed input. Unknown parameters are ignored.
    """

    model_config = ConfigDict(extra="ignore")

    category: Category | None = None
    listing_type: ListingType | None = None
    property_type: PropertyType | None = None
    inventory_status: InventoryStatus | None = None
    tenant_type: TenantType | None = None
    property_category: PropertyCategory | None = None
    furnishing_status: FurnishingStatus | None = None

    bedrooms: CountFilter | None = None
    bathroom: CountFilter | None = None
    min_size: Annotated[float, Field(ge=0)] | None = None
    max_size: Annotated[float, Field(ge=0)] | None = None
    min_rent: Annotated[float, Field(ge=0)] | None = None
    max_rent: Annotated[float, Field(ge=0)] | None = None
    floor: Annotated[int, Field(ge=0)] | None = None

    location: str | None = None
    area: str | None = None
    house_id: str | None = None
    listing_id: str | None = None
    apartment_type: str | None = None

    first_owner: bool | None = None
    on_loan: bool | None = None
    is_verified: bool | None = None
    cctv: bool | None = None
    community_hall: bool | None = None
    gym: bool | None = None
    masjid: bool | None = None
    parking: bool | None = None
    pets_allowed: bool | None = None
    swimming_pool: bool | None = None
    trained_guard: bool | None = None
    is_confirmed: bool | None = None

    page: int | None = None
    limit: int | None = None

    @model_validator(mode="before")
    @classmethod
    def drop_empty(cls, data: Any) -> Any:
        return drop_empty_params(data)

    @field_validator("bedrooms", "bathroom", mode="before")
    @classmethod
    def parse_count(cls, value: Any) -> Any:
        if isinstance(value, str):
            raw = value.strip()
            if raw.endswith("+"):
                return {"type": "min", "value": raw[:-1].strip()}
            return {"type": "exact", "value": raw}
        if isinstance(value, int) and not isinstance(value, bool):
            return {"type": "exact", "value": value}
        return value


class PropertyResponse(CamelModel):
    id: str
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    property_name: str | None = None
    listing_type: str | None = None
    property_type: str | None = None
    apartment_type: str | None = None
    size: float | None = None
    location: str | None = None
    bedrooms: int | None = None
    bathroom: int | None = None
    baranda: int | None = None
    category: str | None = None
    notes: str | None = None

    first_owner: bool | None = None
    paperwork_updated: bool | None = None
    on_loan: bool | None = None
    lift: bool | None = None
    is_confirmed: bool | None = None
    is_verified: bool | None = None

    house_id: str | None = None
    street_address: str | None = None
    landmark: str | None = None
    area: str | None = None
    listing_id: str | None = None
    latitude: float | None = None
    longitude: float | None = None

    inventory_status: str | None = None
    tenant_type: str | None = None
    property_category: str | None = None
    furnishing_status: str | None = None
    available_from: str | None = None

    floor: int | None = None
    total_floor: int | None = None
    year_of_construction: int | None = None

    rent: float | None = None
    service_charge: float | None = None
    advance_months: int | None = None

    clean_hygiene_score: int | None = None
    sunlight_score: int | None = None
    bathroom_conditions_score: int | None = None

    cctv: bool | None = None
    community_hall: bool | None = None
    gym: bool | None = None
    masjid: bool | None = None
    parking: bool | None = None
    pets_allowed: bool | None = None
    swimming_pool: bool | None = None
    trained_guard: bool | None = None

    cover_image: str | None = None
    other_images: list[str] | None = None

    created_at: str | None = None
    updated_at: str | None = None


class PropertyListResponse(CamelModel):
    properties: list[PropertyResponse]
    total: int
    pagination: PaginationMeta


class PropertyStatsResponse(CamelModel):
    total: int
    by_category: dict[str, int]
    by_property_type: dict[str, int]
    available: int
    on_loan: int
