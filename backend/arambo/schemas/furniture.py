from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import ConfigDict, EmailStr, Field, field_validator, model_validator

from arambo.models.furniture import FurnitureCondition, FurnitureType, PaymentType
from arambo.schemas.common import CamelModel, drop_empty_params, reject_null
from arambo.services.pagination import DEFAULT_LIMIT, DEFAULT_PAGE, MAX_LIMIT
from arambo.utils.normalization import normalize_fields

Name = Annotated[str, Field(min_length=1, max_length=100)]
Phone = Annotated[str, Field(min_length=1)]


class _FurniturePayload(CamelModel):
    @model_validator(mode="before")
    @classmethod
    def normalize(cls, data: Any) -> Any:
        return normalize_fields(data)


class FurnitureCreate(_FurniturePayload):
    name: Name
    email: EmailStr
    phone: Phone
    furniture_type: FurnitureType
    payment_type: PaymentType | None = None
    furniture_condition: FurnitureCondition | None = None


class FurnitureUpdate(_FurniturePayload):
    name: Name | None = None
    email: EmailStr | None = None
    phone: Phone | None = None
    furniture_type: FurnitureType | None = None
    payment_type: PaymentType | None = None
    furniture_condition: FurnitureCondition | None = None

    @field_validator("name", "email", "phone", "furniture_type", mode="before")
    @classmethod
    def required_not_null(cls, value: Any) -> Any:
        return reject_null(value)


class FurnitureListParams(CamelModel):
    model_config = ConfigDict(extra="ignore")

    page: Annotated[int, Field(ge=1)] = DEFAULT_PAGE
    limit: Annotated[int, Field(ge=1, le=MAX_LIMIT)] = DEFAULT_LIMIT
    sort_by: Literal["createdAt", "name", "furnitureType"] = "createdAt"
    sort_order: Literal["asc", "desc"] = "desc"

    @model_validator(mode="before")
    @classmethod
    def drop_empty(cls, data: Any) -> Any:
        return drop_empty_params(data)


class FurnitureResponse(CamelModel):
    id: str
    name: str
    email: str
    phone: str
    furniture_type: str
    payment_type: str | None = None
    furniture_condition: str | None = None
    created_at: str | None = None
    updated_at: str | None = None


class FurniturePageMeta(CamelModel):
    current_page: int
    total_pages: int
    total_items: int
    items_per_page: int
    has_next_page: bool
    has_previous_page: bool


class FurnitureListResponse(CamelModel):
    data: list[FurnitureResponse]
    meta: FurniturePageMeta


class FurnitureStatsResponse(CamelModel):
    total: int
    commercial: int
    residential: int
