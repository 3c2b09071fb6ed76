from __future__ import annotations

from typing import Annotated, Any

from pydantic import Field, field_validator

from arambo.schemas.common import CamelModel, reject_null

ModelNumber = Annotated[str, Field(min_length=1, max_length=100)]
Height = Annotated[float, Field(ge=1, le=100)]


class TruckCreate(CamelModel):
    model_number: ModelNumber
    height: Height
    is_open: bool


class TruckUpdate(CamelModel):
    model_number: ModelNumber | None = None
    height: Height | None = None
    is_open: bool | None = None

    @field_validator("model_number", "height", "is_open", mode="before")
    @classmethod
    def required_not_null(cls, value: Any) -> Any:
        return reject_null(value)


class TruckIdRequest(CamelModel):
    id: Annotated[str, Field(min_length=1)]


class TruckResponse(CamelModel):
    id: str
    model_number: str
    height: float
    is_open: bool
    created_at: str | None = None
    updated_at: str | None = None
