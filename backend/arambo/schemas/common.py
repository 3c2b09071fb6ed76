from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )


class PaginationMeta(CamelModel):
    current_page: int
    limit: int
    total_items: int
    total_pages: int
    has_next_page: bool
    has_prev_page: bool
    next_page: int | None = None
    prev_page: int | None = None


class ErrorDetail(BaseModel):
    field: str
    message: str


class ErrorResponse(BaseModel):
    success: bool = False
    error: str
    message: str
    details: list[ErrorDetail] | None = None


class SuccessResponse(BaseModel):
    success: bool = True
    message: str | None = None


def drop_empty_params(data: Any) -> Any:
    """Query strings like ``?location=`` mean "no filter"."""
    if isinstance(data, dict):
        return {k: v for k, v in data.items() if not (isinstance(v, str) and not v.strip())}
    return data


def reject_null(value: Any) -> Any:
    """Partial updates may omit a non-nullable field but not set it to null."""
    if value is None:
        raise ValueError("Field cannot be null")
    return value
