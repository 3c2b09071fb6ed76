from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from sqlalchemy import inspect

# Storage bookkeeping and secrets; never part of an external shape
INTERNAL_FIELDS = frozenset({"revision", "password_hash"})


def serialize_datetime(value: datetime) -> str:
    """ISO-8601 in UTC with a ``Z`` suffix. Naive values are taken as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    else:
        value = value.astimezone(timezone.utc)
    return value.isoformat().replace("+00:00", "Z")


def to_response(document: Any) -> dict[str, Any]:
    """Map a stored row to its external field dict.

    The storage identifier becomes ``id``; null columns are left out so
    absent optional fields stay absent on the wire.
    """
    mapper = inspect(document).mapper
    identifiers = {mapper.get_property_by_column(c).key for c in mapper.primary_key}
    result: dict[str, Any] = {}
    for attr in mapper.column_attrs:
        key = attr.key
        if key in INTERNAL_FIELDS:
            continue
        value = getattr(document, key)
        if value is None:
            continue
        if isinstance(value, datetime):
            value = serialize_datetime(value)
        result["id" if key in identifiers else key] = value
    return result
