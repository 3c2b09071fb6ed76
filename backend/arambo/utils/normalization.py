"""Write-path normalization shared by every entity schema.

Applied to raw input before field validation, so create and partial update
payloads are normalized the same way regardless of the storage backend.
"""

import re
from typing import Any

_WHITESPACE = re.compile(r"\s+")


def normalize_email(value: str) -> str:
    return value.strip().lower()


def normalize_phone(value: str) -> str:
    return _WHITESPACE.sub("", value)


def normalize_fields(data: Any) -> Any:
    """Trim strings, lowercase ``email`` and strip whitespace from ``phone``."""
    if not isinstance(data, dict):
        return data

    normalized = {}
    for key, value in data.items():
        if isinstance(value, str):
            value = value.strip()
            if key == "email":
                value = normalize_email(value)
            elif key == "phone":
                value = normalize_phone(value)
        normalized[key] = value
    return normalized

