"""Domain exceptions, converted to JSON error envelopes in ``arambo.main``."""

from __future__ import annotations

from typing import Any


class AppError(Exception):
    status_code = 500
    error = "Internal Server Error"

    def __init__(self, message: str, details: list[dict[str, Any]] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


class ValidationError(AppError):
    status_code = 400
    error = "Validation Error"

    @classmethod
    def from_pydantic(cls, exc: Any, message: str = "Invalid request data") -> ValidationError:
        """Build from a pydantic ``ValidationError``, keeping field-level detail."""
        details = [
            {
                "field": ".".join(str(p) for p in err["loc"]),
                "message": err["msg"],
            }
            for err in exc.errors()
        ]
        return cls(message, details)


class NotFoundError(AppError):
    status_code = 404
    error = "Not Found"


class StorageError(AppError):
    status_code = 500
    error = "Internal Server Error"


class AuthError(AppError):
    status_code = 401
    error = "Unauthorized"

    def __init__(self, message: str, error: str | None = None) -> None:
        super().__init__(message)
        if error:
            self.error = error
