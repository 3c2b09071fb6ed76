from __future__ import annotations

from typing import Annotated

from pydantic import Field, field_validator

from arambo.schemas.common import CamelModel


class LoginRequest(CamelModel):
    username: Annotated[str, Field(min_length=1, max_length=50)]
    password: Annotated[str, Field(min_length=1, max_length=72)]

    @field_validator("username")
    @classmethod
    def lowercase(cls, value: str) -> str:
        return value.lower()


class AdminInfo(CamelModel):
    id: str
    username: str
    last_login: str | None = None


class LoginData(CamelModel):
    access_token: str
    token_type: str = "bearer"
    expires_in: int
    admin: AdminInfo


class LoginResponse(CamelModel):
    success: bool = True
    message: str = "Login successful"
    data: LoginData


class VerifyResponse(CamelModel):
    success: bool = True
    message: str = "Token is valid"
    admin: AdminInfo


class AuthStatusResponse(CamelModel):
    success: bool = True
    authenticated: bool
    admin: AdminInfo | None = None
