"""Route credential policy.

Every route is public unless listed in ``ROUTE_POLICIES``. The policy is
enforced by one application-wide dependency, so no router declares its own
auth and every entity is gated the same way.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum

from fastapi import Depends, Request

from arambo.services.auth_service import AuthService, extract_bearer_token
from arambo.utils.exceptions import AuthError

logger = logging.getLogger(__name__)


class Credential(StrEnum):
    PUBLIC = "public"
    BEARER = "bearer"


ROUTE_POLICIES: dict[tuple[str, str], Credential] = {
    ("PUT", "/properties/{property_id}"): Credential.BEARER,
    ("POST", "/trucks"): Credential.BEARER,
    ("PUT", "/trucks/{truck_id}"): Credential.BEARER,
    ("DELETE", "/trucks/{truck_id}"): Credential.BEARER,
    ("PUT", "/trips/{trip_id}"): Credential.BEARER,
    ("DELETE", "/trips/{trip_id}"): Credential.BEARER,
    ("PUT", "/furniture/{furniture_id}"): Credential.BEARER,
    ("DELETE", "/furniture/{furniture_id}"): Credential.BEARER,
    ("GET", "/auth/verify"): Credential.BEARER,
    ("POST", "/auth/logout"): Credential.BEARER,
}


@dataclass(frozen=True)
class Identity:
    admin_id: str
    username: str


DEV_IDENTITY = Identity(admin_id="dev", username="dev")


def get_auth_service(request: Request) -> AuthService:
    return request.app.state.auth_service


def policy_for(method: str, path: str) -> Credential:
    return ROUTE_POLICIES.get((method.upper(), path), Credential.PUBLIC)


def _route_path(request: Request) -> str:
    route = request.scope.get("route")
    path = getattr(route, "path", request.url.path)
    prefix = request.app.state.settings.api_prefix
    if prefix and path.startswith(prefix):
        path = path[len(prefix):] or "/"
    return path


def enforce_route_policy(
    request: Request,
    auth: AuthService = Depends(get_auth_service),
) -> Identity | None:
    """Admit the request or raise ``AuthError`` according to its route policy."""
    if policy_for(request.method, _route_path(request)) is Credential.PUBLIC:
        return None

    if auth.settings.skip_auth:
        logger.warning("SKIP_AUTH is enabled; admitting %s %s", request.method, request.url.path)
        request.state.identity = DEV_IDENTITY
        return DEV_IDENTITY

    token = extract_bearer_token(request.headers.get("Authorization"))
    if token is None:
        raise AuthError(
            "Access token is required. Provide it via Authorization: Bearer <token>"
        )

    with request.app.state.database.session() as db:
        admin = auth.verify(db, token)
        identity = Identity(admin_id=admin.id, username=admin.username)
    request.state.identity = identity
    return identity


def get_identity(request: Request) -> Identity:
    identity = getattr(request.state, "identity", None)
    if identity is None:
        raise AuthError("Authentication required")
    return identity
