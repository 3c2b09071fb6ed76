from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from arambo.database import get_db
from arambo.schemas.auth import (
    AuthStatusResponse,
    LoginRequest,
    LoginResponse,
    VerifyResponse,
)
from arambo.schemas.common import SuccessResponse
from arambo.security import Identity, get_auth_service, get_identity
from arambo.services.auth_service import AuthService, extract_bearer_token, to_admin_info
from arambo.utils.exceptions import AuthError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth")


@router.post("/login", response_model=LoginResponse)
def login(
    body: LoginRequest,
    db: Session = Depends(get_db),
    auth: AuthService = Depends(get_auth_service),
) -> LoginResponse:
    return LoginResponse(data=auth.login(db, body.username, body.password))


@router.get("/verify", response_model=VerifyResponse)
def verify_token(
    request: Request,
    db: Session = Depends(get_db),
    auth: AuthService = Depends(get_auth_service),
    identity: Identity = Depends(get_identity),
) -> VerifyResponse:
    token = extract_bearer_token(request.headers.get("Authorization"))
    if token is None:
        # SKIP_AUTH admitted the request without a token
        return VerifyResponse(
            admin={"id": identity.admin_id, "username": identity.username},
        )
    return VerifyResponse(admin=to_admin_info(auth.verify(db, token)))


@router.get("/status", response_model=AuthStatusResponse, response_model_exclude_none=True)
def auth_status(
    request: Request,
    db: Session = Depends(get_db),
    auth: AuthService = Depends(get_auth_service),
) -> AuthStatusResponse:
    """Report whether the caller holds a valid token without rejecting them."""
    token = extract_bearer_token(request.headers.get("Authorization"))
    if token is None:
        return AuthStatusResponse(authenticated=False)
    try:
        admin = auth.verify(db, token)
    except AuthError as e:
        logger.debug("Status check with unusable token: %s", e.message)
        return AuthStatusResponse(authenticated=False)
    return AuthStatusResponse(authenticated=True, admin=to_admin_info(admin))


@router.post("/logout", response_model=SuccessResponse)
def logout(identity: Identity = Depends(get_identity)) -> SuccessResponse:
    # Tokens are stateless; the client discards its copy.
    logger.info("Admin %s logged out", identity.username)
    return SuccessResponse(message="Logout successful")


@router.get("/health")
def health_check() -> dict:
    return {
        "status": "OK",
        "message": "Auth service is running",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
