"""Admin authentication: bcrypt password hashes and HS256 access tokens."""

from __future__ import annotations

import logging
import re
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING, Any

import bcrypt
import jwt
from sqlalchemy import select

from arambo.models.admin import Admin
from arambo.schemas.auth import AdminInfo, LoginData
from arambo.services.response_mapper import serialize_datetime
from arambo.utils.exceptions import AuthError, ValidationError

if TYPE_CHECKING:
    from sqlalchemy.orm import Session

    from arambo.config import Settings

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"
USERNAME_PATTERN = re.compile(r"^[a-zA-Z0-9_]{3,50}$")
MIN_PASSWORD_LENGTH = 6

INVALID_CREDENTIALS = "Invalid username or password"


def to_admin_info(admin: Admin) -> AdminInfo:
    return AdminInfo(
        id=admin.id,
        username=admin.username,
        last_login=serialize_datetime(admin.last_login) if admin.last_login else None,
    )


class AuthService:
    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.secret_key = settings.jwt_secret
        self.token_lifetime = timedelta(minutes=settings.jwt_expires_minutes)

    # -- passwords ---------------------------------------------------------

    def hash_password(self, password: str) -> str:
        return bcrypt.hashpw(
            password.encode("utf-8"), bcrypt.gensalt(rounds=self.settings.bcrypt_rounds)
        ).decode("utf-8")

    def verify_password(self, password: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
        except ValueError:
            return False

    # -- tokens ------------------------------------------------------------

    def create_access_token(self, admin: Admin) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            "adminId": admin.id,
            "username": admin.username,
            "iat": now,
            "exp": now + self.token_lifetime,
            "iss": self.settings.jwt_issuer,
            "aud": self.settings.jwt_audience,
        }
        return jwt.encode(payload, self.secret_key, algorithm=ALGORITHM)

    def decode_token(self, token: str) -> dict[str, Any]:
        try:
            payload = jwt.decode(
                token,
                self.secret_key,
                algorithms=[ALGORITHM],
                audience=self.settings.jwt_audience,
                issuer=self.settings.jwt_issuer,
            )
        except jwt.ExpiredSignatureError as e:
            raise AuthError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise AuthError("Invalid token") from e

        if not payload.get("adminId") or not payload.get("username"):
            raise AuthError("Invalid token")
        return payload

    # -- credential gate ---------------------------------------------------

    def login(self, db: Session, username: str, password: str) -> LoginData:
        admin = db.scalar(select(Admin).where(Admin.username == username.lower()))
        if admin is None or not self.verify_password(password, admin.password_hash):
            logger.info("Failed login for username=%s", username)
            raise AuthError(INVALID_CREDENTIALS, error="Authentication Failed")
        if not admin.is_active:
            raise AuthError(
                "Your account has been disabled. Please contact support.",
                error="Account Disabled",
            )

        token = self.create_access_token(admin)
        admin.last_login = datetime.now(timezone.utc)
        db.commit()
        db.refresh(admin)
        logger.info("Admin %s logged in", admin.username)

        return LoginData(
            access_token=token,
            expires_in=int(self.token_lifetime.total_seconds()),
            admin=to_admin_info(admin),
        )

    def verify(self, db: Session, token: str) -> Admin:
        """Resolve a bearer token to an active admin."""
        payload = self.decode_token(token)
        admin = db.get(Admin, payload["adminId"])
        if admin is None:
            raise AuthError("Admin not found")
        if not admin.is_active:
            raise AuthError("Account disabled", error="Account Disabled")
        return admin

    # -- bootstrap ---------------------------------------------------------

    def ensure_admin(self, db: Session, username: str, password: str) -> Admin:
        """Create the admin account if it does not exist yet."""
        username = username.strip().lower()
        if not USERNAME_PATTERN.match(username):
            raise ValidationError(
                "Username must be 3-50 characters of letters, numbers and underscores"
            )
        if len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
            )

        admin = db.scalar(select(Admin).where(Admin.username == username))
        if admin is not None:
            return admin

        admin = Admin(username=username, password_hash=self.hash_password(password))
        db.add(admin)
        db.commit()
        db.refresh(admin)
        logger.info("Created admin account %s", username)
        return admin


def extract_bearer_token(header: str | None) -> str | None:
    if not header or not header.startswith("Bearer "):
        return None
    token = header[len("Bearer "):].strip()
    return token or None
