"""API tests for admin login, token verification and the route policy gate."""

from __future__ import annotations

from unittest import mock

import jwt
from fastapi.testclient import TestClient
from sqlalchemy import select
from sqlalchemy.orm import Session

from arambo.config import Settings
from arambo.database import Database
from arambo.main import create_app
from arambo.models.admin import Admin
from arambo.security import ROUTE_POLICIES, Credential, policy_for
from arambo.services.auth_service import AuthService, extract_bearer_token

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "secret123"


def _login(client: TestClient, username: str = ADMIN_USERNAME, password: str = ADMIN_PASSWORD):
    return client.post("/auth/login", json={"username": username, "password": password})


# ── Login ──────────────────────────────────────────────────────────────────


def test_login_returns_token(client: TestClient) -> None:
    resp = _login(client)
    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["tokenType"] == "bearer"
    assert data["expiresIn"] == 24 * 60 * 60
    assert data["admin"]["username"] == ADMIN_USERNAME
    assert data["admin"]["lastLogin"].endswith("Z")


def test_login_username_is_case_insensitive(client: TestClient) -> None:
    assert _login(client, username="ADMIN").status_code == 200


def test_login_with_wrong_password(client: TestClient) -> None:
    resp = _login(client, password="wrong-password")
    assert resp.status_code == 401
    body = resp.json()
    assert body["error"] == "Authentication Failed"
    assert body["message"] == "Invalid username or password"


def test_login_with_unknown_user(client: TestClient) -> None:
    assert _login(client, username="nobody").status_code == 401


def test_login_disabled_account(client: TestClient, db: Session) -> None:
    admin = db.scalar(select(Admin).where(Admin.username == ADMIN_USERNAME))
    admin.is_active = False
    db.commit()

    resp = _login(client)
    assert resp.status_code == 401
    assert resp.json()["error"] == "Account Disabled"


def test_login_validates_body(client: TestClient) -> None:
    resp = client.post("/auth/login", json={"username": ""})
    assert resp.status_code == 400


# ── Verify, status, logout ─────────────────────────────────────────────────


def test_verify_with_valid_token(client: TestClient, auth_headers) -> None:
    resp = client.get("/auth/verify", headers=auth_headers)
    assert resp.status_code == 200
    assert resp.json()["admin"]["username"] == ADMIN_USERNAME


def test_verify_without_token(client: TestClient) -> None:
    resp = client.get("/auth/verify")
    assert resp.status_code == 401
    assert resp.json()["message"].startswith("Access token is required")


def test_verify_expired_token(client: TestClient, settings: Settings, db: Session) -> None:
    admin = db.scalar(select(Admin).where(Admin.username == ADMIN_USERNAME))
    expired = AuthService(settings.model_copy(update={"jwt_expires_minutes": -5}))
    token = expired.create_access_token(admin)

    resp = client.get("/auth/verify", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 401
    assert resp.json()["message"] == "Token has expired"


def test_verify_token_signed_with_other_secret(
    client: TestClient, settings: Settings, db: Session
) -> None:
    admin = db.scalar(select(Admin).where(Admin.username == ADMIN_USERNAME))
    forged = AuthService(settings.model_copy(update={"jwt_secret": "other-secret"}))
    token = forged.create_access_token(admin)

    resp = client.get("/auth/verify", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 401
    assert resp.json()["message"] == "Invalid token"


def test_status_reports_without_rejecting(client: TestClient, auth_headers) -> None:
    assert client.get("/auth/status").json() == {"success": True, "authenticated": False}

    bad = client.get("/auth/status", headers={"Authorization": "Bearer junk"}).json()
    assert bad["authenticated"] is False

    good = client.get("/auth/status", headers=auth_headers).json()
    assert good["authenticated"] is True
    assert good["admin"]["username"] == ADMIN_USERNAME


def test_logout(client: TestClient, auth_headers) -> None:
    assert client.post("/auth/logout").status_code == 401
    resp = client.post("/auth/logout", headers=auth_headers)
    assert resp.status_code == 200
    assert resp.json()["success"] is True


# ── AuthService ────────────────────────────────────────────────────────────


def test_token_claims(settings: Settings, db: Session) -> None:
    service = AuthService(settings)
    admin = service.ensure_admin(db, "Ops_User", "longpassword")
    claims = jwt.decode(
        service.create_access_token(admin),
        settings.jwt_secret,
        algorithms=["HS256"],
        audience=settings.jwt_audience,
        issuer=settings.jwt_issuer,
    )
    assert claims["adminId"] == admin.id
    assert claims["username"] == "ops_user"


def test_ensure_admin_is_idempotent(settings: Settings, db: Session) -> None:
    service = AuthService(settings)
    first = service.ensure_admin(db, "ops", "longpassword")
    second = service.ensure_admin(db, "OPS", "another-password")
    assert first.id == second.id
    assert service.verify_password("longpassword", second.password_hash)


def test_password_hash_is_not_plaintext(settings: Settings) -> None:
    service = AuthService(settings)
    hashed = service.hash_password("secret123")
    assert hashed != "secret123"
    assert service.verify_password("secret123", hashed)
    assert not service.verify_password("secret124", hashed)
    assert not service.verify_password("secret123", "not-a-bcrypt-hash")


def test_extract_bearer_token() -> None:
    assert extract_bearer_token("Bearer abc") == "abc"
    assert extract_bearer_token("Basic abc") is None
    assert extract_bearer_token("Bearer ") is None
    assert extract_bearer_token(None) is None


# ── Route policy ───────────────────────────────────────────────────────────


def test_reads_are_public() -> None:
    for method, path in ROUTE_POLICIES:
        assert method != "GET" or path.startswith("/auth")
    assert policy_for("get", "/properties") is Credential.PUBLIC
    assert policy_for("post", "/properties") is Credential.PUBLIC
    assert policy_for("put", "/properties/{property_id}") is Credential.BEARER


def test_skip_auth_admits_without_token(
    settings: Settings, database: Database, property_payload
) -> None:
    app = create_app(settings.model_copy(update={"skip_auth": True}), database)
    with TestClient(app) as client:
        created = client.post("/properties", json=property_payload()).json()
        resp = client.put(f"/properties/{created['id']}", json={"rent": 100})
        assert resp.status_code == 200
        assert client.get("/auth/verify").json()["admin"]["username"] == "dev"


def test_api_prefix_is_honored_by_policy(
    settings: Settings, database: Database, property_payload
) -> None:
    app = create_app(settings.model_copy(update={"api_prefix": "/api"}), database)
    with TestClient(app) as client:
        created = client.post("/api/properties", json=property_payload())
        assert created.status_code == 201
        resp = client.put(f"/api/properties/{created.json()['id']}", json={"rent": 1})
        assert resp.status_code == 401


def test_public_routes_do_not_open_a_session(
    client: TestClient, database: Database, auth_headers
) -> None:
    with mock.patch.object(database, "session", wraps=database.session) as session:
        for path in ("/health", "/properties/health", "/auth/health"):
            assert client.get(path).status_code == 200
        session.assert_not_called()

        assert client.get("/trucks").status_code == 200
        assert session.call_count == 1

        # Bearer routes resolve the admin in their own session
        session.reset_mock()
        assert client.get("/auth/verify", headers=auth_headers).status_code == 200
        assert session.call_count == 2
