"""Pytest configuration and fixtures for tests."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from datetime import datetime
from typing import Any

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from arambo.config import Settings
from arambo.database import Database, utcnow
from arambo.main import create_app
from arambo.models.property import Property

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "secret123"


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        environment="test",
        database_url="sqlite://",
        jwt_secret="test-secret",
        bcrypt_rounds=4,
        skip_auth=False,
        admin_username=ADMIN_USERNAME,
        admin_password=ADMIN_PASSWORD,
    )


@pytest.fixture
def database() -> Iterator[Database]:
    """An in-memory SQLite database, one per test."""
    database = Database("sqlite://")
    database.open()
    database.create_tables()
    yield database
    database.close()


@pytest.fixture
def db(database: Database) -> Iterator[Session]:
    """Provide a fresh database session for each test."""
    session = database.session()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def app(settings: Settings, database: Database) -> FastAPI:
    return create_app(settings, database)


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    # Entering the client runs the lifespan, which creates the admin account
    with TestClient(app) as client:
        yield client


@pytest.fixture
def auth_headers(client: TestClient) -> dict[str, str]:
    resp = client.post(
        "/auth/login", json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD}
    )
    assert resp.status_code == 200
    return {"Authorization": f"Bearer {resp.json()['data']['accessToken']}"}


@pytest.fixture
def property_payload() -> Callable[..., dict[str, Any]]:
    """Build a valid create-listing body; keyword overrides use wire names."""

    def _make(**overrides: Any) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "name": "Rahim Uddin",
            "email": "rahim@example.com",
            "phone": "01711000000",
            "propertyName": "Lake View Residence",
            "size": 1200,
            "location": "Dhanmondi 27, Dhaka",
            "bedrooms": 3,
            "bathroom": 2,
            "category": "Furnished",
            "isConfirmed": True,
        }
        payload.update(overrides)
        return payload

    return _make


@pytest.fixture
def make_listing(db: Session) -> Callable[..., Property]:
    """Insert a listing row directly, bypassing the API."""

    def _make(created_at: datetime | None = None, **overrides: Any) -> Property:
        fields: dict[str, Any] = dict(
            name="Rahim Uddin",
            email="rahim@example.com",
            phone="01711000000",
            property_name="Lake View Residence",
            size=1200.0,
            location="Dhanmondi 27, Dhaka",
            bedrooms=3,
            bathroom=2,
            category="Furnished",
            is_confirmed=True,
        )
        fields.update(overrides)
        prop = Property(created_at=created_at or utcnow(), **fields)
        db.add(prop)
        db.commit()
        db.refresh(prop)
        return prop

    return _make
