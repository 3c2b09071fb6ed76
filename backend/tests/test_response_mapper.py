"""Tests for the stored-row to external-shape mapping."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from sqlalchemy.orm import Session

from arambo.models.admin import Admin
from arambo.services.response_mapper import serialize_datetime, to_response


def test_identifier_is_exposed_as_id(db: Session, make_listing) -> None:
    prop = make_listing()
    data = to_response(prop)
    assert data["id"] == prop.id


def test_internal_fields_are_dropped(db: Session, make_listing) -> None:
    prop = make_listing()
    assert "revision" not in to_response(prop)

    admin = Admin(username="ops", password_hash="x")
    db.add(admin)
    db.commit()
    assert "password_hash" not in to_response(admin)


def test_null_fields_are_omitted(db: Session, make_listing) -> None:
    data = to_response(make_listing(area=None, rent=None))
    assert "area" not in data
    assert "rent" not in data
    assert data["bedrooms"] == 3


def test_falsy_values_are_kept(db: Session, make_listing) -> None:
    data = to_response(make_listing(floor=0, gym=False))
    assert data["floor"] == 0
    assert data["gym"] is False


def test_dates_are_serialized(db: Session, make_listing) -> None:
    available = datetime(2025, 3, 1, 9, 30, tzinfo=timezone.utc)
    data = to_response(make_listing(available_from=available))
    assert data["available_from"] == "2025-03-01T09:30:00Z"
    assert data["created_at"].endswith("Z")
    assert data["updated_at"].endswith("Z")


def test_serialize_datetime_normalizes_to_utc() -> None:
    dhaka = timezone(timedelta(hours=6))
    assert serialize_datetime(datetime(2025, 1, 1, 6, 0, tzinfo=dhaka)) == "2025-01-01T00:00:00Z"
    assert serialize_datetime(datetime(2025, 1, 1, 0, 0)) == "2025-01-01T00:00:00Z"
