"""Tests for write-path normalization and payload validation."""

from __future__ import annotations

import time
from datetime import date

import pytest
from pydantic import ValidationError

from arambo.schemas.furniture import FurnitureListParams
from arambo.schemas.property import MAX_OTHER_IMAGES, PropertyCreate, PropertyUpdate
from arambo.schemas.trip import TripCreate, TripUpdate
from arambo.schemas.truck import TruckUpdate
from arambo.utils.normalization import normalize_fields, normalize_phone


# ── normalize_fields ───────────────────────────────────────────────────────


def test_normalize_fields_trims_and_lowercases() -> None:
    result = normalize_fields(
        {"email": "  Rahim@Example.COM ", "phone": "+880 1711 000 000", "name": "  Rahim  "}
    )
    assert result == {"email": "rahim@example.com", "phone": "+8801711000000", "name": "Rahim"}


def test_normalize_fields_leaves_non_strings_alone() -> None:
    assert normalize_fields({"size": 10, "tags": ["a "]}) == {"size": 10, "tags": ["a "]}
    assert normalize_fields(None) is None


def test_normalize_phone_strips_all_whitespace() -> None:
    assert normalize_phone("017\t11 00\n0000") == "01711000000"


# ── Property payloads ──────────────────────────────────────────────────────


def test_create_normalizes_contact_fields(property_payload) -> None:
    body = PropertyCreate.model_validate(
        property_payload(email="RAHIM@Example.com", phone="017 1100 0000")
    )
    assert body.email == "rahim@example.com"
    assert body.phone == "01711000000"


def test_create_requires_core_fields(property_payload) -> None:
    payload = property_payload()
    del payload["location"]
    with pytest.raises(ValidationError):
        PropertyCreate.model_validate(payload)


@pytest.mark.parametrize(
    "overrides",
    [
        {"email": "not-an-email"},
        {"bedrooms": 51},
        {"size": 0},
        {"size": 100_001},
        {"category": "Luxury"},
        {"phone": "12345"},
        {"cleanHygieneScore": 11},
        {"otherImages": ["x.jpg"] * (MAX_OTHER_IMAGES + 1)},
        {"yearOfConstruction": date.today().year + 10},
    ],
)
def test_create_rejects_out_of_range_values(property_payload, overrides) -> None:
    with pytest.raises(ValidationError):
        PropertyCreate.model_validate(property_payload(**overrides))


def test_update_accepts_partial_body() -> None:
    body = PropertyUpdate.model_validate({"rent": 25000, "email": " New@Example.com"})
    assert body.model_dump(exclude_unset=True) == {"rent": 25000, "email": "new@example.com"}


def test_update_still_validates_supplied_fields() -> None:
    with pytest.raises(ValidationError):
        PropertyUpdate.model_validate({"bedrooms": -1})


@pytest.mark.parametrize(
    "model, body",
    [
        (PropertyUpdate, {"name": None}),
        (PropertyUpdate, {"isConfirmed": None}),
        (TripUpdate, {"preferredDate": None}),
        (TruckUpdate, {"isOpen": None}),
    ],
)
def test_update_rejects_null_for_non_nullable_fields(model, body) -> None:
    with pytest.raises(ValidationError, match="Field cannot be null"):
        model.model_validate(body)


def test_update_keeps_explicit_null_for_optional_fields() -> None:
    body = PropertyUpdate.model_validate({"notes": None, "rent": None})
    assert body.model_dump(exclude_unset=True) == {"notes": None, "rent": None}


def test_email_validation_does_not_backtrack() -> None:
    started = time.perf_counter()
    with pytest.raises(ValidationError):
        PropertyUpdate.model_validate({"email": "a" * 40 + "!"})
    assert time.perf_counter() - started < 1.0


# ── Sibling entities ───────────────────────────────────────────────────────


def test_trip_date_is_stored_in_utc() -> None:
    trip = TripCreate.model_validate(
        {
            "name": "Karim",
            "phone": "01811 000 000",
            "email": "Karim@Mail.com",
            "productType": "Fragile",
            "pickupLocation": "Banani",
            "dropOffLocation": "Uttara",
            "preferredDate": "2025-12-25T06:00:00+06:00",
            "preferredTimeSlot": "Morning (8AM - 12PM)",
        }
    )
    assert trip.preferred_date.utcoffset().total_seconds() == 0
    assert trip.preferred_date.hour == 0
    assert trip.email == "karim@mail.com"


def test_furniture_list_params_defaults_and_bounds() -> None:
    params = FurnitureListParams.model_validate({"page": "", "sortOrder": "asc"})
    assert (params.page, params.limit, params.sort_order) == (1, 10, "asc")
    with pytest.raises(ValidationError):
        FurnitureListParams.model_validate({"limit": "101"})
