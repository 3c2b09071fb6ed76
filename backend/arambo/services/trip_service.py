"""Trip bookings, optionally linked to a truck."""

from __future__ import annotations

import logging
from datetime import date, datetime, time, timedelta, timezone

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from arambo.models.trip import TimeSlot, Trip
from arambo.models.truck import Truck
from arambo.schemas.trip import TripCreate, TripResponse, TripUpdate
from arambo.services.response_mapper import to_response
from arambo.utils.exceptions import NotFoundError, StorageError, ValidationError

logger = logging.getLogger(__name__)


def to_trip_response(trip: Trip) -> TripResponse:
    data = to_response(trip)
    if trip.truck_details is not None:
        data["truck_details"] = to_response(trip.truck_details)
    return TripResponse.model_validate(data)


def _trips_query():
    return (
        select(Trip)
        .options(selectinload(Trip.truck_details))
        .order_by(Trip.created_at.desc())
    )


def _fetch_all(db: Session, stmt) -> list[Trip]:
    try:
        return list(db.scalars(stmt).all())
    except SQLAlchemyError as e:
        logger.exception("Failed to list trips")
        raise StorageError("Failed to fetch trips") from e


def _ensure_truck_exists(db: Session, truck_id: str | None) -> None:
    if not truck_id:
        return
    try:
        truck = db.get(Truck, truck_id)
    except SQLAlchemyError as e:
        logger.exception("Failed to fetch truck %s", truck_id)
        raise StorageError("Failed to fetch truck") from e
    if truck is None:
        raise NotFoundError(f"Truck {truck_id} not found")


def _commit(db: Session, trip: Trip, action: str) -> Trip:
    try:
        db.commit()
        db.refresh(trip)
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Failed to %s trip", action)
        raise StorageError(f"Failed to {action} trip") from e
    return trip


def create_trip(db: Session, data: TripCreate) -> Trip:
    _ensure_truck_exists(db, data.truck_id)
    trip = Trip(**data.model_dump(exclude_none=True))
    db.add(trip)
    trip = _commit(db, trip, "create")
    logger.info("Created trip %s for %s", trip.id, trip.preferred_date.date())
    return trip


def get_trip(db: Session, trip_id: str) -> Trip:
    try:
        trip = db.get(Trip, trip_id)
    except SQLAlchemyError as e:
        logger.exception("Failed to fetch trip %s", trip_id)
        raise StorageError("Failed to fetch trip") from e
    if trip is None:
        raise NotFoundError("Trip not found")
    return trip


def list_trips(db: Session) -> list[Trip]:
    return _fetch_all(db, _trips_query())


def list_trips_by_truck(db: Session, truck_id: str) -> list[Trip]:
    return _fetch_all(db, _trips_query().where(Trip.truck_id == truck_id))


def list_trips_by_date(db: Session, day: date) -> list[Trip]:
    """Trips whose preferred date falls on ``day`` (UTC calendar day)."""
    start = datetime.combine(day, time.min, tzinfo=timezone.utc)
    end = start + timedelta(days=1)
    stmt = _trips_query().where(Trip.preferred_date >= start, Trip.preferred_date < end)
    return _fetch_all(db, stmt)


def list_trips_by_time_slot(db: Session, time_slot: TimeSlot) -> list[Trip]:
    stmt = _trips_query().where(Trip.preferred_time_slot == time_slot.value)
    return _fetch_all(db, stmt)


def update_trip(db: Session, trip_id: str, data: TripUpdate) -> Trip:
    changes = data.model_dump(exclude_unset=True)
    if not changes:
        raise ValidationError("No valid fields to update")

    trip = get_trip(db, trip_id)
    _ensure_truck_exists(db, changes.get("truck_id"))
    for key, value in changes.items():
        setattr(trip, key, value)
    trip.revision = (trip.revision or 0) + 1
    return _commit(db, trip, "update")


def delete_trip(db: Session, trip_id: str) -> None:
    trip = get_trip(db, trip_id)
    try:
        db.delete(trip)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Failed to delete trip %s", trip_id)
        raise StorageError("Failed to delete trip") from e
    logger.info("Deleted trip %s", trip_id)
