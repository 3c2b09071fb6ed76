from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from arambo.database import get_db
from arambo.models.trip import TimeSlot
from arambo.schemas.common import SuccessResponse
from arambo.schemas.trip import TripCreate, TripResponse, TripUpdate
from arambo.services import trip_service

router = APIRouter(prefix="/trips")


@router.post("", response_model=TripResponse, response_model_exclude_none=True, status_code=201)
def create_trip(body: TripCreate, db: Session = Depends(get_db)) -> TripResponse:
    return trip_service.to_trip_response(trip_service.create_trip(db, body))


@router.get("", response_model=list[TripResponse], response_model_exclude_none=True)
def list_trips(db: Session = Depends(get_db)) -> list[TripResponse]:
    return [trip_service.to_trip_response(t) for t in trip_service.list_trips(db)]


@router.get("/date", response_model=list[TripResponse], response_model_exclude_none=True)
def list_trips_by_date(
    day: date = Query(alias="date"), db: Session = Depends(get_db)
) -> list[TripResponse]:
    """Trips booked for a calendar day, e.g. ``/trips/date?date=2025-12-25``."""
    trips = trip_service.list_trips_by_date(db, day)
    return [trip_service.to_trip_response(t) for t in trips]


@router.get(
    "/truck/{truck_id}", response_model=list[TripResponse], response_model_exclude_none=True
)
def list_trips_by_truck(truck_id: str, db: Session = Depends(get_db)) -> list[TripResponse]:
    trips = trip_service.list_trips_by_truck(db, truck_id)
    return [trip_service.to_trip_response(t) for t in trips]


@router.get(
    "/timeslot/{time_slot}",
    response_model=list[TripResponse],
    response_model_exclude_none=True,
)
def list_trips_by_time_slot(
    time_slot: TimeSlot, db: Session = Depends(get_db)
) -> list[TripResponse]:
    trips = trip_service.list_trips_by_time_slot(db, time_slot)
    return [trip_service.to_trip_response(t) for t in trips]


@router.get("/{trip_id}", response_model=TripResponse, response_model_exclude_none=True)
def get_trip(trip_id: str, db: Session = Depends(get_db)) -> TripResponse:
    return trip_service.to_trip_response(trip_service.get_trip(db, trip_id))


@router.put("/{trip_id}", response_model=TripResponse, response_model_exclude_none=True)
def update_trip(trip_id: str, body: TripUpdate, db: Session = Depends(get_db)) -> TripResponse:
    return trip_service.to_trip_response(trip_service.update_trip(db, trip_id, body))


@router.delete("/{trip_id}", response_model=SuccessResponse, response_model_exclude_none=True)
def delete_trip(trip_id: str, db: Session = Depends(get_db)) -> SuccessResponse:
    trip_service.delete_trip(db, trip_id)
    return SuccessResponse()
