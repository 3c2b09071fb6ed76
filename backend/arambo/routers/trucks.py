from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from arambo.database import get_db
from arambo.schemas.common import SuccessResponse
from arambo.schemas.truck import TruckCreate, TruckIdRequest, TruckResponse, TruckUpdate
from arambo.services import truck_service

router = APIRouter(prefix="/trucks")


@router.post("", response_model=TruckResponse, status_code=201)
def create_truck(body: TruckCreate, db: Session = Depends(get_db)) -> TruckResponse:
    return truck_service.to_truck_response(truck_service.create_truck(db, body))


@router.get("", response_model=list[TruckResponse])
def list_trucks(db: Session = Depends(get_db)) -> list[TruckResponse]:
    return [truck_service.to_truck_response(t) for t in truck_service.list_trucks(db)]


@router.post("/get-by-id", response_model=TruckResponse)
def get_truck_from_body(body: TruckIdRequest, db: Session = Depends(get_db)) -> TruckResponse:
    """Look a truck up by an id sent in the request body."""
    return truck_service.to_truck_response(truck_service.get_truck(db, body.id))


@router.get("/{truck_id}", response_model=TruckResponse)
def get_truck(truck_id: str, db: Session = Depends(get_db)) -> TruckResponse:
    return truck_service.to_truck_response(truck_service.get_truck(db, truck_id))


@router.put("/{truck_id}", response_model=TruckResponse)
def update_truck(
    truck_id: str, body: TruckUpdate, db: Session = Depends(get_db)
) -> TruckResponse:
    return truck_service.to_truck_response(truck_service.update_truck(db, truck_id, body))


@router.delete("/{truck_id}", response_model=SuccessResponse, response_model_exclude_none=True)
def delete_truck(truck_id: str, db: Session = Depends(get_db)) -> SuccessResponse:
    truck_service.delete_truck(db, truck_id)
    return SuccessResponse()
