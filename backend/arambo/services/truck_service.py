from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from arambo.models.truck import Truck
from arambo.schemas.truck import TruckCreate, TruckResponse, TruckUpdate
from arambo.services.response_mapper import to_response
from arambo.utils.exceptions import NotFoundError, StorageError

logger = logging.getLogger(__name__)


def to_truck_response(truck: Truck) -> TruckResponse:
    return TruckResponse.model_validate(to_response(truck))


def get_truck(db: Session, truck_id: str) -> Truck:
    try:
        truck = db.get(Truck, truck_id)
    except SQLAlchemyError as e:
        logger.exception("Failed to fetch truck %s", truck_id)
        raise StorageError("Failed to fetch truck") from e
    if truck is None:
        raise NotFoundError("Truck not found")
    return truck


def create_truck(db: Session, data: TruckCreate) -> Truck:
    truck = Truck(**data.model_dump())
    try:
        db.add(truck)
        db.commit()
        db.refresh(truck)
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Failed to create truck")
        raise StorageError("Failed to create truck") from e
    logger.info("Created truck %s (%s)", truck.id, truck.model_number)
    return truck


def list_trucks(db: Session) -> list[Truck]:
    try:
        return list(db.scalars(select(Truck).order_by(Truck.created_at.desc())).all())
    except SQLAlchemyError as e:
        logger.exception("Failed to list trucks")
        raise StorageError("Failed to fetch trucks") from e


def update_truck(db: Session, truck_id: str, data: TruckUpdate) -> Truck:
    truck = get_truck(db, truck_id)
    for key, value in data.model_dump(exclude_unset=True).items():
        setattr(truck, key, value)
    truck.revision = (truck.revision or 0) + 1
    try:
        db.commit()
        db.refresh(truck)
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Failed to update truck %s", truck_id)
        raise StorageError("Failed to update truck") from e
    return truck


def delete_truck(db: Session, truck_id: str) -> None:
    truck = get_truck(db, truck_id)
    try:
        db.delete(truck)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Failed to delete truck %s", truck_id)
        raise StorageError("Failed to delete truck") from e
    logger.info("Deleted truck %s", truck_id)
