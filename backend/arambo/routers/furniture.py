from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Request
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.orm import Session

from arambo.database import get_db
from arambo.schemas.common import SuccessResponse
from arambo.schemas.furniture import (
    FurnitureCreate,
    FurnitureListParams,
    FurnitureListResponse,
    FurnitureResponse,
    FurnitureStatsResponse,
    FurnitureUpdate,
)
from arambo.services import furniture_service
from arambo.utils.exceptions import ValidationError

router = APIRouter(prefix="/furniture")


@router.get("/health")
def health_check() -> dict:
    return {
        "status": "OK",
        "message": "Furniture service is running",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@router.get("/stats", response_model=FurnitureStatsResponse)
def get_furniture_stats(db: Session = Depends(get_db)) -> FurnitureStatsResponse:
    return furniture_service.get_stats(db)


@router.post(
    "", response_model=FurnitureResponse, response_model_exclude_none=True, status_code=201
)
def create_furniture(body: FurnitureCreate, db: Session = Depends(get_db)) -> FurnitureResponse:
    item = furniture_service.create_furniture(db, body)
    return furniture_service.to_furniture_response(item)


@router.get("", response_model=FurnitureListResponse, response_model_exclude_none=True)
def list_furniture(request: Request, db: Session = Depends(get_db)) -> FurnitureListResponse:
    try:
        params = FurnitureListParams.model_validate(dict(request.query_params))
    except PydanticValidationError as e:
        raise ValidationError.from_pydantic(e, "Invalid query parameters") from e
    return furniture_service.query_furniture(db, params)


@router.get(
    "/{furniture_id}", response_model=FurnitureResponse, response_model_exclude_none=True
)
def get_furniture(furniture_id: str, db: Session = Depends(get_db)) -> FurnitureResponse:
    item = furniture_service.get_furniture(db, furniture_id)
    return furniture_service.to_furniture_response(item)


@router.put(
    "/{furniture_id}", response_model=FurnitureResponse, response_model_exclude_none=True
)
def update_furniture(
    furniture_id: str, body: FurnitureUpdate, db: Session = Depends(get_db)
) -> FurnitureResponse:
    item = furniture_service.update_furniture(db, furniture_id, body)
    return furniture_service.to_furniture_response(item)


@router.delete("/{furniture_id}", response_model=SuccessResponse)
def delete_furniture(furniture_id: str, db: Session = Depends(get_db)) -> SuccessResponse:
    furniture_service.delete_furniture(db, furniture_id)
    return SuccessResponse(message="Furniture item deleted successfully")
