from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Request
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.orm import Session

from arambo.database import get_db
from arambo.schemas.property import (
    PropertyCreate,
    PropertyFilterParams,
    PropertyListResponse,
    PropertyResponse,
    PropertyStatsResponse,
    PropertyUpdate,
)
from arambo.services import property_service
from arambo.utils.exceptions import ValidationError

router = APIRouter(prefix="/properties")


@router.get("/health")
def health_check(request: Request) -> dict:
    settings = request.app.state.settings
    return {
        "status": "OK",
        "message": f"{settings.app_name} is running",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": settings.app_version,
    }


@router.get("/stats", response_model=PropertyStatsResponse)
def get_property_stats(db: Session = Depends(get_db)) -> PropertyStatsResponse:
    return property_service.get_stats(db)


@router.get("", response_model=PropertyListResponse, response_model_exclude_none=True)
def list_properties(request: Request, db: Session = Depends(get_db)) -> PropertyListResponse:
    """List confirmed properties, or unconfirmed ones with ``isConfirmed=false``.

    Query parameters are validated here rather than declared individually so
    that every filter is parsed by one schema and rejected with field detail.
    """
    try:
        filters = PropertyFilterParams.model_validate(dict(request.query_params))
    except PydanticValidationError as e:
        raise ValidationError.from_pydantic(e, "Invalid query parameters") from e
    return property_service.query_listings(db, filters)


@router.post(
    "",
    response_model=PropertyResponse,
    response_model_exclude_none=True,
    status_code=201,
)
def create_property(body: PropertyCreate, db: Session = Depends(get_db)) -> PropertyResponse:
    return property_service.create_listing(db, body)


@router.get("/{property_id}", response_model=PropertyResponse, response_model_exclude_none=True)
def get_property(property_id: str, db: Session = Depends(get_db)) -> PropertyResponse:
    return property_service.get_listing(db, property_id)


@router.put("/{property_id}", response_model=PropertyResponse, response_model_exclude_none=True)
def update_property(
    property_id: str,
    body: PropertyUpdate,
    db: Session = Depends(get_db),
) -> PropertyResponse:
    return property_service.update_listing(db, property_id, body)
