"""Property listings: create, query, fetch, update and stats."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from arambo.models.property import Property
from arambo.schemas.property import (
    PropertyCreate,
    PropertyFilterParams,
    PropertyListResponse,
    PropertyResponse,
    PropertyStatsResponse,
    PropertyUpdate,
)
from arambo.services.filter_compiler import compile_filters
from arambo.services.pagination import page_window, paginate
from arambo.services.query_executor import execute
from arambo.services.response_mapper import to_response
from arambo.utils.exceptions import NotFoundError, StorageError

logger = logging.getLogger(__name__)


def _to_property_response(prop: Property) -> PropertyResponse:
    return PropertyResponse.model_validate(to_response(prop))


def create_listing(db: Session, data: PropertyCreate) -> PropertyResponse:
    prop = Property(**data.model_dump(exclude_none=True))
    try:
        db.add(prop)
        db.commit()
        db.refresh(prop)
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Failed to create property listing")
        raise StorageError("Failed to create property listing") from e

    logger.info("Created property %s (%s)", prop.id, prop.property_name)
    return _to_property_response(prop)


def query_listings(db: Session, filters: PropertyFilterParams) -> PropertyListResponse:
    predicate = compile_filters(filters)
    skip, take = page_window(filters.page, filters.limit)
    documents, total = execute(db, Property, predicate, skip, take)
    pagination = paginate(filters.page, filters.limit, total)

    logger.debug(
        "Property query: %d clauses, %d/%d returned",
        len(predicate.clauses),
        len(documents),
        total,
    )
    return PropertyListResponse(
        properties=[_to_property_response(d) for d in documents],
        total=total,
        pagination=pagination.meta,
    )


def _get_property(db: Session, property_id: str) -> Property:
    try:
        prop = db.get(Property, property_id)
    except SQLAlchemyError as e:
        logger.exception("Failed to fetch property %s", property_id)
        raise StorageError("Failed to fetch property") from e
    if prop is None:
        raise NotFoundError("Property not found")
    return prop


def get_listing(db: Session, property_id: str) -> PropertyResponse:
    return _to_property_response(_get_property(db, property_id))


def update_listing(db: Session, property_id: str, data: PropertyUpdate) -> PropertyResponse:
    """Apply a partial update. Fields the caller did not send stay untouched."""
    prop = _get_property(db, property_id)
    changes: dict[str, Any] = data.model_dump(exclude_unset=True)

    for key, value in changes.items():
        setattr(prop, key, value)
    prop.revision = (prop.revision or 0) + 1

    try:
        db.commit()
        db.refresh(prop)
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Failed to update property %s", property_id)
        raise StorageError("Failed to update property listing") from e

    logger.info("Updated property %s (%s)", property_id, ", ".join(sorted(changes)) or "no fields")
    return _to_property_response(prop)


def get_stats(db: Session) -> PropertyStatsResponse:
    try:
        total = db.scalar(select(func.count()).select_from(Property)) or 0
        by_category = db.execute(
            select(Property.category, func.count()).group_by(Property.category)
        ).all()
        by_type = db.execute(
            select(Property.property_type, func.count()).group_by(Property.property_type)
        ).all()
        on_loan = (
            db.scalar(
                select(func.count()).select_from(Property).where(Property.on_loan.is_(True))
            )
            or 0
        )
    except SQLAlchemyError as e:
        logger.exception("Failed to compute property statistics")
        raise StorageError("Failed to fetch property statistics") from e

    return PropertyStatsResponse(
        total=total,
        by_category={str(k): v for k, v in by_category if k is not None},
        by_property_type={str(k): v for k, v in by_type if k is not None},
        available=total - on_loan,
        on_loan=on_loan,
    )
