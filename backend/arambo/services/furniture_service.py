from __future__ import annotations

import logging

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from arambo.models.furniture import Furniture, FurnitureType
from arambo.schemas.furniture import (
    FurnitureCreate,
    FurnitureListParams,
    FurnitureListResponse,
    FurniturePageMeta,
    FurnitureResponse,
    FurnitureStatsResponse,
    FurnitureUpdate,
)
from arambo.services.filter_compiler import Predicate
from arambo.services.pagination import paginate
from arambo.services.query_executor import execute
from arambo.services.response_mapper import to_response
from arambo.utils.exceptions import NotFoundError, StorageError

logger = logging.getLogger(__name__)

SORT_COLUMNS = {
    "createdAt": Furniture.created_at,
    "name": Furniture.name,
    "furnitureType": Furniture.furniture_type,
}


def to_furniture_response(item: Furniture) -> FurnitureResponse:
    return FurnitureResponse.model_validate(to_response(item))


def _commit(db: Session, item: Furniture, action: str) -> Furniture:
    try:
        db.commit()
        db.refresh(item)
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Failed to %s furniture item", action)
        raise StorageError(f"Failed to {action} furniture item") from e
    return item


def create_furniture(db: Session, data: FurnitureCreate) -> Furniture:
    item = Furniture(**data.model_dump(exclude_none=True))
    db.add(item)
    item = _commit(db, item, "create")
    logger.info("Created furniture item %s (%s)", item.id, item.furniture_type)
    return item


def query_furniture(db: Session, params: FurnitureListParams) -> FurnitureListResponse:
    column = SORT_COLUMNS[params.sort_by]
    order = column.asc() if params.sort_order == "asc" else column.desc()
    skip = (params.page - 1) * params.limit

    items, total = execute(
        db,
        Furniture,
        Predicate(),
        skip,
        params.limit,
        order_by=(order, Furniture.id.desc()),
    )
    meta = paginate(params.page, params.limit, total).meta

    return FurnitureListResponse(
        data=[to_furniture_response(i) for i in items],
        meta=FurniturePageMeta(
            current_page=meta.current_page,
            total_pages=meta.total_pages,
            total_items=meta.total_items,
            items_per_page=meta.limit,
            has_next_page=meta.has_next_page,
            has_previous_page=meta.has_prev_page,
        ),
    )


def get_furniture(db: Session, furniture_id: str) -> Furniture:
    try:
        item = db.get(Furniture, furniture_id)
    except SQLAlchemyError as e:
        logger.exception("Failed to fetch furniture item %s", furniture_id)
        raise StorageError("Failed to fetch furniture item") from e
    if item is None:
        raise NotFoundError("Furniture item not found")
    return item


def update_furniture(db: Session, furniture_id: str, data: FurnitureUpdate) -> Furniture:
    item = get_furniture(db, furniture_id)
    for key, value in data.model_dump(exclude_unset=True).items():
        setattr(item, key, value)
    item.revision = (item.revision or 0) + 1
    return _commit(db, item, "update")


def delete_furniture(db: Session, furniture_id: str) -> None:
    item = get_furniture(db, furniture_id)
    try:
        db.delete(item)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Failed to delete furniture item %s", furniture_id)
        raise StorageError("Failed to delete furniture item") from e
    logger.info("Deleted furniture item %s", furniture_id)


def get_stats(db: Session) -> FurnitureStatsResponse:
    try:
        rows = db.execute(
            select(Furniture.furniture_type, func.count()).group_by(Furniture.furniture_type)
        ).all()
    except SQLAlchemyError as e:
        logger.exception("Failed to compute furniture stats")
        raise StorageError("Failed to fetch furniture stats") from e
    counts = {k: v for k, v in rows}
    return FurnitureStatsResponse(
        total=sum(counts.values()),
        commercial=counts.get(FurnitureType.COMMERCIAL.value, 0),
        residential=counts.get(FurnitureType.RESIDENTIAL.value, 0),
    )
