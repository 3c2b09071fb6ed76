"""Run a compiled predicate against the database: one count, one page."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any, TypeVar

from sqlalchemy import ColumnElement, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from arambo.database import Base
from arambo.services.filter_compiler import Operator, Predicate
from arambo.utils.exceptions import StorageError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


_OPERATORS: dict[Operator, Callable[[Any, Any], ColumnElement[bool]]] = {
    Operator.EQ: lambda col, v: col == v,
    Operator.GTE: lambda col, v: col >= v,
    Operator.LTE: lambda col, v: col <= v,
    Operator.CONTAINS: lambda col, v: col.ilike(f"%{_escape_like(v)}%", escape="\\"),
}


def to_conditions(model: type[ModelT], predicate: Predicate) -> list[ColumnElement[bool]]:
    conditions = []
    for clause in predicate.clauses:
        column = getattr(model, clause.field)
        conditions.append(_OPERATORS[clause.op](column, clause.value))
    return conditions


def execute(
    db: Session,
    model: type[ModelT],
    predicate: Predicate,
    skip: int,
    take: int,
    order_by: Sequence[Any] | None = None,
) -> tuple[list[ModelT], int]:
    """Count every match, then fetch one page of matches.

    Default order is newest first, with the identifier as tie-break so that
    repeated queries page identically. Any database failure aborts the whole
    call; a count without its page is never returned.
    """
    conditions = to_conditions(model, predicate)
    if order_by is None:
        order_by = (model.created_at.desc(), model.id.desc())

    try:
        total = db.scalar(select(func.count()).select_from(model).where(*conditions))
        documents = db.scalars(
            select(model).where(*conditions).order_by(*order_by).offset(skip).limit(take)
        ).all()
    except SQLAlchemyError as e:
        logger.exception("Query on %s failed", model.__tablename__)
        raise StorageError("query failed") from e

    return list(documents), total or 0
