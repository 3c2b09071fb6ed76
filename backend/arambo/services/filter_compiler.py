"""Translate validated listing filters into a storage predicate.

Filters are declared in ``PROPERTY_FILTERS``, a table from request attribute
to (kind, target column). The compiler walks the table; adding a filter is a
new row, not a new branch.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from arambo.schemas.property import PropertyFilterParams


class FilterKind(StrEnum):
    EXACT = "exact"
    MIN = "min"
    MAX = "max"
    COUNT = "count"  # exact-or-minimum, e.g. "3" or "3+"
    SUBSTRING = "substring"
    BOOLEAN = "boolean"


class Operator(StrEnum):
    EQ = "eq"
    GTE = "gte"
    LTE = "lte"
    CONTAINS = "contains"  # case-insensitive, unanchored


@dataclass(frozen=True)
class Clause:
    field: str
    op: Operator
    value: Any


@dataclass(frozen=True)
class Predicate:
    """Conjunction of clauses, interpreted by the query executor."""

    clauses: tuple[Clause, ...] = ()

    def for_field(self, field: str) -> list[Clause]:
        return [c for c in self.clauses if c.field == field]


@dataclass(frozen=True)
class FilterField:
    kind: FilterKind
    target: str


PROPERTY_FILTERS: dict[str, FilterField] = {
    # enums
    "category": FilterField(FilterKind.EXACT, "category"),
    "listing_type": FilterField(FilterKind.EXACT, "listing_type"),
    "property_type": FilterField(FilterKind.EXACT, "property_type"),
    "inventory_status": FilterField(FilterKind.EXACT, "inventory_status"),
    "tenant_type": FilterField(FilterKind.EXACT, "tenant_type"),
    "property_category": FilterField(FilterKind.EXACT, "property_category"),
    "furnishing_status": FilterField(FilterKind.EXACT, "furnishing_status"),
    "floor": FilterField(FilterKind.EXACT, "floor"),
    # ranges
    "min_size": FilterField(FilterKind.MIN, "size"),
    "max_size": FilterField(FilterKind.MAX, "size"),
    "min_rent": FilterField(FilterKind.MIN, "rent"),
    "max_rent": FilterField(FilterKind.MAX, "rent"),
    # exact-or-minimum
    "bedrooms": FilterField(FilterKind.COUNT, "bedrooms"),
    "bathroom": FilterField(FilterKind.COUNT, "bathroom"),
    # text
    "location": FilterField(FilterKind.SUBSTRING, "location"),
    "area": FilterField(FilterKind.SUBSTRING, "area"),
    "house_id": FilterField(FilterKind.SUBSTRING, "house_id"),
    "listing_id": FilterField(FilterKind.SUBSTRING, "listing_id"),
    "apartment_type": FilterField(FilterKind.SUBSTRING, "apartment_type"),
    # flags
    "first_owner": FilterField(FilterKind.BOOLEAN, "first_owner"),
    "on_loan": FilterField(FilterKind.BOOLEAN, "on_loan"),
    "is_verified": FilterField(FilterKind.BOOLEAN, "is_verified"),
    "cctv": FilterField(FilterKind.BOOLEAN, "cctv"),
    "community_hall": FilterField(FilterKind.BOOLEAN, "community_hall"),
    "gym": FilterField(FilterKind.BOOLEAN, "gym"),
    "masjid": FilterField(FilterKind.BOOLEAN, "masjid"),
    "parking": FilterField(FilterKind.BOOLEAN, "parking"),
    "pets_allowed": FilterField(FilterKind.BOOLEAN, "pets_allowed"),
    "swimming_pool": FilterField(FilterKind.BOOLEAN, "swimming_pool"),
    "trained_guard": FilterField(FilterKind.BOOLEAN, "trained_guard"),
}

CONFIRMATION_FIELD = "is_confirmed"


def _clause_for(entry: FilterField, value: Any) -> Clause:
    if entry.kind == FilterKind.MIN:
        return Clause(entry.target, Operator.GTE, value)
    if entry.kind == FilterKind.MAX:
        return Clause(entry.target, Operator.LTE, value)
    if entry.kind == FilterKind.COUNT:
        op = Operator.GTE if value.type == "min" else Operator.EQ
        return Clause(entry.target, op, value.value)
    if entry.kind == FilterKind.SUBSTRING:
        return Clause(entry.target, Operator.CONTAINS, value)
    return Clause(entry.target, Operator.EQ, value)


def compile_filters(
    filters: PropertyFilterParams,
    table: dict[str, FilterField] = PROPERTY_FILTERS,
) -> Predicate:
    """Build the predicate for a listing query.

    Unconfirmed listings are hidden unless the request asks for a specific
    ``is_confirmed`` value. Absent filters add nothing.
    """
    confirmed = filters.is_confirmed if filters.is_confirmed is not None else True
    clauses = [Clause(CONFIRMATION_FIELD, Operator.EQ, confirmed)]

    for name, entry in table.items():
        value = getattr(filters, name, None)
        if value is None:
            continue
        clauses.append(_clause_for(entry, value))

    return Predicate(tuple(clauses))
