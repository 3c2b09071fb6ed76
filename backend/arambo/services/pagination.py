from __future__ import annotations

import math
from typing import NamedTuple

from arambo.schemas.common import PaginationMeta

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100


class Pagination(NamedTuple):
    skip: int
    take: int
    meta: PaginationMeta


def clamp_page(page: int | None, limit: int | None) -> tuple[int, int]:
    """Default page to 1 when unset or below 1, clamp limit to [1, MAX_LIMIT]."""
    if page is None or page < 1:
        page = DEFAULT_PAGE
    if limit is None:
        limit = DEFAULT_LIMIT
    limit = max(1, min(limit, MAX_LIMIT))
    return page, limit


def page_window(page: int | None, limit: int | None) -> tuple[int, int]:
    """Return ``(skip, take)``. Independent of the total, so it can run before the count."""
    page, limit = clamp_page(page, limit)
    return (page - 1) * limit, limit


def paginate(page: int | None, limit: int | None, total_items: int) -> Pagination:
    page, limit = clamp_page(page, limit)
    skip, take = page_window(page, limit)

    total_pages = math.ceil(total_items / limit) if total_items > 0 else 0
    has_next = page < total_pages
    has_prev = page > 1

    meta = PaginationMeta(
        current_page=page,
        limit=limit,
        total_items=total_items,
        total_pages=total_pages,
        has_next_page=has_next,
        has_prev_page=has_prev,
        next_page=page + 1 if has_next else None,
        prev_page=page - 1 if has_prev else None,
    )
    return Pagination(skip, take, meta)
