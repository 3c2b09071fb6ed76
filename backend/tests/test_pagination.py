"""Unit tests for the pagination calculator."""

from __future__ import annotations

import math

import pytest

from arambo.services.pagination import (
    DEFAULT_LIMIT,
    MAX_LIMIT,
    clamp_page,
    page_window,
    paginate,
)


@pytest.mark.parametrize(
    "page, limit, expected",
    [
        (None, None, (1, DEFAULT_LIMIT)),
        (0, 10, (1, 10)),
        (-3, 10, (1, 10)),
        (2, 0, (2, 1)),
        (2, 500, (2, MAX_LIMIT)),
    ],
)
def test_clamp_page(page, limit, expected) -> None:
    assert clamp_page(page, limit) == expected


def test_page_window_skips_previous_pages() -> None:
    assert page_window(1, 10) == (0, 10)
    assert page_window(3, 25) == (50, 25)


def test_first_of_several_pages() -> None:
    result = paginate(1, 10, 25)
    assert (result.skip, result.take) == (0, 10)
    assert result.meta.total_pages == 3
    assert result.meta.has_next_page is True
    assert result.meta.has_prev_page is False
    assert result.meta.next_page == 2
    assert result.meta.prev_page is None


def test_last_page() -> None:
    meta = paginate(2, 10, 15).meta
    assert meta.total_pages == 2
    assert meta.has_next_page is False
    assert meta.has_prev_page is True
    assert meta.next_page is None
    assert meta.prev_page == 1


def test_no_items() -> None:
    meta = paginate(1, 10, 0).meta
    assert meta.total_pages == 0
    assert meta.has_next_page is False
    assert meta.has_prev_page is False


def test_page_past_the_end_is_not_an_error() -> None:
    result = paginate(9, 10, 15)
    assert result.skip == 80
    assert result.meta.current_page == 9
    assert result.meta.has_next_page is False
    assert result.meta.prev_page == 8


@pytest.mark.parametrize("total", [1, 9, 10, 11, 99, 100, 101])
@pytest.mark.parametrize("limit", [1, 7, 10, 100])
def test_total_pages_is_ceiling(total: int, limit: int) -> None:
    meta = paginate(1, limit, total).meta
    assert meta.total_pages == math.ceil(total / limit)
    assert meta.has_next_page == (1 < meta.total_pages)
