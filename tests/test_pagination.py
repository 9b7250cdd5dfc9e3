from __future__ import annotations

import pytest
from pydantic import ValidationError

from academy.config.settings import settings
from academy.core.pagination import extract_pagination_params, paginate_items
from academy.schemas.common.pagination import PaginatedResponse, PaginationParams


def test_defaults() -> None:
    params = extract_pagination_params({})

    assert params.page == 1
    assert params.limit == 10
    assert params.sort_by == "created_at"
    assert params.sort_order == "desc"
    assert params.offset == 0


def test_default_limit_follows_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(settings, "DEFAULT_PAGE_SIZE", 25)

    assert PaginationParams().limit == 25
    assert extract_pagination_params({}).limit == 25


@pytest.mark.parametrize(
    "query, page, limit",
    [
        ({"page": "3", "limit": "20"}, 3, 20),
        ({"page": "0"}, 1, 10),
        ({"page": "-4"}, 1, 10),
        ({"limit": "0"}, 1, 1),
        ({"limit": "500"}, 1, 100),
        ({"page": "abc", "limit": "xyz"}, 1, 10),
    ],
)
def test_page_and_limit_are_clamped(query: dict, page: int, limit: int) -> None:
    params = extract_pagination_params(query)

    assert params.page == page
    assert params.limit == limit


def test_camel_case_sort_keys() -> None:
    params = extract_pagination_params({"sortBy": "fullName", "sortOrder": "asc"})

    assert params.sort_by == "full_name"
    assert params.sort_order == "asc"


def test_unknown_sort_order_falls_back_to_desc() -> None:
    assert extract_pagination_params({"sortOrder": "sideways"}).sort_order == "desc"


def test_offset_is_derived_from_page_and_limit() -> None:
    assert PaginationParams(page=3, limit=25).offset == 50


def test_params_reject_out_of_range_values() -> None:
    with pytest.raises(ValidationError):
        PaginationParams(page=0)
    with pytest.raises(ValidationError):
        PaginationParams(limit=101)


def test_paginated_response_metadata() -> None:
    response = PaginatedResponse.create(items=[1, 2, 3], total=23, page=2, limit=10)

    assert response.data == [1, 2, 3]
    assert response.pagination.total_pages == 3
    assert response.pagination.has_next_page is True
    assert response.pagination.has_previous_page is True


def test_last_page_has_no_next_page() -> None:
    meta = PaginatedResponse.create(items=[], total=20, page=2, limit=10).pagination

    assert meta.total_pages == 2
    assert meta.has_next_page is False


def test_empty_result_has_zero_pages() -> None:
    meta = PaginatedResponse.create(items=[], total=0, page=1, limit=10).pagination

    assert meta.total_pages == 0
    assert meta.has_next_page is False
    assert meta.has_previous_page is False


def test_paginate_items_applies_mapper() -> None:
    params = PaginationParams(page=1, limit=2)

    response = paginate_items(items=["a", "b"], total=5, params=params, mapper=str.upper)

    assert response.data == ["A", "B"]
    assert response.pagination.total_pages == 3
