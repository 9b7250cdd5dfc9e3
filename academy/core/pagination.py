"""
Core pagination helpers.

This module provides:
- `extract_pagination_params` to read page/limit/sort values from raw
  query parameters with defaults and clamping.
- `paginate_items` to map and wrap results in a `PaginatedResponse` schema.
"""

from __future__ import annotations

from typing import Any, Callable, List, Mapping, Optional, Sequence, TypeVar

from academy.config.settings import settings
from academy.core.constants import (
    DEFAULT_PAGE,
    DEFAULT_SORT_BY,
    DEFAULT_SORT_ORDER,
    MAX_PAGE_SIZE,
    SORT_ORDERS,
)
from academy.schemas.common.pagination import PaginatedResponse, PaginationParams

TModel = TypeVar("TModel")
TSchema = TypeVar("TSchema")


def _to_int(value: Any, default: int) -> int:
    if value is None or value == "":
        return default
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return default


def normalize_pagination(
    page: Optional[int],
    limit: Optional[int],
    sort_by: Optional[str] = None,
    sort_order: Optional[str] = None,
) -> PaginationParams:
    """
    Clean up raw pagination inputs into a PaginationParams object.

    Rules:
        - page < 1 or None -> 1
        - limit < 1 -> 1, limit > MAX_PAGE_SIZE -> MAX_PAGE_SIZE
        - limit None -> configured default page size
        - sort_order not in {asc, desc} -> desc
    """
    max_size = min(settings.MAX_PAGE_SIZE, MAX_PAGE_SIZE)

    if page is None or page < 1:
        page = DEFAULT_PAGE

    if limit is None:
        limit = settings.DEFAULT_PAGE_SIZE
    limit = min(max_size, max(1, limit))

    order = (sort_order or "").lower()
    if order not in SORT_ORDERS:
        order = DEFAULT_SORT_ORDER

    return PaginationParams(
        page=page,
        limit=limit,
        sort_by=sort_by or DEFAULT_SORT_BY,
        sort_order=order,
    )


def extract_pagination_params(query: Mapping[str, Any]) -> PaginationParams:
    """
    Extract and validate pagination from query parameters.

    Accepts any mapping with ``get`` (a dict, Starlette ``QueryParams``).
    Unparseable numbers fall back to the defaults.
    """
    page = _to_int(query.get("page"), DEFAULT_PAGE)
    limit = _to_int(query.get("limit"), settings.DEFAULT_PAGE_SIZE)
    return normalize_pagination(
        page=page,
        limit=limit,
        sort_by=query.get("sortBy") or query.get("sort_by"),
        sort_order=query.get("sortOrder") or query.get("sort_order"),
    )


def paginate_items(
    *,
    items: Sequence[TModel],
    total: int,
    params: PaginationParams,
    mapper: Optional[Callable[[TModel], TSchema]] = None,
) -> PaginatedResponse:
    """
    Map and wrap items into a PaginatedResponse.

    Args:
        items: Items of the current page.
        total: Total number of items across all pages.
        params: Pagination parameters used for the query.
        mapper: Optional conversion applied to each item.
    """
    mapped: List[Any] = [mapper(obj) for obj in items] if mapper else list(items)
    return PaginatedResponse.create(
        items=mapped,
        total=total,
        page=params.page,
        limit=params.limit,
    )
