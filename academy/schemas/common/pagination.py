"""
Pagination schemas for page-based listings.
"""

from __future__ import annotations

from typing import Generic, List, Literal, TypeVar

from pydantic import Field, computed_field, field_validator

from academy.config.settings import settings
from academy.core.constants import (
    DEFAULT_PAGE,
    DEFAULT_SORT_BY,
    DEFAULT_SORT_ORDER,
    MAX_PAGE_SIZE,
)
from academy.schemas.common.base import BaseSchema

T = TypeVar("T")

__all__ = [
    "PaginationParams",
    "PaginationMeta",
    "PaginatedResponse",
]


class PaginationParams(BaseSchema):
    """Page/limit pagination with ordering."""

    page: int = Field(
        default=DEFAULT_PAGE,
        ge=1,
        description="Page number (1-indexed)",
    )
    limit: int = Field(
        default_factory=lambda: settings.DEFAULT_PAGE_SIZE,
        ge=1,
        le=MAX_PAGE_SIZE,
        description="Items per page",
    )
    sort_by: str = Field(
        default=DEFAULT_SORT_BY,
        description="Field to order by",
    )
    sort_order: Literal["asc", "desc"] = Field(
        default=DEFAULT_SORT_ORDER,
        description="Ordering direction",
    )

    @field_validator("sort_by")
    @classmethod
    def normalize_sort_by(cls, v: str) -> str:
        """Accept camelCase field names (``createdAt`` -> ``created_at``)."""
        if not v:
            return DEFAULT_SORT_BY
        out = []
        for ch in v:
            if ch.isupper():
                out.append("_")
                out.append(ch.lower())
            else:
                out.append(ch)
        return "".join(out).lstrip("_")

    @computed_field  # type: ignore[misc]
    @property
    def offset(self) -> int:
        """Calculate offset for database queries."""
        return (self.page - 1) * self.limit


class PaginationMeta(BaseSchema):
    """Pagination metadata."""

    page: int = Field(..., ge=1)
    limit: int = Field(..., ge=1)
    total: int = Field(..., ge=0)
    total_pages: int = Field(..., ge=0)
    has_next_page: bool
    has_previous_page: bool


class PaginatedResponse(BaseSchema, Generic[T]):
    """Generic paginated response."""

    data: List[T] = Field(..., description="Items on the current page")
    pagination: PaginationMeta

    @classmethod
    def create(
        cls,
        items: List[T],
        total: int,
        page: int,
        limit: int,
    ) -> "PaginatedResponse[T]":
        """
        Create paginated response with calculated metadata.

        Args:
            items: Items for the current page.
            total: Total number of items across all pages.
            page: Current page number.
            limit: Number of items per page.
        """
        total_pages = (total + limit - 1) // limit if limit > 0 else 0

        meta = PaginationMeta(
            page=page,
            limit=limit,
            total=total,
            total_pages=total_pages,
            has_next_page=page < total_pages,
            has_previous_page=page > 1,
        )
        return cls(data=items, pagination=meta)
