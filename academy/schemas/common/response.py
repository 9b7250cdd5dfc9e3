"""
Standard API envelopes for success and error responses.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Generic, Literal, Optional, TypeVar, Union

from pydantic import Field

from academy.schemas.common.base import BaseSchema

T = TypeVar("T")

__all__ = [
    "ResponseMeta",
    "SuccessResponse",
    "ErrorResponse",
]


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class ResponseMeta(BaseSchema):
    timestamp: str = Field(default_factory=_now_iso)


class SuccessResponse(BaseSchema, Generic[T]):
    """Standard success envelope."""

    success: Literal[True] = True
    data: Union[T, None] = Field(default=None, description="Response data")
    message: Optional[str] = Field(default=None, description="Response message")
    meta: ResponseMeta = Field(default_factory=ResponseMeta)


class ErrorResponse(BaseSchema):
    """Standard error envelope."""

    success: Literal[False] = False
    error: str = Field(..., description="Error message")
    details: Optional[Any] = Field(default=None, description="Additional error context")
    code: Optional[str] = Field(default=None, description="Application error code")
