"""
JSON response builders.

Every API response is one of two envelopes:

    {"success": true, "data": ..., "message": ..., "meta": {"timestamp": ...}}
    {"success": false, "error": ..., "details": ..., "code": ...}
"""

import json
from typing import Any, Dict, Mapping, Optional, Sequence, Union

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from academy.schemas.common.pagination import PaginatedResponse
from academy.schemas.common.response import ErrorResponse, SuccessResponse
from academy.services.base.service_result import ErrorCode, ServiceResult

ERROR_STATUS_CODES: Dict[ErrorCode, int] = {
    ErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_FORMAT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.CONFLICT: status.HTTP_409_CONFLICT,
}

Envelope = Union[JSONResponse, Mapping[str, Any]]


def create_success_response(
    data: Any,
    message: Optional[str] = None,
    status_code: int = status.HTTP_200_OK,
) -> JSONResponse:
    """Wrap ``data`` in a success envelope stamped with the current time."""
    envelope = SuccessResponse[Any](data=data, message=message)
    return JSONResponse(status_code=status_code, content=jsonable_encoder(envelope))


def create_error_response(
    error: str,
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
    details: Any = None,
    code: Optional[str] = None,
) -> JSONResponse:
    envelope = ErrorResponse(error=error, details=details, code=code)
    return JSONResponse(status_code=status_code, content=jsonable_encoder(envelope))


def create_paginated_response(
    items: Sequence[Any],
    total: int,
    page: int,
    limit: int,
    status_code: int = status.HTTP_200_OK,
) -> JSONResponse:
    """
    Success envelope whose data holds one page plus pagination metadata
    (total_pages, has_next_page, has_previous_page).
    """
    page_data = PaginatedResponse[Any].create(items=list(items), total=total, page=page, limit=limit)
    return create_success_response(page_data, status_code=status_code)


def result_to_response(
    result: ServiceResult,
    success_status: int = status.HTTP_200_OK,
) -> JSONResponse:
    """
    Translate a service result into an HTTP response.

    NOT_FOUND maps to 404, VALIDATION_ERROR and INVALID_FORMAT to 400,
    CONFLICT to 409 and every other error code to 500.
    """
    if result.is_success:
        return create_success_response(result.data, message=result.message, status_code=success_status)

    error = result.error
    return create_error_response(
        error.message,
        status_code=ERROR_STATUS_CODES.get(error.code, status.HTTP_500_INTERNAL_SERVER_ERROR),
        details=error.details,
        code=error.code.value,
    )


def _body(response: Envelope) -> Mapping[str, Any]:
    if isinstance(response, JSONResponse):
        return json.loads(response.body)
    return response


def is_success_response(response: Envelope) -> bool:
    return _body(response).get("success") is True


def is_error_response(response: Envelope) -> bool:
    return _body(response).get("success") is False
