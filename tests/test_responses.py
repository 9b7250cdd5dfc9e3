from __future__ import annotations

import json
from datetime import datetime

import pytest

from academy.core.responses import (
    create_error_response,
    create_paginated_response,
    create_success_response,
    is_error_response,
    is_success_response,
    result_to_response,
)
from academy.schemas.student import StudentStatistics
from academy.services.base import ErrorCode, ServiceResult, failure


def _body(response) -> dict:
    return json.loads(response.body)


def test_success_envelope() -> None:
    response = create_success_response({"id": "s1"}, message="Loaded")
    body = _body(response)

    assert response.status_code == 200
    assert body["success"] is True
    assert body["data"] == {"id": "s1"}
    assert body["message"] == "Loaded"
    datetime.fromisoformat(body["meta"]["timestamp"])


def test_success_envelope_serializes_schemas() -> None:
    response = create_success_response(StudentStatistics(total=3, active=2), status_code=201)

    assert response.status_code == 201
    assert _body(response)["data"]["active"] == 2


def test_error_envelope() -> None:
    response = create_error_response("Student not found", 404, details={"id": "s1"}, code="NOT_FOUND")
    body = _body(response)

    assert response.status_code == 404
    assert body == {
        "success": False,
        "error": "Student not found",
        "details": {"id": "s1"},
        "code": "NOT_FOUND",
    }


def test_error_envelope_defaults_to_500() -> None:
    assert create_error_response("boom").status_code == 500


def test_paginated_envelope() -> None:
    body = _body(create_paginated_response(["a", "b"], total=5, page=1, limit=2))

    assert body["success"] is True
    assert body["data"]["data"] == ["a", "b"]
    assert body["data"]["pagination"] == {
        "page": 1,
        "limit": 2,
        "total": 5,
        "total_pages": 3,
        "has_next_page": True,
        "has_previous_page": False,
    }


@pytest.mark.parametrize(
    "code, status_code",
    [
        (ErrorCode.NOT_FOUND, 404),
        (ErrorCode.VALIDATION_ERROR, 400),
        (ErrorCode.INVALID_FORMAT, 400),
        (ErrorCode.CONFLICT, 409),
        (ErrorCode.DATABASE_ERROR, 500),
        (ErrorCode.INTERNAL_ERROR, 500),
    ],
)
def test_result_to_response_status_codes(code: ErrorCode, status_code: int) -> None:
    response = result_to_response(failure(code, "nope"))

    assert response.status_code == status_code
    assert _body(response)["code"] == code.value


def test_result_to_response_success() -> None:
    response = result_to_response(ServiceResult.success(7, message="Counted"), success_status=201)

    assert response.status_code == 201
    assert _body(response)["data"] == 7
    assert _body(response)["message"] == "Counted"


def test_type_guards() -> None:
    ok = create_success_response(None)
    bad = create_error_response("boom")

    assert is_success_response(ok) and not is_error_response(ok)
    assert is_error_response(bad) and not is_success_response(bad)
    assert is_success_response({"success": True, "data": None})
