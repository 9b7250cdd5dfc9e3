from __future__ import annotations

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from academy.core.exceptions import (
    EntityAlreadyExistsError,
    InvalidIdentifierError,
    StudentNotFoundError,
    ValidationError,
)
from academy.services.base import (
    ErrorCode,
    ErrorSeverity,
    ServiceError,
    ServiceResult,
    failure,
    map_exception_to_error_code,
    map_result,
    success,
    try_catch,
)


def _error(code: ErrorCode = ErrorCode.INTERNAL_ERROR) -> ServiceError:
    return ServiceError(code=code, message="boom")


def test_success_carries_data_and_no_error() -> None:
    result = ServiceResult.success({"id": "s1"}, message="ok")

    assert result.is_success
    assert not result.is_failure
    assert result.error is None
    assert result.unwrap() == {"id": "s1"}
    assert bool(result) is True


def test_success_may_carry_none() -> None:
    result = ServiceResult.success(None)

    assert result.is_success
    assert result.unwrap() is None


def test_failure_carries_error_and_no_data() -> None:
    result = ServiceResult.failure(_error())

    assert result.is_failure
    assert result.data is None
    assert result.message == "boom"
    assert bool(result) is False


def test_success_with_error_is_rejected() -> None:
    with pytest.raises(ValueError):
        ServiceResult(is_success=True, error=_error())


def test_failure_without_error_is_rejected() -> None:
    with pytest.raises(ValueError):
        ServiceResult(is_success=False)


def test_failure_with_data_is_rejected() -> None:
    with pytest.raises(ValueError):
        ServiceResult(is_success=False, data=1, error=_error())


def test_unwrap_failure_raises() -> None:
    with pytest.raises(ValueError, match="boom"):
        ServiceResult.failure(_error()).unwrap()


def test_unwrap_or_helpers() -> None:
    failed: ServiceResult[int] = ServiceResult.failure(_error())

    assert failed.unwrap_or(5) == 5
    assert failed.unwrap_or_none() is None
    assert ServiceResult.success(3).unwrap_or(5) == 3


def test_not_found_helper() -> None:
    result = ServiceResult.not_found("Student", "abc")

    assert result.error.code is ErrorCode.NOT_FOUND
    assert result.error.message == "Student not found (ID: abc)"
    assert result.error.severity is ErrorSeverity.WARNING


def test_validation_and_conflict_helpers() -> None:
    invalid = ServiceResult.validation_failure("bad age", field="age")
    conflict = ServiceResult.conflict("taken", field="email")

    assert invalid.error.code is ErrorCode.VALIDATION_ERROR
    assert invalid.error.field == "age"
    assert conflict.error.code is ErrorCode.CONFLICT
    assert conflict.error.field == "email"


def test_map_transforms_success_and_passes_failure() -> None:
    doubled = ServiceResult.success(21).map(lambda v: v * 2)
    failed = ServiceResult.failure(_error(ErrorCode.NOT_FOUND)).map(lambda v: v * 2)

    assert doubled.unwrap() == 42
    assert failed.is_failure
    assert failed.error.code is ErrorCode.NOT_FOUND


def test_map_captures_exceptions_from_the_mapper() -> None:
    result = ServiceResult.success("x").map(int)

    assert result.is_failure
    assert result.error.code is ErrorCode.VALIDATION_ERROR


def test_flat_map_chains_results() -> None:
    result = ServiceResult.success(2).flat_map(lambda v: ServiceResult.success(v + 1))
    stopped = ServiceResult.success(2).flat_map(lambda v: ServiceResult.not_found("Student"))

    assert result.unwrap() == 3
    assert stopped.error.code is ErrorCode.NOT_FOUND


def test_map_result_function() -> None:
    assert map_result(success("a"), str.upper).unwrap() == "A"
    assert map_result(failure(ErrorCode.CONFLICT, "dup"), str.upper).error.code is ErrorCode.CONFLICT


def test_to_dict_shapes() -> None:
    ok = ServiceResult.success([1, 2]).to_dict()
    bad = ServiceResult.not_found("Student", "1").to_dict()

    assert ok["is_success"] is True
    assert ok["data"] == [1, 2]
    assert bad["is_success"] is False
    assert bad["error"]["code"] == "NOT_FOUND"
    assert "data" not in bad


def test_try_catch_returns_value() -> None:
    result = try_catch(int, "42")

    assert result.is_success
    assert result.unwrap() == 42


def test_try_catch_passes_keyword_arguments() -> None:
    result = try_catch(int, "ff", base=16)

    assert result.unwrap() == 255


def test_try_catch_prefixes_operation() -> None:
    def explode() -> None:
        raise RuntimeError("disk full")

    result = try_catch(explode, operation="load students")

    assert result.error.code is ErrorCode.INTERNAL_ERROR
    assert result.error.message == "Failed to load students: disk full"
    assert result.error.details["exception_type"] == "RuntimeError"


@pytest.mark.parametrize(
    "exc, code",
    [
        (StudentNotFoundError("s1"), ErrorCode.NOT_FOUND),
        (EntityAlreadyExistsError("User", "email", "a@example.com"), ErrorCode.CONFLICT),
        (IntegrityError("INSERT", {}, Exception("UNIQUE")), ErrorCode.CONFLICT),
        (InvalidIdentifierError("student", ""), ErrorCode.INVALID_FORMAT),
        (ValidationError("bad"), ErrorCode.VALIDATION_ERROR),
        (ValueError("bad"), ErrorCode.VALIDATION_ERROR),
        (OperationalError("SELECT", {}, Exception("locked")), ErrorCode.DATABASE_ERROR),
        (RuntimeError("?"), ErrorCode.INTERNAL_ERROR),
        (KeyError("ACTIVE"), ErrorCode.INTERNAL_ERROR),
    ],
)
def test_exception_mapping(exc: Exception, code: ErrorCode) -> None:
    assert map_exception_to_error_code(exc) is code

    def raiser() -> None:
        raise exc

    assert try_catch(raiser).error.code is code


def test_try_catch_does_not_swallow_keyboard_interrupt() -> None:
    def interrupted() -> None:
        raise KeyboardInterrupt

    with pytest.raises(KeyboardInterrupt):
        try_catch(interrupted)
