"""
Service result patterns for standardized response handling.

Service methods never raise across their boundary: every outcome is a
``ServiceResult`` carrying either a payload or a ``ServiceError``.
"""

from typing import Any, Callable, Dict, Generic, Optional, TypeVar
from dataclasses import dataclass
from enum import Enum
from datetime import datetime, timezone

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from academy.config.logging import get_logger
from academy.core.exceptions import (
    AcademyException,
    EntityAlreadyExistsError,
    EntityNotFoundError,
    InvalidIdentifierError,
    ValidationError,
)

logger = get_logger(__name__)


class ErrorCode(str, Enum):
    """Standard error codes for service operations."""

    INTERNAL_ERROR = "INTERNAL_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    INVALID_FORMAT = "INVALID_FORMAT"
    DATABASE_ERROR = "DATABASE_ERROR"


class ErrorSeverity(str, Enum):
    """Error severity levels."""

    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


@dataclass
class ServiceError:
    """Represents a service operation error with context."""

    code: ErrorCode
    message: str
    severity: ErrorSeverity = ErrorSeverity.ERROR
    details: Optional[Dict[str, Any]] = None
    field: Optional[str] = None
    timestamp: Optional[datetime] = None

    def __post_init__(self):
        if self.timestamp is None:
            self.timestamp = datetime.now(timezone.utc)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        return {
            "code": self.code.value,
            "message": self.message,
            "severity": self.severity.value,
            "details": self.details,
            "field": self.field,
            "timestamp": self.timestamp.isoformat() if self.timestamp else None,
        }


TData = TypeVar("TData")
TOut = TypeVar("TOut")


@dataclass
class ServiceResult(Generic[TData]):
    """
    Tagged success/failure outcome of a service operation.

    Exactly one branch is populated: a success carries ``data`` (which may
    legitimately be ``None``) and no error; a failure carries an error and
    no data.

    Attributes:
        is_success: Operation success indicator
        data: Result data (if successful)
        error: Error information (if failed)
        message: Human-readable status message
        metadata: Additional context information
    """

    is_success: bool
    data: Optional[TData] = None
    error: Optional[ServiceError] = None
    message: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None

    def __post_init__(self):
        if self.is_success and self.error is not None:
            raise ValueError("A successful result cannot carry an error")
        if not self.is_success:
            if self.error is None:
                raise ValueError("A failed result requires an error")
            if self.data is not None:
                raise ValueError("A failed result cannot carry data")

    @property
    def is_failure(self) -> bool:
        return not self.is_success

    @classmethod
    def success(
        cls,
        data: Optional[TData] = None,
        message: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> "ServiceResult[TData]":
        """Create a successful result."""
        return cls(
            is_success=True,
            data=data,
            message=message,
            metadata=metadata or {},
        )

    @classmethod
    def failure(
        cls,
        error: ServiceError,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> "ServiceResult[TData]":
        """Create a failed result."""
        return cls(
            is_success=False,
            error=error,
            message=error.message,
            metadata=metadata or {},
        )

    @classmethod
    def from_exception(
        cls,
        exception: Exception,
        operation: Optional[str] = None,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
    ) -> "ServiceResult[TData]":
        """Create a failed result from an exception."""
        return cls.failure(error_from_exception(exception, operation, severity))

    @classmethod
    def validation_failure(
        cls,
        message: str,
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> "ServiceResult[TData]":
        """Create a validation failure result."""
        return cls.failure(
            ServiceError(
                code=ErrorCode.VALIDATION_ERROR,
                message=message,
                severity=ErrorSeverity.WARNING,
                field=field,
                details=details,
            )
        )

    @classmethod
    def not_found(
        cls,
        resource_type: str,
        resource_id: Optional[str] = None,
    ) -> "ServiceResult[TData]":
        """Create a not found failure result."""
        message = f"{resource_type} not found"
        if resource_id:
            message += f" (ID: {resource_id})"

        return cls.failure(
            ServiceError(
                code=ErrorCode.NOT_FOUND,
                message=message,
                severity=ErrorSeverity.WARNING,
                details={"resource_type": resource_type, "resource_id": resource_id},
            )
        )

    @classmethod
    def conflict(
        cls,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        field: Optional[str] = None,
    ) -> "ServiceResult[TData]":
        """Create a conflict failure result."""
        return cls.failure(
            ServiceError(
                code=ErrorCode.CONFLICT,
                message=message,
                severity=ErrorSeverity.WARNING,
                details=details,
                field=field,
            )
        )

    def unwrap(self) -> TData:
        """
        Unwrap the result data or raise exception if failed.

        Raises:
            ValueError: If the result is not successful
        """
        if not self.is_success:
            raise ValueError(f"Cannot unwrap failed result: {self.error.message}")
        return self.data

    def unwrap_or(self, default: TData) -> TData:
        """Unwrap the result data or return default if failed."""
        return self.data if self.is_success else default

    def unwrap_or_none(self) -> Optional[TData]:
        """Unwrap the result data or return None if failed."""
        return self.data if self.is_success else None

    def map(self, func: Callable[[TData], TOut]) -> "ServiceResult[TOut]":
        """Map the result data through a function if successful."""
        if not self.is_success:
            return self
        try:
            return ServiceResult.success(func(self.data), message=self.message, metadata=self.metadata)
        except Exception as e:
            return ServiceResult.from_exception(e, "map result")

    def flat_map(self, func: Callable[[TData], "ServiceResult[TOut]"]) -> "ServiceResult[TOut]":
        """Chain a function that itself returns a ServiceResult."""
        if not self.is_success:
            return self
        try:
            return func(self.data)
        except Exception as e:
            return ServiceResult.from_exception(e, "flat_map result")

    def add_metadata(self, key: str, value: Any) -> "ServiceResult[TData]":
        """Add metadata to the result."""
        if self.metadata is None:
            self.metadata = {}
        self.metadata[key] = value
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Convert result to dictionary representation."""
        result = {
            "is_success": self.is_success,
            "message": self.message,
            "metadata": self.metadata,
        }

        if self.is_success:
            data = self.data
            if hasattr(data, "model_dump"):
                data = data.model_dump(mode="json")
            result["data"] = data
        else:
            result["error"] = self.error.to_dict()

        return result

    def __bool__(self) -> bool:
        return self.is_success

    def __repr__(self) -> str:
        status = "Success" if self.is_success else "Failure"
        if self.message:
            return f"ServiceResult({status}: {self.message})"
        return f"ServiceResult({status})"


# Checked in order; the first matching type wins.
_EXCEPTION_CODES = (
    (EntityNotFoundError, ErrorCode.NOT_FOUND),
    (EntityAlreadyExistsError, ErrorCode.CONFLICT),
    (IntegrityError, ErrorCode.CONFLICT),
    (InvalidIdentifierError, ErrorCode.INVALID_FORMAT),
    (ValidationError, ErrorCode.VALIDATION_ERROR),
    (PydanticValidationError, ErrorCode.VALIDATION_ERROR),
    (ValueError, ErrorCode.VALIDATION_ERROR),
    (SQLAlchemyError, ErrorCode.DATABASE_ERROR),
)


def map_exception_to_error_code(exception: Exception) -> ErrorCode:
    """Map exception types to error codes."""
    for exc_type, error_code in _EXCEPTION_CODES:
        if isinstance(exception, exc_type):
            return error_code
    return ErrorCode.INTERNAL_ERROR


def error_from_exception(
    exception: Exception,
    operation: Optional[str] = None,
    severity: ErrorSeverity = ErrorSeverity.ERROR,
) -> ServiceError:
    """Build a ServiceError describing ``exception``."""
    code = map_exception_to_error_code(exception)
    if isinstance(exception, AcademyException):
        text = exception.message
    else:
        text = str(exception) or type(exception).__name__
    message = f"Failed to {operation}: {text}" if operation else text

    details: Dict[str, Any] = {"exception_type": type(exception).__name__}
    if isinstance(exception, AcademyException) and exception.details:
        details.update(exception.details)

    return ServiceError(
        code=code,
        message=message,
        severity=severity,
        details=details,
        field=getattr(exception, "field", None),
    )


def try_catch(
    fn: Callable[..., TData],
    *args: Any,
    operation: Optional[str] = None,
    **kwargs: Any,
) -> ServiceResult[TData]:
    """
    Run ``fn`` and wrap its outcome in a ServiceResult.

    A normal return becomes a success carrying the return value; any
    ``Exception`` becomes a failure. ``KeyboardInterrupt`` and
    ``SystemExit`` are not caught.

    Example:
        >>> try_catch(int, "42").unwrap()
        42
        >>> try_catch(int, "x").error.code
        <ErrorCode.VALIDATION_ERROR: 'VALIDATION_ERROR'>
    """
    try:
        return ServiceResult.success(fn(*args, **kwargs))
    except Exception as e:
        logger.debug(f"try_catch captured {type(e).__name__}: {e}")
        return ServiceResult.from_exception(e, operation)


def map_result(
    result: ServiceResult[TData],
    fn: Callable[[TData], TOut],
) -> ServiceResult[TOut]:
    """Map the payload of a successful result, passing failures through."""
    return result.map(fn)


def success(
    data: Optional[TData] = None,
    message: Optional[str] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> ServiceResult[TData]:
    """Create a successful service result."""
    return ServiceResult.success(data=data, message=message, metadata=metadata)


def failure(
    error_code: ErrorCode,
    message: str,
    field: Optional[str] = None,
    details: Optional[Dict[str, Any]] = None,
    severity: ErrorSeverity = ErrorSeverity.ERROR,
) -> ServiceResult[None]:
    """Create a failed service result."""
    error = ServiceError(
        code=error_code,
        message=message,
        field=field,
        details=details,
        severity=severity,
    )
    return ServiceResult.failure(error)


__all__ = [
    "ErrorCode",
    "ErrorSeverity",
    "ServiceError",
    "ServiceResult",
    "map_exception_to_error_code",
    "error_from_exception",
    "try_catch",
    "map_result",
    "success",
    "failure",
]
