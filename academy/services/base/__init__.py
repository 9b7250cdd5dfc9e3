"""
Base service package: result types and the shared service base class.
"""

from academy.services.base.service_result import (
    ErrorCode,
    ErrorSeverity,
    ServiceError,
    ServiceResult,
    error_from_exception,
    failure,
    map_exception_to_error_code,
    map_result,
    success,
    try_catch,
)
from academy.services.base.base_service import BaseService

__all__ = [
    "ErrorCode",
    "ErrorSeverity",
    "ServiceError",
    "ServiceResult",
    "error_from_exception",
    "failure",
    "map_exception_to_error_code",
    "map_result",
    "success",
    "try_catch",
    "BaseService",
]
