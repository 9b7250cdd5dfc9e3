"""
Custom Exceptions for the Academy Application

This module defines custom exception classes used throughout the application
for better error handling and debugging.
"""

from typing import Any, Dict, Optional
from enum import Enum


class ErrorCode(str, Enum):
    """Error codes carried by application exceptions"""
    INTERNAL_ERROR = "INTERNAL_ERROR"
    DATABASE_ERROR = "DATABASE_ERROR"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    DUPLICATE_ENTRY = "DUPLICATE_ENTRY"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_FORMAT = "INVALID_FORMAT"
    STUDENT_NOT_FOUND = "STUDENT_NOT_FOUND"
    TEACHER_NOT_FOUND = "TEACHER_NOT_FOUND"


class AcademyException(Exception):
    """
    Base exception class for all application exceptions.

    Provides consistent error handling across the application with
    structured error information.
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.status_code = status_code
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format"""
        return {
            "error": {
                "message": self.message,
                "code": self.error_code.value,
                "details": self.details,
                "type": self.__class__.__name__
            }
        }


class ValidationError(AcademyException):
    """Raised when input fails a business validation rule"""

    def __init__(self, message: str, field: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorCode.VALIDATION_ERROR, details, 400)
        self.field = field


class InvalidIdentifierError(AcademyException):
    """Raised when an identifier value is empty or not a string"""

    def __init__(self, kind: str, value: Any = None):
        super().__init__(
            f"Invalid {kind} ID",
            ErrorCode.INVALID_FORMAT,
            {"kind": kind, "value": repr(value)},
            400,
        )
        self.kind = kind


# ==================== Repository errors ====================

class RepositoryError(AcademyException):
    """Raised when a persistence operation fails"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorCode.DATABASE_ERROR, details, 500)


class EntityNotFoundError(RepositoryError):
    """Raised when an entity lookup finds nothing"""

    def __init__(self, entity: str, entity_id: Any = None):
        message = f"{entity} not found"
        if entity_id is not None:
            message += f" (ID: {entity_id})"
        super().__init__(message, {"entity": entity, "entity_id": str(entity_id) if entity_id is not None else None})
        self.error_code = ErrorCode.RESOURCE_NOT_FOUND
        self.status_code = 404
        self.entity = entity
        self.entity_id = entity_id


class EntityAlreadyExistsError(RepositoryError):
    """Raised when a unique constraint would be violated"""

    def __init__(self, entity: str, field: Optional[str] = None, value: Any = None):
        message = f"{entity} already exists"
        if field:
            message = f"{entity} with {field}='{value}' already exists"
        super().__init__(message, {"entity": entity, "field": field})
        self.error_code = ErrorCode.DUPLICATE_ENTRY
        self.status_code = 409
        self.entity = entity
        self.field = field


class StudentNotFoundError(EntityNotFoundError):
    """Student lookup failure"""

    def __init__(self, student_id: Any = None):
        super().__init__("Student", student_id)
        self.error_code = ErrorCode.STUDENT_NOT_FOUND


class TeacherNotFoundError(EntityNotFoundError):
    """Teacher lookup failure"""

    def __init__(self, teacher_id: Any = None):
        super().__init__("Teacher", teacher_id)
        self.error_code = ErrorCode.TEACHER_NOT_FOUND
