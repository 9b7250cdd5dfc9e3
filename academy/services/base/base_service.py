"""
Base service class providing common functionality for all services.
"""

from typing import Any, Callable, Dict, Optional, TypeVar
from contextlib import contextmanager

from sqlalchemy.orm import Session

from academy.config.logging import get_logger
from academy.core.exceptions import AcademyException
from academy.services.base.service_result import (
    ErrorSeverity,
    ServiceResult,
    error_from_exception,
)

TData = TypeVar("TData")


class BaseService:
    """
    Base service with common behaviors:
    - Shared logger and db session
    - Consistent error handling via ServiceResult
    - Transaction management utilities
    """

    def __init__(self, db_session: Session):
        """
        Initialize base service.

        Args:
            db_session: SQLAlchemy database session
        """
        self.db: Session = db_session
        self._logger = get_logger(f"academy.services.{self.__class__.__name__}")

    # -------------------------------------------------------------------------
    # Exception & Error Handling
    # -------------------------------------------------------------------------

    def _handle_exception(
        self,
        exception: Exception,
        operation: str,
        entity_ref: Optional[Any] = None,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
    ) -> ServiceResult:
        """
        Convert exception to a ServiceResult failure with logging.

        Args:
            exception: The caught exception
            operation: Description of the operation that failed
            entity_ref: Reference to the entity involved (ID, email, etc.)
            severity: Error severity level
        """
        context = {
            "operation": operation,
            "entity_ref": str(entity_ref) if entity_ref is not None else None,
            "exception_type": type(exception).__name__,
        }
        if isinstance(exception, AcademyException) and exception.status_code < 500:
            # caller errors: no traceback
            severity = ErrorSeverity.WARNING
            self._logger.warning(f"{operation} rejected: {exception}", extra=context)
        else:
            self._logger.error(
                f"Error during {operation}: {exception}",
                exc_info=True,
                extra=context,
            )
        error = error_from_exception(exception, operation, severity)
        if entity_ref is not None:
            error.details = {**(error.details or {}), "entity_ref": str(entity_ref)}
        return ServiceResult.failure(error)

    def _run(
        self,
        operation: str,
        fn: Callable[[], TData],
        entity_ref: Optional[Any] = None,
        message: Optional[str] = None,
    ) -> ServiceResult[TData]:
        """
        Execute a read-only unit of work and wrap its outcome.

        Any exception rolls the session back and becomes a failure result.
        """
        try:
            return ServiceResult.success(fn(), message=message)
        except Exception as e:
            self._rollback()
            return self._handle_exception(e, operation, entity_ref)

    def _run_in_transaction(
        self,
        operation: str,
        fn: Callable[[], TData],
        entity_ref: Optional[Any] = None,
        message: Optional[str] = None,
    ) -> ServiceResult[TData]:
        """Execute ``fn`` inside a transaction and wrap its outcome."""
        try:
            with self.transaction():
                data = fn()
            return ServiceResult.success(data, message=message)
        except Exception as e:
            return self._handle_exception(e, operation, entity_ref)

    # -------------------------------------------------------------------------
    # Transaction Management
    # -------------------------------------------------------------------------

    @contextmanager
    def transaction(self):
        """
        Context manager for database transactions with automatic rollback.

        Example:
            with self.transaction():
                self.repository.create(data)
        """
        try:
            yield self.db
            self._commit()
        except Exception as e:
            self._rollback()
            self._logger.warning(f"Transaction rolled back: {e}")
            raise

    def _commit(self) -> None:
        self.db.commit()
        self._logger.debug("Transaction committed successfully")

    def _rollback(self) -> None:
        """Rollback the current transaction, suppressing rollback errors."""
        try:
            self.db.rollback()
        except Exception as e:
            # Log but don't raise - rollback errors should not mask original error
            self._logger.warning(f"Rollback failed: {e}")

    # -------------------------------------------------------------------------
    # Utility Methods
    # -------------------------------------------------------------------------

    def _log_operation(
        self,
        operation: str,
        entity_ref: Optional[Any] = None,
        extra: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Log service operation with standardized format."""
        context = {"operation": operation, "entity_ref": str(entity_ref) if entity_ref else None}
        if extra:
            context.update(extra)
        self._logger.info(f"Operation: {operation}", extra=context)
