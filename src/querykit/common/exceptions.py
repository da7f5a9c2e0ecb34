import logging
from enum import Enum
from typing import Any, Dict, Optional

from querykit.constants.sql import PG_UNIQUE_VIOLATION


class ErrorCode(Enum):
    """Standard error codes for querykit.

    This enum provides categorized error codes that can be used
    to identify error types without creating numerous exception classes.
    Each category has its own prefix for easy identification.

    Attributes:
        VALIDATION_*: Input validation errors
        PRECONDITION_*: Caller programming errors detected at runtime
        RESOURCE_*: Repository lookup and uniqueness errors
    """
    # Validation errors
    VALIDATION_ERROR = "VALIDATION_001"
    INVALID_SORT = "VALIDATION_002"
    INVALID_CURSOR = "VALIDATION_003"

    # Precondition errors
    PRECONDITION_FAILED = "PRECONDITION_001"

    # Resource errors
    RESOURCE_NOT_FOUND = "RESOURCE_001"
    RESOURCE_CONFLICT = "RESOURCE_002"


class QueryKitError(Exception):
    """Base exception for all querykit errors.

    This exception class uses error codes for categorization
    instead of creating numerous specific exception classes.

    Attributes:
        message: Error message
        error_code: Error code from ErrorCode enum
        details: Additional error details
        cause: Optional underlying exception
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
    ):
        """Initialize querykit error.

        Args:
            message: Error message
            error_code: Error code from ErrorCode enum
            details: Additional error details
            cause: Optional underlying exception
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.cause = cause

        # Lazy import to avoid circular dependency
        from querykit.logging import get_logger
        logger = get_logger(__name__)
        logger.log(
            _LOG_LEVELS.get(error_code, logging.WARNING),
            message,
            extra={"error_code": error_code.value, "details": self.details},
            exc_info=cause is not None,
        )

    def __str__(self) -> str:
        """String representation of the error."""
        msg = f"[{self.error_code.value}] {self.message}"
        if self.cause:
            msg = f"{msg} (caused by: {type(self.cause).__name__}: {str(self.cause)})"
        return msg

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for serialization."""
        return {
            "type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code.value,
            "error_name": self.error_code.name,
            "details": self.details,
        }


# Codes not listed here log at WARNING.
_LOG_LEVELS: Dict[ErrorCode, int] = {
    ErrorCode.PRECONDITION_FAILED: logging.ERROR,
}


# Helper functions for common error scenarios
def validation_error(
    message: str,
    field: Optional[str] = None,
    value: Any = None,
    error_code: ErrorCode = ErrorCode.VALIDATION_ERROR,
    **kwargs
) -> QueryKitError:
    """Create a validation error.

    Args:
        message: Error message
        field: Field that failed validation
        value: Invalid value
        error_code: More specific VALIDATION_* code, if any
        **kwargs: Additional error details

    Returns:
        QueryKitError with a VALIDATION_* code
    """
    details = kwargs.get('details', {})
    if field:
        details["field"] = field
    if value is not None:
        details["value"] = str(value)

    return QueryKitError(
        message=message,
        error_code=error_code,
        details=details,
        **{k: v for k, v in kwargs.items() if k != 'details'}
    )


def precondition_error(
    message: str,
    statement: Optional[str] = None,
    **kwargs
) -> QueryKitError:
    """Create a precondition error.

    Raised when a caller hands the library something it was never shaped
    to handle. Not meant to be caught and recovered from.

    Args:
        message: Error message
        statement: SQL text involved (truncated to 500 characters)
        **kwargs: Additional error details

    Returns:
        QueryKitError with PRECONDITION_FAILED code
    """
    details = kwargs.get('details', {})
    if statement:
        details["statement"] = statement[:500] + "..." if len(statement) > 500 else statement

    return QueryKitError(
        message=message,
        error_code=ErrorCode.PRECONDITION_FAILED,
        details=details,
        **{k: v for k, v in kwargs.items() if k != 'details'}
    )


def resource_not_found_error(
    message: str = "resource not found",
    resource_type: Optional[str] = None,
    resource_id: Any = None,
    **kwargs
) -> QueryKitError:
    """Create a resource not found error.

    Args:
        message: Error message
        resource_type: Type of resource (user, order, etc.)
        resource_id: Identifier that was looked up
        **kwargs: Additional error details

    Returns:
        QueryKitError with RESOURCE_NOT_FOUND code
    """
    details = kwargs.get('details', {})
    if resource_type:
        details["resource_type"] = resource_type
    if resource_id is not None:
        details["resource_id"] = str(resource_id)

    return QueryKitError(
        message=message,
        error_code=ErrorCode.RESOURCE_NOT_FOUND,
        details=details,
        **{k: v for k, v in kwargs.items() if k != 'details'}
    )


def conflict_error(
    message: str = "resource conflict",
    resource_type: Optional[str] = None,
    constraint: Optional[str] = None,
    **kwargs
) -> QueryKitError:
    """Create a resource conflict error.

    Args:
        message: Error message
        resource_type: Type of resource that conflicted
        constraint: Name of the violated constraint, if known
        **kwargs: Additional error details

    Returns:
        QueryKitError with RESOURCE_CONFLICT code
    """
    details = kwargs.get('details', {})
    if resource_type:
        details["resource_type"] = resource_type
    if constraint:
        details["constraint"] = constraint

    return QueryKitError(
        message=message,
        error_code=ErrorCode.RESOURCE_CONFLICT,
        details=details,
        **{k: v for k, v in kwargs.items() if k != 'details'}
    )


def is_unique_violation(exc: Optional[BaseException]) -> bool:
    """Check whether a database driver error is a unique constraint violation.

    Looks for PostgreSQL SQLSTATE ``23505`` on ``sqlstate`` (asyncpg,
    psycopg 3) or ``pgcode`` (psycopg2), following ``__cause__`` and
    ``__context__`` so wrapped driver errors are recognized too.

    Args:
        exc: Exception raised by the execution layer

    Returns:
        True if the error (or an error it wraps) is a unique violation
    """
    seen = set()
    while exc is not None and id(exc) not in seen:
        seen.add(id(exc))
        code = getattr(exc, "sqlstate", None) or getattr(exc, "pgcode", None)
        if code == PG_UNIQUE_VIOLATION:
            return True
        exc = exc.__cause__ or exc.__context__
    return False
