"""Common utilities and exceptions for querykit.

Exception Design:
    The exception system uses error codes for categorization rather than
    numerous specific exception classes. All exceptions inherit from
    QueryKitError and include structured error information.
"""

from querykit.common.exceptions import (
    QueryKitError,
    ErrorCode,
    # Helper functions
    validation_error,
    precondition_error,
    resource_not_found_error,
    conflict_error,
    is_unique_violation,
)

__all__ = [
    "QueryKitError",
    "ErrorCode",
    "validation_error",
    "precondition_error",
    "resource_not_found_error",
    "conflict_error",
    "is_unique_violation",
]
