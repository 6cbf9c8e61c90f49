"""
Custom exceptions for consistent error reporting.

Provides standardized error codes for the persistence layer.
"""

from typing import Any, Dict, Optional


class AppException(Exception):
    """Base application exception."""

    def __init__(self, message: str, error_code: str, details: Dict[str, Any] = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(message)


class ResourceNotFoundError(AppException):
    """Raised when requested resource is not found."""

    def __init__(self, resource: str, resource_id: Any = None):
        message = f"{resource} not found"
        if resource_id is not None:
            message = f"{resource} with ID {resource_id} not found"
        super().__init__(
            message=message,
            error_code="ERR_NOT_FOUND_001",
            details={"resource": resource, "id": resource_id}
        )


class ParcelNotFoundError(ResourceNotFoundError):
    """Raised when no parcel row matches the requested number."""

    def __init__(self, number: int):
        self.number = number
        super().__init__(resource="Parcel", resource_id=number)


class PersistenceError(AppException):
    """
    Raised when a statement, row mapping or result iteration fails.

    The driver-level error is kept on ``original`` and chained as the
    exception cause.
    """

    def __init__(self, operation: str, original: Optional[BaseException] = None):
        self.operation = operation
        self.original = original
        message = f"Parcel store operation '{operation}' failed"
        if original is not None:
            message = f"{message}: {original}"
        super().__init__(
            message=message,
            error_code="ERR_DB_001",
            details={
                "operation": operation,
                "error_type": type(original).__name__ if original is not None else None
            }
        )
