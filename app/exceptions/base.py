# ruff: noqa: D107
"""Base exception classes."""

from typing import Any

from fastapi import HTTPException


class BaseAppException(HTTPException):
    """Base application exception."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_code: str = "INTERNAL_ERROR",
        details: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}

        super().__init__(
            status_code=status_code,
            detail={"message": message, "error_code": error_code, "details": self.details},
            headers=headers,
        )


class NotFoundError(BaseAppException):
    """Exception raised when a resource is not found."""

    def __init__(
        self,
        message: str = "Resource not found",
        error_code: str = "NOT_FOUND",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message=message, status_code=404, error_code=error_code, details=details)


class AuthenticationError(BaseAppException):
    """Exception raised when the bearer token is missing or cannot be verified."""

    def __init__(self, message: str = "token missing"):
        super().__init__(
            message=message,
            status_code=401,
            error_code="AUTHENTICATION_FAILED",
            headers={"WWW-Authenticate": "Bearer"},
        )


class OwnershipError(BaseAppException):
    """Exception raised when the caller does not own the resource."""

    def __init__(
        self,
        message: str = "only the owner can access this resource",
        error_code: str = "NOT_OWNER",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(
            message=message,
            status_code=401,
            error_code=error_code,
            details=details,
        )


class ValidationError(BaseAppException):
    """Exception raised when validation fails."""

    def __init__(
        self,
        message: str = "Validation failed",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(
            message=message,
            status_code=400,
            error_code="VALIDATION_ERROR",
            details=details,
        )


class NotModifiedError(BaseAppException):
    """Raised when an update omits its required field and is treated as a no-op."""

    def __init__(self, message: str = "Not modified"):
        super().__init__(message=message, status_code=304, error_code="NOT_MODIFIED")


class DatabaseOperationError(BaseAppException):
    """Raised when a write fails and the transaction has been rolled back."""

    def __init__(self, message: str = "Database operation failed"):
        super().__init__(message=message, status_code=500, error_code="DATABASE_ERROR")
