"""Project-related exceptions."""

from .base import NotFoundError, OwnershipError


class ProjectNotFoundError(NotFoundError):
    """Raised when a project is not found."""

    def __init__(self, message: str = "project not found"):
        super().__init__(message=message, error_code="PROJECT_NOT_FOUND")


class ProjectPermissionError(OwnershipError):
    """Raised when the caller does not own the project."""

    def __init__(self, message: str = "only the owner can access the project"):
        super().__init__(message=message, error_code="PROJECT_PERMISSION_DENIED")
