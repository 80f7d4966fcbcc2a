"""List-related exceptions."""

from .base import BaseAppException, NotFoundError, OwnershipError


class ListNotFoundError(NotFoundError):
    """Raised when a list is not found."""

    def __init__(self, message: str = "list not found"):
        super().__init__(message=message, error_code="LIST_NOT_FOUND")


class ListPermissionError(OwnershipError):
    """Raised when the caller does not own the list."""

    def __init__(self, message: str = "only the owner can access the list"):
        super().__init__(message=message, error_code="LIST_PERMISSION_DENIED")


class ListNotEmptyError(BaseAppException):
    """Raised when deleting a list that still holds cards."""

    def __init__(self, message: str = "only an empty list may be deleted"):
        super().__init__(message=message, status_code=400, error_code="LIST_NOT_EMPTY")
