"""Note-related exceptions."""

from .base import BaseAppException, NotFoundError, OwnershipError


class NoteNotFoundError(NotFoundError):
    """Raised when a note is not found."""

    def __init__(self, message: str = "note not found"):
        super().__init__(message=message, error_code="NOTE_NOT_FOUND")


class NotePermissionError(OwnershipError):
    """Raised when the caller does not own the note."""

    def __init__(self, message: str = "only the owner can access the note"):
        super().__init__(message=message, error_code="NOTE_PERMISSION_DENIED")


class NoSuchCardError(BaseAppException):
    """Raised when a note references a card that is missing or owned by someone else."""

    def __init__(self, message: str = "no such card"):
        super().__init__(message=message, status_code=400, error_code="NO_SUCH_CARD")
