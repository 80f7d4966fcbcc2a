"""Card-related exceptions."""

from .base import BaseAppException, NotFoundError, OwnershipError


class CardNotFoundError(NotFoundError):
    """Raised when a card is not found."""

    def __init__(self, message: str = "card not found"):
        super().__init__(message=message, error_code="CARD_NOT_FOUND")


class CardPermissionError(OwnershipError):
    """Raised when the caller does not own the card."""

    def __init__(self, message: str = "only the owner can access the card"):
        super().__init__(message=message, error_code="CARD_PERMISSION_DENIED")


class NoSuchListError(BaseAppException):
    """Raised when a card references a list that is missing or owned by someone else."""

    def __init__(self, message: str = "no such list"):
        super().__init__(message=message, status_code=400, error_code="NO_SUCH_LIST")


class NoSuchProjectError(BaseAppException):
    """Raised when a card or note references a missing project."""

    def __init__(self, message: str = "no such project"):
        super().__init__(message=message, status_code=400, error_code="NO_SUCH_PROJECT")


class TimerStateError(BaseAppException):
    """Raised when a timer is started twice or stopped while not running."""

    def __init__(self, message: str = "Invalid timer operation"):
        super().__init__(message=message, status_code=400, error_code="INVALID_TIMER_OPERATION")
