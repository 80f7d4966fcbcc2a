"""User-related exceptions."""

from .base import BaseAppException


class UserAlreadyExistsError(BaseAppException):
    """Raised when registering a username that is already taken."""

    def __init__(self, message: str = "username is already registered"):
        super().__init__(message=message, status_code=400, error_code="USER_ALREADY_EXISTS")


class InvalidCredentialsError(BaseAppException):
    """Raised when login credentials do not match a user."""

    def __init__(self, message: str = "invalid username or password"):
        super().__init__(message=message, status_code=401, error_code="INVALID_CREDENTIALS")
