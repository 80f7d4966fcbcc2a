"""User-related Pydantic schemas for request/response validation."""

from typing import Optional

from pydantic import Field, field_validator

from .base import BaseModelSchema, BaseSchema
from .list import ListSummary


class UserSignupRequest(BaseSchema):
    """Schema for user registration.

    Password rules are enforced by the service so that the error messages
    stay specific ("password is required", minimum length).
    """

    username: str = Field(..., max_length=255, description="Unique login name")
    first_name: Optional[str] = Field(None, max_length=100)
    last_name: Optional[str] = Field(None, max_length=100)
    password: Optional[str] = Field(None, description="Clear-text password")

    @field_validator("username")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate that username is not empty."""
        if not v or not v.strip():
            raise ValueError("username is required")
        return v.strip()


class UserLoginRequest(BaseSchema):
    """Schema for user login request."""

    username: str = Field(..., description="Login name")
    password: str = Field(..., description="Clear-text password")


class AuthResponse(BaseSchema):
    """Token issued on registration and login."""

    token: str
    username: str
    name: str


class UserResponse(BaseModelSchema):
    """Schema for user response data."""

    username: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    name: str


class UserWithLists(UserResponse):
    """User together with the lists they own."""

    lists: list[ListSummary] = []
