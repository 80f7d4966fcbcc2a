"""Base schemas for the application."""

from datetime import datetime
from typing import Any, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class BaseSchema(BaseModel):
    """Base schema class with common configuration."""
    model_config = ConfigDict(from_attributes=True)


class BaseModelSchema(BaseSchema):
    """Base schema for database models."""
    id: UUID
    created_at: datetime
    updated_at: datetime


class ResponseSchema(BaseSchema):
    """Standard API response schema."""
    status: str
    message: Optional[str] = None
    data: Optional[dict] = None


def blank_to_none(value: Any) -> Any:
    """Treat an empty string reference as "no reference"."""
    if isinstance(value, str) and not value.strip():
        return None
    return value


def require_text(value: Any, field: str) -> str:
    """Strip a required text field, rejecting blank or non-string values."""
    if value is not None and not isinstance(value, str):
        raise ValueError(f"{field} must be a string")
    if value is None or not value.strip():
        raise ValueError(f"{field} should be present")
    return value.strip()
