"""List schemas for request/response serialization."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import Field, field_validator

from .base import BaseModelSchema, BaseSchema, require_text


class ListCreate(BaseSchema):
    """Schema for creating a new list."""

    title: str = Field(..., max_length=255)

    @field_validator("title", mode="before")
    @classmethod
    def validate_title(cls, v):
        return require_text(v, "title")


class ListUpdate(BaseSchema):
    """Schema for updating a list. A blank title leaves the list unchanged."""

    title: str | None = Field(None, max_length=255)


class CardSummary(BaseSchema):
    """Compact card representation embedded in lists and projects."""

    id: UUID
    title: str
    due_date: datetime | None = None
    ticking_from: datetime | None = None
    list_id: UUID
    project_id: UUID | None = None


class ListSummary(BaseSchema):
    """List without its cards, used when embedding lists in users."""

    id: UUID
    title: str
    creation_date: datetime | None = None


class ListResponse(BaseModelSchema):
    """Schema for list response."""

    user_id: UUID
    title: str
    creation_date: datetime | None = None
    cards: list[CardSummary] = []
