"""Note schemas for request/response serialization."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import Field, field_validator

from .base import BaseModelSchema, BaseSchema, blank_to_none, require_text


class NoteCreate(BaseSchema):
    """Schema for creating a new note."""

    content: str
    title: str | None = Field(None, max_length=255)
    label: str | None = Field(None, max_length=100)
    colour: str | None = Field(None, max_length=50)
    card_id: UUID | None = None
    project_id: UUID | None = None

    @field_validator("content", mode="before")
    @classmethod
    def validate_content(cls, v):
        return require_text(v, "content")

    @field_validator("card_id", "project_id", mode="before")
    @classmethod
    def validate_references(cls, v):
        return blank_to_none(v)


class NoteUpdate(BaseSchema):
    """Schema for updating a note. Blank content leaves the note unchanged."""

    content: str | None = None
    title: str | None = Field(None, max_length=255)
    label: str | None = Field(None, max_length=100)
    colour: str | None = Field(None, max_length=50)
    card_id: UUID | None = None
    project_id: UUID | None = None

    @field_validator("card_id", "project_id", mode="before")
    @classmethod
    def validate_references(cls, v):
        return blank_to_none(v)


class NoteResponse(BaseModelSchema):
    """Schema for note response."""

    user_id: UUID
    content: str
    title: str | None = None
    label: str | None = None
    colour: str | None = None
    date: datetime | None = None
    card_id: UUID | None = None
    project_id: UUID | None = None
