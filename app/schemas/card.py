"""Card schemas for request/response serialization."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import Field, field_validator, model_validator

from models.base import to_naive_utc

from .base import BaseModelSchema, BaseSchema, blank_to_none, require_text


class TimeInterval(BaseSchema):
    """A closed time-tracking interval."""

    start: datetime
    stop: datetime

    @model_validator(mode="after")
    def validate_order(self):
        if to_naive_utc(self.stop) < to_naive_utc(self.start):
            raise ValueError("stop must not be earlier than start")
        return self


class TimeEntryResponse(TimeInterval):
    id: UUID


class ChecklistItemBase(BaseSchema):
    task: str = Field(..., min_length=1, max_length=500)
    status: str = Field(default="To-do", pattern="^(Done|To-do)$")


class ChecklistItemResponse(ChecklistItemBase):
    id: UUID


class CardCreate(BaseSchema):
    """Schema for creating a new card."""

    title: str = Field(..., max_length=500)
    description: str | None = None
    due_date: datetime | None = None
    estimated_hours: float | None = Field(None, ge=0)
    list_id: UUID
    project_id: UUID | None = None
    checklist: list[ChecklistItemBase] = []

    @field_validator("title", mode="before")
    @classmethod
    def validate_title(cls, v):
        return require_text(v, "title")

    @field_validator("project_id", mode="before")
    @classmethod
    def validate_project_id(cls, v):
        return blank_to_none(v)


class CardUpdate(BaseSchema):
    """Schema for updating a card.

    Only the supplied fields are merged over the stored card. A blank title
    means "no change"; an empty ``project_id`` removes the card from its
    project.
    """

    title: str | None = Field(None, max_length=500)
    description: str | None = None
    due_date: datetime | None = None
    estimated_hours: float | None = Field(None, ge=0)
    list_id: UUID | None = None
    project_id: UUID | None = None
    checklist: list[ChecklistItemBase] | None = None
    time_spent: list[TimeInterval] | None = None

    @field_validator("list_id", "project_id", mode="before")
    @classmethod
    def validate_references(cls, v):
        return blank_to_none(v)


class CardResponse(BaseModelSchema):
    """Schema for card response."""

    user_id: UUID
    list_id: UUID
    project_id: UUID | None = None
    title: str
    description: str | None = None
    creation_date: datetime | None = None
    due_date: datetime | None = None
    estimated_hours: float | None = None
    ticking_from: datetime | None = None
    hours_spent: float = 0
    time_spent: list[TimeEntryResponse] = Field(default=[], validation_alias="time_entries")
    checklist: list[ChecklistItemResponse] = []
    notes: list[UUID] = Field(default=[], validation_alias="note_ids")
    activity_log: list[str] = []


class CardFilter(BaseSchema):
    """Schema for filtering cards."""

    list_id: UUID | None = None
    project_id: UUID | None = None
    search: str | None = None
