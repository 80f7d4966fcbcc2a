"""Project schemas for request/response serialization."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import Field, field_validator

from .base import BaseModelSchema, BaseSchema, require_text
from .list import CardSummary


class ProjectCreate(BaseSchema):
    """Schema for creating a new project."""

    title: str = Field(..., max_length=255)
    due_date: datetime | None = None
    estimated_hours: float | None = Field(None, ge=0)

    @field_validator("title", mode="before")
    @classmethod
    def validate_title(cls, v):
        return require_text(v, "title")


class ProjectUpdate(BaseSchema):
    """Schema for updating a project. A blank title leaves the project unchanged."""

    title: str | None = Field(None, max_length=255)
    due_date: datetime | None = None
    estimated_hours: float | None = Field(None, ge=0)


class ProjectResponse(BaseModelSchema):
    """Schema for project response."""

    user_id: UUID
    title: str
    due_date: datetime | None = None
    estimated_hours: float | None = None
    cards: list[CardSummary] = []


class WeeklyHours(BaseSchema):
    """Hours logged in one ISO week."""

    year: int
    week: int
    hours: float


class ProjectTimeReport(BaseSchema):
    """Time spent on a project's cards, aggregated by ISO week."""

    total_hours_spent: float
    total_hours_left: float | None = None
    average_hours_per_week: float
    weekly_hours: list[WeeklyHours] = []


class ProjectDetail(ProjectResponse, ProjectTimeReport):
    """Project with its cards and time report."""
