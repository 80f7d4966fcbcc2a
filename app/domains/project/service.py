"""Project service layer with business logic."""

import logging
from typing import Any, Optional
from uuid import UUID

from sqlalchemy import update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.orm import selectinload

from app.domains.project.report import build_time_report
from app.exceptions.base import DatabaseOperationError, NotModifiedError
from app.exceptions.project import ProjectNotFoundError, ProjectPermissionError
from app.schemas.project import ProjectCreate, ProjectUpdate
from models import Card, Note, Project
from models.base import to_naive_utc

logger = logging.getLogger(__name__)


class ProjectService:
    """Service class for project business logic."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create_project(self, project_data: ProjectCreate, user_id: UUID) -> Project:
        """Create a new project."""
        project = Project(
            user_id=user_id,
            title=project_data.title,
            due_date=to_naive_utc(project_data.due_date),
            estimated_hours=project_data.estimated_hours,
        )

        try:
            self.db.add(project)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error("Failed to create project: %s", e)
            raise DatabaseOperationError("Failed to create project") from e

        return await self._load_project(project.id)

    async def get_projects_list(self, user_id: UUID) -> list[Project]:
        """Get the caller's projects with their cards."""
        stmt = (
            select(Project)
            .options(selectinload(Project.cards))
            .where(Project.user_id == user_id)
            .order_by(Project.created_at)
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def get_project_report(self, project_id: UUID, user_id: UUID) -> dict[str, Any]:
        """Get a project with its cards and the weekly time report."""
        project = await self._get_owned_project(
            project_id, user_id, "only the owner may view the project"
        )

        intervals = [
            (entry.start, entry.stop) for card in project.cards for entry in card.time_entries
        ]
        report = build_time_report(intervals, project.estimated_hours)

        return {"project": project, **report}

    async def update_project(
        self, project_id: UUID, project_data: ProjectUpdate, user_id: UUID
    ) -> Project:
        """Update a project. A missing or blank title is a no-op."""
        if not project_data.title or not project_data.title.strip():
            raise NotModifiedError()

        project = await self._get_owned_project(
            project_id, user_id, "only the owner can update the project"
        )

        update_data = project_data.model_dump(exclude_unset=True)
        for field, value in update_data.items():
            if field == "title":
                value = value.strip()
            elif field == "due_date":
                value = to_naive_utc(value)
            setattr(project, field, value)

        try:
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error("Failed to update project %s: %s", project_id, e)
            raise DatabaseOperationError("Failed to update project") from e

        return await self._load_project(project_id)

    async def delete_project(self, project_id: UUID, user_id: UUID) -> None:
        """Delete a project; its cards and notes are kept without a project."""
        project = await self._get_owned_project(
            project_id, user_id, "only the owner can delete the project"
        )

        try:
            await self._unassign_from_project(project_id)
            await self.db.delete(project)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error("Failed to delete project %s: %s", project_id, e)
            raise DatabaseOperationError("Failed to delete project") from e

        logger.info("Deleted project %s", project_id)

    # Private helper methods
    async def _load_project(self, project_id: UUID) -> Optional[Project]:
        stmt = (
            select(Project)
            .options(
                selectinload(Project.cards).selectinload(Card.time_entries),
                selectinload(Project.notes),
            )
            .where(Project.id == project_id)
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def _get_owned_project(self, project_id: UUID, user_id: UUID, message: str) -> Project:
        project = await self._load_project(project_id)
        if not project:
            raise ProjectNotFoundError()
        if project.user_id != user_id:
            raise ProjectPermissionError(message)
        return project

    async def _unassign_from_project(self, project_id: UUID) -> None:
        """Set project_id to None for all cards and notes in the project."""
        await self.db.execute(
            update(Card).where(Card.project_id == project_id).values(project_id=None)
        )
        await self.db.execute(
            update(Note).where(Note.project_id == project_id).values(project_id=None)
        )
