"""List service layer with business logic."""

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.orm import selectinload

from app.exceptions.base import DatabaseOperationError, NotModifiedError
from app.exceptions.list import ListNotEmptyError, ListNotFoundError, ListPermissionError
from app.schemas.list import ListCreate, ListUpdate
from models import Card, TaskList

logger = logging.getLogger(__name__)


class ListService:
    """Service class for list business logic."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create_list(self, list_data: ListCreate, user_id: UUID) -> TaskList:
        """Create a new list."""
        task_list = TaskList(user_id=user_id, title=list_data.title)

        try:
            self.db.add(task_list)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error("Failed to create list: %s", e)
            raise DatabaseOperationError("Failed to create list") from e

        return await self._load_list(task_list.id)

    async def get_lists(self, user_id: UUID) -> list[TaskList]:
        """Get all lists of a user with their cards."""
        stmt = (
            select(TaskList)
            .options(selectinload(TaskList.cards))
            .where(TaskList.user_id == user_id)
            .order_by(TaskList.creation_date)
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def get_list(self, list_id: UUID, user_id: UUID) -> TaskList:
        """Get a single list, ensuring the caller owns it."""
        return await self._get_owned_list(list_id, user_id, "only the owner can view the list")

    async def update_list(self, list_id: UUID, list_data: ListUpdate, user_id: UUID) -> TaskList:
        """Rename a list. A missing or blank title is a no-op."""
        if not list_data.title or not list_data.title.strip():
            raise NotModifiedError()

        task_list = await self._get_owned_list(
            list_id, user_id, "only the owner can update the list"
        )
        task_list.title = list_data.title.strip()

        try:
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error("Failed to update list %s: %s", list_id, e)
            raise DatabaseOperationError("Failed to update list") from e

        return await self._load_list(list_id)

    async def delete_list(self, list_id: UUID, user_id: UUID) -> None:
        """Delete a list. Only empty lists may be deleted."""
        task_list = await self._get_owned_list(
            list_id, user_id, "only the owner can delete the list"
        )

        if await self._get_card_count(list_id) > 0:
            raise ListNotEmptyError()

        try:
            await self.db.delete(task_list)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error("Failed to delete list %s: %s", list_id, e)
            raise DatabaseOperationError("Failed to delete list") from e

        logger.info("Deleted list %s", list_id)

    # Private helper methods
    async def _load_list(self, list_id: UUID) -> Optional[TaskList]:
        stmt = (
            select(TaskList)
            .options(selectinload(TaskList.cards))
            .where(TaskList.id == list_id)
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def _get_owned_list(self, list_id: UUID, user_id: UUID, message: str) -> TaskList:
        task_list = await self._load_list(list_id)
        if not task_list:
            raise ListNotFoundError()
        if task_list.user_id != user_id:
            raise ListPermissionError(message)
        return task_list

    async def _get_card_count(self, list_id: UUID) -> int:
        stmt = select(func.count(Card.id)).where(Card.list_id == list_id)
        result = await self.db.execute(stmt)
        return result.scalar() or 0
