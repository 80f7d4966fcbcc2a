"""Card service layer with business logic.

Cards reference their list and project through foreign keys, so the list and
project card collections are derived rather than stored twice. Every
operation validates its references first, then mutates, then commits once;
a failed write rolls back the whole operation.
"""

import logging
from datetime import datetime
from typing import Any, Optional
from uuid import UUID

from sqlalchemy import and_, func, or_, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.orm import selectinload

from app.exceptions.base import DatabaseOperationError, NotModifiedError
from app.exceptions.card import (
    CardNotFoundError,
    CardPermissionError,
    NoSuchListError,
    NoSuchProjectError,
    TimerStateError,
)
from app.schemas.card import CardCreate, CardFilter, CardUpdate
from app.shared.pagination import PaginationParams, paginate
from models import Card, ChecklistItem, Note, Project, TaskList, TimeEntry
from models.base import to_naive_utc, utcnow

logger = logging.getLogger(__name__)


def _card_query():
    return select(Card).options(
        selectinload(Card.list),
        selectinload(Card.project),
        selectinload(Card.notes),
        selectinload(Card.time_entries),
        selectinload(Card.checklist),
    )


class CardService:
    """Service class for card business logic."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create_card(self, card_data: CardCreate, user_id: UUID) -> Card:
        """Create a card at the end of its list."""
        task_list = await self._get_destination_list(card_data.list_id, user_id)
        project = None
        if card_data.project_id:
            project = await self._get_destination_project(card_data.project_id, user_id)

        card = Card(
            user_id=user_id,
            list_id=task_list.id,
            project_id=project.id if project else None,
            title=card_data.title,
            description=card_data.description,
            due_date=to_naive_utc(card_data.due_date),
            estimated_hours=card_data.estimated_hours,
            position=await self._next_position(task_list.id),
            checklist=[
                ChecklistItem(task=item.task, status=item.status, position=index)
                for index, item in enumerate(card_data.checklist)
            ],
        )
        card.log_activity(f"created in list '{task_list.title}'")
        if project:
            card.log_activity(f"added to project '{project.title}'")

        try:
            self.db.add(card)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error("Failed to create card: %s", e)
            raise DatabaseOperationError("Failed to create card") from e

        return await self._load_card(card.id)

    async def get_card(self, card_id: UUID, user_id: UUID) -> Card:
        """Get a card, ensuring the caller owns it."""
        return await self._get_owned_card(card_id, user_id, "only the owner can view the card")

    async def get_cards_list(
        self, user_id: UUID, filters: CardFilter, pagination: PaginationParams
    ) -> dict[str, Any]:
        """Get paginated list of the caller's cards with filters."""
        query = _card_query().where(Card.user_id == user_id)

        if filters.list_id:
            query = query.where(Card.list_id == filters.list_id)

        if filters.project_id:
            query = query.where(Card.project_id == filters.project_id)

        if filters.search:
            search_term = f"%{filters.search}%"
            query = query.where(
                or_(Card.title.ilike(search_term), Card.description.ilike(search_term))
            )

        query = query.order_by(Card.list_id, Card.position)

        return await paginate(self.db, query, pagination)

    async def update_card(self, card_id: UUID, card_data: CardUpdate, user_id: UUID) -> Card:
        """Merge the supplied fields over the card.

        A change of ``list_id`` moves the card to the end of the destination
        list; a change of ``project_id`` moves it between projects. A missing
        or blank title makes the whole update a no-op.
        """
        if not card_data.title or not card_data.title.strip():
            raise NotModifiedError()

        card = await self._get_owned_card(card_id, user_id, "only the owner can update the card")
        update_data = card_data.model_dump(exclude_unset=True)

        destination = None
        new_list_id = update_data.pop("list_id", None)
        if new_list_id is not None and new_list_id != card.list_id:
            destination = await self._get_destination_list(new_list_id, user_id)

        project_changed = False
        new_project = None
        if "project_id" in update_data:
            new_project_id = update_data.pop("project_id")
            project_changed = new_project_id != card.project_id
            if project_changed and new_project_id is not None:
                new_project = await self._get_destination_project(new_project_id, user_id)

        # References are valid; nothing below can fail validation
        if destination is not None:
            logger.info("Moving card %s from list %s to %s", card.id, card.list_id, destination.id)
            card.log_activity(f"moved from '{card.list.title}' to '{destination.title}'")
            card.position = await self._next_position(destination.id)
            card.list_id = destination.id

        if project_changed:
            if new_project is not None:
                card.log_activity(f"added to project '{new_project.title}'")
            elif card.project is not None:
                card.log_activity(f"removed from project '{card.project.title}'")
            card.project_id = new_project.id if new_project else None

        checklist = update_data.pop("checklist", None)
        if checklist is not None:
            card.checklist = [
                ChecklistItem(task=item["task"], status=item["status"], position=index)
                for index, item in enumerate(checklist)
            ]

        time_spent = update_data.pop("time_spent", None)
        if time_spent is not None:
            card.time_entries = [
                TimeEntry(start=to_naive_utc(entry["start"]), stop=to_naive_utc(entry["stop"]))
                for entry in time_spent
            ]

        for field, value in update_data.items():
            if field == "title":
                value = value.strip()
            elif field == "due_date":
                value = to_naive_utc(value)
            setattr(card, field, value)

        try:
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error("Failed to update card %s: %s", card_id, e)
            raise DatabaseOperationError("Failed to update card") from e

        return await self._load_card(card_id)

    async def delete_card(self, card_id: UUID, user_id: UUID) -> None:
        """Delete a card; its notes stay but are detached from it."""
        card = await self._get_owned_card(card_id, user_id, "only the owner can delete the card")

        try:
            await self.db.execute(update(Note).where(Note.card_id == card_id).values(card_id=None))
            await self.db.delete(card)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error("Failed to delete card %s: %s", card_id, e)
            raise DatabaseOperationError("Failed to delete card") from e

        logger.info("Deleted card %s", card_id)

    # Time tracking

    async def get_ticking_card(self, user_id: UUID) -> Optional[Card]:
        """Get the caller's card whose timer is running, if any."""
        stmt = (
            _card_query()
            .where(and_(Card.user_id == user_id, Card.ticking_from.is_not(None)))
            .order_by(Card.ticking_from.desc())
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(stmt)
        return result.scalars().first()

    async def start_timer(self, card_id: UUID, user_id: UUID) -> Card:
        """Start the timer on a card, stopping any other running timer of the user."""
        card = await self._get_owned_card(
            card_id, user_id, "only the owner can track time on the card"
        )
        if card.is_ticking:
            raise TimerStateError("timer is already running on this card")

        now = utcnow()
        running = await self.get_ticking_card(user_id)
        if running is not None:
            logger.info("Stopping timer on card %s before starting %s", running.id, card.id)
            self._close_interval(running, now)

        card.ticking_from = now

        try:
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error("Failed to start timer on card %s: %s", card_id, e)
            raise DatabaseOperationError("Failed to start timer") from e

        logger.info("Started timer on card %s", card_id)
        return await self._load_card(card_id)

    async def stop_timer(self, card_id: UUID, user_id: UUID) -> Card:
        """Stop the timer on a card and log the elapsed interval."""
        card = await self._get_owned_card(
            card_id, user_id, "only the owner can track time on the card"
        )
        if not card.is_ticking:
            raise TimerStateError("timer is not running on this card")

        self._close_interval(card, utcnow())

        try:
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error("Failed to stop timer on card %s: %s", card_id, e)
            raise DatabaseOperationError("Failed to stop timer") from e

        logger.info("Stopped timer on card %s", card_id)
        return await self._load_card(card_id)

    # Private helper methods

    @staticmethod
    def _close_interval(card: Card, now: datetime) -> None:
        stop = max(now, card.ticking_from)
        card.time_entries.append(TimeEntry(start=card.ticking_from, stop=stop))
        card.ticking_from = None

    async def _load_card(self, card_id: UUID) -> Optional[Card]:
        stmt = (
            _card_query()
            .where(Card.id == card_id)
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def _get_owned_card(self, card_id: UUID, user_id: UUID, message: str) -> Card:
        card = await self._load_card(card_id)
        if not card:
            raise CardNotFoundError()
        if card.user_id != user_id:
            raise CardPermissionError(message)
        return card

    async def _get_destination_list(self, list_id: UUID, user_id: UUID) -> TaskList:
        stmt = select(TaskList).where(and_(TaskList.id == list_id, TaskList.user_id == user_id))
        result = await self.db.execute(stmt)
        task_list = result.scalar_one_or_none()
        if not task_list:
            raise NoSuchListError()
        return task_list

    async def _get_destination_project(self, project_id: UUID, user_id: UUID) -> Project:
        stmt = select(Project).where(and_(Project.id == project_id, Project.user_id == user_id))
        result = await self.db.execute(stmt)
        project = result.scalar_one_or_none()
        if not project:
            raise NoSuchProjectError()
        return project

    async def _next_position(self, list_id: UUID) -> int:
        stmt = select(func.max(Card.position)).where(Card.list_id == list_id)
        result = await self.db.execute(stmt)
        highest = result.scalar()
        return 0 if highest is None else highest + 1
