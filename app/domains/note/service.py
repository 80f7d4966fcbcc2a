"""Note service layer with business logic."""

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy import and_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from app.exceptions.base import DatabaseOperationError, NotModifiedError
from app.exceptions.card import NoSuchProjectError
from app.exceptions.note import NoSuchCardError, NoteNotFoundError, NotePermissionError
from app.schemas.note import NoteCreate, NoteUpdate
from models import Card, Note, Project

logger = logging.getLogger(__name__)


class NoteService:
    """Service class for note business logic."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create_note(self, note_data: NoteCreate, user_id: UUID) -> Note:
        """Create a note, attaching it to a card and/or project when given."""
        if note_data.card_id:
            await self._validate_card(note_data.card_id, user_id)
        if note_data.project_id:
            await self._validate_project(note_data.project_id, user_id)

        note = Note(
            user_id=user_id,
            content=note_data.content,
            title=note_data.title.strip() if note_data.title else None,
            label=note_data.label,
            colour=note_data.colour,
            card_id=note_data.card_id,
            project_id=note_data.project_id,
        )

        try:
            self.db.add(note)
            await self.db.commit()
            await self.db.refresh(note)
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error("Failed to create note: %s", e)
            raise DatabaseOperationError("Failed to create note") from e

        return note

    async def get_notes(self, user_id: UUID, card_id: Optional[UUID] = None) -> list[Note]:
        """Get the caller's notes, optionally only those attached to one card."""
        stmt = select(Note).where(Note.user_id == user_id)
        if card_id:
            stmt = stmt.where(Note.card_id == card_id)
        stmt = stmt.order_by(Note.date).execution_options(populate_existing=True)

        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def get_note(self, note_id: UUID, user_id: UUID) -> Note:
        """Get a note, ensuring the caller owns it."""
        return await self._get_owned_note(note_id, user_id, "only the owner can view the note")

    async def update_note(self, note_id: UUID, note_data: NoteUpdate, user_id: UUID) -> Note:
        """Update a note. Missing or blank content is a no-op.

        Changing ``card_id`` moves the note from the old card's notes to the
        new card's notes.
        """
        if not note_data.content or not note_data.content.strip():
            raise NotModifiedError()

        note = await self._get_owned_note(note_id, user_id, "only the owner can update the note")
        update_data = note_data.model_dump(exclude_unset=True)

        card_id = update_data.get("card_id")
        if card_id is not None and card_id != note.card_id:
            await self._validate_card(card_id, user_id)
        project_id = update_data.get("project_id")
        if project_id is not None and project_id != note.project_id:
            await self._validate_project(project_id, user_id)

        if "card_id" in update_data and update_data["card_id"] != note.card_id:
            logger.info("Moving note %s from card %s to %s", note.id, note.card_id, card_id)

        for field, value in update_data.items():
            if field in ("content", "title") and value is not None:
                value = value.strip()
            setattr(note, field, value)

        try:
            await self.db.commit()
            await self.db.refresh(note)
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error("Failed to update note %s: %s", note_id, e)
            raise DatabaseOperationError("Failed to update note") from e

        return note

    async def delete_note(self, note_id: UUID, user_id: UUID) -> None:
        """Delete a note; it leaves its card's note collection with it."""
        note = await self._get_owned_note(note_id, user_id, "only the owner can delete the note")

        try:
            await self.db.delete(note)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error("Failed to delete note %s: %s", note_id, e)
            raise DatabaseOperationError("Failed to delete note") from e

    # Private helper methods
    async def _get_owned_note(self, note_id: UUID, user_id: UUID, message: str) -> Note:
        stmt = select(Note).where(Note.id == note_id).execution_options(populate_existing=True)
        result = await self.db.execute(stmt)
        note = result.scalar_one_or_none()
        if not note:
            raise NoteNotFoundError()
        if note.user_id != user_id:
            raise NotePermissionError(message)
        return note

    async def _validate_card(self, card_id: UUID, user_id: UUID) -> None:
        stmt = select(Card.id).where(and_(Card.id == card_id, Card.user_id == user_id))
        result = await self.db.execute(stmt)
        if result.scalar_one_or_none() is None:
            raise NoSuchCardError()

    async def _validate_project(self, project_id: UUID, user_id: UUID) -> None:
        stmt = select(Project.id).where(
            and_(Project.id == project_id, Project.user_id == user_id)
        )
        result = await self.db.execute(stmt)
        if result.scalar_one_or_none() is None:
            raise NoSuchProjectError()
