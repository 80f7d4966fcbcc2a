"""Note API controller with FastAPI endpoints."""

from uuid import UUID

from fastapi import APIRouter, Body, Depends, Path, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.dependencies import get_current_user, get_db, validate_token
from app.domains.note.service import NoteService
from app.schemas.base import ResponseSchema
from app.schemas.note import NoteCreate, NoteResponse, NoteUpdate
from models.user import User

router = APIRouter(
    prefix="/api/notes",
    tags=["notes"],
    dependencies=[Depends(validate_token)],  # Global token validation for all routes
)


@router.get("", response_model=ResponseSchema)
async def get_notes(
    card_id: UUID | None = Query(None, description="Only notes attached to this card"),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Get the caller's notes."""
    service = NoteService(db)
    notes = await service.get_notes(current_user.id, card_id=card_id)

    return ResponseSchema(
        status="success",
        message="Notes retrieved successfully",
        data={"items": [NoteResponse.model_validate(note).model_dump() for note in notes]},
    )


@router.get("/{note_id}", response_model=ResponseSchema)
async def get_note(
    note_id: UUID = Path(..., description="Note ID"),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Get a specific note by ID."""
    service = NoteService(db)
    note = await service.get_note(note_id, current_user.id)

    return ResponseSchema(
        status="success",
        message="Note retrieved successfully",
        data=NoteResponse.model_validate(note).model_dump(),
    )


@router.post("", response_model=ResponseSchema, status_code=201)
async def create_note(
    note_data: NoteCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Create a new note."""
    service = NoteService(db)
    note = await service.create_note(note_data, current_user.id)

    return ResponseSchema(
        status="success",
        message="Note created successfully",
        data=NoteResponse.model_validate(note).model_dump(),
    )


@router.put("/{note_id}", response_model=ResponseSchema)
async def update_note(
    note_id: UUID = Path(..., description="Note ID"),
    note_data: NoteUpdate = Body(...),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Update a specific note."""
    service = NoteService(db)
    note = await service.update_note(note_id, note_data, current_user.id)

    return ResponseSchema(
        status="success",
        message="Note updated successfully",
        data=NoteResponse.model_validate(note).model_dump(),
    )


@router.delete("/{note_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_note(
    note_id: UUID = Path(..., description="Note ID"),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Delete a specific note."""
    service = NoteService(db)
    await service.delete_note(note_id, current_user.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
