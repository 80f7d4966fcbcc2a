"""Card API controller with FastAPI endpoints."""

import logging
from uuid import UUID

from fastapi import APIRouter, Body, Depends, Path, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.dependencies import get_current_user, get_db, validate_token
from app.domains.card.service import CardService
from app.schemas.base import ResponseSchema
from app.schemas.card import CardCreate, CardFilter, CardResponse, CardUpdate
from app.shared.pagination import PaginationParams
from models.user import User

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/cards",
    tags=["cards"],
    dependencies=[Depends(validate_token)],  # Global token validation for all routes
)


@router.get("", response_model=ResponseSchema)
async def get_cards(
    list_id: UUID | None = Query(None),
    project_id: UUID | None = Query(None),
    search: str | None = Query(None),
    page: int = Query(1, ge=1),
    size: int = Query(20, ge=1, le=100),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Get paginated list of cards with optional filters."""
    filters = CardFilter(list_id=list_id, project_id=project_id, search=search)
    pagination = PaginationParams(page=page, size=size)

    service = CardService(db)
    result = await service.get_cards_list(
        user_id=current_user.id, filters=filters, pagination=pagination
    )

    return ResponseSchema(
        status="success",
        message="Cards retrieved successfully",
        data={
            "items": [CardResponse.model_validate(card).model_dump() for card in result["items"]],
            "total": result["total"],
            "page": result["page"],
            "size": result["size"],
            "has_next": result["has_next"],
            "has_prev": result["has_prev"],
        },
    )


@router.get("/timer", response_model=ResponseSchema)
async def get_timer(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Get the caller's card whose timer is running."""
    service = CardService(db)
    card = await service.get_ticking_card(current_user.id)

    if card is None:
        return ResponseSchema(
            status="success", message="No timer running", data={"no_timer_on": True}
        )

    return ResponseSchema(
        status="success",
        message="Timer running",
        data=CardResponse.model_validate(card).model_dump(),
    )


@router.get("/{card_id}", response_model=ResponseSchema)
async def get_card(
    card_id: UUID = Path(..., description="Card ID"),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Get a specific card by ID."""
    service = CardService(db)
    card = await service.get_card(card_id, current_user.id)

    return ResponseSchema(
        status="success",
        message="Card retrieved successfully",
        data=CardResponse.model_validate(card).model_dump(),
    )


@router.post("", response_model=ResponseSchema, status_code=201)
async def create_card(
    card_data: CardCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Create a new card in one of the caller's lists."""
    service = CardService(db)
    card = await service.create_card(card_data, current_user.id)

    return ResponseSchema(
        status="success",
        message="Card created successfully",
        data=CardResponse.model_validate(card).model_dump(),
    )


@router.put("/{card_id}", response_model=ResponseSchema)
async def update_card(
    card_id: UUID = Path(..., description="Card ID"),
    card_data: CardUpdate = Body(...),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Update a card, moving it between lists or projects when those change."""
    service = CardService(db)
    card = await service.update_card(card_id, card_data, current_user.id)

    return ResponseSchema(
        status="success",
        message="Card updated successfully",
        data=CardResponse.model_validate(card).model_dump(),
    )


@router.delete("/{card_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_card(
    card_id: UUID = Path(..., description="Card ID"),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Delete a specific card."""
    service = CardService(db)
    await service.delete_card(card_id, current_user.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{card_id}/timer/start", response_model=ResponseSchema)
async def start_timer(
    card_id: UUID = Path(..., description="Card ID"),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Start tracking time on a card."""
    service = CardService(db)
    card = await service.start_timer(card_id, current_user.id)

    return ResponseSchema(
        status="success",
        message="Timer started",
        data=CardResponse.model_validate(card).model_dump(),
    )


@router.post("/{card_id}/timer/stop", response_model=ResponseSchema)
async def stop_timer(
    card_id: UUID = Path(..., description="Card ID"),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Stop tracking time on a card and log the interval."""
    service = CardService(db)
    card = await service.stop_timer(card_id, current_user.id)

    return ResponseSchema(
        status="success",
        message="Timer stopped",
        data=CardResponse.model_validate(card).model_dump(),
    )
