"""List API controller with FastAPI endpoints."""

import logging
from uuid import UUID

from fastapi import APIRouter, Body, Depends, Path, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.dependencies import get_current_user, get_db, validate_token
from app.domains.list.service import ListService
from app.schemas.base import ResponseSchema
from app.schemas.list import ListCreate, ListResponse, ListUpdate
from models.user import User

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/lists",
    tags=["lists"],
    dependencies=[Depends(validate_token)],  # Global token validation for all routes
)


@router.get("", response_model=ResponseSchema)
async def get_lists(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Get the caller's lists with their cards."""
    service = ListService(db)
    lists = await service.get_lists(current_user.id)

    return ResponseSchema(
        status="success",
        message="Lists retrieved successfully",
        data={"items": [ListResponse.model_validate(item).model_dump() for item in lists]},
    )


@router.get("/{list_id}", response_model=ResponseSchema)
async def get_list(
    list_id: UUID = Path(..., description="List ID"),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Get a specific list by ID."""
    service = ListService(db)
    task_list = await service.get_list(list_id, current_user.id)

    return ResponseSchema(
        status="success",
        message="List retrieved successfully",
        data=ListResponse.model_validate(task_list).model_dump(),
    )


@router.post("", response_model=ResponseSchema, status_code=201)
async def create_list(
    list_data: ListCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Create a new list."""
    service = ListService(db)
    task_list = await service.create_list(list_data, current_user.id)

    return ResponseSchema(
        status="success",
        message="List created successfully",
        data=ListResponse.model_validate(task_list).model_dump(),
    )


@router.put("/{list_id}", response_model=ResponseSchema)
async def update_list(
    list_id: UUID = Path(..., description="List ID"),
    list_data: ListUpdate = Body(...),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Update a specific list."""
    service = ListService(db)
    task_list = await service.update_list(list_id, list_data, current_user.id)

    return ResponseSchema(
        status="success",
        message="List updated successfully",
        data=ListResponse.model_validate(task_list).model_dump(),
    )


@router.delete("/{list_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_list(
    list_id: UUID = Path(..., description="List ID"),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Delete an empty list."""
    service = ListService(db)
    await service.delete_list(list_id, current_user.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
