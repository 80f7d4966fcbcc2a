"""Project API controller with FastAPI endpoints."""

import logging
from uuid import UUID

from fastapi import APIRouter, Body, Depends, Path, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.dependencies import get_current_user, get_db, validate_token
from app.domains.project.service import ProjectService
from app.schemas.base import ResponseSchema
from app.schemas.project import (
    ProjectCreate,
    ProjectDetail,
    ProjectResponse,
    ProjectUpdate,
)
from models.user import User

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/projects",
    tags=["projects"],
    dependencies=[Depends(validate_token)],  # Global token validation for all routes
)


@router.post("", response_model=ResponseSchema, status_code=201)
async def create_project(
    project_data: ProjectCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Create a new project."""
    service = ProjectService(db)
    project = await service.create_project(project_data=project_data, user_id=current_user.id)

    return ResponseSchema(
        status="success",
        message="Project created successfully",
        data=ProjectResponse.model_validate(project).model_dump(),
    )


@router.get("", response_model=ResponseSchema)
async def get_projects(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Get the caller's projects with their cards."""
    service = ProjectService(db)
    projects = await service.get_projects_list(current_user.id)

    return ResponseSchema(
        status="success",
        message="Projects retrieved successfully",
        data={"items": [ProjectResponse.model_validate(p).model_dump() for p in projects]},
    )


@router.get("/{project_id}", response_model=ResponseSchema)
async def get_project(
    project_id: UUID = Path(..., description="Project ID"),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Get a project with its cards and weekly time report."""
    service = ProjectService(db)
    result = await service.get_project_report(project_id, current_user.id)

    project_data = ProjectResponse.model_validate(result.pop("project")).model_dump()
    detail = ProjectDetail.model_validate({**project_data, **result})

    return ResponseSchema(
        status="success",
        message="Project retrieved successfully",
        data=detail.model_dump(),
    )


@router.put("/{project_id}", response_model=ResponseSchema)
async def update_project(
    project_id: UUID = Path(..., description="Project ID"),
    project_data: ProjectUpdate = Body(...),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Update a specific project."""
    service = ProjectService(db)
    project = await service.update_project(project_id, project_data, current_user.id)

    return ResponseSchema(
        status="success",
        message="Project updated successfully",
        data=ProjectResponse.model_validate(project).model_dump(),
    )


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_project(
    project_id: UUID = Path(..., description="Project ID"),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Delete a project, keeping its cards and notes."""
    service = ProjectService(db)
    await service.delete_project(project_id, current_user.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
