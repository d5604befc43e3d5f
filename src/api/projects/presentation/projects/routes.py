"""Project management routes."""

from __future__ import annotations

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Response, status

from auth.dependencies import get_current_user
from auth.value_objects import CurrentUser
from projects.application.services import ProjectService
from projects.dependencies import get_project_service
from projects.presentation.errors import guard_http_error
from projects.presentation.models import (
    CreateProjectRequest,
    ProjectListResponse,
    ProjectResponse,
    UpdateProjectRequest,
)
from shared_kernel.authorization import AccessDeniedError, ResourceNotFoundError

router = APIRouter(
    prefix="/projects",
    tags=["projects"],
)


@router.post(
    "",
    response_model=ProjectResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a project",
    responses={
        201: {"description": "Project created; the caller is its owner"},
        400: {"description": "Validation error"},
        401: {"description": "Authentication required"},
    },
)
async def create_project(
    request: CreateProjectRequest,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[ProjectService, Depends(get_project_service)],
) -> ProjectResponse:
    """Create a new project owned by the caller."""
    try:
        project = await service.create_project(
            caller=current_user.username,
            title=request.title,
            description=request.description,
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    return ProjectResponse.from_domain(project)


@router.get(
    "",
    response_model=ProjectListResponse,
    summary="List own projects",
)
async def list_projects(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[ProjectService, Depends(get_project_service)],
) -> ProjectListResponse:
    """List the projects the caller owns, oldest first."""
    projects = await service.list_projects(caller=current_user.username)
    return ProjectListResponse(
        projects=[ProjectResponse.from_domain(p) for p in projects],
        count=len(projects),
    )


@router.get(
    "/{project_id}",
    response_model=ProjectResponse,
    summary="Get project by ID",
    responses={
        403: {"description": "Caller does not own the project"},
        404: {"description": "Project not found"},
    },
)
async def get_project(
    project_id: UUID,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[ProjectService, Depends(get_project_service)],
) -> ProjectResponse:
    try:
        project = await service.get_project(project_id, caller=current_user.username)
    except (ResourceNotFoundError, AccessDeniedError) as e:
        raise guard_http_error(e) from e

    return ProjectResponse.from_domain(project)


@router.put(
    "/{project_id}",
    response_model=ProjectResponse,
    summary="Update a project",
    responses={
        400: {"description": "Validation error"},
        403: {"description": "Caller does not own the project"},
        404: {"description": "Project not found"},
    },
)
async def update_project(
    project_id: UUID,
    request: UpdateProjectRequest,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[ProjectService, Depends(get_project_service)],
) -> ProjectResponse:
    """Update title and/or description of a project."""
    try:
        project = await service.update_project(
            project_id,
            caller=current_user.username,
            title=request.title,
            description=request.description,
        )
    except (ResourceNotFoundError, AccessDeniedError) as e:
        raise guard_http_error(e) from e
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    return ProjectResponse.from_domain(project)


@router.delete(
    "/{project_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a project",
    responses={
        204: {"description": "Project, its tasks and collaborators deleted"},
        403: {"description": "Caller does not own the project"},
        404: {"description": "Project not found"},
    },
)
async def delete_project(
    project_id: UUID,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[ProjectService, Depends(get_project_service)],
) -> Response:
    try:
        await service.delete_project(project_id, caller=current_user.username)
    except (ResourceNotFoundError, AccessDeniedError) as e:
        raise guard_http_error(e) from e

    return Response(status_code=status.HTTP_204_NO_CONTENT)
