"""Collaborator management routes."""

from __future__ import annotations

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Response, status

from auth.dependencies import get_current_user
from auth.value_objects import CurrentUser
from projects.application.results import InviteResult
from projects.application.services import ProjectService
from projects.dependencies import get_project_service
from projects.presentation.errors import guard_http_error
from projects.presentation.models import (
    CollaboratorListResponse,
    InviteCollaboratorRequest,
)
from shared_kernel.authorization import AccessDeniedError, ResourceNotFoundError

router = APIRouter(
    prefix="/projects/{project_id}/collaborators",
    tags=["collaborators"],
)


@router.get(
    "",
    response_model=CollaboratorListResponse,
    summary="List collaborators",
    responses={
        403: {"description": "Caller does not own the project"},
        404: {"description": "Project not found"},
    },
)
async def list_collaborators(
    project_id: UUID,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[ProjectService, Depends(get_project_service)],
) -> CollaboratorListResponse:
    try:
        usernames = await service.list_collaborators(
            project_id, caller=current_user.username
        )
    except (ResourceNotFoundError, AccessDeniedError) as e:
        raise guard_http_error(e) from e

    return CollaboratorListResponse(collaborators=usernames)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Invite a collaborator",
    description="""
Give a registered user access to the project. The invitee is notified by
email asynchronously.
""",
    responses={
        201: {"description": "Collaborator added"},
        403: {"description": "Caller does not own the project"},
        404: {"description": "Project or user not found"},
        409: {"description": "User already has access"},
    },
)
async def invite_collaborator(
    project_id: UUID,
    request: InviteCollaboratorRequest,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[ProjectService, Depends(get_project_service)],
) -> Response:
    try:
        result = await service.invite_collaborator(
            project_id,
            caller=current_user.username,
            username=request.username,
        )
    except (ResourceNotFoundError, AccessDeniedError) as e:
        raise guard_http_error(e) from e

    if result is InviteResult.USER_NOT_FOUND:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"User {request.username} not found",
        )
    if result is InviteResult.ALREADY_HAS_ACCESS:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"User {request.username} already has access to this project",
        )

    return Response(status_code=status.HTTP_201_CREATED)


@router.delete(
    "/{username}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Remove a collaborator",
    responses={
        403: {"description": "Caller does not own the project"},
        404: {"description": "Project not found or user is not a collaborator"},
    },
)
async def remove_collaborator(
    project_id: UUID,
    username: str,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[ProjectService, Depends(get_project_service)],
) -> Response:
    try:
        removed = await service.remove_collaborator(
            project_id,
            caller=current_user.username,
            username=username,
        )
    except (ResourceNotFoundError, AccessDeniedError) as e:
        raise guard_http_error(e) from e

    if not removed:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"User {username} is not a collaborator",
        )

    return Response(status_code=status.HTTP_204_NO_CONTENT)
