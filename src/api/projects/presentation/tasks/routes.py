"""Task management routes.

Tasks are addressed by their number within the project.
"""

from __future__ import annotations

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from auth.dependencies import get_current_user
from auth.value_objects import CurrentUser
from projects.application.results import (
    CreateTaskStatus,
    DeleteTaskResult,
    TaskProfileStatus,
    UpdateTaskResult,
)
from projects.application.services import TaskService
from projects.dependencies import get_task_service
from projects.presentation.errors import guard_http_error
from projects.presentation.models import (
    CreateTaskRequest,
    CreateTaskResponse,
    TaskListResponse,
    TaskProfileResponse,
    TaskSummaryResponse,
    UpdateTaskRequest,
)
from shared_kernel.authorization import AccessDeniedError, ResourceNotFoundError

router = APIRouter(
    prefix="/projects/{project_id}/tasks",
    tags=["tasks"],
)


def _task_not_found(number: int) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Task {number} not found",
    )


def _assignee_not_found(assignee: str | None) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Assignee {assignee} not found",
    )


def _assignee_has_no_access(assignee: str | None) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail=f"Assignee {assignee} has no access to this project",
    )


@router.post(
    "",
    response_model=CreateTaskResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a task",
    responses={
        201: {"description": "Task created with the next number of the project"},
        400: {"description": "Validation error or assignee has no access"},
        403: {"description": "Caller does not own the project"},
        404: {"description": "Project or assignee not found"},
    },
)
async def create_task(
    project_id: UUID,
    request: CreateTaskRequest,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[TaskService, Depends(get_task_service)],
) -> CreateTaskResponse:
    try:
        result = await service.create_task(
            project_id,
            caller=current_user.username,
            title=request.title,
            description=request.description,
            assignee=request.assignee,
        )
    except (ResourceNotFoundError, AccessDeniedError) as e:
        raise guard_http_error(e) from e
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    if result.status is CreateTaskStatus.ASSIGNEE_NOT_FOUND:
        raise _assignee_not_found(request.assignee)
    if result.status is CreateTaskStatus.ASSIGNEE_HAS_NO_ACCESS:
        raise _assignee_has_no_access(request.assignee)

    assert result.task_number is not None
    return CreateTaskResponse(number=result.task_number)


@router.get(
    "",
    response_model=TaskListResponse,
    summary="List tasks",
    responses={
        403: {"description": "Caller does not own the project"},
        404: {"description": "Project not found"},
    },
)
async def list_tasks(
    project_id: UUID,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[TaskService, Depends(get_task_service)],
    assignee: Annotated[
        str | None, Query(description="Only tasks assigned to this user")
    ] = None,
) -> TaskListResponse:
    try:
        tasks = await service.list_tasks(
            project_id,
            caller=current_user.username,
            assignee=assignee,
        )
    except (ResourceNotFoundError, AccessDeniedError) as e:
        raise guard_http_error(e) from e

    return TaskListResponse(tasks=[TaskSummaryResponse.from_domain(t) for t in tasks])


@router.get(
    "/{number}",
    response_model=TaskProfileResponse,
    summary="Get a task",
    responses={
        403: {"description": "Caller does not own the project"},
        404: {"description": "Project or task not found"},
    },
)
async def get_task(
    project_id: UUID,
    number: int,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[TaskService, Depends(get_task_service)],
) -> TaskProfileResponse:
    try:
        result = await service.get_task_profile(
            project_id,
            caller=current_user.username,
            number=number,
        )
    except (ResourceNotFoundError, AccessDeniedError) as e:
        raise guard_http_error(e) from e

    if result.status is TaskProfileStatus.TASK_NOT_FOUND:
        raise _task_not_found(number)

    assert result.profile is not None
    return TaskProfileResponse.from_profile(result.profile)


@router.put(
    "/{number}",
    response_model=TaskProfileResponse,
    summary="Update a task",
    responses={
        400: {"description": "Validation error or assignee has no access"},
        403: {"description": "Caller does not own the project"},
        404: {"description": "Project, task or assignee not found"},
    },
)
async def update_task(
    project_id: UUID,
    number: int,
    request: UpdateTaskRequest,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[TaskService, Depends(get_task_service)],
) -> TaskProfileResponse:
    """Apply a partial update and return the updated task."""
    try:
        result = await service.update_task(
            project_id,
            caller=current_user.username,
            number=number,
            title=request.title,
            description=request.description,
            assignee=request.assignee,
            status=request.status,
        )
        if result is UpdateTaskResult.SUCCESS:
            updated = await service.get_task_profile(
                project_id, caller=current_user.username, number=number
            )
    except (ResourceNotFoundError, AccessDeniedError) as e:
        raise guard_http_error(e) from e
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    if result is UpdateTaskResult.TASK_NOT_FOUND:
        raise _task_not_found(number)
    if result is UpdateTaskResult.ASSIGNEE_NOT_FOUND:
        raise _assignee_not_found(request.assignee)
    if result is UpdateTaskResult.ASSIGNEE_HAS_NO_ACCESS:
        raise _assignee_has_no_access(request.assignee)

    # The task may have been deleted between the update and the re-read
    if updated.status is TaskProfileStatus.TASK_NOT_FOUND:
        raise _task_not_found(number)
    assert updated.profile is not None
    return TaskProfileResponse.from_profile(updated.profile)



@router.delete(
    "/{number}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a task",
    responses={
        403: {"description": "Caller does not own the project"},
        404: {"description": "Project or task not found"},
    },
)
async def delete_task(
    project_id: UUID,
    number: int,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[TaskService, Depends(get_task_service)],
) -> Response:
    try:
        result = await service.delete_task(
            project_id,
            caller=current_user.username,
            number=number,
        )
    except (ResourceNotFoundError, AccessDeniedError) as e:
        raise guard_http_error(e) from e

    if result is DeleteTaskResult.TASK_NOT_FOUND:
        raise _task_not_found(number)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
