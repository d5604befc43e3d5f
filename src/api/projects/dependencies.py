"""FastAPI dependency wiring for the projects bounded context.

All repositories of one request share the request session, so a
service commit covers the aggregate rows and their outbox events.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from infrastructure.database.dependencies import get_session
from infrastructure.outbox.repository import OutboxRepository
from projects.application.services import ProjectService, TaskService
from projects.infrastructure.project_repository import ProjectRepository
from projects.infrastructure.task_repository import TaskRepository
from users.infrastructure.user_repository import UserRepository


def get_outbox_repository(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> OutboxRepository:
    return OutboxRepository(session=session)


def get_project_repository(
    session: Annotated[AsyncSession, Depends(get_session)],
    outbox: Annotated[OutboxRepository, Depends(get_outbox_repository)],
) -> ProjectRepository:
    return ProjectRepository(session=session, outbox=outbox)


def get_task_repository(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> TaskRepository:
    return TaskRepository(session=session)


def get_user_directory(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> UserRepository:
    return UserRepository(session=session)


def get_project_service(
    session: Annotated[AsyncSession, Depends(get_session)],
    project_repository: Annotated[ProjectRepository, Depends(get_project_repository)],
    user_directory: Annotated[UserRepository, Depends(get_user_directory)],
) -> ProjectService:
    return ProjectService(
        session=session,
        project_repository=project_repository,
        user_directory=user_directory,
    )


def get_task_service(
    session: Annotated[AsyncSession, Depends(get_session)],
    task_repository: Annotated[TaskRepository, Depends(get_task_repository)],
    project_repository: Annotated[ProjectRepository, Depends(get_project_repository)],
    user_directory: Annotated[UserRepository, Depends(get_user_directory)],
) -> TaskService:
    return TaskService(
        session=session,
        task_repository=task_repository,
        project_repository=project_repository,
        user_directory=user_directory,
    )
