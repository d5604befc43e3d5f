"""PostgreSQL implementation of IProjectRepository.

Write operations use the transactional outbox pattern: domain events are
collected from the aggregate and appended to the outbox table in the
same transaction as the project rows.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from sqlalchemy import delete, exists, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from projects.domain.aggregates import Project
from projects.infrastructure.models import (
    ProjectCollaboratorModel,
    ProjectModel,
    TaskModel,
)
from projects.infrastructure.outbox import ProjectsEventSerializer

if TYPE_CHECKING:
    from shared_kernel.outbox.ports import EventSerializer, IOutboxRepository


class ProjectRepository:
    """Repository for Project aggregates and their collaborators.

    Never commits; the application service owns the transaction.
    """

    def __init__(
        self,
        session: AsyncSession,
        outbox: IOutboxRepository,
        serializer: EventSerializer | None = None,
    ) -> None:
        self._session = session
        self._outbox = outbox
        self._serializer = serializer or ProjectsEventSerializer()

    async def save(self, project: Project) -> None:
        """Upsert the project row, sync collaborators, append events."""
        model = await self._session.get(ProjectModel, project.id)
        if model:
            model.title = project.title
            model.description = project.description
            model.updated_at = project.updated_at
        else:
            model = ProjectModel(
                id=project.id,
                title=project.title,
                description=project.description,
                owner=project.owner,
                last_task_number=0,
                created_at=project.created_at,
                updated_at=project.updated_at,
            )
            self._session.add(model)

        await self._sync_collaborators(project)

        # Flush so integrity errors surface before the outbox write
        await self._session.flush()

        for event in project.collect_events():
            await self._outbox.append(
                event_type=type(event).__name__,
                payload=self._serializer.serialize(event),
                aggregate_id=str(project.id),
            )

    async def _sync_collaborators(self, project: Project) -> None:
        stored = set(await self._collaborators(project.id))
        wanted = set(project.collaborators)

        for username in project.collaborators:
            if username not in stored:
                self._session.add(
                    ProjectCollaboratorModel(project_id=project.id, username=username)
                )

        removed = stored - wanted
        if removed:
            await self._session.execute(
                delete(ProjectCollaboratorModel).where(
                    ProjectCollaboratorModel.project_id == project.id,
                    ProjectCollaboratorModel.username.in_(removed),
                )
            )

    async def _collaborators(self, project_id: UUID) -> list[str]:
        stmt = (
            select(ProjectCollaboratorModel.username)
            .where(ProjectCollaboratorModel.project_id == project_id)
            .order_by(
                ProjectCollaboratorModel.invited_at,
                ProjectCollaboratorModel.username,
            )
        )
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    def _to_domain(self, model: ProjectModel, collaborators: list[str]) -> Project:
        return Project(
            id=model.id,
            title=model.title,
            description=model.description,
            owner=model.owner,
            created_at=model.created_at,
            updated_at=model.updated_at,
            collaborators=collaborators,
        )

    async def get_by_id(self, project_id: UUID) -> Project | None:
        model = await self._session.get(ProjectModel, project_id)
        if model is None:
            return None
        return self._to_domain(model, await self._collaborators(project_id))

    async def list_by_owner(self, owner: str) -> list[Project]:
        stmt = (
            select(ProjectModel)
            .where(ProjectModel.owner == owner)
            .order_by(ProjectModel.created_at, ProjectModel.id)
        )
        result = await self._session.execute(stmt)
        return [
            self._to_domain(model, await self._collaborators(model.id))
            for model in result.scalars().all()
        ]

    async def delete(self, project_id: UUID) -> bool:
        """Delete the project, its tasks and its collaborators."""
        await self._session.execute(
            delete(TaskModel).where(TaskModel.project_id == project_id)
        )
        await self._session.execute(
            delete(ProjectCollaboratorModel).where(
                ProjectCollaboratorModel.project_id == project_id
            )
        )
        result = await self._session.execute(
            delete(ProjectModel).where(ProjectModel.id == project_id)
        )
        return result.rowcount > 0

    async def get_owner(self, project_id: UUID) -> str | None:
        result = await self._session.execute(
            select(ProjectModel.owner).where(ProjectModel.id == project_id)
        )
        return result.scalar_one_or_none()

    async def has_access(self, project_id: UUID, username: str) -> bool:
        collaborator = exists().where(
            ProjectCollaboratorModel.project_id == ProjectModel.id,
            ProjectCollaboratorModel.username == username,
        )
        stmt = select(ProjectModel.id).where(
            ProjectModel.id == project_id,
            or_(ProjectModel.owner == username, collaborator),
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def next_task_number(self, project_id: UUID) -> int:
        # Row lock from the UPDATE serializes concurrent task creation
        stmt = (
            update(ProjectModel)
            .where(ProjectModel.id == project_id)
            .values(last_task_number=ProjectModel.last_task_number + 1)
            .returning(ProjectModel.last_task_number)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one()
