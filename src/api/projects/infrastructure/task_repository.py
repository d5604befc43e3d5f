"""PostgreSQL implementation of ITaskRepository."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from projects.domain.aggregates import Task
from projects.domain.value_objects import TaskStatus
from projects.infrastructure.models import TaskModel


class TaskRepository:
    """Repository for Task aggregates. Never commits."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def save(self, task: Task) -> None:
        model = await self._session.get(TaskModel, (task.project_id, task.number))
        if model is None:
            model = TaskModel(project_id=task.project_id, number=task.number)
            self._session.add(model)

        model.title = task.title
        model.description = task.description
        model.author = task.author
        model.assignee = task.assignee
        model.status = task.status.value
        model.created_at = task.created_at
        model.changed_at = task.changed_at

        await self._session.flush()

    async def get(self, project_id: UUID, number: int) -> Task | None:
        model = await self._session.get(TaskModel, (project_id, number))
        return self._to_domain(model) if model else None

    async def list_by_project(
        self,
        project_id: UUID,
        assignee: str | None = None,
    ) -> list[Task]:
        stmt = select(TaskModel).where(TaskModel.project_id == project_id)
        if assignee is not None:
            stmt = stmt.where(TaskModel.assignee == assignee)
        stmt = stmt.order_by(TaskModel.number)

        result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def delete(self, project_id: UUID, number: int) -> bool:
        result = await self._session.execute(
            delete(TaskModel).where(
                TaskModel.project_id == project_id,
                TaskModel.number == number,
            )
        )
        return result.rowcount > 0

    def _to_domain(self, model: TaskModel) -> Task:
        return Task(
            project_id=model.project_id,
            number=model.number,
            title=model.title,
            description=model.description,
            author=model.author,
            assignee=model.assignee,
            status=TaskStatus(model.status),
            created_at=model.created_at,
            changed_at=model.changed_at,
        )
