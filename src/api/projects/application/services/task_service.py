"""Task application service.

Every operation requires the caller to own the task's project. Assignees
are validated against the user directory and project access before any
row is written.
"""

from __future__ import annotations

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from projects.application.assignment import validate_assignee
from projects.application.observability import (
    DefaultTaskServiceProbe,
    TaskServiceProbe,
)
from projects.application.results import (
    AssigneeCheck,
    CreateTaskResult,
    CreateTaskStatus,
    DeleteTaskResult,
    TaskProfile,
    TaskProfileResult,
    TaskProfileStatus,
    UpdateTaskResult,
)
from projects.domain.aggregates import Task
from projects.domain.value_objects import TaskStatus
from projects.ports.repositories import IProjectRepository, ITaskRepository
from projects.ports.users import UserDirectory
from shared_kernel.authorization import (
    OwnershipGuard,
    ResourceNotFoundError,
    owner_required,
)


class TaskService:
    """Application service for task management inside a project."""

    def __init__(
        self,
        session: AsyncSession,
        task_repository: ITaskRepository,
        project_repository: IProjectRepository,
        user_directory: UserDirectory,
        guard: OwnershipGuard | None = None,
        probe: TaskServiceProbe | None = None,
    ):
        self._session = session
        self._task_repository = task_repository
        self._project_repository = project_repository
        self._user_directory = user_directory
        self._guard = guard or OwnershipGuard("project", project_repository)
        self._probe = probe or DefaultTaskServiceProbe()

    async def _check_assignee(self, project_id: UUID, assignee: str) -> AssigneeCheck:
        check = await validate_assignee(
            self._user_directory,
            self._project_repository,
            project_id,
            assignee,
        )
        if check is not AssigneeCheck.OK:
            self._probe.assignee_rejected(str(project_id), assignee, check.value)
        return check

    @owner_required()
    async def create_task(
        self,
        project_id: UUID,
        caller: str,
        title: str,
        description: str,
        assignee: str | None = None,
    ) -> CreateTaskResult:
        """Create a task with the next number of the project.

        Returns:
            CreateTaskResult carrying the new task number on success, or the
            reason the assignee was rejected (nothing is written then)

        Raises:
            ValueError: If title or description are invalid
        """
        if assignee is not None:
            check = await self._check_assignee(project_id, assignee)
            if check is AssigneeCheck.ASSIGNEE_NOT_FOUND:
                return CreateTaskResult(CreateTaskStatus.ASSIGNEE_NOT_FOUND)
            if check is AssigneeCheck.ASSIGNEE_HAS_NO_ACCESS:
                return CreateTaskResult(CreateTaskStatus.ASSIGNEE_HAS_NO_ACCESS)

        number = await self._project_repository.next_task_number(project_id)
        task = Task.create(
            project_id=project_id,
            number=number,
            title=title,
            description=description,
            author=caller,
            assignee=assignee,
        )
        await self._task_repository.save(task)
        await self._session.commit()

        self._probe.task_created(str(project_id), number, caller)
        return CreateTaskResult(CreateTaskStatus.SUCCESS, task_number=number)

    @owner_required()
    async def list_tasks(
        self,
        project_id: UUID,
        caller: str,
        assignee: str | None = None,
    ) -> list[Task]:
        """List tasks ordered by number, optionally only those of one assignee."""
        return await self._task_repository.list_by_project(project_id, assignee=assignee)

    @owner_required()
    async def get_task_profile(
        self,
        project_id: UUID,
        caller: str,
        number: int,
    ) -> TaskProfileResult:
        task = await self._task_repository.get(project_id, number)
        if task is None:
            self._probe.task_not_found(str(project_id), number)
            return TaskProfileResult(TaskProfileStatus.TASK_NOT_FOUND)

        project = await self._project_repository.get_by_id(project_id)
        if project is None:
            raise ResourceNotFoundError("project", project_id, caller)

        return TaskProfileResult(
            TaskProfileStatus.SUCCESS,
            profile=TaskProfile(
                number=task.number,
                title=task.title,
                description=task.description,
                project_title=project.title,
                author=task.author,
                assignee=task.assignee,
                status=task.status,
                created_at=task.created_at,
                changed_at=task.changed_at,
            ),
        )

    @owner_required()
    async def update_task(
        self,
        project_id: UUID,
        caller: str,
        number: int,
        title: str | None = None,
        description: str | None = None,
        assignee: str | None = None,
        status: TaskStatus | None = None,
    ) -> UpdateTaskResult:
        """Apply a partial update to a task.

        The task is left unchanged unless the result is SUCCESS.

        Raises:
            ValueError: If the new title or description are invalid
        """
        task = await self._task_repository.get(project_id, number)
        if task is None:
            self._probe.task_not_found(str(project_id), number)
            return UpdateTaskResult.TASK_NOT_FOUND

        if assignee is not None:
            check = await self._check_assignee(project_id, assignee)
            if check is AssigneeCheck.ASSIGNEE_NOT_FOUND:
                return UpdateTaskResult.ASSIGNEE_NOT_FOUND
            if check is AssigneeCheck.ASSIGNEE_HAS_NO_ACCESS:
                return UpdateTaskResult.ASSIGNEE_HAS_NO_ACCESS

        task.update(
            title=title,
            description=description,
            assignee=assignee,
            status=status,
        )
        await self._task_repository.save(task)
        await self._session.commit()

        self._probe.task_updated(str(project_id), number, caller)
        return UpdateTaskResult.SUCCESS

    @owner_required()
    async def delete_task(
        self,
        project_id: UUID,
        caller: str,
        number: int,
    ) -> DeleteTaskResult:
        if not await self._task_repository.delete(project_id, number):
            self._probe.task_not_found(str(project_id), number)
            return DeleteTaskResult.TASK_NOT_FOUND

        await self._session.commit()
        self._probe.task_deleted(str(project_id), number, caller)
        return DeleteTaskResult.SUCCESS
