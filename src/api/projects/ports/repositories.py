"""Repository protocols (ports) for the projects bounded context."""

from __future__ import annotations

from typing import Protocol, runtime_checkable
from uuid import UUID

from projects.domain.aggregates import Project, Task


@runtime_checkable
class IProjectRepository(Protocol):
    """Repository for Project aggregate persistence.

    Also serves as the owner lookup for the ownership guard and as the
    access check for task assignment validation.
    """

    async def save(self, project: Project) -> None:
        """Persist a project with its collaborators.

        Pending domain events are appended to the outbox in the same
        transaction.
        """
        ...

    async def get_by_id(self, project_id: UUID) -> Project | None:
        """Retrieve a project with its collaborators loaded."""
        ...

    async def list_by_owner(self, owner: str) -> list[Project]:
        """List projects owned by a user, oldest first."""
        ...

    async def delete(self, project_id: UUID) -> bool:
        """Delete a project together with its tasks and collaborators."""
        ...

    async def get_owner(self, project_id: UUID) -> str | None:
        """Return the owner's username, or None if the project does not exist."""
        ...

    async def has_access(self, project_id: UUID, username: str) -> bool:
        """True if the user owns the project or collaborates on it."""
        ...

    async def next_task_number(self, project_id: UUID) -> int:
        """Atomically advance the project's task counter and return the new value."""
        ...


@runtime_checkable
class ITaskRepository(Protocol):
    """Repository for Task aggregate persistence."""

    async def save(self, task: Task) -> None:
        """Insert or update a task."""
        ...

    async def get(self, project_id: UUID, number: int) -> Task | None:
        """Retrieve a task by project and number."""
        ...

    async def list_by_project(
        self,
        project_id: UUID,
        assignee: str | None = None,
    ) -> list[Task]:
        """List a project's tasks ordered by number, optionally by assignee."""
        ...

    async def delete(self, project_id: UUID, number: int) -> bool:
        """Delete a task. Returns False if it did not exist."""
        ...
