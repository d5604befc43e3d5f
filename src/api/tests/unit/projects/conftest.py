"""In-memory collaborators for projects tests.

The fakes keep state across calls so tests can assert on what was (and
was not) persisted, the same way the PostgreSQL repositories would.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass
from unittest.mock import AsyncMock, create_autospec
from uuid import UUID

import pytest

from projects.application.observability import (
    ProjectServiceProbe,
    TaskServiceProbe,
)
from projects.application.services import ProjectService, TaskService
from projects.domain.aggregates import Project, Task


@dataclass(frozen=True)
class FakeUser:
    username: str
    first_name: str
    last_name: str
    email: str


class FakeUserDirectory:
    def __init__(self) -> None:
        self.users: dict[str, FakeUser] = {}

    def register(self, username: str, first_name: str = "Test") -> FakeUser:
        user = FakeUser(username, first_name, "User", f"{username}@example.com")
        self.users[username] = user
        return user

    async def fetch_by_username(self, username: str) -> list[FakeUser]:
        user = self.users.get(username)
        return [user] if user else []


class FakeProjectRepository:
    """Stores copies so unsaved aggregate changes never leak into the store."""

    def __init__(self) -> None:
        self.projects: dict[UUID, Project] = {}
        self.counters: dict[UUID, int] = {}
        self.outbox: list = []

    async def save(self, project: Project) -> None:
        self.outbox.extend(project.collect_events())
        self.projects[project.id] = copy.deepcopy(project)
        self.counters.setdefault(project.id, 0)

    async def get_by_id(self, project_id: UUID) -> Project | None:
        project = self.projects.get(project_id)
        return copy.deepcopy(project) if project else None

    async def list_by_owner(self, owner: str) -> list[Project]:
        return [
            copy.deepcopy(p)
            for p in sorted(self.projects.values(), key=lambda p: p.created_at)
            if p.owner == owner
        ]

    async def delete(self, project_id: UUID) -> bool:
        self.counters.pop(project_id, None)
        return self.projects.pop(project_id, None) is not None

    async def get_owner(self, project_id: UUID) -> str | None:
        project = self.projects.get(project_id)
        return project.owner if project else None

    async def has_access(self, project_id: UUID, username: str) -> bool:
        project = self.projects.get(project_id)
        return project is not None and project.has_access(username)

    async def next_task_number(self, project_id: UUID) -> int:
        self.counters[project_id] += 1
        return self.counters[project_id]


class FakeTaskRepository:
    def __init__(self) -> None:
        self.tasks: dict[tuple[UUID, int], Task] = {}

    async def save(self, task: Task) -> None:
        self.tasks[(task.project_id, task.number)] = copy.deepcopy(task)

    async def get(self, project_id: UUID, number: int) -> Task | None:
        task = self.tasks.get((project_id, number))
        return copy.deepcopy(task) if task else None

    async def list_by_project(
        self, project_id: UUID, assignee: str | None = None
    ) -> list[Task]:
        return [
            copy.deepcopy(t)
            for (pid, _), t in sorted(self.tasks.items(), key=lambda kv: kv[0][1])
            if pid == project_id and (assignee is None or t.assignee == assignee)
        ]

    async def delete(self, project_id: UUID, number: int) -> bool:
        return self.tasks.pop((project_id, number), None) is not None


@pytest.fixture
def mock_session() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def user_directory() -> FakeUserDirectory:
    directory = FakeUserDirectory()
    directory.register("alice", "Alice")
    directory.register("bob", "Bob")
    directory.register("carol", "Carol")
    return directory


@pytest.fixture
def project_repository() -> FakeProjectRepository:
    return FakeProjectRepository()


@pytest.fixture
def task_repository() -> FakeTaskRepository:
    return FakeTaskRepository()


@pytest.fixture
def project_probe():
    return create_autospec(ProjectServiceProbe, instance=True)


@pytest.fixture
def task_probe():
    return create_autospec(TaskServiceProbe, instance=True)


@pytest.fixture
def project_service(
    mock_session, project_repository, user_directory, project_probe
) -> ProjectService:
    return ProjectService(
        session=mock_session,
        project_repository=project_repository,
        user_directory=user_directory,
        probe=project_probe,
    )


@pytest.fixture
def task_service(
    mock_session, task_repository, project_repository, user_directory, task_probe
) -> TaskService:
    return TaskService(
        session=mock_session,
        task_repository=task_repository,
        project_repository=project_repository,
        user_directory=user_directory,
        probe=task_probe,
    )
