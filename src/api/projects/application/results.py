"""Result values returned by the projects application services.

Expected business outcomes are returned rather than raised; the
presentation layer maps each status to an HTTP response.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

from projects.domain.value_objects import TaskStatus


class AssigneeCheck(StrEnum):
    OK = "ok"
    ASSIGNEE_NOT_FOUND = "assignee_not_found"
    ASSIGNEE_HAS_NO_ACCESS = "assignee_has_no_access"


class CreateTaskStatus(StrEnum):
    SUCCESS = "success"
    ASSIGNEE_NOT_FOUND = "assignee_not_found"
    ASSIGNEE_HAS_NO_ACCESS = "assignee_has_no_access"


class UpdateTaskResult(StrEnum):
    SUCCESS = "success"
    TASK_NOT_FOUND = "task_not_found"
    ASSIGNEE_NOT_FOUND = "assignee_not_found"
    ASSIGNEE_HAS_NO_ACCESS = "assignee_has_no_access"


class DeleteTaskResult(StrEnum):
    SUCCESS = "success"
    TASK_NOT_FOUND = "task_not_found"


class TaskProfileStatus(StrEnum):
    SUCCESS = "success"
    TASK_NOT_FOUND = "task_not_found"


class InviteResult(StrEnum):
    SUCCESS = "success"
    USER_NOT_FOUND = "user_not_found"
    ALREADY_HAS_ACCESS = "already_has_access"


@dataclass(frozen=True)
class CreateTaskResult:
    """Outcome of task creation; ``task_number`` is set only on success."""

    status: CreateTaskStatus
    task_number: int | None = None


@dataclass(frozen=True)
class TaskProfile:
    """Read model of a single task, including its project's title."""

    number: int
    title: str
    description: str
    project_title: str
    author: str
    assignee: str | None
    status: TaskStatus
    created_at: datetime
    changed_at: datetime


@dataclass(frozen=True)
class TaskProfileResult:
    status: TaskProfileStatus
    profile: TaskProfile | None = None
