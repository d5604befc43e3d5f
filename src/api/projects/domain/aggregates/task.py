"""Task aggregate."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from projects.domain.value_objects import (
    TaskStatus,
    validate_description,
    validate_title,
)


@dataclass
class Task:
    """A unit of work inside a project, addressed by its per-project number.

    Numbers are handed out by the project's counter and never reused,
    even after a task is deleted.
    """

    project_id: UUID
    number: int
    title: str
    description: str
    author: str
    assignee: str | None
    status: TaskStatus
    created_at: datetime
    changed_at: datetime

    def __post_init__(self) -> None:
        validate_title(self.title, "Task")
        validate_description(self.description, "Task")
        if self.number < 1:
            raise ValueError("Task number must be positive")

    @classmethod
    def create(
        cls,
        project_id: UUID,
        number: int,
        title: str,
        description: str,
        author: str,
        assignee: str | None = None,
    ) -> Task:
        """Factory for a new task in status NEW."""
        now = datetime.now(UTC)
        return cls(
            project_id=project_id,
            number=number,
            title=title,
            description=description,
            author=author,
            assignee=assignee,
            status=TaskStatus.NEW,
            created_at=now,
            changed_at=now,
        )

    def update(
        self,
        title: str | None = None,
        description: str | None = None,
        assignee: str | None = None,
        status: TaskStatus | None = None,
    ) -> None:
        """Apply a partial update. Omitted fields stay as they are.

        All values are validated before anything is changed, so a
        rejected update leaves the task untouched.
        """
        if title is not None:
            validate_title(title, "Task")
        if description is not None:
            validate_description(description, "Task")

        if title is not None:
            self.title = title
        if description is not None:
            self.description = description
        if assignee is not None:
            self.assignee = assignee
        if status is not None:
            self.status = status
        self.changed_at = datetime.now(UTC)
