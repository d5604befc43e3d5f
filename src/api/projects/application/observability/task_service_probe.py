"""Protocol for task application service observability."""

from __future__ import annotations

from typing import Protocol

import structlog


class TaskServiceProbe(Protocol):
    """Domain probe for task application service operations."""

    def task_created(self, project_id: str, number: int, author: str) -> None:
        """Record task creation."""
        ...

    def task_updated(self, project_id: str, number: int, caller: str) -> None:
        """Record task update."""
        ...

    def task_deleted(self, project_id: str, number: int, caller: str) -> None:
        """Record task deletion."""
        ...

    def task_not_found(self, project_id: str, number: int) -> None:
        """Record a lookup of a missing task."""
        ...

    def assignee_rejected(self, project_id: str, assignee: str, reason: str) -> None:
        """Record an assignee that failed validation."""
        ...


class DefaultTaskServiceProbe:
    """Default implementation of TaskServiceProbe using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def task_created(self, project_id: str, number: int, author: str) -> None:
        self._logger.info(
            "task_created",
            project_id=project_id,
            number=number,
            author=author,
        )

    def task_updated(self, project_id: str, number: int, caller: str) -> None:
        self._logger.info(
            "task_updated",
            project_id=project_id,
            number=number,
            caller=caller,
        )

    def task_deleted(self, project_id: str, number: int, caller: str) -> None:
        self._logger.info(
            "task_deleted",
            project_id=project_id,
            number=number,
            caller=caller,
        )

    def task_not_found(self, project_id: str, number: int) -> None:
        self._logger.debug("task_not_found", project_id=project_id, number=number)

    def assignee_rejected(self, project_id: str, assignee: str, reason: str) -> None:
        self._logger.info(
            "assignee_rejected",
            project_id=project_id,
            assignee=assignee,
            reason=reason,
        )
