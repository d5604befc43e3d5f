"""Application services for the projects bounded context."""

from projects.application.services.project_service import ProjectService
from projects.application.services.task_service import TaskService

__all__ = ["ProjectService", "TaskService"]
