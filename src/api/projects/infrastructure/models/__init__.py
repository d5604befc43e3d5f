"""SQLAlchemy ORM models for the projects bounded context."""

from projects.infrastructure.models.collaborator import ProjectCollaboratorModel
from projects.infrastructure.models.project import ProjectModel
from projects.infrastructure.models.task import TaskModel

__all__ = [
    "ProjectCollaboratorModel",
    "ProjectModel",
    "TaskModel",
]
