"""Domain-Oriented Observability for the projects application layer."""

from projects.application.observability.project_service_probe import (
    DefaultProjectServiceProbe,
    ProjectServiceProbe,
)
from projects.application.observability.task_service_probe import (
    DefaultTaskServiceProbe,
    TaskServiceProbe,
)

__all__ = [
    "DefaultProjectServiceProbe",
    "DefaultTaskServiceProbe",
    "ProjectServiceProbe",
    "TaskServiceProbe",
]
