"""Ports (interfaces) for the projects bounded context.

Ports define the contracts for repositories and the user directory
without specifying implementation details.
"""

from projects.ports.repositories import IProjectRepository, ITaskRepository
from projects.ports.users import DirectoryUser, UserDirectory

__all__ = [
    "DirectoryUser",
    "IProjectRepository",
    "ITaskRepository",
    "UserDirectory",
]
