"""Validation of task assignees.

An assignee must exist in the user directory and have access to the
project at assignment time. The outcome is returned, never raised.
"""

from __future__ import annotations

from typing import Protocol
from uuid import UUID

from projects.application.results import AssigneeCheck
from projects.ports.users import UserDirectory


class ProjectAccess(Protocol):
    async def has_access(self, project_id: UUID, username: str) -> bool: ...


async def validate_assignee(
    directory: UserDirectory,
    access: ProjectAccess,
    project_id: UUID,
    username: str,
) -> AssigneeCheck:
    """Check that ``username`` may be assigned tasks in the project.

    Returns:
        ASSIGNEE_NOT_FOUND if the directory has no such user,
        ASSIGNEE_HAS_NO_ACCESS if the user is neither owner nor
        collaborator, OK otherwise
    """
    users = await directory.fetch_by_username(username)
    if not users:
        return AssigneeCheck.ASSIGNEE_NOT_FOUND

    if not await access.has_access(project_id, username):
        return AssigneeCheck.ASSIGNEE_HAS_NO_ACCESS

    return AssigneeCheck.OK
