"""Protocol for project application service observability."""

from __future__ import annotations

from typing import Protocol

import structlog


class ProjectServiceProbe(Protocol):
    """Domain probe for project application service operations."""

    def project_created(self, project_id: str, owner: str, title: str) -> None:
        """Record project creation."""
        ...

    def project_updated(self, project_id: str, caller: str) -> None:
        """Record project update."""
        ...

    def project_deleted(self, project_id: str, caller: str) -> None:
        """Record project deletion."""
        ...

    def projects_listed(self, owner: str, count: int) -> None:
        """Record project listing."""
        ...

    def collaborator_invited(self, project_id: str, inviter: str, invitee: str) -> None:
        """Record a successful invitation."""
        ...

    def invitation_rejected(
        self,
        project_id: str,
        invitee: str,
        reason: str,
    ) -> None:
        """Record an invitation that did not go through."""
        ...

    def collaborator_removed(self, project_id: str, username: str) -> None:
        """Record revoked access."""
        ...


class DefaultProjectServiceProbe:
    """Default implementation of ProjectServiceProbe using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def project_created(self, project_id: str, owner: str, title: str) -> None:
        self._logger.info(
            "project_created",
            project_id=project_id,
            owner=owner,
            title=title,
        )

    def project_updated(self, project_id: str, caller: str) -> None:
        self._logger.info("project_updated", project_id=project_id, caller=caller)

    def project_deleted(self, project_id: str, caller: str) -> None:
        self._logger.info("project_deleted", project_id=project_id, caller=caller)

    def projects_listed(self, owner: str, count: int) -> None:
        self._logger.debug("projects_listed", owner=owner, count=count)

    def collaborator_invited(self, project_id: str, inviter: str, invitee: str) -> None:
        self._logger.info(
            "collaborator_invited",
            project_id=project_id,
            inviter=inviter,
            invitee=invitee,
        )

    def invitation_rejected(
        self,
        project_id: str,
        invitee: str,
        reason: str,
    ) -> None:
        self._logger.info(
            "invitation_rejected",
            project_id=project_id,
            invitee=invitee,
            reason=reason,
        )

    def collaborator_removed(self, project_id: str, username: str) -> None:
        self._logger.info(
            "collaborator_removed",
            project_id=project_id,
            username=username,
        )
