"""Project application service.

Orchestrates project lifecycle and collaborator management. Every
operation on an existing project is gated by the ownership guard.
"""

from __future__ import annotations

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from projects.application.observability import (
    DefaultProjectServiceProbe,
    ProjectServiceProbe,
)
from projects.application.results import InviteResult
from projects.domain.aggregates import Project
from projects.ports.repositories import IProjectRepository
from projects.ports.users import UserDirectory
from shared_kernel.authorization import (
    OwnershipGuard,
    ResourceNotFoundError,
    owner_required,
)


class ProjectService:
    """Application service for project management.

    The caller's username is passed explicitly to every method. Writes
    commit the request session once the aggregate and its outbox events
    have been flushed.
    """

    def __init__(
        self,
        session: AsyncSession,
        project_repository: IProjectRepository,
        user_directory: UserDirectory,
        guard: OwnershipGuard | None = None,
        probe: ProjectServiceProbe | None = None,
    ):
        """Initialize ProjectService with dependencies.

        Args:
            session: Database session for transaction management
            project_repository: Repository for project persistence
            user_directory: Lookup for invitees
            guard: Ownership guard; defaults to one backed by the repository
            probe: Optional domain probe for observability
        """
        self._session = session
        self._project_repository = project_repository
        self._user_directory = user_directory
        self._guard = guard or OwnershipGuard("project", project_repository)
        self._probe = probe or DefaultProjectServiceProbe()

    async def _load(self, project_id: UUID, caller: str) -> Project:
        project = await self._project_repository.get_by_id(project_id)
        if project is None:
            # Deleted between the guard check and the load
            raise ResourceNotFoundError("project", project_id, caller)
        return project

    async def create_project(self, caller: str, title: str, description: str) -> Project:
        """Create a project owned by the caller.

        Raises:
            ValueError: If title or description are invalid
        """
        project = Project.create(title=title, description=description, owner=caller)
        await self._project_repository.save(project)
        await self._session.commit()

        self._probe.project_created(str(project.id), caller, title)
        return project

    async def list_projects(self, caller: str) -> list[Project]:
        """List the projects the caller owns, oldest first."""
        projects = await self._project_repository.list_by_owner(caller)
        self._probe.projects_listed(caller, len(projects))
        return projects

    @owner_required()
    async def get_project(self, project_id: UUID, caller: str) -> Project:
        return await self._load(project_id, caller)

    @owner_required()
    async def update_project(
        self,
        project_id: UUID,
        caller: str,
        title: str | None = None,
        description: str | None = None,
    ) -> Project:
        """Update title and/or description.

        Raises:
            ResourceNotFoundError: If the project does not exist
            AccessDeniedError: If the caller is not the owner
            ValueError: If the new values are invalid
        """
        project = await self._load(project_id, caller)
        project.update(title=title, description=description)
        await self._project_repository.save(project)
        await self._session.commit()

        self._probe.project_updated(str(project_id), caller)
        return project

    @owner_required()
    async def delete_project(self, project_id: UUID, caller: str) -> None:
        """Delete the project with its tasks and collaborators."""
        await self._project_repository.delete(project_id)
        await self._session.commit()
        self._probe.project_deleted(str(project_id), caller)

    @owner_required()
    async def invite_collaborator(
        self,
        project_id: UUID,
        caller: str,
        username: str,
    ) -> InviteResult:
        """Give another user access to the project.

        On success a CollaboratorInvited event is written to the outbox in
        the same transaction as the new collaborator row.
        """
        users = await self._user_directory.fetch_by_username(username)
        if not users:
            self._probe.invitation_rejected(str(project_id), username, "user_not_found")
            return InviteResult.USER_NOT_FOUND

        project = await self._load(project_id, caller)
        if project.has_access(username):
            self._probe.invitation_rejected(
                str(project_id), username, "already_has_access"
            )
            return InviteResult.ALREADY_HAS_ACCESS

        invitee = users[0]
        project.invite(
            username=invitee.username,
            email=invitee.email,
            first_name=invitee.first_name,
        )
        await self._project_repository.save(project)
        await self._session.commit()

        self._probe.collaborator_invited(str(project_id), caller, username)
        return InviteResult.SUCCESS

    @owner_required()
    async def list_collaborators(self, project_id: UUID, caller: str) -> list[str]:
        project = await self._load(project_id, caller)
        return list(project.collaborators)

    @owner_required()
    async def remove_collaborator(
        self,
        project_id: UUID,
        caller: str,
        username: str,
    ) -> bool:
        """Revoke a collaborator's access.

        Returns:
            False if the user was not a collaborator
        """
        project = await self._load(project_id, caller)
        if not project.remove_collaborator(username):
            return False

        await self._project_repository.save(project)
        await self._session.commit()
        self._probe.collaborator_removed(str(project_id), username)
        return True
