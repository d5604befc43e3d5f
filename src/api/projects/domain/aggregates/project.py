"""Project aggregate."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from projects.domain.events import CollaboratorInvited
from projects.domain.value_objects import validate_description, validate_title

if TYPE_CHECKING:
    from projects.domain.events import DomainEvent


@dataclass
class Project:
    """A project owned by exactly one user.

    Business rules:
    - Title must be 1-255 characters
    - The owner never changes and the id is immutable
    - A user has access when they are the owner or a collaborator
    - A user with access cannot be invited again

    Event collection:
    - Invitations record a CollaboratorInvited event
    - Events are drained through collect_events() for the outbox
    """

    id: UUID
    title: str
    description: str
    owner: str
    created_at: datetime
    updated_at: datetime
    collaborators: list[str] = field(default_factory=list)
    _pending_events: list[DomainEvent] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        validate_title(self.title, "Project")
        validate_description(self.description, "Project")

    @classmethod
    def create(cls, title: str, description: str, owner: str) -> Project:
        """Factory for a new project owned by ``owner``.

        Raises:
            ValueError: If title or description are invalid
        """
        now = datetime.now(UTC)
        return cls(
            id=uuid4(),
            title=title,
            description=description,
            owner=owner,
            created_at=now,
            updated_at=now,
        )

    def has_access(self, username: str) -> bool:
        return username == self.owner or username in self.collaborators

    def update(self, title: str | None = None, description: str | None = None) -> None:
        """Change title and/or description. Omitted fields stay as they are."""
        if title is not None:
            validate_title(title, "Project")
            self.title = title
        if description is not None:
            validate_description(description, "Project")
            self.description = description
        self.updated_at = datetime.now(UTC)

    def invite(self, username: str, email: str, first_name: str) -> None:
        """Grant a user access and record the invitation.

        Raises:
            ValueError: If the user already has access
        """
        if self.has_access(username):
            raise ValueError(f"User {username} already has access to project {self.id}")

        self.collaborators.append(username)
        self._pending_events.append(
            CollaboratorInvited(
                project_id=self.id,
                project_title=self.title,
                inviter=self.owner,
                invitee=username,
                invitee_email=email,
                invitee_first_name=first_name,
                occurred_at=datetime.now(UTC),
            )
        )

    def remove_collaborator(self, username: str) -> bool:
        """Revoke a collaborator's access. Returns False if not a collaborator."""
        if username not in self.collaborators:
            return False
        self.collaborators.remove(username)
        return True

    def collect_events(self) -> list[DomainEvent]:
        """Return and clear pending domain events."""
        events = self._pending_events.copy()
        self._pending_events.clear()
        return events
