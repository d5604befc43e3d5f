"""Domain events for the projects context.

Only events with an external consumer are recorded. Invitations are
relayed to the email service through the outbox.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class CollaboratorInvited:
    """Event raised when a user is granted access to a project.

    Carries everything the email service needs so it never has to call
    back into this service.

    Attributes:
        project_id: The project the invitee joined
        project_title: Title of the project at invitation time
        inviter: Username of the project owner
        invitee: Username of the invited user
        invitee_email: Email address to notify
        invitee_first_name: First name used in the greeting
        occurred_at: When the invitation happened (UTC)
    """

    project_id: UUID
    project_title: str
    inviter: str
    invitee: str
    invitee_email: str
    invitee_first_name: str
    occurred_at: datetime


# Union of every event the projects context records
DomainEvent = CollaboratorInvited
