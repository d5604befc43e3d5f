"""Serializer turning projects domain events into broker payloads.

Payload keys are camelCase because the email service consumes them
directly from the broker.
"""

from __future__ import annotations

from typing import Any

from projects.domain.events import CollaboratorInvited, DomainEvent


class ProjectsEventSerializer:
    """Serializes projects domain events for the outbox."""

    def serialize(self, event: DomainEvent) -> dict[str, Any]:
        """Convert a domain event to a JSON-compatible dictionary.

        Raises:
            ValueError: If the event type is not supported
        """
        match event:
            case CollaboratorInvited():
                return {
                    "type": "COLLABORATOR_INVITED",
                    "projectUuid": str(event.project_id),
                    "projectTitle": event.project_title,
                    "inviter": event.inviter,
                    "invitee": event.invitee,
                    "inviteeEmail": event.invitee_email,
                    "inviteeFirstName": event.invitee_first_name,
                    "occurredAt": event.occurred_at.isoformat(),
                }
            case _:
                raise ValueError(f"Unsupported event type: {type(event).__name__}")
