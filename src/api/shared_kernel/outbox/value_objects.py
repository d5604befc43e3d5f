"""Value objects for the outbox pattern."""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime
from typing import Any
from uuid import UUID


@dataclass(frozen=True)
class OutboxEvent:
    """A pending event as stored in the outbox table.

    Rows are only ever inserted and deleted, so an OutboxEvent read from
    the store is never stale with respect to its payload.

    Attributes:
        id: Stable identifier, also used as the broker message key
        event_type: Name of the domain event (e.g. "CollaboratorInvited")
        aggregate_id: Identifier of the aggregate that produced the event
        payload: JSON object, always carrying an ``eventId`` field
        created_at: When the event was appended
    """

    id: UUID
    event_type: str
    aggregate_id: str
    payload: dict[str, Any]
    created_at: datetime

    @property
    def key(self) -> str:
        """Broker message key (string form of the id)."""
        return str(self.id)

    def to_message(self) -> str:
        """Serialize the payload to the JSON message value."""
        return json.dumps(self.payload, separators=(",", ":"), sort_keys=True)
