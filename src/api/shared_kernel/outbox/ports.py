"""Protocols (ports) for the outbox pattern.

The outbox store, the event serializers contributed by bounded contexts,
and the broker publisher are all defined as protocols so that the
publisher stays context-agnostic and testable with mocks.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable
from uuid import UUID

if TYPE_CHECKING:
    from shared_kernel.outbox.value_objects import OutboxEvent


class DeliveryFailure(Exception):
    """Raised when the broker does not acknowledge a published message.

    Transient by nature: the outbox publisher keeps the event and retries
    on its next cycle. Never surfaced to API callers.
    """

    def __init__(self, key: str, reason: str):
        super().__init__(f"Delivery of {key} failed: {reason}")
        self.key = key
        self.reason = reason


@runtime_checkable
class IOutboxRepository(Protocol):
    """Repository for outbox persistence.

    Appends share the caller's session so that events become visible only
    when the caller's transaction commits. The repository never commits.
    """

    async def append(
        self,
        event_type: str,
        payload: dict[str, Any],
        aggregate_id: str,
    ) -> UUID:
        """Append a serialized event within the current transaction.

        Args:
            event_type: Name of the domain event type
            payload: JSON-compatible event data
            aggregate_id: Identifier of the producing aggregate

        Returns:
            The id assigned to the outbox event
        """
        ...

    async def fetch_pending(self, limit: int = 100) -> list["OutboxEvent"]:
        """Fetch pending events in insertion order.

        Args:
            limit: Maximum number of events to fetch

        Returns:
            List of pending OutboxEvent objects, oldest first
        """
        ...

    async def delete(self, event_id: UUID) -> bool:
        """Delete an event by id.

        Returns:
            True if a row was removed
        """
        ...


@runtime_checkable
class EventSerializer(Protocol):
    """Converts a bounded context's domain events to outbox payloads."""

    def serialize(self, event: Any) -> dict[str, Any]:
        """Convert a domain event to a JSON-compatible dictionary.

        Raises:
            ValueError: If the event type is not supported
        """
        ...


@runtime_checkable
class MessagePublisher(Protocol):
    """Publishes messages to the broker with confirmed delivery."""

    async def publish(self, topic: str, key: str, value: str) -> None:
        """Publish one message and wait for the broker acknowledgment.

        Args:
            topic: Destination topic
            key: Message key (the outbox event id)
            value: Serialized message body

        Raises:
            DeliveryFailure: If the broker rejects or does not confirm the message
        """
        ...

    async def close(self) -> None:
        """Release broker connections."""
        ...
