"""Observability probes for the outbox publisher.

Following Domain Oriented Observability, probes capture domain-significant
events without cluttering the publisher with logging concerns.
"""

from __future__ import annotations

from typing import Protocol
from uuid import UUID

import structlog

logger = structlog.get_logger()


class OutboxPublisherProbe(Protocol):
    """Protocol for outbox publisher observability."""

    def publisher_started(self, topic: str, poll_interval: float) -> None:
        """Called when the publisher loop starts."""
        ...

    def publisher_stopped(self) -> None:
        """Called when the publisher loop stops."""
        ...

    def event_sent(self, event_id: UUID, event_type: str) -> None:
        """Called when the broker acknowledged an event."""
        ...

    def event_deleted(self, event_id: UUID) -> None:
        """Called when a sent event was removed from the store."""
        ...

    def delivery_failed(self, event_id: UUID, error: str) -> None:
        """Called when publishing failed; the event stays for the next cycle."""
        ...

    def deletion_failed(self, event_id: UUID, error: str) -> None:
        """Called when a sent event could not be deleted (may be re-sent)."""
        ...

    def cycle_completed(self, fetched: int, sent: int) -> None:
        """Called at the end of each publisher cycle."""
        ...

    def cycle_skipped(self) -> None:
        """Called when a tick finds the previous cycle still running."""
        ...

    def poll_loop_error(self, error: str) -> None:
        """Called when a cycle fails unexpectedly."""
        ...


class DefaultOutboxPublisherProbe:
    """Default implementation using structlog."""

    def __init__(self) -> None:
        self._log = logger.bind(component="outbox_publisher")

    def publisher_started(self, topic: str, poll_interval: float) -> None:
        """Log publisher start."""
        self._log.info(
            "outbox_publisher_started",
            topic=topic,
            poll_interval=poll_interval,
        )

    def publisher_stopped(self) -> None:
        """Log publisher stop."""
        self._log.info("outbox_publisher_stopped")

    def event_sent(self, event_id: UUID, event_type: str) -> None:
        """Log broker acknowledgment."""
        self._log.info(
            f"{event_id} is sent",
            event_id=str(event_id),
            event_type=event_type,
        )

    def event_deleted(self, event_id: UUID) -> None:
        """Log removal of a sent event."""
        self._log.debug("outbox_event_deleted", event_id=str(event_id))

    def delivery_failed(self, event_id: UUID, error: str) -> None:
        """Log failed delivery that will be retried."""
        self._log.warning(
            "outbox_delivery_failed",
            event_id=str(event_id),
            error=error,
        )

    def deletion_failed(self, event_id: UUID, error: str) -> None:
        """Log failed deletion after a successful publish."""
        self._log.warning(
            "outbox_deletion_failed",
            event_id=str(event_id),
            error=error,
        )

    def cycle_completed(self, fetched: int, sent: int) -> None:
        """Log non-empty cycles."""
        if fetched > 0:
            self._log.info("outbox_cycle_completed", fetched=fetched, sent=sent)

    def cycle_skipped(self) -> None:
        """Log overlapping tick."""
        self._log.debug("outbox_cycle_skipped")

    def poll_loop_error(self, error: str) -> None:
        """Log unexpected cycle error."""
        self._log.error("outbox_poll_loop_error", error=error)
