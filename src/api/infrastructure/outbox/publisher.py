"""Outbox publisher that relays stored events to the message broker.

The publisher runs as a background task within the FastAPI application.
On a fixed delay it reads pending outbox rows, publishes each one and
deletes it only after the broker has acknowledged it, giving
at-least-once delivery.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Callable

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from infrastructure.outbox.repository import OutboxRepository

if TYPE_CHECKING:
    from shared_kernel.outbox.observability import OutboxPublisherProbe
    from shared_kernel.outbox.ports import IOutboxRepository, MessagePublisher
    from shared_kernel.outbox.value_objects import OutboxEvent


class OutboxPublisher:
    """Background relay from the outbox table to the broker.

    Each cycle fetches a batch in insertion order and handles the events
    one at a time. An event is deleted only after its publish call
    returned; a failed or timed-out publish leaves the event in place and
    ends the cycle, so later events never overtake it.

    Cycles never overlap: a tick that finds the previous cycle still
    running is skipped.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        publisher: MessagePublisher,
        probe: OutboxPublisherProbe,
        topic: str,
        poll_interval_seconds: float = 3.0,
        batch_size: int = 100,
        publish_timeout_seconds: float = 10.0,
        repository_factory: Callable[[AsyncSession], IOutboxRepository] = OutboxRepository,
    ) -> None:
        """Initialize the publisher.

        Args:
            session_factory: Factory for creating database sessions
            publisher: Broker publisher with confirmed delivery
            probe: Observability probe for logging
            topic: Destination topic for every event
            poll_interval_seconds: Delay between the end of one cycle and the next
            batch_size: Maximum events handled per cycle
            publish_timeout_seconds: How long to wait for one broker acknowledgment
            repository_factory: Builds an outbox repository around a session
        """
        self._session_factory = session_factory
        self._publisher = publisher
        self._probe = probe
        self._topic = topic
        self._poll_interval = poll_interval_seconds
        self._batch_size = batch_size
        self._publish_timeout = publish_timeout_seconds
        self._repository_factory = repository_factory
        self._cycle_lock = asyncio.Lock()
        self._running = False
        self._task: asyncio.Task | None = None

    @property
    def is_running(self) -> bool:
        return self._running

    async def start(self) -> None:
        """Start the poll loop."""
        if self._running:
            return
        self._running = True
        self._probe.publisher_started(self._topic, self._poll_interval)
        self._task = asyncio.create_task(self._poll_loop())

    async def stop(self) -> None:
        """Stop the poll loop and wait for it to finish."""
        self._running = False

        if self._task is not None:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None

        self._probe.publisher_stopped()

    async def _poll_loop(self) -> None:
        while self._running:
            try:
                await self.run_cycle()
            except asyncio.CancelledError:
                raise
            except Exception as e:
                self._probe.poll_loop_error(str(e))

            await asyncio.sleep(self._poll_interval)

    async def run_cycle(self) -> int:
        """Run one publish cycle unless one is already in progress.

        Returns:
            Number of events published and deleted during this cycle
        """
        if self._cycle_lock.locked():
            self._probe.cycle_skipped()
            return 0

        async with self._cycle_lock:
            async with self._session_factory() as session:
                events = await self._repository_factory(session).fetch_pending(
                    limit=self._batch_size
                )

            sent = 0
            for event in events:
                if not await self._send(event):
                    break
                sent += 1
                await self._delete(event)

            self._probe.cycle_completed(fetched=len(events), sent=sent)
            return sent

    async def _send(self, event: OutboxEvent) -> bool:
        try:
            await asyncio.wait_for(
                self._publisher.publish(
                    topic=self._topic,
                    key=event.key,
                    value=event.to_message(),
                ),
                timeout=self._publish_timeout,
            )
        except asyncio.TimeoutError:
            self._probe.delivery_failed(
                event.id, f"no acknowledgment within {self._publish_timeout}s"
            )
            return False
        except Exception as e:
            self._probe.delivery_failed(event.id, str(e))
            return False

        self._probe.event_sent(event.id, event.event_type)
        return True

    async def _delete(self, event: OutboxEvent) -> None:
        # Each delete commits on its own so one failure cannot undo the others
        try:
            async with self._session_factory() as session:
                await self._repository_factory(session).delete(event.id)
                await session.commit()
        except Exception as e:
            self._probe.deletion_failed(event.id, str(e))
            return

        self._probe.event_deleted(event.id)
