"""Outbox repository implementation.

This module provides the PostgreSQL implementation of the outbox store.
Application services append events through it inside their own
transaction; the outbox publisher reads and deletes through it.
"""

from __future__ import annotations

from typing import Any
from uuid import UUID, uuid4

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from infrastructure.database.models import utc_now
from infrastructure.outbox.models import OutboxModel
from shared_kernel.outbox.value_objects import OutboxEvent


class OutboxRepository:
    """PostgreSQL implementation of the outbox repository.

    This repository shares the same database session as the calling service,
    so an appended event becomes visible exactly when the caller's business
    changes commit, and disappears with them on rollback.

    The repository only calls session.add() and session.execute() - it never
    calls session.commit(). The caller owns the transaction boundary.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def append(
        self,
        event_type: str,
        payload: dict[str, Any],
        aggregate_id: str,
    ) -> UUID:
        """Append an event to the outbox within the current transaction.

        A fresh id is generated and injected into the stored payload as
        ``eventId`` so consumers can de-duplicate redeliveries.

        Args:
            event_type: Name of the domain event type
            payload: JSON-compatible event data
            aggregate_id: Identifier of the producing aggregate

        Returns:
            The id of the new outbox row
        """
        event_id = uuid4()
        model = OutboxModel(
            id=event_id,
            event_type=event_type,
            aggregate_id=aggregate_id,
            payload={**payload, "eventId": str(event_id)},
            created_at=utc_now(),
        )
        self._session.add(model)
        await self._session.flush()
        return event_id

    async def fetch_pending(self, limit: int = 100) -> list[OutboxEvent]:
        """Fetch pending events, oldest first.

        Args:
            limit: Maximum number of events to fetch

        Returns:
            List of OutboxEvent value objects in (created_at, id) order
        """
        stmt = (
            select(OutboxModel)
            .order_by(OutboxModel.created_at, OutboxModel.id)
            .limit(limit)
        )

        result = await self._session.execute(stmt)
        models = result.scalars().all()

        return [model.to_value_object() for model in models]

    async def delete(self, event_id: UUID) -> bool:
        """Delete a sent event.

        Args:
            event_id: The UUID of the event to delete

        Returns:
            True if a row was removed, False if it was already gone
        """
        stmt = delete(OutboxModel).where(OutboxModel.id == event_id)
        result = await self._session.execute(stmt)
        return result.rowcount > 0
