"""SQLAlchemy ORM model for the outbox table.

Rows are inserted by application services inside their own transaction
and deleted by the outbox publisher once the broker has acknowledged them.
"""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, Index, String
from sqlalchemy.dialects.postgresql import JSON
from sqlalchemy.dialects.postgresql import UUID as PG_UUID
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.models import Base, utc_now
from shared_kernel.outbox.value_objects import OutboxEvent


class OutboxModel(Base):
    """ORM model for the outbox table.

    There are no status or retry columns: a row is pending for as long as
    it exists. Polling walks the table in (created_at, id) order.
    """

    __tablename__ = "outbox"
    __table_args__ = (Index("idx_outbox_created_at_id", "created_at", "id"),)

    id: Mapped[UUID] = mapped_column(PG_UUID(as_uuid=True), primary_key=True)
    event_type: Mapped[str] = mapped_column(String(255), nullable=False)
    aggregate_id: Mapped[str] = mapped_column(String(255), nullable=False)
    payload: Mapped[dict] = mapped_column(JSON, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        insert_default=utc_now,
    )

    def to_value_object(self) -> OutboxEvent:
        """Convert this ORM model to an OutboxEvent value object."""
        return OutboxEvent(
            id=self.id,
            event_type=self.event_type,
            aggregate_id=self.aggregate_id,
            payload=dict(self.payload),
            created_at=self.created_at,
        )

    def __repr__(self) -> str:
        """Return string representation."""
        return (
            f"<OutboxModel("
            f"id={self.id}, "
            f"event_type={self.event_type}, "
            f"aggregate_id={self.aggregate_id}"
            f")>"
        )
