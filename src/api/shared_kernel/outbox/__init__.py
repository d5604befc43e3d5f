"""Transactional outbox shared by every bounded context.

Domain operations append events to the outbox inside their own transaction;
the outbox publisher later delivers them to the message broker.
"""

from shared_kernel.outbox.ports import (
    DeliveryFailure,
    EventSerializer,
    IOutboxRepository,
    MessagePublisher,
)
from shared_kernel.outbox.value_objects import OutboxEvent

__all__ = [
    "DeliveryFailure",
    "EventSerializer",
    "IOutboxRepository",
    "MessagePublisher",
    "OutboxEvent",
]
