"""Infrastructure layer for the outbox pattern.

Contains the SQLAlchemy model, the repository implementation, and the
publisher that relays stored events to the broker.
"""

from infrastructure.outbox.models import OutboxModel
from infrastructure.outbox.publisher import OutboxPublisher
from infrastructure.outbox.repository import OutboxRepository

__all__ = ["OutboxModel", "OutboxPublisher", "OutboxRepository"]
