"""Shared infrastructure dependencies.

Provides the process-wide broker publisher and outbox publisher.
Does NOT import from bounded contexts to maintain DDD boundaries.
"""

from functools import lru_cache

from infrastructure.database.dependencies import get_sessionmaker
from infrastructure.messaging import RabbitMQMessagePublisher
from infrastructure.outbox import OutboxPublisher
from infrastructure.settings import get_broker_settings, get_outbox_settings
from shared_kernel.outbox.observability import DefaultOutboxPublisherProbe


@lru_cache
def get_message_publisher() -> RabbitMQMessagePublisher:
    """Get the application-scoped broker publisher (singleton).

    Broker operations are bounded by the outbox publish timeout so a
    blocked connection fails the publish instead of wedging it.
    """
    return RabbitMQMessagePublisher(
        get_broker_settings(),
        operation_timeout=get_outbox_settings().publish_timeout_seconds,
    )


@lru_cache
def get_outbox_publisher() -> OutboxPublisher:
    """Get the application-scoped outbox publisher (singleton).

    Publishes every outbox event to the configured email topic.
    """
    outbox_settings = get_outbox_settings()
    return OutboxPublisher(
        session_factory=get_sessionmaker(),
        publisher=get_message_publisher(),
        probe=DefaultOutboxPublisherProbe(),
        topic=get_broker_settings().topic,
        poll_interval_seconds=outbox_settings.poll_interval_seconds,
        batch_size=outbox_settings.batch_size,
        publish_timeout_seconds=outbox_settings.publish_timeout_seconds,
    )
