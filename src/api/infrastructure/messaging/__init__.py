"""Message broker adapters."""

from infrastructure.messaging.rabbitmq import RabbitMQMessagePublisher

__all__ = ["RabbitMQMessagePublisher"]
