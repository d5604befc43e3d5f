"""RabbitMQ implementation of the MessagePublisher port.

Messages go to a durable topic exchange with the topic as routing key
and the outbox event id as message id. Publisher confirms are enabled,
so ``publish`` returns only once the broker has taken the message.

pika's BlockingConnection is not thread-safe, so each connection lives on
one dedicated worker thread. A publish whose caller stops waiting (for
example on an acknowledgment timeout) abandons that thread together with
its connection; the next publish starts over on a fresh one.
"""

from __future__ import annotations

import asyncio
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import pika
from pika import BasicProperties, DeliveryMode
from pika.exceptions import AMQPError, NackError, UnroutableError

from infrastructure.observability import BrokerProbe, DefaultBrokerProbe
from shared_kernel.outbox.ports import DeliveryFailure

if TYPE_CHECKING:
    from pika.adapters.blocking_connection import BlockingChannel

    from infrastructure.settings import BrokerSettings


def _new_executor() -> ThreadPoolExecutor:
    return ThreadPoolExecutor(max_workers=1, thread_name_prefix="rabbitmq-publisher")


@dataclass
class _BrokerLink:
    """A connection and its channel, confined to a single worker thread."""

    executor: ThreadPoolExecutor = field(default_factory=_new_executor)
    connection: pika.BlockingConnection | None = None
    channel: BlockingChannel | None = None


class RabbitMQMessagePublisher:
    """Publishes outbox messages to RabbitMQ with confirmed delivery.

    The connection is opened lazily on the first publish and re-opened
    after any connection-level failure. ``operation_timeout`` bounds socket
    operations and how long a publish may stay blocked by broker flow
    control, so a hung call fails with ``DeliveryFailure`` instead of
    holding the worker thread.
    """

    def __init__(
        self,
        settings: BrokerSettings,
        probe: BrokerProbe | None = None,
        connection_factory=pika.BlockingConnection,
        operation_timeout: float | None = None,
    ) -> None:
        self._settings = settings
        self._probe = probe or DefaultBrokerProbe()
        self._connection_factory = connection_factory
        self._operation_timeout = operation_timeout
        self._link: _BrokerLink | None = None

    async def publish(self, topic: str, key: str, value: str) -> None:
        """Publish one message and wait for the broker confirmation.

        Raises:
            DeliveryFailure: If the message is nacked, unroutable, or the
                connection fails
        """
        if self._link is None:
            self._link = _BrokerLink()
        link = self._link

        loop = asyncio.get_running_loop()
        try:
            await loop.run_in_executor(
                link.executor, self._publish_blocking, link, topic, key, value
            )
        except asyncio.CancelledError:
            self._abandon(link)
            self._probe.publish_failed(topic, key, "publish abandoned while in flight")
            raise

    async def close(self) -> None:
        """Close the broker connection and stop its worker thread.

        The publisher stays usable: the next publish opens a new link.
        """
        link = self._link
        self._link = None
        if link is None:
            return

        loop = asyncio.get_running_loop()
        await loop.run_in_executor(link.executor, self._close_blocking, link)
        link.executor.shutdown(wait=True)

    def _abandon(self, link: _BrokerLink) -> None:
        if self._link is link:
            self._link = None
        # Runs on the abandoned thread once its blocked call returns
        link.executor.submit(self._close_blocking, link)
        link.executor.shutdown(wait=False)

    def _publish_blocking(
        self, link: _BrokerLink, topic: str, key: str, value: str
    ) -> None:
        try:
            channel = self._ensure_channel(link)
            channel.basic_publish(
                exchange=self._settings.exchange,
                routing_key=topic,
                body=value.encode("utf-8"),
                properties=BasicProperties(
                    content_type="application/json",
                    message_id=key,
                    headers={"key": key},
                    delivery_mode=DeliveryMode.Persistent,
                ),
                mandatory=True,
            )
        except (NackError, UnroutableError) as e:
            self._probe.publish_failed(topic, key, repr(e))
            raise DeliveryFailure(key, f"broker refused message: {e!r}") from e
        except AMQPError as e:
            self._probe.publish_failed(topic, key, repr(e))
            self._reset(link)
            raise DeliveryFailure(key, f"broker connection error: {e!r}") from e

        self._probe.message_confirmed(topic, key)

    def _connection_parameters(self) -> pika.ConnectionParameters:
        settings = self._settings
        timeouts = {}
        if self._operation_timeout is not None:
            timeouts = {
                "socket_timeout": self._operation_timeout,
                "blocked_connection_timeout": self._operation_timeout,
            }
        return pika.ConnectionParameters(
            host=settings.host,
            port=settings.port,
            virtual_host=settings.virtual_host,
            credentials=pika.PlainCredentials(
                settings.username, settings.password.get_secret_value()
            ),
            **timeouts,
        )

    def _ensure_channel(self, link: _BrokerLink) -> BlockingChannel:
        if link.channel is not None and link.channel.is_open:
            return link.channel

        self._reset(link)
        settings = self._settings
        link.connection = self._connection_factory(self._connection_parameters())
        channel = link.connection.channel()
        channel.confirm_delivery()
        channel.exchange_declare(
            exchange=settings.exchange, exchange_type="topic", durable=True
        )
        if settings.queue:
            channel.queue_declare(queue=settings.queue, durable=True)
            channel.queue_bind(
                queue=settings.queue,
                exchange=settings.exchange,
                routing_key=settings.topic,
            )
        link.channel = channel
        self._probe.connected(settings.host, settings.exchange)
        return channel

    def _reset(self, link: _BrokerLink) -> None:
        connection = link.connection
        link.connection = None
        link.channel = None
        if connection is not None and connection.is_open:
            try:
                connection.close()
            except AMQPError:
                pass

    def _close_blocking(self, link: _BrokerLink) -> None:
        had_connection = link.connection is not None
        self._reset(link)
        if had_connection:
            self._probe.connection_closed()
