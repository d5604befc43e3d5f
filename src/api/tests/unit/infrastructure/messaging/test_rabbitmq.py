"""Unit tests for RabbitMQMessagePublisher.

The pika connection is replaced by a mock so no broker is required.
"""

import asyncio
import threading
from unittest.mock import MagicMock, create_autospec

import pytest
from pika import DeliveryMode
from pika.exceptions import AMQPConnectionError, NackError, UnroutableError

from infrastructure.messaging import RabbitMQMessagePublisher
from infrastructure.observability import BrokerProbe
from infrastructure.settings import BrokerSettings
from shared_kernel.outbox.ports import DeliveryFailure


@pytest.fixture
def broker_settings() -> BrokerSettings:
    return BrokerSettings(
        host="rabbit",
        port=5672,
        username="benjamin",
        password="secret",
        exchange="benjamin",
        topic="BENJAMIN.EMAIL",
        queue="benjamin.email",
    )


@pytest.fixture
def mock_channel():
    channel = MagicMock()
    channel.is_open = True
    return channel


@pytest.fixture
def connection_factory(mock_channel):
    connection = MagicMock()
    connection.is_open = True
    connection.channel.return_value = mock_channel
    return MagicMock(return_value=connection)


@pytest.fixture
def mock_probe():
    return create_autospec(BrokerProbe, instance=True)


@pytest.fixture
def publisher(broker_settings, mock_probe, connection_factory):
    return RabbitMQMessagePublisher(
        broker_settings,
        probe=mock_probe,
        connection_factory=connection_factory,
    )


class TestPublish:
    """Tests for RabbitMQMessagePublisher.publish()."""

    @pytest.mark.asyncio
    async def test_publishes_to_topic_with_key(
        self, publisher, mock_channel, mock_probe
    ):
        await publisher.publish("BENJAMIN.EMAIL", "event-1", '{"type":"X"}')
        await publisher.close()

        kwargs = mock_channel.basic_publish.call_args.kwargs
        assert kwargs["exchange"] == "benjamin"
        assert kwargs["routing_key"] == "BENJAMIN.EMAIL"
        assert kwargs["body"] == b'{"type":"X"}'
        assert kwargs["mandatory"] is True
        assert kwargs["properties"].message_id == "event-1"
        assert kwargs["properties"].headers == {"key": "event-1"}
        assert kwargs["properties"].delivery_mode == DeliveryMode.Persistent.value
        mock_probe.message_confirmed.assert_called_once_with("BENJAMIN.EMAIL", "event-1")

    @pytest.mark.asyncio
    async def test_connects_once_and_declares_topology(
        self, publisher, connection_factory, mock_channel, mock_probe
    ):
        await publisher.publish("BENJAMIN.EMAIL", "event-1", "{}")
        await publisher.publish("BENJAMIN.EMAIL", "event-2", "{}")
        await publisher.close()

        connection_factory.assert_called_once()
        parameters = connection_factory.call_args[0][0]
        assert parameters.host == "rabbit"
        mock_channel.confirm_delivery.assert_called_once()
        mock_channel.exchange_declare.assert_called_once_with(
            exchange="benjamin", exchange_type="topic", durable=True
        )
        mock_channel.queue_bind.assert_called_once_with(
            queue="benjamin.email",
            exchange="benjamin",
            routing_key="BENJAMIN.EMAIL",
        )
        mock_probe.connected.assert_called_once_with("rabbit", "benjamin")

    @pytest.mark.asyncio
    async def test_skips_queue_declaration_when_unset(
        self, broker_settings, mock_probe, connection_factory, mock_channel
    ):
        settings = broker_settings.model_copy(update={"queue": ""})
        publisher = RabbitMQMessagePublisher(
            settings, probe=mock_probe, connection_factory=connection_factory
        )

        await publisher.publish("BENJAMIN.EMAIL", "event-1", "{}")
        await publisher.close()

        mock_channel.queue_declare.assert_not_called()

    @pytest.mark.asyncio
    async def test_nack_raises_delivery_failure(
        self, publisher, mock_channel, mock_probe
    ):
        mock_channel.basic_publish.side_effect = NackError([])

        with pytest.raises(DeliveryFailure) as exc_info:
            await publisher.publish("BENJAMIN.EMAIL", "event-1", "{}")
        await publisher.close()

        assert exc_info.value.key == "event-1"
        mock_probe.publish_failed.assert_called_once()
        mock_probe.message_confirmed.assert_not_called()

    @pytest.mark.asyncio
    async def test_unroutable_raises_delivery_failure(self, publisher, mock_channel):
        mock_channel.basic_publish.side_effect = UnroutableError([])

        with pytest.raises(DeliveryFailure):
            await publisher.publish("BENJAMIN.EMAIL", "event-1", "{}")
        await publisher.close()

    @pytest.mark.asyncio
    async def test_connection_error_reconnects_on_next_publish(
        self, publisher, connection_factory, mock_channel
    ):
        mock_channel.basic_publish.side_effect = [AMQPConnectionError(), None]

        with pytest.raises(DeliveryFailure):
            await publisher.publish("BENJAMIN.EMAIL", "event-1", "{}")
        await publisher.publish("BENJAMIN.EMAIL", "event-1", "{}")
        await publisher.close()

        assert connection_factory.call_count == 2

    @pytest.mark.asyncio
    async def test_close_closes_open_connection(
        self, publisher, connection_factory, mock_probe
    ):
        await publisher.publish("BENJAMIN.EMAIL", "event-1", "{}")

        await publisher.close()

        connection_factory.return_value.close.assert_called_once()
        mock_probe.connection_closed.assert_called_once()

    @pytest.mark.asyncio
    async def test_close_without_connection_is_quiet(self, publisher, mock_probe):
        await publisher.close()

        mock_probe.connection_closed.assert_not_called()


class TestAbandonedPublish:
    """Tests for publishes whose caller stops waiting."""

    @pytest.mark.asyncio
    async def test_timeout_moves_next_publish_to_fresh_connection(
        self, publisher, connection_factory, mock_channel, mock_probe
    ):
        release = threading.Event()
        calls = []

        def basic_publish(**kwargs):
            calls.append(kwargs["properties"].message_id)
            if len(calls) == 1:
                release.wait(timeout=5)

        mock_channel.basic_publish.side_effect = basic_publish

        try:
            with pytest.raises(asyncio.TimeoutError):
                await asyncio.wait_for(
                    publisher.publish("BENJAMIN.EMAIL", "event-1", "{}"), timeout=0.1
                )
            await asyncio.wait_for(
                publisher.publish("BENJAMIN.EMAIL", "event-1", "{}"), timeout=1
            )
        finally:
            release.set()
            await publisher.close()

        assert calls == ["event-1", "event-1"]
        assert connection_factory.call_count == 2
        mock_probe.publish_failed.assert_called_once_with(
            "BENJAMIN.EMAIL", "event-1", "publish abandoned while in flight"
        )

    def test_operation_timeout_bounds_blocked_and_socket_calls(
        self, broker_settings, connection_factory
    ):
        publisher = RabbitMQMessagePublisher(
            broker_settings,
            connection_factory=connection_factory,
            operation_timeout=2.5,
        )

        parameters = publisher._connection_parameters()

        assert parameters.blocked_connection_timeout == 2.5
        assert parameters.socket_timeout == 2.5


class TestReuseAfterClose:
    @pytest.mark.asyncio
    async def test_publish_after_close_opens_new_link(
        self, publisher, connection_factory, mock_channel
    ):
        """A second application lifespan can keep using the cached publisher."""
        await publisher.publish("BENJAMIN.EMAIL", "event-1", "{}")
        await publisher.close()

        await publisher.publish("BENJAMIN.EMAIL", "event-2", "{}")
        await publisher.close()

        assert mock_channel.basic_publish.call_count == 2
        assert connection_factory.call_count == 2
