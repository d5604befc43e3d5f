"""Domain probes for infrastructure observability.

Domain probes provide a high-level instrumentation API oriented around
domain semantics, keeping infrastructure code clean and testable.
"""

from __future__ import annotations

from typing import Protocol

import structlog


class DatabaseProbe(Protocol):
    """Domain probe for database engine lifecycle."""

    def engine_created(self, connection_string: str, pool_size: int) -> None:
        """Record that the async engine was created."""
        ...

    def schema_created(self, table_count: int) -> None:
        """Record that missing tables were created."""
        ...

    def engine_disposed(self) -> None:
        """Record that the engine and its pool were closed."""
        ...


class DefaultDatabaseProbe:
    """Default implementation of DatabaseProbe using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def engine_created(self, connection_string: str, pool_size: int) -> None:
        """Record that the async engine was created."""
        self._logger.info(
            "database_engine_created",
            connection=connection_string,
            pool_size=pool_size,
        )

    def schema_created(self, table_count: int) -> None:
        """Record that missing tables were created."""
        self._logger.info("database_schema_created", table_count=table_count)

    def engine_disposed(self) -> None:
        """Record that the engine and its pool were closed."""
        self._logger.info("database_engine_disposed")


class BrokerProbe(Protocol):
    """Domain probe for the message broker connection."""

    def connected(self, host: str, exchange: str) -> None:
        """Record that a broker connection and channel were opened."""
        ...

    def message_confirmed(self, topic: str, key: str) -> None:
        """Record that the broker confirmed a published message."""
        ...

    def publish_failed(self, topic: str, key: str, error: str) -> None:
        """Record that a publish was not confirmed."""
        ...

    def connection_closed(self) -> None:
        """Record that the broker connection was closed."""
        ...


class DefaultBrokerProbe:
    """Default implementation of BrokerProbe using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def connected(self, host: str, exchange: str) -> None:
        self._logger.info("broker_connected", host=host, exchange=exchange)

    def message_confirmed(self, topic: str, key: str) -> None:
        self._logger.debug("broker_message_confirmed", topic=topic, key=key)

    def publish_failed(self, topic: str, key: str, error: str) -> None:
        self._logger.warning(
            "broker_publish_failed",
            topic=topic,
            key=key,
            error=error,
        )

    def connection_closed(self) -> None:
        self._logger.info("broker_connection_closed")
