"""Domain probe for the user service."""

from __future__ import annotations

from typing import Protocol

import structlog


class UserServiceProbe(Protocol):
    def user_registered(self, username: str) -> None: ...

    def registration_rejected(self, username: str, reason: str) -> None: ...


class DefaultUserServiceProbe:
    """Default implementation of UserServiceProbe using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def user_registered(self, username: str) -> None:
        self._logger.info("user_registered", username=username)

    def registration_rejected(self, username: str, reason: str) -> None:
        self._logger.info("user_registration_rejected", username=username, reason=reason)
