"""Domain-oriented observability for request authentication.

Follows the Domain Oriented Observability pattern from Martin Fowler.
"""

from typing import Protocol

import structlog


class AuthenticationProbe(Protocol):
    """Observability probe for resolving the caller of a request."""

    def user_authenticated(self, username: str) -> None:
        """Called when a bearer token was accepted."""
        ...

    def authentication_failed(self, reason: str) -> None:
        """Called when a request is rejected with 401."""
        ...


class DefaultAuthenticationProbe:
    """Default AuthenticationProbe implementation using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def user_authenticated(self, username: str) -> None:
        self._logger.debug("user_authenticated", username=username)

    def authentication_failed(self, reason: str) -> None:
        self._logger.warning("authentication_failed", reason=reason)
