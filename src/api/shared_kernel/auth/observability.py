"""Domain probe for bearer token validation.

See: https://martinfowler.com/articles/domain-oriented-observability.html
"""

from __future__ import annotations

from typing import Protocol

import structlog


class JWTValidatorProbe(Protocol):
    """Domain probe for JWT validation operations."""

    def token_validated(self, username: str) -> None:
        """Record that a token was successfully validated."""
        ...

    def token_validation_failed(self, reason: str) -> None:
        """Record that token validation failed."""
        ...

    def jwks_fetched(self, key_count: int) -> None:
        """Record that signing keys were fetched from the issuer."""
        ...

    def jwks_fetch_failed(self, error: str) -> None:
        """Record that the signing keys could not be fetched."""
        ...


class DefaultJWTValidatorProbe:
    """Default implementation of JWTValidatorProbe using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def token_validated(self, username: str) -> None:
        self._logger.debug("jwt_token_validated", username=username)

    def token_validation_failed(self, reason: str) -> None:
        self._logger.warning("jwt_token_validation_failed", reason=reason)

    def jwks_fetched(self, key_count: int) -> None:
        self._logger.info("jwt_jwks_fetched", key_count=key_count)

    def jwks_fetch_failed(self, error: str) -> None:
        self._logger.error("jwt_jwks_fetch_failed", error=error)
