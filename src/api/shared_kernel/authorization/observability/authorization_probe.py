"""Domain probe for authorization decisions.

Following Domain-Oriented Observability patterns, this probe captures
every ownership decision made by the guard.
"""

from __future__ import annotations

from typing import Protocol

import structlog


class AuthorizationProbe(Protocol):
    """Domain probe for authorization operations."""

    def access_granted(self, resource_type: str, resource_id: str, caller: str) -> None:
        """Record that the caller owns the resource."""
        ...

    def access_denied(
        self,
        resource_type: str,
        resource_id: str,
        caller: str,
        owner: str,
    ) -> None:
        """Record that a non-owner was rejected."""
        ...

    def resource_not_found(
        self, resource_type: str, resource_id: str, caller: str
    ) -> None:
        """Record that the guarded resource does not exist."""
        ...


class DefaultAuthorizationProbe:
    """Default implementation of AuthorizationProbe using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def access_granted(self, resource_type: str, resource_id: str, caller: str) -> None:
        self._logger.debug(
            "access_granted",
            resource_type=resource_type,
            resource_id=resource_id,
            caller=caller,
        )

    def access_denied(
        self,
        resource_type: str,
        resource_id: str,
        caller: str,
        owner: str,
    ) -> None:
        self._logger.warning(
            "access_denied",
            resource_type=resource_type,
            resource_id=resource_id,
            caller=caller,
            owner=owner,
        )

    def resource_not_found(
        self, resource_type: str, resource_id: str, caller: str
    ) -> None:
        self._logger.info(
            "guarded_resource_not_found",
            resource_type=resource_type,
            resource_id=resource_id,
            caller=caller,
        )
