"""Ownership-based authorization guard.

Every guarded operation resolves the owner of the target resource with a
single lookup and compares it with the explicitly passed caller before
the operation body runs. The guard never mutates anything.
"""

from __future__ import annotations

import functools
import inspect
from enum import StrEnum
from typing import Any, Awaitable, Callable, Protocol, TypeVar

from shared_kernel.authorization.observability import (
    AuthorizationProbe,
    DefaultAuthorizationProbe,
)

F = TypeVar("F", bound=Callable[..., Awaitable[Any]])


class AccessDecision(StrEnum):
    """Outcome of one ownership check."""

    ALLOWED = "allowed"
    DENIED = "denied"
    RESOURCE_NOT_FOUND = "resource_not_found"


class ResourceNotFoundError(Exception):
    """Raised when the guarded resource does not exist."""

    def __init__(self, resource_type: str, resource_id: Any, caller: str):
        super().__init__(f"{resource_type} {resource_id} not found")
        self.resource_type = resource_type
        self.resource_id = resource_id
        self.caller = caller


class AccessDeniedError(Exception):
    """Raised when the caller does not own the guarded resource."""

    def __init__(self, resource_type: str, resource_id: Any, caller: str):
        super().__init__(
            f"User {caller} is not allowed to access {resource_type} {resource_id}"
        )
        self.resource_type = resource_type
        self.resource_id = resource_id
        self.caller = caller


class OwnerLookup(Protocol):
    """Resolves the owner of a resource."""

    async def get_owner(self, resource_id: Any) -> str | None:
        """Return the owner's username, or None if the resource is absent."""
        ...


def decide_access(owner: str | None, caller: str) -> AccessDecision:
    """Compare a resolved owner with the caller."""
    if owner is None:
        return AccessDecision.RESOURCE_NOT_FOUND
    if owner != caller:
        return AccessDecision.DENIED
    return AccessDecision.ALLOWED


class OwnershipGuard:
    """Gate that allows only the owner of a resource through.

    Args:
        resource_type: Name used in errors and logs (e.g. "project")
        lookup: Owner resolver for that resource type
        probe: Optional authorization probe
    """

    def __init__(
        self,
        resource_type: str,
        lookup: OwnerLookup,
        probe: AuthorizationProbe | None = None,
    ) -> None:
        self._resource_type = resource_type
        self._lookup = lookup
        self._probe = probe or DefaultAuthorizationProbe()

    async def decide(self, resource_id: Any, caller: str) -> AccessDecision:
        """Resolve the owner once and return the decision."""
        owner = await self._lookup.get_owner(resource_id)
        decision = decide_access(owner, caller)

        rid = str(resource_id)
        if decision is AccessDecision.RESOURCE_NOT_FOUND:
            self._probe.resource_not_found(self._resource_type, rid, caller)
        elif decision is AccessDecision.DENIED:
            assert owner is not None
            self._probe.access_denied(self._resource_type, rid, caller, owner)
        else:
            self._probe.access_granted(self._resource_type, rid, caller)

        return decision

    async def check(self, resource_id: Any, caller: str) -> None:
        """Raise unless the caller owns the resource.

        Raises:
            ResourceNotFoundError: If the resource does not exist
            AccessDeniedError: If the caller is not the owner
        """
        decision = await self.decide(resource_id, caller)
        if decision is AccessDecision.RESOURCE_NOT_FOUND:
            raise ResourceNotFoundError(self._resource_type, resource_id, caller)
        if decision is AccessDecision.DENIED:
            raise AccessDeniedError(self._resource_type, resource_id, caller)


def owner_required(
    guard_attr: str = "_guard",
    resource_arg: str = "project_id",
    caller_arg: str = "caller",
) -> Callable[[F], F]:
    """Decorate an async service method so the owner check runs first.

    The decorated method must take the resource id and the caller as
    parameters; the guard is read from ``self.<guard_attr>``.

    Example:
        @owner_required()
        async def delete_project(self, project_id: UUID, caller: str) -> None:
            ...
    """

    def decorator(func: F) -> F:
        signature = inspect.signature(func)
        for name in (resource_arg, caller_arg):
            if name not in signature.parameters:
                raise TypeError(f"{func.__qualname__} has no parameter {name!r}")

        @functools.wraps(func)
        async def wrapper(self, *args: Any, **kwargs: Any) -> Any:
            bound = signature.bind(self, *args, **kwargs)
            guard: OwnershipGuard = getattr(self, guard_attr)
            await guard.check(
                bound.arguments[resource_arg],
                bound.arguments[caller_arg],
            )
            return await func(self, *args, **kwargs)

        return wrapper  # type: ignore[return-value]

    return decorator
