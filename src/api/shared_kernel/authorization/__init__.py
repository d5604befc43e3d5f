"""Shared authorization primitives.

Ownership checks are explicit: the caller identity is always passed in,
never read from ambient request state.
"""

from shared_kernel.authorization.guard import (
    AccessDecision,
    AccessDeniedError,
    OwnerLookup,
    OwnershipGuard,
    ResourceNotFoundError,
    decide_access,
    owner_required,
)

__all__ = [
    "AccessDecision",
    "AccessDeniedError",
    "OwnerLookup",
    "OwnershipGuard",
    "ResourceNotFoundError",
    "decide_access",
    "owner_required",
]
