"""Repository protocol for the users context."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from users.domain import User


class DuplicateUsernameError(Exception):
    """Raised when a username is already registered."""


@runtime_checkable
class IUserRepository(Protocol):
    """Repository for User persistence.

    Doubles as the user directory consumed by the projects context.
    """

    async def add(self, user: User) -> None:
        """Insert a new user.

        Raises:
            DuplicateUsernameError: If the username is already registered
        """
        ...

    async def get_by_username(self, username: str) -> User | None:
        ...

    async def fetch_by_username(self, username: str) -> list[User]:
        """Return the matching users (zero or one)."""
        ...
