"""User directory boundary used by the projects context."""

from __future__ import annotations

from typing import Protocol, Sequence


class DirectoryUser(Protocol):
    """The user attributes the projects context relies on."""

    username: str
    first_name: str
    last_name: str
    email: str


class UserDirectory(Protocol):
    """Looks users up by username."""

    async def fetch_by_username(self, username: str) -> Sequence[DirectoryUser]:
        """Return the matching users (zero or one expected)."""
        ...
