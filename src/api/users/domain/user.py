"""User aggregate for the users context."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import UTC, datetime

_USERNAME_PATTERN = re.compile(r"^[A-Za-z0-9._-]{1,255}$")


@dataclass(frozen=True)
class User:
    """A registered user as seen by the rest of the service.

    Credentials are held by the identity provider; this is the directory
    entry used for invitations and task assignment.
    """

    username: str
    first_name: str
    last_name: str
    email: str
    created_at: datetime

    def __post_init__(self) -> None:
        if not _USERNAME_PATTERN.match(self.username):
            raise ValueError(
                "Username must be 1-255 characters of letters, digits, '.', '_' or '-'"
            )
        if "@" not in self.email:
            raise ValueError(f"Invalid email address: {self.email}")

    @classmethod
    def register(
        cls,
        username: str,
        first_name: str,
        last_name: str,
        email: str,
    ) -> User:
        return cls(
            username=username,
            first_name=first_name,
            last_name=last_name,
            email=email,
            created_at=datetime.now(UTC),
        )
