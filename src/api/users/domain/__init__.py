"""Domain layer for the users context."""

from users.domain.user import User

__all__ = ["User"]
