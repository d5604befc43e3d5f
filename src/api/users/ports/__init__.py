"""Ports for the users context."""

from users.ports.repositories import DuplicateUsernameError, IUserRepository

__all__ = ["DuplicateUsernameError", "IUserRepository"]
