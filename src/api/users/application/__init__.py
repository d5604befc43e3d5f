"""Application layer for the users context."""

from users.application.user_service import RegisterResult, UserService

__all__ = ["RegisterResult", "UserService"]
