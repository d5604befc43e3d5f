"""User application service: registration and profile lookup."""

from __future__ import annotations

from enum import StrEnum

from sqlalchemy.ext.asyncio import AsyncSession

from users.application.observability import (
    DefaultUserServiceProbe,
    UserServiceProbe,
)
from users.domain import User
from users.ports.repositories import DuplicateUsernameError, IUserRepository


class RegisterResult(StrEnum):
    SUCCESS = "success"
    USERNAME_TAKEN = "username_taken"


class UserService:
    """Application service for the user directory."""

    def __init__(
        self,
        session: AsyncSession,
        user_repository: IUserRepository,
        probe: UserServiceProbe | None = None,
    ):
        self._session = session
        self._user_repository = user_repository
        self._probe = probe or DefaultUserServiceProbe()

    async def register(
        self,
        username: str,
        first_name: str,
        last_name: str,
        email: str,
    ) -> RegisterResult:
        """Register a new user.

        Raises:
            ValueError: If the username or email are malformed
        """
        user = User.register(
            username=username,
            first_name=first_name,
            last_name=last_name,
            email=email,
        )

        if await self._user_repository.get_by_username(username) is not None:
            self._probe.registration_rejected(username, "username_taken")
            return RegisterResult.USERNAME_TAKEN

        try:
            await self._user_repository.add(user)
            await self._session.commit()
        except DuplicateUsernameError:
            # Lost a race with a concurrent registration
            await self._session.rollback()
            self._probe.registration_rejected(username, "username_taken")
            return RegisterResult.USERNAME_TAKEN

        self._probe.user_registered(username)
        return RegisterResult.SUCCESS

    async def get_profile(self, username: str) -> User | None:
        return await self._user_repository.get_by_username(username)

    async def fetch_by_username(self, username: str) -> list[User]:
        return await self._user_repository.fetch_by_username(username)
