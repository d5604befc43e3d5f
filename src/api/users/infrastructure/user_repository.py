"""PostgreSQL implementation of IUserRepository."""

from __future__ import annotations

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from users.domain import User
from users.infrastructure.models import UserModel
from users.ports.repositories import DuplicateUsernameError


class UserRepository:
    """PostgreSQL-backed repository for users. Never commits."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add(self, user: User) -> None:
        self._session.add(
            UserModel(
                username=user.username,
                first_name=user.first_name,
                last_name=user.last_name,
                email=user.email,
                created_at=user.created_at,
                updated_at=user.created_at,
            )
        )
        try:
            await self._session.flush()
        except IntegrityError as e:
            raise DuplicateUsernameError(
                f"Username '{user.username}' is already registered"
            ) from e

    async def get_by_username(self, username: str) -> User | None:
        model = await self._session.get(UserModel, username)
        if model is None:
            return None
        return User(
            username=model.username,
            first_name=model.first_name,
            last_name=model.last_name,
            email=model.email,
            created_at=model.created_at,
        )

    async def fetch_by_username(self, username: str) -> list[User]:
        user = await self.get_by_username(username)
        return [user] if user else []
