"""Request and response models for the users API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, EmailStr, Field

from users.domain import User


class RegisterUserRequest(BaseModel):
    """Request to register a user in the directory.

    Passwords are managed by the identity provider and are not accepted here.
    """

    username: str = Field(
        ...,
        min_length=1,
        max_length=255,
        pattern=r"^[A-Za-z0-9._-]+$",
        description="Unique username, as issued in the identity provider's tokens",
        examples=["a.elmurzaev95"],
    )
    first_name: str = Field(..., min_length=1, max_length=255, examples=["Adam"])
    last_name: str = Field(..., min_length=1, max_length=255, examples=["Elmurzaev"])
    email: EmailStr = Field(..., examples=["a.elmurzaev@gmail.com"])


class UserResponse(BaseModel):
    username: str
    first_name: str
    last_name: str
    email: str
    created_at: datetime

    @classmethod
    def from_domain(cls, user: User) -> UserResponse:
        return cls(
            username=user.username,
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email,
            created_at=user.created_at,
        )
