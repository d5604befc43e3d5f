"""User registration and profile routes."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response, status

from auth.dependencies import get_current_user
from auth.value_objects import CurrentUser
from users.application import RegisterResult, UserService
from users.dependencies import get_user_service
from users.presentation.models import RegisterUserRequest, UserResponse

router = APIRouter(
    prefix="/users",
    tags=["users"],
)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Register a user",
    responses={
        201: {"description": "User registered"},
        400: {"description": "Validation error"},
        409: {"description": "Username already taken"},
    },
)
async def register_user(
    request: RegisterUserRequest,
    service: Annotated[UserService, Depends(get_user_service)],
) -> Response:
    """Register a user. Open to unauthenticated callers."""
    try:
        result = await service.register(
            username=request.username,
            first_name=request.first_name,
            last_name=request.last_name,
            email=str(request.email),
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    if result is RegisterResult.USERNAME_TAKEN:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Username '{request.username}' is already taken",
        )

    return Response(status_code=status.HTTP_201_CREATED)


@router.get(
    "/me",
    response_model=UserResponse,
    summary="Get the caller's profile",
    responses={
        401: {"description": "Authentication required"},
        404: {"description": "Caller has not registered"},
    },
)
async def get_me(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[UserService, Depends(get_user_service)],
) -> UserResponse:
    user = await service.get_profile(current_user.username)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"User {current_user.username} is not registered",
        )
    return UserResponse.from_domain(user)
