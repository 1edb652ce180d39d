"""Registration endpoint."""

from __future__ import annotations

from fastapi import APIRouter, status

from ...deps import UserStoreDependency
from ...errors import unwrap
from ...schemas import RegisterRequest, UserPublic
from ...services import register_user

router = APIRouter(prefix="/users", tags=["users"])


@router.post(
    "",
    response_model=UserPublic,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user account",
)
async def create_user(payload: RegisterRequest, users: UserStoreDependency) -> UserPublic:
    user = unwrap(
        await register_user(
            users,
            name=payload.name,
            email=payload.email,
            password=payload.password,
            confirm_password=payload.confirm_password,
        )
    )
    return UserPublic.model_validate(user)
