"""Routes handling user authentication flows."""

from __future__ import annotations

from fastapi import APIRouter, status

from ...deps import UserStoreDependency
from ...errors import unwrap
from ...schemas import AuthResponse, LoginRequest
from ...services import login as login_user

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/login",
    response_model=AuthResponse,
    status_code=status.HTTP_200_OK,
    summary="Authenticate using email and password",
)
async def login(payload: LoginRequest, users: UserStoreDependency) -> AuthResponse:
    authenticated = unwrap(await login_user(users, payload.email, payload.password))
    return AuthResponse.model_validate(authenticated)
