"""Schemas describing authentication payloads."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class LoginRequest(BaseModel):
    """Email and password submitted to the login endpoint."""

    email: str | None = None
    password: str | None = None


class AuthResponse(BaseModel):
    """Authenticated user together with the issued token."""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "name": "Ada",
                "email": "ada@example.com",
                "token": "fake-token-1",
            }
        },
    )

    id: int
    name: str
    email: str
    token: str


__all__ = ["AuthResponse", "LoginRequest"]
