"""User-facing Pydantic schemas."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class RegisterRequest(BaseModel):
    """Sign-up payload. Fields are optional here so the core reports what is missing."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "name": "Ada",
                "email": "ada@example.com",
                "password": "abcdef",
                "confirmPassword": "abcdef",
            }
        },
    )

    name: str | None = None
    email: str | None = None
    password: str | None = None
    confirm_password: str | None = Field(default=None, alias="confirmPassword")


class UserPublic(BaseModel):
    """Public representation of a registered user."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str


__all__ = ["RegisterRequest", "UserPublic"]
