"""User domain models built with SQLModel."""

from __future__ import annotations

import sqlalchemy as sa
from sqlmodel import Field, SQLModel


class UserBase(SQLModel, table=False):
    """Shared attributes for user models."""

    name: str = Field(sa_column=sa.Column(sa.String(length=255), nullable=False))
    email: str = Field(
        sa_column=sa.Column(
            sa.String(length=320),
            nullable=False,
            unique=True,
        ),
    )


class User(UserBase, table=True):
    """Persistent user row. The password column holds the value as submitted."""

    __tablename__ = "users"

    id: int | None = Field(default=None, primary_key=True)
    password: str = Field(sa_column=sa.Column(sa.String(length=255), nullable=False))


__all__ = ["User", "UserBase"]
