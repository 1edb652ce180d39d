"""Repository for interacting with user persistence models."""

from __future__ import annotations

from sqlalchemy import exists
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from ..models import User, UserRecord
from .base import BaseRepository


class UserRepository(BaseRepository[User]):
    """SQLModel-backed ``UserStore``."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)

    async def insert(self, *, name: str, email: str, password: str) -> int:
        user = await self.add(User(name=name, email=email, password=password))
        assert user.id is not None
        return user.id

    async def find_by_email(self, email: str) -> UserRecord | None:
        """Return the user whose email matches exactly, case included."""
        result = await self.session.execute(select(User).where(User.email == email))
        row = result.scalar_one_or_none()
        if row is None:
            return None
        return UserRecord.from_row(row)

    async def exists_by_email(self, email: str) -> bool:
        result = await self.session.execute(select(exists().where(User.email == email)))
        return bool(result.scalar())
