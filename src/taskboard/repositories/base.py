"""Store protocols consumed by the core and the shared SQLModel repository base."""

from __future__ import annotations

from datetime import datetime
from typing import Generic, Protocol, TypeVar, runtime_checkable

from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from ..models import TaskRecord, TaskStatus, UserRecord

ModelType = TypeVar("ModelType", bound=SQLModel)


@runtime_checkable
class UserStore(Protocol):
    """User persistence surface needed by registration and login."""

    async def insert(self, *, name: str, email: str, password: str) -> int:  # pragma: no cover
        """Persist a user and return its identifier."""

    async def find_by_email(self, email: str) -> UserRecord | None:  # pragma: no cover
        """Return the user whose email matches exactly."""

    async def exists_by_email(self, email: str) -> bool:  # pragma: no cover
        """Return ``True`` if a user with that exact email exists."""


@runtime_checkable
class TaskStore(Protocol):
    """Task persistence surface needed by the task engine."""

    async def insert(
        self,
        *,
        user_id: int,
        title: str,
        description: str | None,
        status: TaskStatus,
        created_at: datetime,
        updated_at: datetime,
    ) -> int:  # pragma: no cover
        """Persist a task and return its identifier."""

    async def find_by_id(self, task_id: int) -> TaskRecord | None:  # pragma: no cover
        """Return the task or ``None``."""

    async def update(
        self,
        task_id: int,
        *,
        title: str,
        description: str | None,
        updated_at: datetime,
    ) -> None:  # pragma: no cover
        """Overwrite title, description and ``updated_at``."""

    async def update_status(
        self,
        task_id: int,
        *,
        status: TaskStatus,
        updated_at: datetime,
    ) -> None:  # pragma: no cover
        """Overwrite status and ``updated_at``."""

    async def delete(self, task_id: int) -> int:  # pragma: no cover
        """Delete the task and return the number of rows removed."""

    async def list_by_user(self, user_id: int) -> list[TaskRecord]:  # pragma: no cover
        """Return the user's tasks, oldest first."""


class BaseRepository(Generic[ModelType]):
    """Provide shared persistence helpers for repositories."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    @property
    def session(self) -> AsyncSession:
        """Return the session associated with the repository."""
        return self._session

    async def add(self, instance: ModelType) -> ModelType:
        """Add a new instance, commit it and reload server-side state."""
        self._session.add(instance)
        await self._session.commit()
        await self._session.refresh(instance)
        return instance


__all__ = ["BaseRepository", "ModelType", "TaskStore", "UserStore"]
