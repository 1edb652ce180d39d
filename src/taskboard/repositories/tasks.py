"""Repository for interacting with task persistence models."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import delete, update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from ..models import Task, TaskRecord, TaskStatus
from .base import BaseRepository


class TaskRepository(BaseRepository[Task]):
    """SQLModel-backed ``TaskStore``. Every write commits on its own."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)

    async def insert(
        self,
        *,
        user_id: int,
        title: str,
        description: str | None,
        status: TaskStatus,
        created_at: datetime,
        updated_at: datetime,
    ) -> int:
        task = await self.add(
            Task(
                user_id=user_id,
                title=title,
                description=description,
                status=status,
                created_at=created_at,
                updated_at=updated_at,
            )
        )
        assert task.id is not None
        return task.id

    async def find_by_id(self, task_id: int) -> TaskRecord | None:
        result = await self.session.execute(
            select(Task)
            .where(Task.id == task_id)
            .execution_options(populate_existing=True)
        )
        row = result.scalar_one_or_none()
        if row is None:
            return None
        return TaskRecord.from_row(row)

    async def update(
        self,
        task_id: int,
        *,
        title: str,
        description: str | None,
        updated_at: datetime,
    ) -> None:
        await self.session.execute(
            update(Task)
            .where(Task.id == task_id)
            .values(title=title, description=description, updated_at=updated_at)
        )
        await self.session.commit()

    async def update_status(
        self,
        task_id: int,
        *,
        status: TaskStatus,
        updated_at: datetime,
    ) -> None:
        await self.session.execute(
            update(Task)
            .where(Task.id == task_id)
            .values(status=status, updated_at=updated_at)
        )
        await self.session.commit()

    async def delete(self, task_id: int) -> int:
        """Delete by primary key and return the affected row count."""
        result = await self.session.execute(
            delete(Task)
            .where(Task.id == task_id)
            .execution_options(synchronize_session=False)
        )
        await self.session.commit()
        return int(result.rowcount or 0)

    async def list_by_user(self, user_id: int) -> list[TaskRecord]:
        """Return the owner's tasks by creation time, insertion order on ties."""
        result = await self.session.execute(
            select(Task)
            .where(Task.user_id == user_id)
            .order_by(Task.created_at, Task.id)
            .execution_options(populate_existing=True)
        )
        return [TaskRecord.from_row(row) for row in result.scalars().all()]
