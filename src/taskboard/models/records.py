"""Plain row records passed between the stores and the core."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .common import ensure_utc
from .task import Task, TaskStatus
from .user import User


@dataclass(frozen=True, slots=True)
class UserRecord:
    id: int
    name: str
    email: str
    password: str

    @classmethod
    def from_row(cls, row: User) -> "UserRecord":
        if row.id is None:  # pragma: no cover - rows are only mapped after flush
            raise ValueError("User row has not been persisted.")
        return cls(id=row.id, name=row.name, email=row.email, password=row.password)


@dataclass(frozen=True, slots=True)
class TaskRecord:
    id: int
    user_id: int
    title: str
    description: str | None
    status: TaskStatus
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_row(cls, row: Task) -> "TaskRecord":
        if row.id is None:  # pragma: no cover - rows are only mapped after flush
            raise ValueError("Task row has not been persisted.")
        return cls(
            id=row.id,
            user_id=row.user_id,
            title=row.title,
            description=row.description,
            status=TaskStatus(row.status),
            created_at=ensure_utc(row.created_at),
            updated_at=ensure_utc(row.updated_at),
        )


__all__ = ["TaskRecord", "UserRecord"]
