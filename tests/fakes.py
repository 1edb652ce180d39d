"""In-memory stand-ins for the user and task stores."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timedelta, timezone
from itertools import count

from taskboard.models import TaskRecord, TaskStatus, UserRecord

USER_HEADER = "X-User-Id"


@dataclass(slots=True)
class FakeUserStore:
    """Dictionary-backed ``UserStore`` with exact-match email lookups."""

    rows: dict[int, UserRecord] = field(default_factory=dict)
    _ids: count = field(default_factory=lambda: count(1))

    async def insert(self, *, name: str, email: str, password: str) -> int:
        user_id = next(self._ids)
        self.rows[user_id] = UserRecord(id=user_id, name=name, email=email, password=password)
        return user_id

    async def find_by_email(self, email: str) -> UserRecord | None:
        return next((row for row in self.rows.values() if row.email == email), None)

    async def exists_by_email(self, email: str) -> bool:
        return await self.find_by_email(email) is not None


@dataclass(slots=True)
class FakeTaskStore:
    """Dictionary-backed ``TaskStore`` that records every call it receives."""

    rows: dict[int, TaskRecord] = field(default_factory=dict)
    calls: list[str] = field(default_factory=list)
    _ids: count = field(default_factory=lambda: count(1))

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
        self.calls.append("insert")
        task_id = next(self._ids)
        self.rows[task_id] = TaskRecord(
            id=task_id,
            user_id=user_id,
            title=title,
            description=description,
            status=status,
            created_at=created_at,
            updated_at=updated_at,
        )
        return task_id

    async def find_by_id(self, task_id: int) -> TaskRecord | None:
        self.calls.append("find_by_id")
        return self.rows.get(task_id)

    async def update(
        self,
        task_id: int,
        *,
        title: str,
        description: str | None,
        updated_at: datetime,
    ) -> None:
        self.calls.append("update")
        self.rows[task_id] = replace(
            self.rows[task_id],
            title=title,
            description=description,
            updated_at=updated_at,
        )

    async def update_status(self, task_id: int, *, status: TaskStatus, updated_at: datetime) -> None:
        self.calls.append("update_status")
        self.rows[task_id] = replace(self.rows[task_id], status=status, updated_at=updated_at)

    async def delete(self, task_id: int) -> int:
        self.calls.append("delete")
        return 1 if self.rows.pop(task_id, None) is not None else 0

    async def list_by_user(self, user_id: int) -> list[TaskRecord]:
        self.calls.append("list_by_user")
        owned = [row for row in self.rows.values() if row.user_id == user_id]
        return sorted(owned, key=lambda row: (row.created_at, row.id))


class SteppingClock:
    """Deterministic clock advancing one second per call."""

    def __init__(self, start: datetime | None = None) -> None:
        self.current = start or datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        value = self.current
        self.current += timedelta(seconds=1)
        return value


class FrozenClock:
    def __init__(self, value: datetime | None = None) -> None:
        self.value = value or datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.value
