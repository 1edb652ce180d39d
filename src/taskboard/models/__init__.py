"""Domain models exposed for the taskboard service."""

from __future__ import annotations

from .common import TimestampMixin, ensure_utc, utcnow
from .records import TaskRecord, UserRecord
from .task import Task, TaskBase, TaskStatus
from .user import User, UserBase

__all__ = [
    "Task",
    "TaskBase",
    "TaskRecord",
    "TaskStatus",
    "TimestampMixin",
    "User",
    "UserBase",
    "UserRecord",
    "ensure_utc",
    "utcnow",
]
