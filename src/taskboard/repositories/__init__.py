"""Database repositories for encapsulating persistence logic."""

from __future__ import annotations

from .base import TaskStore, UserStore
from .tasks import TaskRepository
from .users import UserRepository

__all__ = ["TaskRepository", "TaskStore", "UserRepository", "UserStore"]
