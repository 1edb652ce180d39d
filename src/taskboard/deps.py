"""Reusable FastAPI dependencies."""

from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Annotated

from fastapi import Depends, Request
from sqlmodel.ext.asyncio.session import AsyncSession

from .core.config import Settings, get_settings
from .db import Database
from .errors import unwrap
from .repositories import TaskRepository, TaskStore, UserRepository, UserStore
from .services import resolve_principal


def get_app_settings(request: Request) -> Settings:
    """Return the settings the running app was built with."""

    return getattr(request.app.state, "settings", None) or get_settings()


SettingsDependency = Annotated[Settings, Depends(get_app_settings)]


def get_database(request: Request) -> Database:
    """Return the storage handle created by ``create_app``."""

    return request.app.state.database


async def get_db_session(
    database: Annotated[Database, Depends(get_database)],
) -> AsyncIterator[AsyncSession]:
    """FastAPI dependency that yields a database session."""

    async for session in database.session():
        yield session


DatabaseSessionDependency = Annotated[AsyncSession, Depends(get_db_session)]


def get_user_store(session: DatabaseSessionDependency) -> UserStore:
    return UserRepository(session)


def get_task_store(session: DatabaseSessionDependency) -> TaskStore:
    return TaskRepository(session)


def require_principal(request: Request, settings: SettingsDependency) -> int:
    """Resolve the calling user from the configured id header.

    Raises ``DomainError(UNAUTHORIZED)`` when the header is absent or not a
    positive integer.
    """

    return unwrap(resolve_principal(request.headers.get(settings.user_id_header)))


UserStoreDependency = Annotated[UserStore, Depends(get_user_store)]
TaskStoreDependency = Annotated[TaskStore, Depends(get_task_store)]
PrincipalDependency = Annotated[int, Depends(require_principal)]


__all__ = [
    "DatabaseSessionDependency",
    "PrincipalDependency",
    "SettingsDependency",
    "TaskStoreDependency",
    "UserStoreDependency",
    "get_app_settings",
    "get_database",
    "get_db_session",
    "get_task_store",
    "get_user_store",
    "require_principal",
]
