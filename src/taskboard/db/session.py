"""Database handle owning the async engine and its session factory."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from typing import Any

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from .. import models  # noqa: F401  registers table metadata
from ..core.config import Settings

logger = logging.getLogger(__name__)


class Database:
    """Storage handle created once at startup and disposed on shutdown."""

    def __init__(self, engine: AsyncEngine) -> None:
        self._engine = engine
        self._session_maker = async_sessionmaker(
            engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        """Build the handle for ``settings.database_url``."""
        engine_kwargs: dict[str, Any] = {"echo": settings.db_echo}
        if make_url(settings.database_url).get_backend_name() != "sqlite":
            engine_kwargs["pool_pre_ping"] = True
        return cls(create_async_engine(settings.database_url, **engine_kwargs))

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    async def session(self) -> AsyncIterator[AsyncSession]:
        """Yield an ``AsyncSession`` for request-scoped work."""
        async with self._session_maker() as session:
            yield session

    async def create_all(self) -> None:
        """Create all tables (local development and tests)."""
        async with self._engine.begin() as connection:
            await connection.run_sync(SQLModel.metadata.create_all)
        logger.info("Database tables ensured", extra={"backend": self._engine.dialect.name})

    async def dispose(self) -> None:
        await self._engine.dispose()
        logger.info("Database engine disposed")


__all__ = ["Database"]
