"""Liveness endpoint reporting the running profile and storage backend."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from ...db import Database
from ...deps import SettingsDependency, get_database
from ...schemas.system import HealthCheckResponse

router = APIRouter(tags=["system"])


@router.get("/healthz", response_model=HealthCheckResponse, summary="Health check")
async def read_health(
    settings: SettingsDependency,
    database: Annotated[Database, Depends(get_database)],
) -> HealthCheckResponse:
    return HealthCheckResponse(
        status="ok",
        environment=settings.environment,
        database=database.engine.dialect.name,
    )
