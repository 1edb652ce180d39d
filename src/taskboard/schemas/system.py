"""Common system-level response models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class RootResponse(BaseModel):
    """Metadata payload returned by the root endpoint."""

    name: str = Field(description="Human-friendly service name")
    environment: str = Field(description="Deployment environment identifier")
    version: str = Field(description="Semantic version of the service")
    api_prefix: str = Field(description="Base path for API routes")


class HealthCheckResponse(BaseModel):
    """Payload returned by the health check endpoint."""

    status: str = Field(default="ok", description="Service health indicator")
    environment: str = Field(description="Active configuration profile")
    database: str = Field(description="Dialect of the configured storage backend")


class ErrorResponse(BaseModel):
    """Envelope shared by every error response."""

    code: str = Field(description="Machine-readable error kind")
    message: str = Field(description="Fixed human-readable message for the kind")
    details: Any | None = Field(
        default=None,
        description="Request id and any structured context for the failure.",
    )
