"""Pydantic schemas for public interfaces."""

from __future__ import annotations

from .auth import AuthResponse, LoginRequest
from .system import ErrorResponse, HealthCheckResponse, RootResponse
from .task import TaskCreate, TaskMove, TaskRead, TaskUpdate
from .user import RegisterRequest, UserPublic

__all__ = [
    "AuthResponse",
    "ErrorResponse",
    "HealthCheckResponse",
    "LoginRequest",
    "RegisterRequest",
    "RootResponse",
    "TaskCreate",
    "TaskMove",
    "TaskRead",
    "TaskUpdate",
    "UserPublic",
]
