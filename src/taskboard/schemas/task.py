"""Task-related Pydantic schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from ..models import TaskStatus

TASK_READ_EXAMPLE = {
    "id": 1,
    "user_id": 42,
    "title": "Buy milk",
    "description": "Semi-skimmed, two litres.",
    "status": TaskStatus.TODO.value,
    "created_at": "2024-01-01T12:00:00+00:00",
    "updated_at": "2024-01-02T08:30:00+00:00",
}


class TaskCreate(BaseModel):
    """Payload for creating a new task."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Buy milk",
                "description": "Semi-skimmed, two litres.",
            }
        }
    )

    title: str | None = None
    description: str | None = None


class TaskUpdate(BaseModel):
    """Partial edit of title and/or description. Omitted fields are left as stored."""

    model_config = ConfigDict(json_schema_extra={"example": {"title": "Buy oat milk"}})

    title: str | None = None
    description: str | None = None


class TaskMove(BaseModel):
    """Target status for a task. Free-form so unknown values reach the engine."""

    model_config = ConfigDict(json_schema_extra={"example": {"status": TaskStatus.DOING.value}})

    status: str | None = None


class TaskRead(BaseModel):
    """Public representation of a task."""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={"example": TASK_READ_EXAMPLE},
    )

    id: int
    user_id: int
    title: str
    description: str | None = None
    status: TaskStatus
    created_at: datetime
    updated_at: datetime


__all__ = ["TaskCreate", "TaskMove", "TaskRead", "TaskUpdate"]
