"""Task domain models built with SQLModel."""

from __future__ import annotations

from enum import Enum

import sqlalchemy as sa
from sqlmodel import Field, SQLModel

from .common import TimestampMixin


class TaskStatus(str, Enum):
    """The three lifecycle stages a task can sit in."""

    TODO = "todo"
    DOING = "doing"
    DONE = "done"

    @classmethod
    def parse(cls, value: object) -> "TaskStatus | None":
        """Return the member whose value equals ``value`` exactly, else ``None``."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value)
        except ValueError:
            return None


class TaskBase(SQLModel, table=False):
    """Shared attributes for task models."""

    title: str = Field(sa_column=sa.Column(sa.Text(), nullable=False))
    description: str | None = Field(
        default=None,
        sa_column=sa.Column(sa.Text(), nullable=True),
    )
    status: TaskStatus = Field(
        default=TaskStatus.TODO,
        sa_column=sa.Column(
            sa.Enum(
                TaskStatus,
                name="task_status",
                native_enum=False,
                create_constraint=True,
                validate_strings=True,
                values_callable=lambda members: [member.value for member in members],
            ),
            nullable=False,
        ),
    )
    user_id: int = Field(
        sa_column=sa.Column(
            sa.Integer(),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
    )


class Task(TaskBase, TimestampMixin, table=True):
    """Persistent task row."""

    __tablename__ = "tasks"
    __table_args__ = (
        sa.CheckConstraint("length(title) > 0", name="ck_tasks_title_length"),
        sa.Index("ix_tasks_user_id_created_at", "user_id", "created_at"),
    )

    id: int | None = Field(default=None, primary_key=True)


__all__ = ["Task", "TaskBase", "TaskStatus"]
