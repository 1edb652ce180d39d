"""Task engine: creation, edits, status moves, deletion and listing.

Every operation takes the ``TaskStore`` explicitly and returns a ``Result``.
Single-task operations act on any task id they are given; only
``list_tasks`` is scoped to an owner.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from enum import Enum
from typing import Final

from ..core.result import OK_NONE, Err, Ok, Result
from ..errors import ErrorKind
from ..models import TaskRecord, TaskStatus, utcnow
from ..repositories import TaskStore

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


class _Unset(Enum):
    UNSET = "UNSET"


UNSET: Final = _Unset.UNSET


def validate_title(title: str | None) -> Result[str]:
    """Return the trimmed title, or ``EMPTY_TITLE`` if nothing is left."""
    trimmed = title.strip() if title is not None else ""
    if not trimmed:
        return Err(ErrorKind.EMPTY_TITLE)
    return Ok(trimmed)


def validate_status(status: object) -> Result[TaskStatus]:
    parsed = TaskStatus.parse(status)
    if parsed is None:
        return Err(ErrorKind.INVALID_STATUS)
    return Ok(parsed)


def validate_task_exists(task: TaskRecord | None) -> Result[TaskRecord]:
    if task is None:
        return Err(ErrorKind.NOT_FOUND)
    return Ok(task)


async def _reload(tasks: TaskStore, task_id: int) -> Result[TaskRecord]:
    return validate_task_exists(await tasks.find_by_id(task_id))


async def create_task(
    tasks: TaskStore,
    *,
    user_id: int,
    title: str | None,
    description: str | None = None,
    clock: Clock = utcnow,
) -> Result[TaskRecord]:
    """Insert a ``todo`` task and return the stored row.

    The title is trimmed; the description is stored exactly as given. Both
    timestamps receive the same instant.
    """
    checked = validate_title(title)
    if isinstance(checked, Err):
        logger.debug("Task creation rejected", extra={"kind": checked.kind.value})
        return checked

    now = clock()
    task_id = await tasks.insert(
        user_id=user_id,
        title=checked.value,
        description=description,
        status=TaskStatus.TODO,
        created_at=now,
        updated_at=now,
    )
    logger.info("Task created", extra={"task_id": task_id, "user_id": user_id})
    return await _reload(tasks, task_id)


async def get_task(tasks: TaskStore, task_id: int) -> TaskRecord | None:
    return await tasks.find_by_id(task_id)


async def update_task(
    tasks: TaskStore,
    task_id: int,
    *,
    title: str | None | _Unset = UNSET,
    description: str | None | _Unset = UNSET,
    clock: Clock = utcnow,
) -> Result[TaskRecord]:
    """Edit title and/or description, leaving the status alone.

    Omitted fields keep their stored value (a ``None`` title counts as
    omitted; a ``None`` description clears it). The effective title is
    validated even when only the description changes.
    """
    found = validate_task_exists(await tasks.find_by_id(task_id))
    if isinstance(found, Err):
        return found
    existing = found.value

    new_title = existing.title if title is UNSET or title is None else title
    new_description = existing.description if description is UNSET else description

    checked = validate_title(new_title)
    if isinstance(checked, Err):
        logger.debug("Task update rejected", extra={"task_id": task_id, "kind": checked.kind.value})
        return checked

    await tasks.update(
        task_id,
        title=checked.value,
        description=new_description,
        updated_at=clock(),
    )
    logger.info("Task updated", extra={"task_id": task_id})
    return await _reload(tasks, task_id)


async def delete_task(tasks: TaskStore, task_id: int) -> Result[None]:
    """Delete in a single round trip; zero affected rows means ``NOT_FOUND``."""
    if await tasks.delete(task_id) == 0:
        return Err(ErrorKind.NOT_FOUND)
    logger.info("Task deleted", extra={"task_id": task_id})
    return OK_NONE


async def move_task(
    tasks: TaskStore,
    task_id: int,
    status: object,
    *,
    clock: Clock = utcnow,
) -> Result[TaskRecord]:
    """Set the task's status. Any stage may follow any other, itself included.

    Existence is checked before the status value, so a bad status against a
    missing task reports ``NOT_FOUND``.
    """
    found = validate_task_exists(await tasks.find_by_id(task_id))
    if isinstance(found, Err):
        return found
    parsed = validate_status(status)
    if isinstance(parsed, Err):
        logger.debug("Task move rejected", extra={"task_id": task_id, "kind": parsed.kind.value})
        return parsed

    await tasks.update_status(task_id, status=parsed.value, updated_at=clock())
    logger.info(
        "Task moved",
        extra={"task_id": task_id, "from_status": found.value.status.value, "to_status": parsed.value.value},
    )
    return await _reload(tasks, task_id)


async def list_tasks(tasks: TaskStore, user_id: int) -> list[TaskRecord]:
    """Return the owner's tasks, oldest first."""
    return await tasks.list_by_user(user_id)


__all__ = [
    "UNSET",
    "Clock",
    "create_task",
    "delete_task",
    "get_task",
    "list_tasks",
    "move_task",
    "update_task",
    "validate_status",
    "validate_task_exists",
    "validate_title",
]
