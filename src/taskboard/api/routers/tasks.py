"""Routes handling task CRUD and status moves.

Every route resolves the caller through ``PrincipalDependency``. Only the
list route uses the principal to scope its results.
"""

from __future__ import annotations

from fastapi import APIRouter, Response, status

from ...deps import PrincipalDependency, TaskStoreDependency
from ...errors import DomainError, ErrorKind, unwrap
from ...models import TaskRecord
from ...schemas import TaskCreate, TaskMove, TaskRead, TaskUpdate
from ...services import tasks as task_engine

router = APIRouter(prefix="/tasks", tags=["tasks"])


def _map_task(task: TaskRecord) -> TaskRead:
    return TaskRead.model_validate(task)


@router.get(
    "",
    response_model=list[TaskRead],
    summary="List the caller's tasks, oldest first",
)
async def list_tasks(user_id: PrincipalDependency, tasks: TaskStoreDependency) -> list[TaskRead]:
    return [_map_task(task) for task in await task_engine.list_tasks(tasks, user_id)]


@router.post(
    "",
    response_model=TaskRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new task",
)
async def create_task(
    payload: TaskCreate,
    user_id: PrincipalDependency,
    tasks: TaskStoreDependency,
) -> TaskRead:
    task = unwrap(
        await task_engine.create_task(
            tasks,
            user_id=user_id,
            title=payload.title,
            description=payload.description,
        )
    )
    return _map_task(task)


@router.get(
    "/{task_id}",
    response_model=TaskRead,
    summary="Retrieve a task by id",
)
async def get_task(task_id: int, _: PrincipalDependency, tasks: TaskStoreDependency) -> TaskRead:
    task = await task_engine.get_task(tasks, task_id)
    if task is None:
        raise DomainError(ErrorKind.NOT_FOUND)
    return _map_task(task)


@router.put(
    "/{task_id}",
    response_model=TaskRead,
    summary="Edit a task's title and/or description",
)
async def update_task(
    task_id: int,
    payload: TaskUpdate,
    _: PrincipalDependency,
    tasks: TaskStoreDependency,
) -> TaskRead:
    # only fields present in the body are forwarded; absent ones keep their stored value
    updates = payload.model_dump(exclude_unset=True)
    task = unwrap(await task_engine.update_task(tasks, task_id, **updates))
    return _map_task(task)


@router.patch(
    "/{task_id}/status",
    response_model=TaskRead,
    summary="Move a task to another status",
)
async def move_task(
    task_id: int,
    payload: TaskMove,
    _: PrincipalDependency,
    tasks: TaskStoreDependency,
) -> TaskRead:
    task = unwrap(await task_engine.move_task(tasks, task_id, payload.status))
    return _map_task(task)


@router.delete(
    "/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a task",
)
async def delete_task(task_id: int, _: PrincipalDependency, tasks: TaskStoreDependency) -> Response:
    unwrap(await task_engine.delete_task(tasks, task_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
