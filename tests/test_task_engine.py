from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone

import pytest

from taskboard.core.result import Err, Ok
from taskboard.errors import ErrorKind
from taskboard.models import TaskStatus
from taskboard.services import tasks as engine

from .fakes import FakeTaskStore, FrozenClock, SteppingClock

pytestmark = pytest.mark.asyncio

OWNER = 1


async def _create(store: FakeTaskStore, clock, title: str = "Write report", **kwargs):
    result = await engine.create_task(store, user_id=OWNER, title=title, clock=clock, **kwargs)
    assert isinstance(result, Ok)
    return result.value


async def test_create_trims_title_and_starts_in_todo(task_store: FakeTaskStore, clock: SteppingClock) -> None:
    task = await _create(task_store, clock, title="  Write report  ", description="  draft  ")

    assert task.title == "Write report"
    assert task.description == "  draft  "
    assert task.status is TaskStatus.TODO
    assert task.user_id == OWNER
    assert task.created_at == task.updated_at


async def test_create_without_description_stores_none(task_store: FakeTaskStore, clock: SteppingClock) -> None:
    task = await _create(task_store, clock)

    assert task.description is None


@pytest.mark.parametrize("title", [None, "", "   ", "\n\t"])
async def test_create_rejects_empty_title(task_store: FakeTaskStore, clock: SteppingClock, title) -> None:
    result = await engine.create_task(task_store, user_id=OWNER, title=title, clock=clock)

    assert result == Err(ErrorKind.EMPTY_TITLE)
    assert task_store.rows == {}
    assert "insert" not in task_store.calls


async def test_update_changes_title_only(task_store: FakeTaskStore, clock: SteppingClock) -> None:
    created = await _create(task_store, clock, description="notes")

    result = await engine.update_task(task_store, created.id, title="  Ship report ", clock=clock)

    assert isinstance(result, Ok)
    updated = result.value
    assert updated.title == "Ship report"
    assert updated.description == "notes"
    assert updated.status is TaskStatus.TODO
    assert updated.created_at == created.created_at
    assert updated.updated_at > created.updated_at


async def test_update_description_keeps_title(task_store: FakeTaskStore, clock: SteppingClock) -> None:
    created = await _create(task_store, clock)

    result = await engine.update_task(task_store, created.id, description="extra", clock=clock)

    assert isinstance(result, Ok)
    assert result.value.title == "Write report"
    assert result.value.description == "extra"


async def test_update_with_none_description_clears_it(task_store: FakeTaskStore, clock: SteppingClock) -> None:
    created = await _create(task_store, clock, description="notes")

    result = await engine.update_task(task_store, created.id, description=None, clock=clock)

    assert isinstance(result, Ok)
    assert result.value.description is None


async def test_update_with_none_title_keeps_stored_title(task_store: FakeTaskStore, clock: SteppingClock) -> None:
    created = await _create(task_store, clock)

    result = await engine.update_task(task_store, created.id, title=None, clock=clock)

    assert isinstance(result, Ok)
    assert result.value.title == "Write report"


@pytest.mark.parametrize("title", ["   ", "\n\t", " \t\n "])
async def test_update_rejects_blank_title_and_leaves_row_untouched(
    task_store: FakeTaskStore, clock: SteppingClock, title: str
) -> None:
    created = await _create(task_store, clock)

    result = await engine.update_task(task_store, created.id, title=title, clock=clock)

    assert result == Err(ErrorKind.EMPTY_TITLE)
    assert task_store.rows[created.id] == created


async def test_update_revalidates_stored_title_when_only_description_changes(
    task_store: FakeTaskStore, clock: SteppingClock
) -> None:
    created = await _create(task_store, clock)
    legacy = replace(created, title="  ")
    task_store.rows[created.id] = legacy

    result = await engine.update_task(task_store, created.id, description="d", clock=clock)

    assert result == Err(ErrorKind.EMPTY_TITLE)
    assert task_store.rows[created.id] == legacy
    assert "update" not in task_store.calls


async def test_update_missing_task_is_not_found(task_store: FakeTaskStore, clock: SteppingClock) -> None:
    result = await engine.update_task(task_store, 99, title="x", clock=clock)

    assert result == Err(ErrorKind.NOT_FOUND)


async def test_update_preserves_status(task_store: FakeTaskStore, clock: SteppingClock) -> None:
    created = await _create(task_store, clock)
    await engine.move_task(task_store, created.id, "doing", clock=clock)

    result = await engine.update_task(task_store, created.id, title="Renamed", clock=clock)

    assert isinstance(result, Ok)
    assert result.value.status is TaskStatus.DOING


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        (["doing", "done"], TaskStatus.DONE),
        (["done", "todo"], TaskStatus.TODO),
        (["todo"], TaskStatus.TODO),
        (["done", "doing", "done"], TaskStatus.DONE),
    ],
)
async def test_any_status_may_follow_any_other(
    task_store: FakeTaskStore, clock: SteppingClock, path: list[str], expected: TaskStatus
) -> None:
    created = await _create(task_store, clock)

    result = None
    for status in path:
        result = await engine.move_task(task_store, created.id, status, clock=clock)
        assert isinstance(result, Ok)

    assert result is not None and result.value.status is expected
    assert result.value.title == created.title
    assert result.value.updated_at > created.updated_at


@pytest.mark.parametrize("status", ["DONE", "finished", " doing", "", None, 1])
async def test_move_rejects_unknown_status(task_store: FakeTaskStore, clock: SteppingClock, status) -> None:
    created = await _create(task_store, clock)

    result = await engine.move_task(task_store, created.id, status, clock=clock)

    assert result == Err(ErrorKind.INVALID_STATUS)
    assert task_store.rows[created.id].status is TaskStatus.TODO
    assert "update_status" not in task_store.calls


async def test_move_missing_task_reports_not_found_before_status(
    task_store: FakeTaskStore, clock: SteppingClock
) -> None:
    assert await engine.move_task(task_store, 42, "bogus", clock=clock) == Err(ErrorKind.NOT_FOUND)


async def test_delete_removes_task_in_one_call(task_store: FakeTaskStore, clock: SteppingClock) -> None:
    created = await _create(task_store, clock)
    task_store.calls.clear()

    assert isinstance(await engine.delete_task(task_store, created.id), Ok)
    assert task_store.calls == ["delete"]
    assert await engine.get_task(task_store, created.id) is None


async def test_delete_missing_task_is_not_found(task_store: FakeTaskStore) -> None:
    assert await engine.delete_task(task_store, 7) == Err(ErrorKind.NOT_FOUND)
    assert task_store.calls == ["delete"]


async def test_list_returns_only_owned_tasks_oldest_first(
    task_store: FakeTaskStore, clock: SteppingClock
) -> None:
    first = await _create(task_store, clock, title="first")
    await engine.create_task(task_store, user_id=2, title="foreign", clock=clock)
    second = await _create(task_store, clock, title="second")

    listed = await engine.list_tasks(task_store, OWNER)

    assert [task.id for task in listed] == [first.id, second.id]


async def test_list_breaks_timestamp_ties_by_insertion_order(task_store: FakeTaskStore) -> None:
    frozen = FrozenClock(datetime(2024, 5, 1, tzinfo=timezone.utc))
    ids = [(await _create(task_store, frozen, title=f"t{n}")).id for n in range(3)]

    listed = await engine.list_tasks(task_store, OWNER)

    assert [task.id for task in listed] == ids


async def test_list_for_user_without_tasks_is_empty(task_store: FakeTaskStore) -> None:
    assert await engine.list_tasks(task_store, 5) == []


async def test_single_task_operations_do_not_check_ownership(
    task_store: FakeTaskStore, clock: SteppingClock
) -> None:
    created = await engine.create_task(task_store, user_id=2, title="theirs", clock=clock)
    assert isinstance(created, Ok)

    moved = await engine.move_task(task_store, created.value.id, "done", clock=clock)

    assert isinstance(moved, Ok)
    assert moved.value.user_id == 2


async def test_update_without_fields_only_refreshes_timestamp(
    task_store: FakeTaskStore, clock: SteppingClock
) -> None:
    created = await _create(task_store, clock, description="notes")

    result = await engine.update_task(task_store, created.id, clock=clock)

    assert isinstance(result, Ok)
    updated = result.value
    assert (updated.title, updated.description, updated.status) == (
        created.title,
        created.description,
        created.status,
    )
    assert updated.updated_at > created.updated_at


async def test_delete_twice_reports_not_found_second_time(
    task_store: FakeTaskStore, clock: SteppingClock
) -> None:
    created = await _create(task_store, clock)

    assert await engine.delete_task(task_store, created.id) == Ok(None)
    assert await engine.delete_task(task_store, created.id) == Err(ErrorKind.NOT_FOUND)


async def test_todo_doing_todo_round_trip(task_store: FakeTaskStore, clock: SteppingClock) -> None:
    created = await _create(task_store, clock)

    doing = await engine.move_task(task_store, created.id, "doing", clock=clock)
    todo = await engine.move_task(task_store, created.id, TaskStatus.TODO, clock=clock)

    assert isinstance(doing, Ok) and doing.value.status is TaskStatus.DOING
    assert isinstance(todo, Ok) and todo.value.status is TaskStatus.TODO
