import pytest

from core.errors import NotFoundError
from core.task_store import TaskNotFoundError, TaskStore, parse_iso


def _task(store, task_id):
    return next(t for t in store.list() if t.id == task_id)


def test_create_assigns_sequential_ids_and_todo(store):
    a = store.create("A", "B")
    b = store.create("A", "B")

    assert (a.id, b.id) == ("task-1", "task-2")
    assert a.status == b.status == "todo"
    assert a.priority == "medium"
    assert a.created_at == a.updated_at


def test_list_keeps_creation_order_and_filters(store):
    for title in ("one", "two", "three"):
        store.create(title, "")
    store.update_status("task-2", "done")

    assert [t.title for t in store.list()] == ["one", "two", "three"]
    assert [t.title for t in store.list("all")] == ["one", "two", "three"]
    assert [t.id for t in store.list("done")] == ["task-2"]
    assert [t.id for t in store.list("todo")] == ["task-1", "task-3"]
    assert store.list("in-progress") == []


def test_update_refreshes_updated_at_only(store):
    created = store.create("A", "B")
    updated = store.update_status(created.id, "in-progress")

    assert updated.status == "in-progress"
    assert updated.created_at == created.created_at
    assert updated.updated_at != created.updated_at


@pytest.mark.parametrize(
    "start,end",
    [
        ("todo", "in-progress"),
        ("todo", "done"),
        ("in-progress", "todo"),
        ("in-progress", "done"),
        ("done", "todo"),
        ("done", "in-progress"),
    ],
)
def test_every_transition_is_allowed(store, start, end):
    task = store.create("A", "B")
    store.update_status(task.id, start)
    assert store.update_status(task.id, end).status == end


def test_unknown_id_raises_and_leaves_store_alone(store):
    store.create("A", "B")
    with pytest.raises(TaskNotFoundError, match="Task task-99 not found."):
        store.update_status("task-99", "done")
    assert len(store) == 1
    assert _task(store, "task-1").status == "todo"


def test_not_found_is_a_not_found_error(store):
    with pytest.raises(NotFoundError):
        store.update_status("task-1", "done")


def test_returned_records_are_copies(store):
    task = store.create("A", "B")
    task.status = "done"
    store.list()[0].title = "changed"

    fresh = _task(store, "task-1")
    assert fresh.status == "todo"
    assert fresh.title == "A"


def test_ids_are_never_reused_across_failed_updates(store):
    store.create("A", "B")
    with pytest.raises(TaskNotFoundError):
        store.update_status("task-2", "done")
    assert store.create("C", "D").id == "task-2"


def test_rejects_unknown_status_and_priority(store):
    store.create("A", "B")
    with pytest.raises(ValueError):
        store.update_status("task-1", "blocked")
    with pytest.raises(ValueError):
        store.create("A", "B", priority="urgent")


def test_default_clock_is_iso_utc():
    task = TaskStore().create("A", "B")
    assert task.created_at.endswith("Z")
    assert "T" in task.created_at


def test_to_dict_uses_wire_names(store):
    d = store.create("A", "B", priority="high").to_dict()
    assert d == {
        "id": "task-1",
        "title": "A",
        "description": "B",
        "status": "todo",
        "priority": "high",
        "createdAt": "2026-01-01T00:00:01.000Z",
        "updatedAt": "2026-01-01T00:00:01.000Z",
    }


def test_update_moves_updated_at_forward_with_real_clock():
    store = TaskStore()
    for _ in range(200):
        task = store.create("A", "B")
        updated = store.update_status(task.id, "done")
        assert parse_iso(updated.updated_at) > parse_iso(task.updated_at)
        again = store.update_status(task.id, "todo")
        assert parse_iso(again.updated_at) > parse_iso(updated.updated_at)
        assert again.created_at == task.created_at


def test_stalled_clock_still_advances_updated_at():
    store = TaskStore(clock=lambda: "2026-01-01T00:00:00.000Z")
    task = store.create("A", "B")
    first = store.update_status(task.id, "in-progress")
    second = store.update_status(task.id, "done")

    assert first.updated_at == "2026-01-01T00:00:00.001Z"
    assert second.updated_at == "2026-01-01T00:00:00.002Z"
