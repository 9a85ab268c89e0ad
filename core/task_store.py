from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, List, Optional

from core.errors import NotFoundError

TASK_STATUSES = ("todo", "in-progress", "done")
TASK_PRIORITIES = ("low", "medium", "high")
STATUS_FILTER_ALL = "all"


class TaskNotFoundError(NotFoundError):
    def __init__(self, task_id: str) -> None:
        super().__init__(f"Task {task_id} not found.")
        self.task_id = task_id


def format_iso_ms(dt: datetime) -> str:
    return dt.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_iso(stamp: str) -> datetime:
    return datetime.fromisoformat(stamp.replace("Z", "+00:00"))


def utc_iso_ms() -> str:
    return format_iso_ms(datetime.now(timezone.utc))


@dataclass
class Task:
    id: str
    title: str
    description: str
    status: str  # todo / in-progress / done
    priority: str  # low / medium / high
    created_at: str
    updated_at: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "status": self.status,
            "priority": self.priority,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }


class TaskStore:
    """
    In-memory task records for the lifetime of the process.

    Ids are task-1, task-2, ... from a counter owned by the store and never
    reused. Status changes are not restricted to a transition graph: any of
    the three statuses may follow any other, done -> todo included.
    Every method hands out copies; the store keeps the only live records.
    """

    def __init__(self, clock: Optional[Callable[[], str]] = None) -> None:
        self._clock = clock or utc_iso_ms
        self._tasks: Dict[str, Task] = {}
        self._next_id = 1

    def create(self, title: str, description: str, priority: str = "medium") -> Task:
        if priority not in TASK_PRIORITIES:
            raise ValueError(f"priority must be one of {list(TASK_PRIORITIES)}")

        task_id = f"task-{self._next_id}"
        self._next_id += 1
        now = self._clock()
        task = Task(
            id=task_id,
            title=title,
            description=description,
            status="todo",
            priority=priority,
            created_at=now,
            updated_at=now,
        )
        self._tasks[task_id] = task
        return dataclasses.replace(task)

    def list(self, status: Optional[str] = None) -> List[Task]:
        # dicts keep insertion order, which is creation order here
        tasks = self._tasks.values()
        if status and status != STATUS_FILTER_ALL:
            tasks = [t for t in tasks if t.status == status]
        return [dataclasses.replace(t) for t in tasks]

    def update_status(self, task_id: str, status: str) -> Task:
        if status not in TASK_STATUSES:
            raise ValueError(f"status must be one of {list(TASK_STATUSES)}")

        task = self._tasks.get(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)

        task.status = status
        task.updated_at = self._next_stamp(task.updated_at)
        return dataclasses.replace(task)

    def _next_stamp(self, previous: str) -> str:
        # updatedAt moves forward even if the clock has not ticked since the last write
        stamp = self._clock()
        before = parse_iso(previous)
        if parse_iso(stamp) <= before:
            stamp = format_iso_ms(before + timedelta(milliseconds=1))
        return stamp

    def __len__(self) -> int:
        return len(self._tasks)
