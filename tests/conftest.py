import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from core.task_store import TaskStore  # noqa: E402
from tools import build_dispatcher  # noqa: E402


class TickingClock:
    """Deterministic clock: every call returns the next second."""

    def __init__(self):
        self.calls = 0

    def __call__(self) -> str:
        self.calls += 1
        return f"2026-01-01T00:00:{self.calls:02d}.000Z"


@pytest.fixture
def clock():
    return TickingClock()


@pytest.fixture
def store(clock):
    return TaskStore(clock=clock)


@pytest.fixture
def dispatcher(store):
    return build_dispatcher(store)
