from core.dispatcher import Dispatcher, ToolContext
from core.registry import ToolDescriptor, ToolRegistry
from core.task_store import TaskStore

from .loader import load_tools

TOOL_RUNNERS, TOOL_SPECS = load_tools()


def build_registry() -> ToolRegistry:
    return ToolRegistry(ToolDescriptor.from_spec(spec) for spec in TOOL_SPECS.values())


def build_dispatcher(store: TaskStore | None = None) -> Dispatcher:
    return Dispatcher(
        registry=build_registry(),
        handlers=TOOL_RUNNERS,
        context=ToolContext(tasks=store if store is not None else TaskStore()),
    )
