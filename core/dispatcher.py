"""
Tool Dispatcher

Single entry point for a tool call: (name, raw arguments) -> ResultEnvelope.

- resolves the tool in the registry
- validates the arguments against its parameter schema
- runs the bound handler with the validated arguments
- turns whatever happens into an envelope

Nothing raised by a handler gets past call(); the transport always gets a
well-formed envelope back.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from core.envelope import ContentItem, ResultEnvelope, text_content
from core.errors import ErrorKind, NotFoundError
from core.registry import ToolRegistry
from core.schema import validate
from core.task_store import TaskStore

logger = logging.getLogger(__name__)


@dataclass
class ToolContext:
    """Server-side state handed to every handler."""

    tasks: TaskStore


HandlerResult = Union[str, List[ContentItem]]
Handler = Callable[[Dict[str, Any], ToolContext], HandlerResult]


class Dispatcher:
    def __init__(
        self,
        registry: ToolRegistry,
        handlers: Mapping[str, Handler],
        context: ToolContext,
    ) -> None:
        missing = [name for name in registry.names() if name not in handlers]
        if missing:
            raise ValueError(f"no handler bound for tools: {missing}")
        unknown = [name for name in handlers if name not in registry]
        if unknown:
            raise ValueError(f"handlers bound to unregistered tools: {unknown}")

        self.registry = registry
        self.context = context
        self._handlers = dict(handlers)

    def call(self, name: str, arguments: Optional[Mapping[str, Any]] = None) -> ResultEnvelope:
        logger.info("tool call %r", name)
        descriptor = self.registry.find(name) if isinstance(name, str) else None
        if descriptor is None:
            logger.warning("tool call rejected: unknown tool %r", name)
            return ResultEnvelope.failure(ErrorKind.TOOL_NOT_FOUND, f"Unknown tool: {name}")

        raw = {} if arguments is None else arguments
        if isinstance(raw, Mapping) and not isinstance(raw, dict):
            raw = dict(raw)

        try:
            checked = validate(descriptor.input_schema, raw)
        except Exception as e:
            logger.exception("tool %s: validator raised", name)
            return ResultEnvelope.failure(ErrorKind.EXECUTION, f"Error: {_describe(e)}")
        if not checked.ok:
            message = f"Invalid arguments for {name}: {checked.failure.joined()}"
            logger.warning("tool call rejected: %s", message)
            return ResultEnvelope.failure(ErrorKind.VALIDATION, message)

        handler = self._handlers[name]
        try:
            produced = handler(checked.arguments, self.context)
            envelope = ResultEnvelope.success(_as_content(produced))
        except NotFoundError as e:
            logger.warning("tool %s: %s", name, e)
            return ResultEnvelope.failure(ErrorKind.NOT_FOUND, str(e))
        except OSError as e:
            logger.warning("tool %s: I/O failure: %s", name, e)
            return ResultEnvelope.failure(ErrorKind.IO, f"Error: {_describe(e)}")
        except Exception as e:
            logger.exception("tool %s raised", name)
            return ResultEnvelope.failure(ErrorKind.EXECUTION, f"Error: {_describe(e)}")

        logger.info("tool %s ok (%d content items)", name, len(envelope.content))
        return envelope


def _as_content(produced: HandlerResult) -> List[ContentItem]:
    if isinstance(produced, str):
        return [text_content(produced)]
    if isinstance(produced, list):
        return produced
    raise TypeError(f"handler returned {type(produced).__name__}, expected str or list of content")


def _describe(e: BaseException) -> str:
    return str(e) or type(e).__name__
