"""
Dispatch error taxonomy.

Every failure a tool call can produce is tagged with one of the ErrorKind
values below when it is turned into a failure envelope. Only the tag tells
expected failures (unknown tool, bad arguments, missing task, I/O) apart
from unexpected handler faults.
"""

from __future__ import annotations


class ErrorKind:
    TOOL_NOT_FOUND = "ToolNotFound"
    VALIDATION = "ValidationFailure"
    NOT_FOUND = "NotFound"
    IO = "IOFailure"
    EXECUTION = "ExecutionFault"

    ALL = (TOOL_NOT_FOUND, VALIDATION, NOT_FOUND, IO, EXECUTION)


class NotFoundError(Exception):
    """Raised when a handler references a record that does not exist."""
