"""Trace ID management for correlating contract calls.

Trace IDs live in a `contextvars.ContextVar` so that every coroutine spawned
while handling one registry operation sees the same identifier. Errors and log
records pick the active trace ID up automatically.
"""

import contextvars
import uuid
from typing import Any

trace_id_context: contextvars.ContextVar[str | None] = contextvars.ContextVar("trace_id", default=None)

NO_TRACE = "no-trace"


def generate_trace_id() -> str:
    """Generates a new trace ID.

    Returns:
        A UUID4 hex string without hyphens (32 characters).
    """
    return uuid.uuid4().hex


def set_trace_id(trace_id: str | None = None) -> str:
    """Sets the trace ID for the current context.

    Args:
        trace_id: The trace ID to set. A new one is generated when `None`.

    Returns:
        The trace ID that is now active.
    """
    if trace_id is None:
        trace_id = generate_trace_id()

    trace_id_context.set(trace_id)
    return trace_id


def get_trace_id() -> str | None:
    """Returns the active trace ID, or `None` if none is set."""
    return trace_id_context.get()


def get_or_create_trace_id() -> str:
    """Returns the active trace ID, setting a fresh one if none is active."""
    trace_id = get_trace_id()
    if trace_id is None:
        trace_id = set_trace_id()
    return trace_id


def clear_trace_id() -> None:
    """Clears the trace ID of the current context."""
    trace_id_context.set(None)


def format_trace_id(trace_id: str | None) -> str:
    return trace_id if trace_id else NO_TRACE


def get_formatted_trace_id() -> str:
    """Returns the active trace ID, or "no-trace" when none is set."""
    return format_trace_id(get_trace_id())


class TraceContext:
    """Context manager that scopes a trace ID to a block.

    The previous trace ID is restored on exit, so nested contexts behave like a stack.

    Example:
        with TraceContext() as trace_id:
            await client.register_asset("Bitcoin Holdings", "cryptocurrency", "{}")
    """

    def __init__(self, trace_id: str | None = None):
        self.trace_id = trace_id
        self.token: contextvars.Token[str | None] | None = None

    def __enter__(self) -> str:
        if self.trace_id is None:
            self.trace_id = generate_trace_id()

        self.token = trace_id_context.set(self.trace_id)
        return self.trace_id

    def __exit__(self, exc_type: type[BaseException] | None, exc_val: BaseException | None, exc_tb: Any) -> None:
        if self.token is not None:
            trace_id_context.reset(self.token)
            self.token = None
