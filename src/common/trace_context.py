# This file owns the per-request correlation identifier shared by both services.
# It exists so log lines from the user service and the department service can be joined by one id.
# The id lives in a context variable, so concurrent requests never observe each other's value.
# Outbound calls read the same id and forward it under the same header name.

from __future__ import annotations

import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from typing import Final

TRACE_HEADER_NAME: Final[str] = "eventTraceId"

_TRACE_ID: ContextVar[str | None] = ContextVar(TRACE_HEADER_NAME, default=None)


def generate_trace_id() -> str:
    return str(uuid.uuid4())


def resolve_trace_id(raw_value: str | None) -> str:
    """Return the inbound id unchanged, or a fresh UUID when it is missing or blank."""

    if raw_value is None or raw_value.strip() == "":
        return generate_trace_id()
    return raw_value


def bind_trace_id(trace_id: str) -> Token[str | None]:
    return _TRACE_ID.set(trace_id)


def reset_trace_id(token: Token[str | None]) -> None:
    _TRACE_ID.reset(token)


def current_trace_id() -> str | None:
    return _TRACE_ID.get()


def trace_headers(trace_id: str | None = None) -> dict[str, str]:
    """Build outbound headers carrying the given id, or the currently bound one."""

    resolved = trace_id if trace_id is not None else current_trace_id()
    if not resolved:
        return {}
    return {TRACE_HEADER_NAME: resolved}


@contextmanager
def trace_scope(raw_value: str | None = None) -> Iterator[str]:
    """Bind a trace id for the duration of the block and always clear it afterwards."""

    token = bind_trace_id(resolve_trace_id(raw_value))
    try:
        yield _TRACE_ID.get() or ""
    finally:
        reset_trace_id(token)
