"""
Unit tests for logging helpers.
It asserts every record carries the bound trace id so the two services' logs can be joined.
"""

from __future__ import annotations

import logging

from src.common.logging import LOG_FORMAT, TraceIdFilter
from src.common.trace_context import TRACE_HEADER_NAME, trace_scope


def _record() -> logging.LogRecord:
    return logging.LogRecord("test", logging.INFO, __file__, 1, "hello", None, None)


def test_filter_stamps_bound_trace_id() -> None:
    record = _record()
    with trace_scope("log-trace-id"):
        TraceIdFilter().filter(record)
    assert getattr(record, TRACE_HEADER_NAME) == "log-trace-id"
    assert "trace=log-trace-id" in logging.Formatter(LOG_FORMAT).format(record)


def test_filter_uses_placeholder_outside_requests() -> None:
    record = _record()
    TraceIdFilter().filter(record)
    assert getattr(record, TRACE_HEADER_NAME) == "-"
