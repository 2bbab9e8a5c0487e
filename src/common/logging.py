"""
Logging configuration helpers.
Every record is stamped with the current request's correlation id so the two services' logs
can be joined after the fact.
"""

from __future__ import annotations

import logging

from src.common.trace_context import TRACE_HEADER_NAME, current_trace_id

LOG_FORMAT = f"%(asctime)s | %(levelname)s | %(name)s | trace=%({TRACE_HEADER_NAME})s | %(message)s"

_LOGGING_CONFIGURED = False


class TraceIdFilter(logging.Filter):
    """Attach the bound correlation id (or `-`) to each log record."""

    def filter(self, record: logging.LogRecord) -> bool:
        setattr(record, TRACE_HEADER_NAME, current_trace_id() or "-")
        return True


def configure_logging(level_name: str = "INFO") -> None:
    """Configure process-wide logging once."""

    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    level = getattr(logging, level_name.upper(), logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    for handler in logging.getLogger().handlers:
        if not any(isinstance(existing, TraceIdFilter) for existing in handler.filters):
            handler.addFilter(TraceIdFilter())
    _LOGGING_CONFIGURED = True
