# This file builds success envelopes for both services in a consistent format.
# It exists so every response carries a status indicator, version metadata, and the trace id.
# The helpers return plain dictionaries that Pydantic response models validate at runtime.
# This keeps endpoint functions focused on calling services instead of repetitive envelope assembly.

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel


def utc_now() -> datetime:
    """Return timezone-aware UTC timestamp for response generation."""

    return datetime.now(tz=UTC)


def api_version_label(api_version_path: str) -> str:
    """Convert `/api/v1` style paths into `v1` labels."""

    cleaned = api_version_path.rstrip("/")
    parts = [part for part in cleaned.split("/") if part]
    if not parts:
        raise ValueError(f"Invalid api_version_path: {api_version_path!r}")
    return parts[-1]


def build_version_fields(*, api_version_path: str, schema_version: str) -> dict[str, str]:
    return {
        "api_version": api_version_label(api_version_path),
        "schema_version": schema_version,
    }


def _serialize(data: Any) -> Any:
    if isinstance(data, BaseModel):
        return data.model_dump(by_alias=True)
    if isinstance(data, list):
        return [_serialize(item) for item in data]
    return data


def build_object_envelope(
    *,
    api_version_path: str,
    schema_version: str,
    trace_id: str,
    data: Any,
) -> dict[str, Any]:
    """Build the standard success envelope around a record, a list of records, or a literal."""

    return {
        "status": "success",
        **build_version_fields(api_version_path=api_version_path, schema_version=schema_version),
        "trace_id": trace_id,
        "generated_at": utc_now(),
        "data": _serialize(data),
    }
