# This file defines response schemas shared by both services.
# It exists so success envelopes, error payloads, and health responses have one explicit contract.
# Generic clients can parse either service's responses with the same models.
# Record payload models live with each service and plug into the generic envelope.

from __future__ import annotations

from datetime import datetime
from typing import Any, Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

DataT = TypeVar("DataT")


class RecordModel(BaseModel):
    """Base for record payloads: snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class EnvelopeFields(BaseModel):
    status: Literal["success"] = "success"
    api_version: str
    schema_version: str
    trace_id: str
    generated_at: datetime


class ObjectEnvelope(EnvelopeFields, Generic[DataT]):
    data: DataT


class ErrorResponse(BaseModel):
    status: Literal["error"] = "error"
    error_code: str
    message: str
    details: Any | None = None
    trace_id: str
    timestamp: datetime


class HealthResponse(BaseModel):
    api_version: str
    schema_version: str
    trace_id: str
    status: str
    environment: str
    service_name: str
    timestamp: datetime


class ReadinessResponse(BaseModel):
    api_version: str
    schema_version: str
    trace_id: str
    db_connected: bool
    ready: bool
    database: str
    timestamp: datetime
