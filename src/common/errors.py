# This file defines the error kinds raised by both services' business logic.
# It exists so services signal "bad request", "not found", and "internal failure" without any HTTP concern.
# Only the HTTP boundary in error_handlers.py translates a kind into a status code.
# Messages on internal kinds stay generic; the underlying cause is logged, never returned.

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    INVALID_REQUEST = "INVALID_REQUEST"
    NOT_FOUND = "RESOURCE_NOT_FOUND"
    INTERNAL = "INTERNAL_SERVER_ERROR"
    DEPENDENT_SERVICE = "DEPENDENT_SERVICE_FAILURE"


class ServiceError(Exception):
    """Base error carrying a kind and a client-safe message."""

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(self, message: str, *, details: Any | None = None) -> None:
        self.message = message
        self.details = details
        super().__init__(message)


class InvalidRequestError(ServiceError):
    """Caller sent a null payload or a payload that disagrees with the path."""

    kind = ErrorKind.INVALID_REQUEST


class ResourceNotFoundError(ServiceError):
    """The requested id does not exist in storage."""

    kind = ErrorKind.NOT_FOUND


class InternalServerError(ServiceError):
    """Storage or another unexpected fault; never carries the raw cause."""

    kind = ErrorKind.INTERNAL


class DependentServiceError(InternalServerError):
    """The outbound department lookup failed at the transport level."""

    kind = ErrorKind.DEPENDENT_SERVICE
