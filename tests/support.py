# This file provides shared helpers for service and endpoint tests.
# It exists so tests can build apps against in-memory stores without touching real databases.
# The fake sessions stand in for `requests.Session` on the user service's outbound department call.
# The bridge session forwards that call to a real in-process department app for end-to-end checks.

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import requests
from fastapi.testclient import TestClient

from src.common.db import RecordStore, create_db_engine
from src.common.settings import ServiceConfig
from src.department_service.app import create_app as create_department_app
from src.department_service.models import Department
from src.user_service.app import create_app as create_user_app
from src.user_service.department_client import DepartmentClient
from src.user_service.models import User

DEPARTMENT_BASE_URL = "http://department.test:8081"


def build_test_config(*, service_name: str = "test-service", port: int = 8081) -> ServiceConfig:
    """Create deterministic service config for tests."""

    return ServiceConfig(
        service_name=service_name,
        api_version_path="/api/v1",
        schema_version="1.0.0",
        host="0.0.0.0",
        port=port,
        environment="test",
        log_level="INFO",
        database_url="sqlite://",
        allowed_origins=[],
        app_version="0.1.0",
        department_service_url=DEPARTMENT_BASE_URL,
        department_connect_timeout_seconds=1.0,
        department_read_timeout_seconds=2.0,
    )


def memory_department_store() -> RecordStore[Department]:
    store = RecordStore(model=Department, engine=create_db_engine("sqlite://"))
    store.create_schema()
    return store


def memory_user_store() -> RecordStore[User]:
    store = RecordStore(model=User, engine=create_db_engine("sqlite://"))
    store.create_schema()
    return store


class FakeResponse:
    def __init__(
        self, *, status_code: int, payload: Any | None = None, invalid_json: bool = False
    ) -> None:
        self.status_code = status_code
        self._payload = payload
        self._invalid_json = invalid_json

    def json(self) -> Any:
        if self._invalid_json:
            raise ValueError("No JSON object could be decoded")
        return self._payload


class FakeSession:
    """Records outbound calls and replays canned responses or a transport error."""

    def __init__(
        self,
        responses: list[FakeResponse] | None = None,
        raise_error: Exception | None = None,
    ) -> None:
        self.responses = responses or []
        self.raise_error = raise_error
        self.calls: list[dict[str, Any]] = []
        self.closed = False

    def get(self, url: str, headers: dict[str, str] | None = None, timeout: Any = None) -> FakeResponse:
        self.calls.append({"url": url, "headers": dict(headers or {}), "timeout": timeout})
        if self.raise_error is not None:
            raise self.raise_error
        return self.responses.pop(0)

    def close(self) -> None:
        self.closed = True


class DepartmentBridgeSession:
    """Forwards outbound department lookups to an in-process department app."""

    def __init__(self, client: TestClient, *, base_url: str = DEPARTMENT_BASE_URL) -> None:
        self.client = client
        self.base_url = base_url
        self.calls: list[dict[str, Any]] = []

    def get(self, url: str, headers: dict[str, str] | None = None, timeout: Any = None) -> Any:
        self.calls.append({"url": url, "headers": dict(headers or {}), "timeout": timeout})
        if not url.startswith(self.base_url):
            raise requests.ConnectionError(f"No route to {url}")
        return self.client.get(url[len(self.base_url):], headers=headers)

    def close(self) -> None:
        return None


def department_payload(department_id: int, name: str) -> dict[str, Any]:
    return {
        "status": "success",
        "api_version": "v1",
        "schema_version": "1.0.0",
        "trace_id": "trace-from-department",
        "generated_at": "2026-10-18T10:00:00+00:00",
        "data": {"id": department_id, "departmentName": name},
    }


def fake_department_client(session: Any) -> DepartmentClient:
    return DepartmentClient(
        base_url=DEPARTMENT_BASE_URL,
        api_version_path="/api/v1",
        connect_timeout_seconds=1.0,
        read_timeout_seconds=2.0,
        session=session,
    )


@contextmanager
def department_test_client(
    *, store: RecordStore[Department] | None = None
) -> Iterator[TestClient]:
    """Yield a TestClient for the department service backed by an in-memory store."""

    app = create_department_app(
        config=build_test_config(service_name="department-service", port=8081),
        store=store or memory_department_store(),
    )
    with TestClient(app) as client:
        yield client


@contextmanager
def user_test_client(
    *, session: Any, store: RecordStore[User] | None = None
) -> Iterator[TestClient]:
    """Yield a TestClient for the user service whose outbound calls go to `session`."""

    app = create_user_app(
        config=build_test_config(service_name="user-service", port=8082),
        store=store or memory_user_store(),
        department_client=fake_department_client(session),
    )
    with TestClient(app) as client:
        yield client


def department_not_found_payload(department_id: int) -> dict[str, Any]:
    return {
        "status": "error",
        "error_code": "RESOURCE_NOT_FOUND",
        "message": f"Department not found by departmentId : {department_id}",
        "details": None,
        "trace_id": "trace-from-department",
        "timestamp": "2026-10-18T10:00:00+00:00",
    }
