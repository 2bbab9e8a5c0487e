"""
Unit tests for the outbound department client.
It asserts URL construction, trace-id forwarding, timeouts, and how each response class is classified.
"""

from __future__ import annotations

import pytest
import requests

from src.common.trace_context import trace_scope
from src.department_service.schemas import DepartmentDTO
from src.user_service.department_client import DepartmentServiceUnavailableError
from tests.support import (
    FakeResponse,
    FakeSession,
    department_not_found_payload,
    department_payload,
    fake_department_client,
)


def test_get_department_parses_envelope() -> None:
    session = FakeSession(responses=[FakeResponse(status_code=200, payload=department_payload(3, "Ops"))])
    client = fake_department_client(session)

    department = client.get_department(3, trace_id="trace-1")

    assert department == DepartmentDTO(id=3, department_name="Ops")
    call = session.calls[0]
    assert call["url"] == "http://department.test:8081/api/v1/department/3"
    assert call["headers"] == {"eventTraceId": "trace-1"}
    assert call["timeout"] == (1.0, 2.0)


def test_bound_trace_id_is_forwarded_when_not_passed() -> None:
    session = FakeSession(responses=[FakeResponse(status_code=200, payload=department_payload(3, "Ops"))])
    client = fake_department_client(session)

    with trace_scope("ambient-trace"):
        client.get_department(3)

    assert session.calls[0]["headers"] == {"eventTraceId": "ambient-trace"}


def test_not_found_returns_none() -> None:
    session = FakeSession(responses=[FakeResponse(status_code=404, payload=department_not_found_payload(8))])
    client = fake_department_client(session)

    assert client.get_department(8) is None


def test_null_data_returns_none() -> None:
    payload = department_payload(3, "Ops")
    payload["data"] = None
    session = FakeSession(responses=[FakeResponse(status_code=200, payload=payload)])

    assert fake_department_client(session).get_department(3) is None


@pytest.mark.parametrize(
    "response",
    [
        FakeResponse(status_code=500, payload={"status": "error"}),
        FakeResponse(status_code=400, payload={"status": "error"}),
        FakeResponse(status_code=200, invalid_json=True),
        FakeResponse(status_code=200, payload=["not", "an", "envelope"]),
        FakeResponse(status_code=200, payload={"data": {"id": "not-a-number"}}),
    ],
)
def test_unexpected_responses_raise_unavailable(response: FakeResponse) -> None:
    client = fake_department_client(FakeSession(responses=[response]))

    with pytest.raises(DepartmentServiceUnavailableError):
        client.get_department(3)


@pytest.mark.parametrize(
    "error",
    [requests.ConnectionError("connection refused"), requests.Timeout("read timed out")],
)
def test_transport_errors_raise_unavailable_without_retry(error: Exception) -> None:
    session = FakeSession(raise_error=error)
    client = fake_department_client(session)

    with pytest.raises(DepartmentServiceUnavailableError):
        client.get_department(3)

    assert len(session.calls) == 1


@pytest.mark.parametrize(
    "response",
    [
        FakeResponse(status_code=404, payload={"detail": "Not Found"}),
        FakeResponse(status_code=404, payload={"status": "error", "error_code": "HTTP_ERROR"}),
        FakeResponse(status_code=404, invalid_json=True),
    ],
)
def test_route_level_404_raises_unavailable(response: FakeResponse) -> None:
    client = fake_department_client(FakeSession(responses=[response]))

    with pytest.raises(DepartmentServiceUnavailableError, match="unknown route"):
        client.get_department(1)
