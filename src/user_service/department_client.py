# This file implements the HTTP client the user service uses to look up departments.
# It exists so the outbound call, its timeout, and trace-id forwarding live in one place.
# A 404 carrying the RESOURCE_NOT_FOUND envelope returns None; every other failure raises one error type.
# Exactly one attempt is made per lookup so latency stays bounded by the configured timeouts.

from __future__ import annotations

import logging
from typing import Any

import requests
from pydantic import ValidationError

from src.common.errors import ErrorKind
from src.common.trace_context import trace_headers
from src.department_service.schemas import DepartmentDTO

LOGGER = logging.getLogger("department_client")


class DepartmentServiceUnavailableError(RuntimeError):
    """Raised when the department service cannot be reached or answers unexpectedly."""


class DepartmentClient:
    def __init__(
        self,
        *,
        base_url: str,
        api_version_path: str = "/api/v1",
        connect_timeout_seconds: float = 3.0,
        read_timeout_seconds: float = 5.0,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.api_version_path = api_version_path.rstrip("/")
        self.timeout = (connect_timeout_seconds, read_timeout_seconds)
        self.session = session or requests.Session()

    def department_url(self, department_id: int) -> str:
        return f"{self.base_url}{self.api_version_path}/department/{department_id}"

    def get_department(
        self, department_id: int, *, trace_id: str | None = None
    ) -> DepartmentDTO | None:
        """Fetch one department, forwarding the trace id; None when it does not exist."""

        url = self.department_url(department_id)
        headers = trace_headers(trace_id)
        LOGGER.info("Looking up department id=%s at %s", department_id, url)
        try:
            response = self.session.get(url, headers=headers, timeout=self.timeout)
        except requests.RequestException as exc:
            raise DepartmentServiceUnavailableError(
                f"Department lookup failed for {url}: {exc}"
            ) from exc

        if response.status_code == 404:
            if self._is_record_not_found(response):
                LOGGER.info("Department id=%s not found.", department_id)
                return None
            raise DepartmentServiceUnavailableError(
                f"Department lookup hit an unknown route (404) for {url}"
            )
        if not 200 <= response.status_code < 300:
            raise DepartmentServiceUnavailableError(
                f"Department lookup failed with status {response.status_code} for {url}"
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise DepartmentServiceUnavailableError(
                f"Department service did not return valid JSON for {url}"
            ) from exc

        return self._parse_department(payload, url)

    def close(self) -> None:
        self.session.close()

    @staticmethod
    def _is_record_not_found(response: Any) -> bool:
        """Tell a missing department apart from a 404 for a route that does not exist."""

        try:
            payload = response.json()
        except ValueError:
            return False
        return isinstance(payload, dict) and payload.get("error_code") == ErrorKind.NOT_FOUND.value

    @staticmethod
    def _parse_department(payload: Any, url: str) -> DepartmentDTO | None:
        if not isinstance(payload, dict):
            raise DepartmentServiceUnavailableError(f"Unexpected payload shape from {url}")
        data = payload.get("data")
        if data is None:
            return None
        try:
            return DepartmentDTO.model_validate(data)
        except ValidationError as exc:
            raise DepartmentServiceUnavailableError(
                f"Department payload from {url} did not match the expected shape"
            ) from exc
