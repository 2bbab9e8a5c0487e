"""
Unit tests for service settings.
It asserts per-service environment prefixes, defaults, and startup validation.
These tests are executed by `pytest` locally and in CI and should remain deterministic.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from src.common.settings import (
    DEPARTMENT_ENV_PREFIX,
    USER_ENV_PREFIX,
    ServiceConfig,
    load_service_config,
)


def test_load_user_config_reads_prefixed_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("USER_API_PORT", "9100")
    monkeypatch.setenv("USER_API_DEPARTMENT_SERVICE_URL", "http://departments.internal:8081/")
    monkeypatch.setenv("USER_API_DEPARTMENT_READ_TIMEOUT_SECONDS", "1.5")

    config = load_service_config(
        env_prefix=USER_ENV_PREFIX, service_name="user-service", default_port=8082, load_env=False
    )

    assert config.service_name == "user-service"
    assert config.port == 9100
    assert config.department_service_url == "http://departments.internal:8081"
    assert config.department_timeout() == (3.0, 1.5)
    assert config.api_version_path == "/api/v1"


def test_load_department_config_uses_default_port() -> None:
    config = load_service_config(
        env_prefix=DEPARTMENT_ENV_PREFIX,
        service_name="department-service",
        default_port=8081,
        load_env=False,
    )
    assert config.port == 8081
    assert config.database_url == "sqlite://"


def test_missing_database_url_fails_startup(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("USER_API_DATABASE_URL", raising=False)
    with pytest.raises(RuntimeError, match="USER_API_DATABASE_URL is required"):
        load_service_config(
            env_prefix=USER_ENV_PREFIX, service_name="user-service", default_port=8082, load_env=False
        )


@pytest.mark.parametrize(
    "overrides",
    [
        {"api_version_path": "api/v1"},
        {"api_version_path": "/api"},
        {"department_read_timeout_seconds": 0},
        {"department_service_url": "department:8081"},
    ],
)
def test_invalid_values_are_rejected(overrides: dict[str, object]) -> None:
    values: dict[str, object] = {"service_name": "svc", "database_url": "sqlite://", **overrides}
    with pytest.raises(ValidationError):
        ServiceConfig.model_validate(values)
