"""
Shared test configuration.
It seeds the environment both services read at startup and provides in-memory record stores.
These tests are executed by `pytest` locally and in CI and should remain deterministic.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from src.common.db import RecordStore  # noqa: E402
from src.department_service.models import Department  # noqa: E402
from src.user_service.models import User  # noqa: E402
from tests.support import memory_department_store, memory_user_store  # noqa: E402


@pytest.fixture(autouse=True)
def base_test_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure required environment variables are present during tests."""

    defaults = {
        "ENV": "test",
        "LOG_LEVEL": "INFO",
        "DEPARTMENT_API_DATABASE_URL": "sqlite://",
        "USER_API_DATABASE_URL": "sqlite://",
        "USER_API_DEPARTMENT_SERVICE_URL": "http://department.test:8081",
    }

    for key, value in defaults.items():
        if os.getenv(key) is None:
            monkeypatch.setenv(key, value)


@pytest.fixture
def department_store() -> RecordStore[Department]:
    return memory_department_store()


@pytest.fixture
def user_store() -> RecordStore[User]:
    return memory_user_store()
