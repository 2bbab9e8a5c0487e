# This file provides dependency factories for department routes.
# It exists so the config, record store, and service are built once per app and shared per request.
# Objects live on `app.state`, so an app built for tests carries its own in-memory store.
# The cached loaders are used only when the app is started without explicit collaborators.

from __future__ import annotations

from functools import lru_cache

from fastapi import Request

from src.common.db import RecordStore, create_db_engine
from src.common.settings import DEPARTMENT_ENV_PREFIX, ServiceConfig, load_service_config
from src.department_service.models import Department
from src.department_service.service import DepartmentService

SERVICE_NAME = "department-service"
DEFAULT_PORT = 8081


@lru_cache(maxsize=1)
def load_department_config() -> ServiceConfig:
    return load_service_config(
        env_prefix=DEPARTMENT_ENV_PREFIX,
        service_name=SERVICE_NAME,
        default_port=DEFAULT_PORT,
    )


def build_department_store(config: ServiceConfig) -> RecordStore[Department]:
    return RecordStore(model=Department, engine=create_db_engine(config.database_url))


def get_config(request: Request) -> ServiceConfig:
    return request.app.state.config


def get_department_store(request: Request) -> RecordStore[Department]:
    return request.app.state.store


def get_department_service(request: Request) -> DepartmentService:
    return request.app.state.department_service
