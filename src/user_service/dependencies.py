# This file provides dependency factories for user routes.
# It exists so the config, record store, department client, and service are built once per app.
# Objects live on `app.state`, so an app built for tests carries its own store and client.

from __future__ import annotations

from functools import lru_cache

from fastapi import Request

from src.common.db import RecordStore, create_db_engine
from src.common.settings import USER_ENV_PREFIX, ServiceConfig, load_service_config
from src.user_service.department_client import DepartmentClient
from src.user_service.models import User
from src.user_service.service import UserService

SERVICE_NAME = "user-service"
DEFAULT_PORT = 8082


@lru_cache(maxsize=1)
def load_user_config() -> ServiceConfig:
    return load_service_config(
        env_prefix=USER_ENV_PREFIX,
        service_name=SERVICE_NAME,
        default_port=DEFAULT_PORT,
    )


def build_user_store(config: ServiceConfig) -> RecordStore[User]:
    return RecordStore(model=User, engine=create_db_engine(config.database_url))


def build_department_client(config: ServiceConfig) -> DepartmentClient:
    connect_timeout, read_timeout = config.department_timeout()
    return DepartmentClient(
        base_url=config.department_service_url,
        api_version_path=config.api_version_path,
        connect_timeout_seconds=connect_timeout,
        read_timeout_seconds=read_timeout,
    )


def get_config(request: Request) -> ServiceConfig:
    return request.app.state.config


def get_user_store(request: Request) -> RecordStore[User]:
    return request.app.state.store


def get_user_service(request: Request) -> UserService:
    return request.app.state.user_service
