"""
Service settings loaded from environment variables.
Both services share one typed config model; each reads its own variable prefix so they can
run side by side from the same `.env` file.
"""

from __future__ import annotations

import os
from typing import Final

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

DEPARTMENT_ENV_PREFIX: Final[str] = "DEPARTMENT_API"
USER_ENV_PREFIX: Final[str] = "USER_API"


class ServiceConfig(BaseModel):
    """Typed runtime configuration for one service process."""

    model_config = ConfigDict(extra="ignore")

    service_name: str
    api_version_path: str = "/api/v1"
    schema_version: str = "1.0.0"
    host: str = "0.0.0.0"
    port: int = 8080
    environment: str = "local"
    log_level: str = "INFO"
    database_url: str
    allowed_origins: list[str] = Field(default_factory=list)
    app_version: str = "0.1.0"
    department_service_url: str = "http://localhost:8081"
    department_connect_timeout_seconds: float = 3.0
    department_read_timeout_seconds: float = 5.0

    @field_validator("api_version_path")
    @classmethod
    def validate_api_version_path(cls, value: str) -> str:
        if not value.startswith("/"):
            raise ValueError("api_version_path must start with '/'.")
        parts = [part for part in value.split("/") if part]
        if len(parts) < 2 or parts[-1].startswith("v") is False:
            raise ValueError("api_version_path must look like '/api/v1'.")
        return value.rstrip("/")

    @field_validator("department_service_url")
    @classmethod
    def validate_department_service_url(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError("department_service_url must be an http(s) URL.")
        return value.rstrip("/")

    @field_validator(
        "port",
        "department_connect_timeout_seconds",
        "department_read_timeout_seconds",
    )
    @classmethod
    def validate_positive(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("Value must be greater than 0.")
        return value

    def department_timeout(self) -> tuple[float, float]:
        """Return the `(connect, read)` timeout pair for outbound department lookups."""

        return (self.department_connect_timeout_seconds, self.department_read_timeout_seconds)


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return int(raw)


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return float(raw)


def _env_list(name: str, default: list[str] | None = None) -> list[str]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return list(default or [])
    return [item.strip() for item in raw.split(",") if item.strip()]


def load_service_config(
    *,
    env_prefix: str,
    service_name: str,
    default_port: int,
    load_env: bool = True,
) -> ServiceConfig:
    """Load one service's configuration from `.env` and the process environment."""

    if load_env:
        load_dotenv()

    def key(name: str) -> str:
        return f"{env_prefix}_{name}"

    config_values: dict[str, object] = {
        "service_name": os.getenv(key("SERVICE_NAME"), service_name),
        "api_version_path": os.getenv(key("API_VERSION_PATH"), "/api/v1"),
        "schema_version": os.getenv(key("SCHEMA_VERSION"), "1.0.0"),
        "host": os.getenv(key("HOST"), "0.0.0.0"),
        "port": _env_int(key("PORT"), default_port),
        "environment": os.getenv("ENV", "local"),
        "log_level": os.getenv(key("LOG_LEVEL"), os.getenv("LOG_LEVEL", "INFO")),
        "database_url": os.getenv(key("DATABASE_URL"), ""),
        "allowed_origins": _env_list(key("ALLOWED_ORIGINS"), []),
        "app_version": os.getenv("APP_VERSION", "0.1.0"),
        "department_service_url": os.getenv(
            key("DEPARTMENT_SERVICE_URL"), "http://localhost:8081"
        ),
        "department_connect_timeout_seconds": _env_float(
            key("DEPARTMENT_CONNECT_TIMEOUT_SECONDS"), 3.0
        ),
        "department_read_timeout_seconds": _env_float(
            key("DEPARTMENT_READ_TIMEOUT_SECONDS"), 5.0
        ),
    }
    if not config_values["database_url"]:
        raise RuntimeError(f"{key('DATABASE_URL')} is required for {service_name} startup.")

    return ServiceConfig.model_validate(config_values)
