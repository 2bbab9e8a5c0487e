# This file builds liveness, readiness, and metrics endpoints for either service.
# It exists so orchestration and monitoring can check both services the same way.
# The readiness check confirms the service's record store is reachable.
# Dependency providers are passed in so each service keeps its own overrides for tests.

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any

from fastapi import APIRouter, Depends, Request, Response

from src.common.db import RecordStore
from src.common.metrics import metrics_response
from src.common.response_envelope import build_version_fields
from src.common.schemas import HealthResponse, ReadinessResponse
from src.common.settings import ServiceConfig


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


def build_health_router(
    *,
    get_config: Callable[..., ServiceConfig],
    get_store: Callable[..., RecordStore[Any]],
) -> APIRouter:
    router = APIRouter(tags=["health"])

    @router.get("/health", response_model=HealthResponse)
    def health(
        request: Request,
        config: ServiceConfig = Depends(get_config),
    ) -> dict[str, object]:
        return {
            **build_version_fields(
                api_version_path=config.api_version_path,
                schema_version=config.schema_version,
            ),
            "trace_id": request.state.trace_id,
            "status": "ok",
            "environment": config.environment,
            "service_name": config.service_name,
            "timestamp": _utc_now(),
        }

    @router.get("/ready", response_model=ReadinessResponse)
    def ready(
        request: Request,
        config: ServiceConfig = Depends(get_config),
        store: RecordStore[Any] = Depends(get_store),
    ) -> dict[str, object]:
        db_connected = store.can_connect()
        return {
            **build_version_fields(
                api_version_path=config.api_version_path,
                schema_version=config.schema_version,
            ),
            "trace_id": request.state.trace_id,
            "db_connected": db_connected,
            "ready": db_connected,
            "database": "reachable" if db_connected else "unreachable",
            "timestamp": _utc_now(),
        }

    @router.get("/metrics", include_in_schema=False)
    def metrics() -> Response:
        return metrics_response()

    return router
