# This file builds the department service FastAPI application.
# It exists so startup behavior, middleware, and error handling are configured in one place.
# The app binds a trace id per request, creates its table on startup, and exposes health endpoints.
# Collaborators can be injected, which lets tests run the app against an in-memory store.

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.common.db import RecordStore
from src.common.error_handlers import register_error_handlers
from src.common.health import build_health_router
from src.common.logging import configure_logging
from src.common.middleware import install_request_context
from src.common.settings import ServiceConfig
from src.department_service.dependencies import (
    build_department_store,
    get_config,
    get_department_store,
    load_department_config,
)
from src.department_service.models import Department
from src.department_service.router import router as department_router
from src.department_service.service import DepartmentService

LOGGER = logging.getLogger("department_service")


def create_app(
    *,
    config: ServiceConfig | None = None,
    store: RecordStore[Department] | None = None,
) -> FastAPI:
    """Create configured department service application."""

    resolved_config = config or load_department_config()
    configure_logging(resolved_config.log_level)
    resolved_store = store or build_department_store(resolved_config)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        resolved_store.create_schema()
        LOGGER.info("%s started on port %s.", resolved_config.service_name, resolved_config.port)
        yield
        LOGGER.info("%s stopped.", resolved_config.service_name)

    app = FastAPI(
        title=resolved_config.service_name,
        description="Owns department records: create, full-replace update, list, and fetch by id.",
        version=resolved_config.app_version,
        lifespan=lifespan,
        openapi_tags=[
            {"name": "health", "description": "Service liveness, readiness, and metrics."},
            {"name": "department", "description": "Department records."},
        ],
    )
    app.state.config = resolved_config
    app.state.store = resolved_store
    app.state.department_service = DepartmentService(store=resolved_store)

    if resolved_config.allowed_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=resolved_config.allowed_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    install_request_context(app, service_name=resolved_config.service_name)
    register_error_handlers(app)

    app.include_router(build_health_router(get_config=get_config, get_store=get_department_store))
    app.include_router(department_router, prefix=resolved_config.api_version_path)

    return app
