# This file builds the user service FastAPI application.
# It exists so startup behavior, middleware, and error handling are configured in one place.
# The app binds a trace id per request before any route logic runs; the department client forwards it.
# Collaborators can be injected, which lets tests swap the store and the outbound HTTP session.

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
from src.user_service.department_client import DepartmentClient
from src.user_service.dependencies import (
    build_department_client,
    build_user_store,
    get_config,
    get_user_store,
    load_user_config,
)
from src.user_service.models import User
from src.user_service.router import router as user_router
from src.user_service.service import UserService

LOGGER = logging.getLogger("user_service")


def create_app(
    *,
    config: ServiceConfig | None = None,
    store: RecordStore[User] | None = None,
    department_client: DepartmentClient | None = None,
) -> FastAPI:
    """Create configured user service application."""

    resolved_config = config or load_user_config()
    configure_logging(resolved_config.log_level)
    resolved_store = store or build_user_store(resolved_config)
    resolved_client = department_client or build_department_client(resolved_config)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        resolved_store.create_schema()
        LOGGER.info(
            "%s started on port %s; department service at %s.",
            resolved_config.service_name,
            resolved_config.port,
            resolved_config.department_service_url,
        )
        try:
            yield
        finally:
            resolved_client.close()
            LOGGER.info("%s stopped.", resolved_config.service_name)

    app = FastAPI(
        title=resolved_config.service_name,
        description=(
            "Owns user records. Single-user reads are enriched with the referenced department "
            "from the department service."
        ),
        version=resolved_config.app_version,
        lifespan=lifespan,
        openapi_tags=[
            {"name": "health", "description": "Service liveness, readiness, and metrics."},
            {"name": "user", "description": "User records with department enrichment."},
        ],
    )
    app.state.config = resolved_config
    app.state.store = resolved_store
    app.state.department_client = resolved_client
    app.state.user_service = UserService(store=resolved_store, department_client=resolved_client)

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

    app.include_router(build_health_router(get_config=get_config, get_store=get_user_store))
    app.include_router(user_router, prefix=resolved_config.api_version_path)

    return app
