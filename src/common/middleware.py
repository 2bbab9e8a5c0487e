# This file installs the per-request context middleware shared by both services.
# It exists so the trace id is bound before any route logic runs and cleared on every exit path.
# The middleware also records Prometheus request metrics and timing headers.
# Metric path labels use the matched route template so ids in the URL never create new series.

from __future__ import annotations

import logging
import time

from fastapi import FastAPI, Request, Response
from starlette.middleware.base import RequestResponseEndpoint

from src.common.metrics import (
    API_HTTP_INFLIGHT_REQUESTS,
    API_HTTP_REQUEST_DURATION_SECONDS,
    API_HTTP_REQUESTS_TOTAL,
)
from src.common.trace_context import TRACE_HEADER_NAME, trace_scope

LOGGER = logging.getLogger("request")

UNMATCHED_PATH_LABEL = "unmatched"


def route_path_label(request: Request) -> str:
    """Return the template of the route that served `request`, e.g. `/api/v1/user/{user_id}`."""

    route = request.scope.get("route")
    path = getattr(route, "path", None)
    return path if isinstance(path, str) else UNMATCHED_PATH_LABEL


def install_request_context(app: FastAPI, *, service_name: str) -> None:
    """Register the trace-id and metrics middleware on `app`."""

    @app.middleware("http")
    async def request_context_middleware(
        request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        with trace_scope(request.headers.get(TRACE_HEADER_NAME)) as trace_id:
            request.state.trace_id = trace_id

            method_label = request.method
            started = time.perf_counter()
            status_code = 500
            inflight = API_HTTP_INFLIGHT_REQUESTS.labels(service=service_name, method=method_label)
            inflight.inc()
            try:
                response: Response = await call_next(request)
                status_code = response.status_code
                duration_ms = (time.perf_counter() - started) * 1000.0

                response.headers[TRACE_HEADER_NAME] = trace_id
                response.headers["x-response-time-ms"] = f"{duration_ms:.2f}"
                LOGGER.info(
                    "%s %s -> %s in %.2fms", method_label, request.url.path, status_code, duration_ms
                )
                return response
            finally:
                # Routing has run by now, so the matched route is in scope when there is one.
                path_label = route_path_label(request)
                duration_s = time.perf_counter() - started
                API_HTTP_REQUESTS_TOTAL.labels(
                    service=service_name,
                    method=method_label,
                    path=path_label,
                    status_code=str(status_code),
                ).inc()
                API_HTTP_REQUEST_DURATION_SECONDS.labels(
                    service=service_name,
                    method=method_label,
                    path=path_label,
                ).observe(duration_s)
                inflight.dec()
