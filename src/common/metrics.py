# This file declares the Prometheus collectors shared by both services.
# It exists so collectors are registered once per process even when both apps are loaded together.
# Every series carries a service label to keep the two services apart on one scrape target.

from __future__ import annotations

from fastapi import Response
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Gauge, Histogram, generate_latest

API_HTTP_REQUESTS_TOTAL = Counter(
    "api_http_requests_total",
    "Total number of HTTP requests processed by the service.",
    ["service", "method", "path", "status_code"],
)
API_HTTP_REQUEST_DURATION_SECONDS = Histogram(
    "api_http_request_duration_seconds",
    "Request duration in seconds.",
    ["service", "method", "path"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1, 2.5, 5, 10),
)
API_HTTP_INFLIGHT_REQUESTS = Gauge(
    "api_http_inflight_requests",
    "Number of requests currently being processed.",
    ["service", "method"],
)
DEPARTMENT_LOOKUPS_TOTAL = Counter(
    "department_lookups_total",
    "Outbound department lookups issued by the user service, by outcome.",
    ["outcome"],
)


def metrics_response() -> Response:
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
