"""Prometheus metrics for the gateway.

Key Responsibilities:
    - Define request level counters and latency histograms
    - Count storage adaptor calls and failures per operation
    - Expose the default registry on the configured metrics path

Collaborators:
    - Upstream: Request lifecycle tracking and the service layer
    - Downstream: Prometheus scrapers

Thread Safety:
    - Thread-safe: Prometheus client operations are atomic
"""

from __future__ import annotations

from typing import Any

from fastapi import FastAPI
from fastapi.responses import Response
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest

REQUEST_COUNTER = Counter(
    "eva_http_requests_total",
    "Total number of HTTP requests",
    ["method", "endpoint", "status"],
)

REQUEST_LATENCY = Histogram(
    "eva_http_request_duration_seconds",
    "Duration of HTTP requests",
    ["method", "endpoint"],
    buckets=[0.005, 0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0],
)

ADAPTOR_CALLS = Counter(
    "eva_adaptor_calls_total",
    "Storage adaptor calls by operation and outcome",
    ["operation", "status"],
)


def record_adaptor_call(operation: str, *, success: bool) -> None:
    ADAPTOR_CALLS.labels(operation, "ok" if success else "error").inc()


def register_metrics(app: FastAPI, settings: Any) -> None:
    """Expose the default Prometheus registry when metrics are enabled."""
    metrics_settings = settings.observability.metrics
    if not metrics_settings.enabled:
        return

    @app.get(metrics_settings.path, include_in_schema=False)
    async def metrics_endpoint() -> Response:
        return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)


__all__ = [
    "ADAPTOR_CALLS",
    "REQUEST_COUNTER",
    "REQUEST_LATENCY",
    "record_adaptor_call",
    "register_metrics",
]
