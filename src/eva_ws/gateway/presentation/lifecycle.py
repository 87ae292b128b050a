"""Request lifecycle tracking helpers and middleware.

Each request gets its own :class:`RequestLifecycle`, created when the request
enters the application. Its ``started_at`` instant is the reference point for
the ``time`` field of the response envelope, so concurrent requests never
share a clock.

Key Responsibilities:
    - Request timing and correlation ID management
    - Binding the lifecycle to the current context for presenters
    - Emitting request metrics and access log events

Collaborators:
    - Upstream: FastAPI middleware stack
    - Downstream: Envelope presenters, Prometheus metrics

Thread Safety:
    - Thread-safe: context variables isolate lifecycles per request
"""

# ==============================================================================
# IMPORTS
# ==============================================================================

from __future__ import annotations

from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from uuid import uuid4

from fastapi import Request
from fastapi.responses import Response
from starlette.middleware.base import BaseHTTPMiddleware

from eva_ws.observability.metrics import REQUEST_COUNTER, REQUEST_LATENCY
from eva_ws.utils.logging import (
    bind_correlation_id,
    get_correlation_id,
    get_logger,
    reset_correlation_id,
)

# ==============================================================================
# GLOBAL STATE
# ==============================================================================

logger = get_logger(__name__)

_CURRENT_LIFECYCLE: ContextVar[RequestLifecycle | None] = ContextVar(
    "gateway_request_lifecycle",
    default=None,
)


# ==============================================================================
# LIFECYCLE MODELS
# ==============================================================================


@dataclass(slots=True)
class RequestLifecycle:
    """Tracks request timing, correlation identifiers and the final status."""

    method: str
    path: str
    correlation_id: str = field(default_factory=lambda: str(uuid4()))
    started_at: float = field(default_factory=perf_counter)
    finished_at: float | None = None
    status_code: int | None = None
    error: str | None = None

    def complete(self, status_code: int) -> None:
        """Record the response status if not already completed."""
        if self.status_code is not None:
            return
        self.status_code = status_code
        self.finished_at = perf_counter()
        REQUEST_COUNTER.labels(self.method, self.path, str(status_code)).inc()
        REQUEST_LATENCY.labels(self.method, self.path).observe(self.duration_seconds)

    def fail(self, exc: BaseException, *, status_code: int = 500) -> None:
        self.error = str(exc)
        self.complete(status_code)

    @property
    def duration_seconds(self) -> float:
        end = self.finished_at or perf_counter()
        return max(end - self.started_at, 0.0)

    @property
    def duration_ms(self) -> float:
        return self.duration_seconds * 1000

    def apply(self, response: Response, *, correlation_header: str | None) -> None:
        if correlation_header:
            response.headers.setdefault(correlation_header, self.correlation_id)
        response.headers.setdefault("X-Response-Time-Ms", f"{self.duration_ms:.2f}")


# ==============================================================================
# LIFECYCLE MANAGEMENT FUNCTIONS
# ==============================================================================


def current_lifecycle() -> RequestLifecycle | None:
    """Return the lifecycle bound to the current context, if any."""
    return _CURRENT_LIFECYCLE.get()


def push_lifecycle(lifecycle: RequestLifecycle) -> Token:
    return _CURRENT_LIFECYCLE.set(lifecycle)


def pop_lifecycle(token: Token) -> None:
    _CURRENT_LIFECYCLE.reset(token)


def lifecycle_for(request: Request) -> RequestLifecycle:
    """Return the lifecycle bound to ``request``, creating one when missing."""
    lifecycle = getattr(request.state, "lifecycle", None) or current_lifecycle()
    if lifecycle is None:
        correlation_id = getattr(request.state, "correlation_id", None)
        correlation_id = correlation_id or get_correlation_id() or str(uuid4())
        lifecycle = RequestLifecycle(
            method=request.method,
            path=request.url.path,
            correlation_id=correlation_id,
        )
        request.state.lifecycle = lifecycle
        request.state.correlation_id = correlation_id
    return lifecycle


# ==============================================================================
# MIDDLEWARE IMPLEMENTATION
# ==============================================================================


class RequestLifecycleMiddleware(BaseHTTPMiddleware):
    """FastAPI middleware that binds lifecycle information to each request."""

    def __init__(self, app, *, correlation_header: str | None = None):  # type: ignore[override]
        super().__init__(app)
        self._correlation_header = correlation_header or "X-Correlation-ID"

    async def dispatch(self, request: Request, call_next):  # type: ignore[override]
        provided = request.headers.get(self._correlation_header)
        correlation_id = provided or str(uuid4())

        lifecycle = RequestLifecycle(
            method=request.method,
            path=request.url.path,
            correlation_id=correlation_id,
        )
        request.state.lifecycle = lifecycle
        request.state.correlation_id = correlation_id

        token = bind_correlation_id(correlation_id)
        ctx_token = push_lifecycle(lifecycle)

        logger.info(
            "gateway.request",
            extra={"method": request.method, "path": request.url.path},
        )

        try:
            response = await call_next(request)
        except Exception as exc:
            lifecycle.fail(exc)
            logger.exception(
                "gateway.request.error",
                extra={
                    "method": request.method,
                    "path": request.url.path,
                    "duration_ms": round(lifecycle.duration_ms, 2),
                },
            )
            pop_lifecycle(ctx_token)
            reset_correlation_id(token)
            raise

        lifecycle.complete(response.status_code)
        lifecycle.apply(response, correlation_header=self._correlation_header)

        logger.info(
            "gateway.response",
            extra={
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "duration_ms": round(lifecycle.duration_ms, 2),
            },
        )

        pop_lifecycle(ctx_token)
        reset_correlation_id(token)
        return response


# ==============================================================================
# EXPORTS
# ==============================================================================

__all__ = [
    "RequestLifecycle",
    "RequestLifecycleMiddleware",
    "current_lifecycle",
    "lifecycle_for",
    "pop_lifecycle",
    "push_lifecycle",
]
