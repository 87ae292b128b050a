"""Versioned response envelope for the ``/v1`` endpoints.

Every study endpoint answers with the same JSON object::

    {"apiVersion": "v1", "time": 12, "queryOptions": {...},
     "response": [...], "error": "..."}

``response`` is always an array, even when a single logical item is
returned, and ``error`` is only serialised on failure paths. ``time`` is the
number of milliseconds between the start of this request and the moment its
envelope is serialised.

Key Responsibilities:
    - Normalise payloads into the ``response`` sequence
    - Serialise envelopes, downgrading encoding failures to server errors
    - Render user (400) and server (500) error envelopes

Collaborators:
    - Upstream: REST routes and the application exception handlers
    - Downstream: FastAPI ``Response`` objects

Thread Safety:
    - Thread-safe: builders are created per request and hold no shared state
"""

# ==============================================================================
# IMPORTS
# ==============================================================================

from __future__ import annotations

import dataclasses
import json
from collections.abc import Callable, Iterable, Mapping
from time import perf_counter
from typing import Any

from fastapi.responses import Response
from pydantic import BaseModel, ConfigDict, Field

from eva_ws.config.settings import SUPPORTED_API_VERSION
from eva_ws.utils.errors import SerializationError
from eva_ws.utils.logging import get_logger

from .interface import ResponsePresenter

logger = get_logger(__name__)

ENVELOPE_CONTENT_TYPE = "application/json"


# ==============================================================================
# MODELS
# ==============================================================================


class ResponseEnvelope(BaseModel):
    """Wire representation of a ``/v1`` response."""

    model_config = ConfigDict(populate_by_name=True, arbitrary_types_allowed=True)

    api_version: str = Field(alias="apiVersion")
    time: int = Field(ge=0)
    query_options: dict[str, Any] = Field(default_factory=dict, alias="queryOptions")
    response: list[Any] = Field(default_factory=list)
    error: str | None = None

    def to_wire(self) -> dict[str, Any]:
        """Return the JSON object sent to clients; rows are not re-encoded."""
        payload: dict[str, Any] = {
            "apiVersion": self.api_version,
            "time": self.time,
            "queryOptions": dict(self.query_options),
            "response": list(self.response),
        }
        if self.error is not None:
            payload["error"] = self.error
        return payload


# ==============================================================================
# HELPER FUNCTIONS
# ==============================================================================


def _normalise_item(item: Any) -> Any:
    if isinstance(item, BaseModel):
        return item.model_dump(mode="json", by_alias=True)
    if dataclasses.is_dataclass(item) and not isinstance(item, type):
        return dataclasses.asdict(item)
    return item


def as_result_sequence(payload: Any) -> list[Any]:
    """Return ``payload`` as the ``response`` list of an envelope.

    Sequences keep their order and length; any other value (including a
    mapping or a string) becomes a single-element list.
    """
    if isinstance(payload, Iterable) and not isinstance(payload, (str, bytes, Mapping, BaseModel)):
        return [_normalise_item(item) for item in payload]
    return [_normalise_item(payload)]


# ==============================================================================
# PRESENTER IMPLEMENTATION
# ==============================================================================


class ResponseEnvelopeBuilder(ResponsePresenter):
    """Builds and serialises envelopes for one request."""

    media_type = ENVELOPE_CONTENT_TYPE

    def __init__(
        self,
        *,
        query_options: Mapping[str, Any] | None = None,
        started_at: float | None = None,
        api_version: str = SUPPORTED_API_VERSION,
        clock: Callable[[], float] = perf_counter,
    ) -> None:
        self._clock = clock
        self.started_at = started_at if started_at is not None else clock()
        self.api_version = api_version
        self.query_options: dict[str, Any] = dict(query_options or {})

    def elapsed_ms(self) -> int:
        return max(int((self._clock() - self.started_at) * 1000), 0)

    def envelope(self, payload: Any = None, *, error: str | None = None) -> ResponseEnvelope:
        return ResponseEnvelope(
            api_version=self.api_version,
            time=self.elapsed_ms(),
            query_options=self.query_options,
            response=[] if error is not None else as_result_sequence(payload),
            error=error,
        )

    def _render(self, envelope: ResponseEnvelope, status_code: int) -> Response:
        body = json.dumps(envelope.to_wire(), allow_nan=False)
        return Response(content=body, status_code=status_code, media_type=self.media_type)

    def ok(self, payload: Any, *, status_code: int = 200) -> Response:
        try:
            return self._render(self.envelope(payload), status_code)
        except (TypeError, ValueError) as exc:
            failure = SerializationError(str(exc))
            logger.error("gateway.serialization_error", extra={"error": failure.message})
            return self.server_error(failure.message)

    def user_error(self, message: Any, *, status_code: int = 400) -> Response:
        return self._render(self.envelope(error=str(message)), status_code)

    def server_error(self, message: Any, *, status_code: int = 500) -> Response:
        return self._render(self.envelope(error=str(message)), status_code)

    def error(self, detail: Any, *, status_code: int = 400) -> Response:
        if status_code >= 500:
            return self.server_error(detail, status_code=status_code)
        return self.user_error(detail, status_code=status_code)


# ==============================================================================
# EXPORTS
# ==============================================================================

__all__ = [
    "ENVELOPE_CONTENT_TYPE",
    "ResponseEnvelope",
    "ResponseEnvelopeBuilder",
    "as_result_sequence",
]
