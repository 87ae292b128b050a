"""Presentation layer interfaces for HTTP payload shaping."""

# ==============================================================================
# IMPORTS
# ==============================================================================

from __future__ import annotations

from typing import Any, Protocol

from fastapi import Response

# ==============================================================================
# PRESENTATION PROTOCOLS
# ==============================================================================


class ResponsePresenter(Protocol):
    """Protocol describing presentation responsibilities for route handlers."""

    def ok(self, payload: Any, *, status_code: int = 200) -> Response:
        """Render a successful response with the given payload."""

    def error(self, detail: Any, *, status_code: int = 400) -> Response:
        """Render an error payload in the transport format."""


# ==============================================================================
# EXPORTS
# ==============================================================================

__all__ = ["ResponsePresenter"]
