"""REST routes of the gateway."""

from .router import health_router, router

__all__ = ["health_router", "router"]
