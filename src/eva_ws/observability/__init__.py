"""Observability helpers: structured logging and Prometheus metrics."""

from __future__ import annotations

from fastapi import FastAPI

from eva_ws.config.settings import AppSettings
from eva_ws.utils.logging import configure_logging

from .metrics import register_metrics


def setup_observability(app: FastAPI, settings: AppSettings) -> None:
    """Configure logging and metrics for the app."""
    configure_logging(settings=settings.observability.logging)
    register_metrics(app, settings)


__all__ = ["setup_observability"]
