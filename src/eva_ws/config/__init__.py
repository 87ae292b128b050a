"""Lightweight configuration package exports."""

from __future__ import annotations

from .settings import (
    SUPPORTED_API_VERSION,
    AppSettings,
    Environment,
    GA4GHSettings,
    LoggingSettings,
    TranslationSettings,
    get_settings,
    load_settings,
)

__all__ = [
    "SUPPORTED_API_VERSION",
    "AppSettings",
    "Environment",
    "GA4GHSettings",
    "LoggingSettings",
    "TranslationSettings",
    "get_settings",
    "load_settings",
]
