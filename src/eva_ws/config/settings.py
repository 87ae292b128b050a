"""Configuration system for the web services gateway."""

from __future__ import annotations

import os
from collections.abc import Mapping, Sequence
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

SUPPORTED_API_VERSION = "v1"


class Environment(str, Enum):
    """Deployment environments supported by the platform."""

    DEV = "dev"
    STAGING = "staging"
    PROD = "prod"


class LoggingSettings(BaseModel):
    """Structured logging configuration."""

    level: str = Field(default="INFO", description="Log level for application output")
    correlation_id_header: str = Field(
        default="X-Correlation-ID", description="Header used for request correlation"
    )
    scrub_fields: Sequence[str] = Field(
        default_factory=lambda: ["password", "token", "secret", "authorization"],
        description="Fields that should be redacted in logs",
    )


class MetricsSettings(BaseModel):
    """Prometheus metrics configuration."""

    enabled: bool = True
    path: str = Field(default="/metrics", description="HTTP path for Prometheus metrics")


class ObservabilitySettings(BaseModel):
    """Aggregate observability configuration."""

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    metrics: MetricsSettings = Field(default_factory=MetricsSettings)


class ApiSettings(BaseModel):
    """Versioning and request defaults shared by every endpoint."""

    version: str = Field(default=SUPPORTED_API_VERSION, description="Served API version")
    default_species: str = Field(
        default="hsapiens",
        description="Species used by endpoints that do not require the parameter",
    )


class GA4GHSettings(BaseModel):
    """Defaults for the GA4GH compatible endpoints."""

    species: str = Field(
        default="hsapiens_grch37", description="Datastore context searched for call sets"
    )
    default_page_size: int = Field(default=10, gt=0)


class TranslationSettings(BaseModel):
    """Legacy identifier translation switches.

    The study and file identifier families are unrelated, so each one can be
    disabled on its own.
    """

    translate_study_ids: bool = True
    translate_file_ids: bool = True
    tables_path: Path | None = Field(
        default=None,
        description="Optional YAML file replacing the embedded translation tables",
    )


class StorageSettings(BaseModel):
    """Which adaptor serves which species or assembly context."""

    adaptors: dict[str, str] = Field(
        default_factory=lambda: {
            "hsapiens": "memory",
            "hsapiens_grch37": "memory",
        },
        description="Mapping of species/context key to a registered adaptor factory",
    )


class CORSSecuritySettings(BaseModel):
    allow_origins: Sequence[str] = Field(default_factory=lambda: ["*"])
    allow_methods: Sequence[str] = Field(default_factory=lambda: ["GET", "POST", "OPTIONS"])
    allow_headers: Sequence[str] = Field(
        default_factory=lambda: ["x-requested-with", "content-type", "accept"]
    )


class SecuritySettings(BaseModel):
    cors: CORSSecuritySettings = Field(default_factory=CORSSecuritySettings)


class AppSettings(BaseSettings):
    """Top-level application settings."""

    environment: Environment = Environment.DEV
    debug: bool = False
    service_name: str = "eva-ws"
    api: ApiSettings = Field(default_factory=ApiSettings)
    ga4gh: GA4GHSettings = Field(default_factory=GA4GHSettings)
    translation: TranslationSettings = Field(default_factory=TranslationSettings)
    storage: StorageSettings = Field(default_factory=StorageSettings)
    observability: ObservabilitySettings = Field(default_factory=ObservabilitySettings)
    security: SecuritySettings = Field(default_factory=SecuritySettings)

    model_config = SettingsConfigDict(env_prefix="EVA_", env_nested_delimiter="__")


ENVIRONMENT_DEFAULTS: Mapping[Environment, dict[str, Any]] = {
    Environment.DEV: {
        "debug": True,
        "observability": {"logging": {"level": "DEBUG"}},
    },
    Environment.STAGING: {
        "observability": {"logging": {"level": "INFO"}},
    },
    Environment.PROD: {
        "observability": {"logging": {"level": "WARNING"}},
    },
}


def _deep_update(target: dict[str, Any], updates: Mapping[str, Any]) -> dict[str, Any]:
    for key, value in updates.items():
        current = target.get(key)
        if isinstance(current, dict) and isinstance(value, Mapping):
            target[key] = _deep_update(dict(current), value)
        else:
            target[key] = value
    return target


def load_settings(environment: str | None = None) -> AppSettings:
    """Load application settings with environment specific defaults applied.

    Environment presets only fill values that were not configured explicitly
    through ``EVA_*`` variables.
    """
    env_value = (environment or os.getenv("EVA_ENV", "dev")).lower()
    env = Environment(env_value)
    defaults = ENVIRONMENT_DEFAULTS.get(env, {})
    try:
        base_settings = AppSettings()
    except ValidationError as err:
        raise RuntimeError(f"Invalid configuration: {err}") from err
    explicit = base_settings.model_dump(exclude_unset=True)
    merged = _deep_update(base_settings.model_dump(), defaults)
    merged = _deep_update(merged, explicit)
    merged["environment"] = env
    return AppSettings.model_validate(merged)


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """Cached accessor used by production code."""
    return load_settings()


__all__ = [
    "ENVIRONMENT_DEFAULTS",
    "SUPPORTED_API_VERSION",
    "AppSettings",
    "ApiSettings",
    "CORSSecuritySettings",
    "Environment",
    "GA4GHSettings",
    "LoggingSettings",
    "MetricsSettings",
    "ObservabilitySettings",
    "SecuritySettings",
    "StorageSettings",
    "TranslationSettings",
    "get_settings",
    "load_settings",
]
