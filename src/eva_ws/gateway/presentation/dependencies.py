"""Dependency providers for presentation layer components."""

from __future__ import annotations

from typing import Any

from fastapi import Depends, Query, Request

from eva_ws.config.settings import AppSettings

from .envelope import ResponseEnvelopeBuilder
from .lifecycle import lifecycle_for
from .query_options import QueryOptions, QueryOptionsBuilder


def build_query_options(request: Request, raw: dict[str, Any]) -> QueryOptions:
    """Normalise ``raw`` and remember the result for error envelopes."""
    settings: AppSettings = request.app.state.settings
    options = QueryOptionsBuilder(api_version=settings.api.version).build(raw)
    request.state.query_options = options
    return options


def _common_params(
    exclude: str = Query(
        default="",
        description="Excluded fields will not be returned. Comma separated JSON paths",
    ),
    include: str = Query(
        default="",
        description="Included fields are the only ones returned. Comma separated JSON paths",
    ),
    limit: str | None = Query(
        default=None, description="Max number of results to be returned. No limit when -1"
    ),
    skip: str | None = Query(
        default=None, description="Number of results to be skipped. No skip when -1"
    ),
    count: str | None = Query(
        default=None, description="Whether the total number of results is returned"
    ),
    metadata: str | None = Query(default=None, description="Whether metadata is returned"),
) -> dict[str, Any]:
    return {
        "exclude": exclude,
        "include": include,
        "limit": limit,
        "skip": skip,
        "count": count,
        "metadata": metadata,
    }


def get_query_options(
    request: Request,
    species: str | None = Query(default=None, description="Species and assembly, e.g. hsapiens"),
    common: dict[str, Any] = Depends(_common_params),
) -> QueryOptions:
    """Query options for endpoints where ``species`` is mandatory."""
    return build_query_options(request, {"species": species, **common})


def get_default_species_query_options(
    request: Request,
    species: str | None = Query(default=None, description="Species and assembly"),
    common: dict[str, Any] = Depends(_common_params),
) -> QueryOptions:
    """Query options for endpoints that fall back to the configured species."""
    settings: AppSettings = request.app.state.settings
    return build_query_options(
        request, {"species": species or settings.api.default_species, **common}
    )


def get_ga4gh_query_options(
    request: Request,
    common: dict[str, Any] = Depends(_common_params),
) -> QueryOptions:
    settings: AppSettings = request.app.state.settings
    return build_query_options(request, {"species": settings.ga4gh.species, **common})


def envelope_builder_for(request: Request) -> ResponseEnvelopeBuilder:
    """Envelope builder timed from the start of ``request``."""
    settings: AppSettings = request.app.state.settings
    lifecycle = lifecycle_for(request)
    return ResponseEnvelopeBuilder(
        query_options=getattr(request.state, "query_options", None),
        started_at=lifecycle.started_at,
        api_version=settings.api.version,
    )


__all__ = [
    "build_query_options",
    "envelope_builder_for",
    "get_default_species_query_options",
    "get_ga4gh_query_options",
    "get_query_options",
]
