"""REST API router exposing the EVA web services.

Key Responsibilities:
    - Study endpoints returning results wrapped in the response envelope
    - GA4GH call set search over GET and POST, returned unwrapped
    - Liveness and readiness checks

Collaborators:
    - Upstream: HTTP clients
    - Downstream: :class:`~eva_ws.services.studies.StudyService`,
      :class:`~eva_ws.services.callsets.CallSetSearchService`,
      :class:`~eva_ws.services.health.HealthService`

Side Effects:
    - Stores the normalised query options on ``request.state`` so error
      envelopes can echo them

Thread Safety:
    - Thread-safe: FastAPI handles concurrent requests
    - Stateless: No shared mutable state between requests

Example:
    >>> from fastapi import FastAPI
    >>> from eva_ws.gateway.rest.router import router
    >>> app = FastAPI()
    >>> app.include_router(router)
"""

# ==============================================================================
# IMPORTS
# ==============================================================================

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, Request
from fastapi.responses import JSONResponse, Response

from eva_ws.models.ga4gh import SearchCallSetsRequest
from eva_ws.services.callsets import CallSetSearchService
from eva_ws.services.health import HealthService
from eva_ws.services.studies import StudyService

from ..presentation.dependencies import (
    envelope_builder_for,
    get_default_species_query_options,
    get_ga4gh_query_options,
    get_query_options,
)
from ..presentation.query_options import QueryOptions

router = APIRouter(prefix="/v1")
health_router = APIRouter(tags=["system"])

StudyPath = Annotated[str, Path(description="Study name or identifier, e.g. PRJEB4019")]
Options = Annotated[QueryOptions, Depends(get_query_options)]
SummaryOptions = Annotated[QueryOptions, Depends(get_default_species_query_options)]
GA4GHOptions = Annotated[QueryOptions, Depends(get_ga4gh_query_options)]


def _studies(request: Request) -> StudyService:
    return request.app.state.studies  # type: ignore[attr-defined]


def _callsets(request: Request) -> CallSetSearchService:
    return request.app.state.callsets  # type: ignore[attr-defined]


# ==============================================================================
# HEALTH ENDPOINTS
# ==============================================================================


@health_router.get("/health", include_in_schema=True)
async def health_check(request: Request) -> JSONResponse:
    service: HealthService = request.app.state.health  # type: ignore[attr-defined]
    return JSONResponse(service.liveness())


@health_router.get("/ready", include_in_schema=True)
async def readiness_check(request: Request) -> JSONResponse:
    service: HealthService = request.app.state.health  # type: ignore[attr-defined]
    payload = service.readiness()
    status_code = 503 if payload["status"] == "error" else 200
    return JSONResponse(payload, status_code=status_code)


# ==============================================================================
# STUDY ENDPOINTS
# ==============================================================================


@router.get("/studies/{study}/files", tags=["studies"])
async def get_files_by_study(request: Request, study: StudyPath, options: Options) -> Response:
    """Files (sources) submitted under a study."""
    rows = await _studies(request).get_files(study, options)
    return envelope_builder_for(request).ok(rows)


@router.get("/studies/{study}/view", tags=["studies"])
async def get_study(request: Request, study: StudyPath, options: Options) -> Response:
    rows = await _studies(request).get_study(study, options)
    return envelope_builder_for(request).ok(rows)


@router.get("/studies/{study}/summary", tags=["studies"])
async def get_study_summary(
    request: Request,
    study: StudyPath,
    options: SummaryOptions,
    structural: Annotated[
        bool, Query(description="Whether the study is a structural variation study")
    ] = False,
) -> Response:
    rows = await _studies(request).get_summary(study, options, structural=structural)
    return envelope_builder_for(request).ok(rows)


# ==============================================================================
# GA4GH ENDPOINTS
# ==============================================================================


@router.get("/ga4gh/callsets/search", tags=["ga4gh"])
async def search_call_sets(
    request: Request,
    options: GA4GHOptions,
    variant_set_ids: Annotated[
        str | None,
        Query(alias="variantSetIds", description="Comma separated variant set (file) ids"),
    ] = None,
    page_token: Annotated[str | None, Query(alias="pageToken")] = None,
    page_size: Annotated[int | None, Query(alias="pageSize")] = None,
) -> JSONResponse:
    response = await _callsets(request).search(
        variant_set_ids, page_token=page_token, page_size=page_size, options=options
    )
    return JSONResponse(response.to_wire())


@router.post("/ga4gh/callsets/search", tags=["ga4gh"])
async def search_call_sets_body(
    request: Request,
    body: SearchCallSetsRequest,
    options: GA4GHOptions,
) -> JSONResponse:
    """Same search as the GET endpoint, with the parameters in a JSON body."""
    response = await _callsets(request).search(
        body.variant_set_ids,
        page_token=body.page_token,
        page_size=body.page_size,
        options=options,
    )
    return JSONResponse(response.to_wire())


__all__ = ["health_router", "router"]
