"""FastAPI application factory for the EVA web services.

Key Responsibilities:
    - Wire settings, observability and middleware into a FastAPI app
    - Build the adaptor registry, translator and services stored on
      ``app.state``
    - Convert every :class:`~eva_ws.utils.errors.EvaError`, request
      validation failure and unexpected fault into an error envelope

Collaborators:
    - Upstream: ASGI servers (uvicorn) and tests
    - Downstream: :mod:`eva_ws.gateway.rest.router`, service layer

Side Effects:
    - Configures process-wide logging on creation

Example:
    >>> from eva_ws.gateway.app import create_app
    >>> app = create_app()
"""

# ==============================================================================
# IMPORTS
# ==============================================================================

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response
from starlette.exceptions import HTTPException

from eva_ws import __version__
from eva_ws.adapters.registry import AdaptorRegistry
from eva_ws.config.settings import AppSettings, get_settings
from eva_ws.observability import setup_observability
from eva_ws.services import CallSetSearchService, HealthService, StudyService
from eva_ws.services.health import adaptor_check
from eva_ws.translation import IdentifierTranslator, get_translator, load_translation_tables
from eva_ws.utils.errors import EvaError, ProblemDetail
from eva_ws.utils.logging import get_correlation_id

from .presentation.dependencies import envelope_builder_for
from .presentation.lifecycle import RequestLifecycleMiddleware
from .rest.router import health_router
from .rest.router import router as rest_router

logger = logging.getLogger(__name__)


# ==============================================================================
# HELPERS
# ==============================================================================


def _translator_for(settings: AppSettings | None) -> IdentifierTranslator:
    if settings is None:
        return get_translator()
    translation = settings.translation
    return IdentifierTranslator.from_tables(
        load_translation_tables(translation.tables_path),
        translate_study_ids=translation.translate_study_ids,
        translate_file_ids=translation.translate_file_ids,
    )


def _log_problem(event: str, detail: ProblemDetail) -> None:
    log = logger.warning if detail.is_client_error else logger.error
    log(
        event,
        extra={
            "correlation_id": get_correlation_id(),
            "problem": detail.model_dump(),
        },
    )


def _validation_message(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()) if item != "body")
        parts.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return "Request validation failed: " + "; ".join(parts)


# ==============================================================================
# APPLICATION FACTORY
# ==============================================================================


def create_app(
    settings: AppSettings | None = None,
    *,
    adaptors: AdaptorRegistry | None = None,
    translator: IdentifierTranslator | None = None,
) -> FastAPI:
    translator = translator or _translator_for(settings)
    settings = settings or get_settings()
    adaptors = adaptors or AdaptorRegistry.from_config(settings.storage.adaptors)

    app = FastAPI(title="EVA Web Services", version=__version__)
    app.state.settings = settings
    app.state.adaptors = adaptors
    app.state.translator = translator

    setup_observability(app, settings)

    app.add_middleware(
        RequestLifecycleMiddleware,
        correlation_header=settings.observability.logging.correlation_id_header,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.security.cors.allow_origins),
        allow_methods=list(settings.security.cors.allow_methods),
        allow_headers=list(settings.security.cors.allow_headers),
    )

    app.include_router(health_router)
    app.include_router(rest_router)

    app.state.studies = StudyService(adaptors, translator)
    app.state.callsets = CallSetSearchService(
        adaptors,
        translator,
        species=settings.ga4gh.species,
        default_page_size=settings.ga4gh.default_page_size,
    )
    app.state.health = HealthService(
        checks={species: adaptor_check(adaptor) for species, adaptor in adaptors},
        version=app.version,
    )

    @app.exception_handler(EvaError)
    async def handle_eva_error(request: Request, exc: EvaError) -> Response:
        _log_problem("gateway.error", exc.problem)
        return envelope_builder_for(request).error(exc.message, status_code=exc.problem.status)

    @app.exception_handler(RequestValidationError)
    async def handle_validation_exception(
        request: Request, exc: RequestValidationError
    ) -> Response:
        message = _validation_message(exc)
        _log_problem(
            "gateway.validation_error",
            ProblemDetail(title=message, status=400, type="https://httpstatuses.com/400"),
        )
        return envelope_builder_for(request).user_error(message)

    @app.exception_handler(HTTPException)
    async def handle_http_exception(request: Request, exc: HTTPException) -> Response:
        detail = ProblemDetail(
            title=str(exc.detail),
            status=exc.status_code,
            type="https://httpstatuses.com/" + str(exc.status_code),
        )
        _log_problem("gateway.http_error", detail)
        return envelope_builder_for(request).error(exc.detail, status_code=exc.status_code)

    @app.exception_handler(Exception)
    async def handle_unexpected_exception(request: Request, exc: Exception) -> Response:
        detail = ProblemDetail(
            title=str(exc) or type(exc).__name__,
            status=500,
            type="https://httpstatuses.com/500",
            extra={"exception": type(exc).__name__},
        )
        _log_problem("gateway.unhandled_error", detail)
        return envelope_builder_for(request).server_error(detail.title)

    return app


__all__ = ["create_app"]
