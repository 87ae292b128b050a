"""Study lookups behind ``/v1/studies``.

A study may be addressed by name or identifier; it is resolved first and a
miss is reported as :class:`NotFoundError` before any further adaptor call.
Rows leave this service with legacy identifiers already translated.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import structlog

from eva_ws.adapters.base import StorageAdaptor
from eva_ws.adapters.registry import AdaptorRegistry
from eva_ws.translation.translator import STUDY_ID_FIELD, IdentifierTranslator
from eva_ws.utils.errors import NotFoundError

from .adaptor_calls import call_adaptor

logger = structlog.get_logger(__name__)

STUDY_NOT_FOUND = "Study identifier not found"


def _study_id_of(row: Any) -> str | None:
    if isinstance(row, Mapping):
        value = row.get(STUDY_ID_FIELD)
    else:
        value = getattr(row, STUDY_ID_FIELD, None)
    return None if value is None else str(value)


class StudyService:
    """Files, details and summaries of a single study."""

    def __init__(self, adaptors: AdaptorRegistry, translator: IdentifierTranslator) -> None:
        self._adaptors = adaptors
        self._translator = translator

    async def resolve_study_id(
        self, adaptor: StorageAdaptor, study: str, options: Mapping[str, Any]
    ) -> str:
        result = await call_adaptor(
            "find_study_by_name_or_id", adaptor.find_study_by_name_or_id, study, options
        )
        study_id = _study_id_of(result.first()) if result.num_results else None
        if study_id is None:
            logger.info("studies.not_found", study=study, species=options.get("species"))
            raise NotFoundError(STUDY_NOT_FOUND)
        return study_id

    async def get_files(self, study: str, options: Mapping[str, Any]) -> list[Any]:
        adaptor = self._adaptors.get(options["species"])
        study_id = await self.resolve_study_id(adaptor, study, options)
        result = await call_adaptor(
            "get_all_sources_by_study", adaptor.get_all_sources_by_study, study_id, options
        )
        return self._translator.translate_sources(result.rows)

    async def get_study(self, study: str, options: Mapping[str, Any]) -> list[Any]:
        adaptor = self._adaptors.get(options["species"])
        study_id = await self.resolve_study_id(adaptor, study, options)
        result = await call_adaptor("get_study_by_id", adaptor.get_study_by_id, study_id, options)
        return self._translator.translate_sources(result.rows)

    async def get_summary(
        self, study: str, options: Mapping[str, Any], *, structural: bool = False
    ) -> list[Any]:
        adaptor = self._adaptors.get(options["species"])
        result = await call_adaptor(
            "get_study_summary", adaptor.get_study_summary, study, options, structural
        )
        return self._translator.translate_sources(result.rows)


__all__ = ["STUDY_NOT_FOUND", "StudyService"]
