"""In-memory storage adaptor used for local development and tests."""

from __future__ import annotations

import copy
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from .base import QueryResult, StorageAdaptor


def _page(rows: list[Any], options: Mapping[str, Any]) -> list[Any]:
    """Apply ``skip``/``limit`` options where ``-1`` (or absent) means unset."""
    skip = int(options.get("skip", -1) or -1)
    limit = int(options.get("limit", -1) or -1)
    if skip > 0:
        rows = rows[skip:]
    if limit > 0:
        rows = rows[:limit]
    return rows


class InMemoryStorageAdaptor(StorageAdaptor):
    """Adaptor serving studies, file sources and samples from plain dicts.

    Rows are deep-copied on the way out so callers may rewrite identifiers
    without touching the stored documents.
    """

    def __init__(
        self,
        name: str = "memory",
        *,
        studies: Iterable[Mapping[str, Any]] = (),
        sources: Iterable[Mapping[str, Any]] = (),
        summaries: Mapping[str, Mapping[str, Any]] | None = None,
        structural_summaries: Mapping[str, Mapping[str, Any]] | None = None,
    ) -> None:
        super().__init__(name)
        self._studies = [dict(study) for study in studies]
        self._sources = [dict(source) for source in sources]
        self._summaries = dict(summaries or {})
        self._structural_summaries = dict(structural_summaries or {})

    def find_study_by_name_or_id(self, study: str, options: Mapping[str, Any]) -> QueryResult:
        matches = [
            {"studyId": row["studyId"]}
            for row in self._studies
            if study in (row.get("studyId"), row.get("studyName"))
        ]
        return QueryResult(rows=matches)

    def get_study_by_id(self, study_id: str, options: Mapping[str, Any]) -> QueryResult:
        rows = [copy.deepcopy(row) for row in self._studies if row.get("studyId") == study_id]
        return QueryResult(rows=rows)

    def get_all_sources_by_study(self, study_id: str, options: Mapping[str, Any]) -> QueryResult:
        matches = [
            copy.deepcopy(row) for row in self._sources if row.get("studyId") == study_id
        ]
        return QueryResult(rows=_page(matches, options), num_total_results=len(matches))

    def get_study_summary(
        self, study_id: str, options: Mapping[str, Any], structural: bool
    ) -> QueryResult:
        catalogue = self._structural_summaries if structural else self._summaries
        summary = catalogue.get(study_id)
        return QueryResult(rows=[copy.deepcopy(dict(summary))] if summary else [])

    def get_samples_by_sources(
        self, source_ids: Sequence[str], options: Mapping[str, Any]
    ) -> QueryResult:
        matches: list[dict[str, Any]] = []
        for source_id in source_ids:
            for row in self._sources:
                if row.get("fileId") == source_id:
                    matches.append(
                        {"fileId": source_id, "samples": list(row.get("samples", ()))}
                    )
        return QueryResult(rows=_page(matches, options), num_total_results=len(matches))


__all__ = ["InMemoryStorageAdaptor"]
