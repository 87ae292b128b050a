from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

import pytest
from fastapi.testclient import TestClient

from eva_ws.adapters.base import QueryResult
from eva_ws.adapters.memory import InMemoryStorageAdaptor
from eva_ws.adapters.registry import AdaptorRegistry
from eva_ws.config.settings import get_settings
from eva_ws.gateway.app import create_app
from eva_ws.translation import TranslationTables, get_translator
from eva_ws.translation.translator import IdentifierTranslator

STUDIES = [
    {"studyId": "PRJEB4019", "studyName": "1000 Genomes Phase 1", "species": "hsapiens"},
]

SOURCES = [
    {
        "studyId": "PRJEB4019",
        "fileId": "52",
        "fileName": "ALL.chr1.vcf.gz",
        "samples": ["HG00096", "HG00097"],
    },
    {
        "studyId": "PRJEB4019",
        "fileId": "53",
        "fileName": "ALL.chr2.vcf.gz",
        "samples": ["HG00097", "HG00099"],
    },
]

SUMMARIES = {
    "8616": {"studyId": "8616", "studyName": "1000 Genomes Phase 1", "numVariants": 38000000},
}

STRUCTURAL_SUMMARIES = {
    "estd199": {"studyId": "estd199", "studyName": "1000 Genomes SV", "numVariants": 68000},
}


class RecordingAdaptor(InMemoryStorageAdaptor):
    """In-memory adaptor remembering every call made to it."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.calls: list[tuple[str, Any]] = []

    def find_study_by_name_or_id(self, study: str, options: Mapping[str, Any]) -> QueryResult:
        self.calls.append(("find_study_by_name_or_id", study))
        return super().find_study_by_name_or_id(study, options)

    def get_study_by_id(self, study_id: str, options: Mapping[str, Any]) -> QueryResult:
        self.calls.append(("get_study_by_id", study_id))
        return super().get_study_by_id(study_id, options)

    def get_all_sources_by_study(self, study_id: str, options: Mapping[str, Any]) -> QueryResult:
        self.calls.append(("get_all_sources_by_study", study_id))
        return super().get_all_sources_by_study(study_id, options)

    def get_study_summary(
        self, study_id: str, options: Mapping[str, Any], structural: bool
    ) -> QueryResult:
        self.calls.append(("get_study_summary", (study_id, structural)))
        return super().get_study_summary(study_id, options, structural)

    def get_samples_by_sources(
        self, source_ids: Sequence[str], options: Mapping[str, Any]
    ) -> QueryResult:
        self.calls.append(("get_samples_by_sources", (list(source_ids), dict(options))))
        return super().get_samples_by_sources(source_ids, options)

    def operations(self) -> list[str]:
        return [name for name, _ in self.calls]


class FailingAdaptor(InMemoryStorageAdaptor):
    def get_samples_by_sources(
        self, source_ids: Sequence[str], options: Mapping[str, Any]
    ) -> QueryResult:
        raise RuntimeError("connection refused by variant store")

    def find_study_by_name_or_id(self, study: str, options: Mapping[str, Any]) -> QueryResult:
        raise RuntimeError("connection refused by variant store")

    def health(self) -> bool:
        return False


@pytest.fixture(autouse=True)
def _reset_settings(monkeypatch):
    monkeypatch.delenv("EVA_ENV", raising=False)
    get_settings.cache_clear()
    get_translator.cache_clear()
    yield
    get_settings.cache_clear()
    get_translator.cache_clear()


@pytest.fixture
def adaptor() -> RecordingAdaptor:
    return RecordingAdaptor(
        name="memory:test",
        studies=STUDIES,
        sources=SOURCES,
        summaries=SUMMARIES,
        structural_summaries=STRUCTURAL_SUMMARIES,
    )


@pytest.fixture
def registry(adaptor: RecordingAdaptor) -> AdaptorRegistry:
    return AdaptorRegistry({"hsapiens": adaptor, "hsapiens_grch37": adaptor})


@pytest.fixture
def translator() -> IdentifierTranslator:
    return IdentifierTranslator.from_tables(TranslationTables.embedded())


@pytest.fixture
def client(registry: AdaptorRegistry, translator: IdentifierTranslator) -> TestClient:
    app = create_app(get_settings(), adaptors=registry, translator=translator)
    return TestClient(app)


@pytest.fixture
def failing_client(translator: IdentifierTranslator) -> TestClient:
    failing = FailingAdaptor(name="memory:failing")
    registry = AdaptorRegistry({"hsapiens": failing, "hsapiens_grch37": failing})
    return TestClient(create_app(get_settings(), adaptors=registry, translator=translator))


class PositionalSamplesAdaptor(InMemoryStorageAdaptor):
    """Returns bare sample lists, one per stored file found, in request order."""

    def get_samples_by_sources(
        self, source_ids: Sequence[str], options: Mapping[str, Any]
    ) -> QueryResult:
        stored = {row["fileId"]: list(row.get("samples", ())) for row in self._sources}
        rows = [stored[source_id] for source_id in source_ids if source_id in stored]
        return QueryResult(rows=rows, num_total_results=len(rows))


@pytest.fixture
def positional_adaptor() -> PositionalSamplesAdaptor:
    return PositionalSamplesAdaptor(
        name="memory:positional",
        sources=[
            {"fileId": "52", "samples": ["A"]},
            {"fileId": "208", "samples": ["B"]},
        ],
    )
