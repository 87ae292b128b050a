from __future__ import annotations

import pytest

from eva_ws.adapters.base import QueryResult
from eva_ws.adapters.memory import InMemoryStorageAdaptor
from eva_ws.adapters.registry import AdaptorFactoryRegistry, AdaptorRegistry, factories
from eva_ws.utils.errors import SpeciesError


def test_query_result_defaults_total_to_row_count() -> None:
    result = QueryResult(rows=[{"a": 1}, {"a": 2}])
    assert result.num_results == 2
    assert result.num_total_results == 2
    assert result.first() == {"a": 1}
    assert QueryResult().first() is None


def test_memory_adaptor_pages_samples_and_reports_total() -> None:
    adaptor = InMemoryStorageAdaptor(
        sources=[{"fileId": "52", "samples": [f"S{index}"]} for index in range(5)]
    )
    result = adaptor.get_samples_by_sources(["52"], {"skip": 2, "limit": 2})
    assert [row["samples"] for row in result.rows] == [["S2"], ["S3"]]
    assert result.num_total_results == 5


def test_memory_adaptor_ignores_unset_paging() -> None:
    adaptor = InMemoryStorageAdaptor(
        sources=[{"studyId": "S1", "fileId": str(index)} for index in range(3)]
    )
    result = adaptor.get_all_sources_by_study("S1", {"skip": -1, "limit": -1})
    assert result.num_results == 3


def test_memory_adaptor_finds_study_by_name_or_id() -> None:
    adaptor = InMemoryStorageAdaptor(studies=[{"studyId": "PRJEB4019", "studyName": "1000G"}])
    assert adaptor.find_study_by_name_or_id("1000G", {}).rows == [{"studyId": "PRJEB4019"}]
    assert adaptor.find_study_by_name_or_id("PRJEB4019", {}).num_results == 1
    assert adaptor.find_study_by_name_or_id("missing", {}).num_results == 0


def test_registry_resolves_species() -> None:
    adaptor = InMemoryStorageAdaptor()
    registry = AdaptorRegistry({"hsapiens": adaptor})
    assert registry.get("hsapiens") is adaptor
    assert registry.species() == ["hsapiens"]
    with pytest.raises(SpeciesError, match="ecaballus"):
        registry.get("ecaballus")


def test_registry_builds_adaptors_from_config() -> None:
    registry = AdaptorRegistry.from_config({"hsapiens": "memory", "mmusculus": "memory"})
    assert registry.get("mmusculus").name == "memory:mmusculus"
    assert "memory" in factories.registered()


def test_factory_registry_rejects_duplicates_and_unknown_names() -> None:
    factory_registry = AdaptorFactoryRegistry()
    factory_registry.register("memory", lambda species: InMemoryStorageAdaptor(name=species))
    with pytest.raises(ValueError):
        factory_registry.register("memory", lambda species: InMemoryStorageAdaptor())
    with pytest.raises(KeyError):
        factory_registry.create("mongodb", "hsapiens")
