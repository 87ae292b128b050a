from __future__ import annotations

import asyncio

import pytest

from eva_ws.adapters.registry import AdaptorRegistry
from eva_ws.services.adaptor_calls import call_adaptor
from eva_ws.services.studies import STUDY_NOT_FOUND, StudyService
from eva_ws.utils.errors import CollaboratorError, NotFoundError, SpeciesError

OPTIONS = {"species": "hsapiens", "limit": -1, "skip": -1}


@pytest.fixture
def service(registry, translator) -> StudyService:
    return StudyService(registry, translator)


def test_get_files_translates_file_ids(service, adaptor) -> None:
    rows = asyncio.run(service.get_files("PRJEB4019", OPTIONS))
    assert [row["fileId"] for row in rows] == ["ERZ017134", "53"]
    assert adaptor.calls[-1] == ("get_all_sources_by_study", "PRJEB4019")


def test_unknown_study_stops_before_listing_sources(service, adaptor) -> None:
    with pytest.raises(NotFoundError, match=STUDY_NOT_FOUND):
        asyncio.run(service.get_files("PRJEB9999", OPTIONS))
    assert adaptor.operations() == ["find_study_by_name_or_id"]


def test_unknown_species_is_rejected(service) -> None:
    with pytest.raises(SpeciesError):
        asyncio.run(service.get_study("PRJEB4019", {**OPTIONS, "species": "mmusculus"}))


def test_files_are_paged_by_options(service) -> None:
    rows = asyncio.run(service.get_files("PRJEB4019", {**OPTIONS, "skip": 1, "limit": 5}))
    assert [row["fileId"] for row in rows] == ["53"]


def test_stored_rows_are_not_modified(service, adaptor) -> None:
    asyncio.run(service.get_files("PRJEB4019", OPTIONS))
    rows = asyncio.run(service.get_files("PRJEB4019", {**OPTIONS}))
    assert rows[0]["fileId"] == "ERZ017134"
    assert adaptor.get_all_sources_by_study("PRJEB4019", OPTIONS).rows[0]["fileId"] == "52"


def test_call_adaptor_wraps_failures() -> None:
    def explode(*_):
        raise ConnectionError("datastore offline")

    with pytest.raises(CollaboratorError) as excinfo:
        asyncio.run(call_adaptor("explode", explode, "x"))
    assert excinfo.value.message == "datastore offline"
    assert excinfo.value.problem.status == 500


def test_call_adaptor_keeps_domain_errors() -> None:
    registry = AdaptorRegistry()

    def lookup(species):
        return registry.get(species)

    with pytest.raises(SpeciesError):
        asyncio.run(call_adaptor("lookup", lookup, "hsapiens"))
