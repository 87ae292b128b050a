from __future__ import annotations

import pytest

from eva_ws.translation import get_translator
from eva_ws.translation.tables import (
    IdentifierTranslationTable,
    TranslationTables,
    load_translation_tables,
)


def test_embedded_tables_translate_both_directions() -> None:
    tables = TranslationTables.embedded()
    assert tables.files.forward("52") == "ERZ017134"
    assert tables.files.inverse("ERZ017134") == "52"
    assert tables.studies.forward("8616") == "PRJEB4019"
    assert tables.studies.inverse("PRJEB4019") == "8616"


def test_embedded_tables_are_exact_inverses() -> None:
    tables = TranslationTables.embedded()
    for table in (tables.studies, tables.files):
        assert len(table.accession_to_legacy) == len(table)
        for legacy, accession in table.legacy_to_accession.items():
            assert table.accession_to_legacy[accession] == legacy


def test_lookup_miss_passes_identifier_through() -> None:
    table = IdentifierTranslationTable({"1": "ERZ000001"})
    assert table.forward("unknown") == "unknown"
    assert table.inverse("unknown") == "unknown"
    assert table.forward("") == ""


def test_inverse_map_only_holds_accessions() -> None:
    table = IdentifierTranslationTable({"1": "ERZ000001"})
    assert table.accession_to_legacy.get("ERZ000001") == "1"
    assert table.accession_to_legacy.get("1") is None


def test_non_injective_mapping_is_rejected() -> None:
    with pytest.raises(ValueError, match="ERZ000001"):
        IdentifierTranslationTable({"1": "ERZ000001", "2": "ERZ000001"})


def test_tables_are_read_only() -> None:
    table = IdentifierTranslationTable.from_mapping({1: "ERZ000001"})
    assert "1" in table
    with pytest.raises(TypeError):
        table.legacy_to_accession["2"] = "ERZ000002"  # type: ignore[index]


def test_tables_load_from_yaml(tmp_path) -> None:
    path = tmp_path / "tables.yaml"
    path.write_text("studies:\n  '7': PRJEB0007\nfiles:\n  '70': ERZ000070\n")

    tables = load_translation_tables(path)

    assert tables.studies.forward("7") == "PRJEB0007"
    assert tables.files.inverse("ERZ000070") == "70"
    assert tables.files.forward("52") == "52"


def test_yaml_tables_must_be_a_mapping(tmp_path) -> None:
    path = tmp_path / "tables.yaml"
    path.write_text("- 1\n- 2\n")
    with pytest.raises(ValueError):
        TranslationTables.from_path(path)


def test_get_translator_uses_configured_tables(tmp_path, monkeypatch) -> None:
    path = tmp_path / "tables.yaml"
    path.write_text("files:\n  '70': ERZ000070\n")
    monkeypatch.setenv("EVA_TRANSLATION__TABLES_PATH", str(path))
    monkeypatch.setenv("EVA_TRANSLATION__TRANSLATE_STUDY_IDS", "false")

    translator = get_translator()

    assert translator.translate_file_id("70") == "ERZ000070"
    assert translator.translate_file_id("52") == "52"
    assert translator.translate_study_ids is False
