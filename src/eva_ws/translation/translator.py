"""Legacy identifier translation applied to adaptor results.

Key Responsibilities:
    - Translate study and file identifiers between the legacy numeric scheme
      and accessions, passing unknown identifiers through unchanged
    - Rewrite ``studyId``/``fileId`` fields on result rows before they are
      wrapped in a response envelope
    - Keep the study and file families behind independent switches

Collaborators:
    - Upstream: Study and call set services
    - Downstream: :class:`~eva_ws.translation.tables.IdentifierTranslationTable`

Side Effects:
    - Mutates the result rows handed to the ``translate_*`` row helpers

Thread Safety:
    - Thread-safe: the translator only reads its immutable tables; rows are
      request scoped

Example:
    >>> from eva_ws.translation import TranslationTables
    >>> translator = IdentifierTranslator.from_tables(TranslationTables.embedded())
    >>> translator.translate_file_id("52")
    'ERZ017134'
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, MutableMapping
from typing import Any, TypeVar

from .tables import IdentifierTranslationTable, TranslationTables

STUDY_ID_FIELD = "studyId"
FILE_ID_FIELD = "fileId"

TRow = TypeVar("TRow")


def _get_field(row: Any, name: str) -> Any:
    if isinstance(row, Mapping):
        return row.get(name)
    return getattr(row, name, None)


def _set_field(row: Any, name: str, value: str) -> None:
    if isinstance(row, MutableMapping):
        row[name] = value
    else:
        setattr(row, name, value)


class IdentifierTranslator:
    """Applies the study and file translation tables to identifiers and rows."""

    def __init__(
        self,
        studies: IdentifierTranslationTable,
        files: IdentifierTranslationTable,
        *,
        translate_study_ids: bool = True,
        translate_file_ids: bool = True,
    ) -> None:
        self._studies = studies
        self._files = files
        self.translate_study_ids = translate_study_ids
        self.translate_file_ids = translate_file_ids

    @classmethod
    def from_tables(
        cls,
        tables: TranslationTables,
        *,
        translate_study_ids: bool = True,
        translate_file_ids: bool = True,
    ) -> IdentifierTranslator:
        return cls(
            tables.studies,
            tables.files,
            translate_study_ids=translate_study_ids,
            translate_file_ids=translate_file_ids,
        )

    # ------------------------------------------------------------------
    # Identifier lookups
    # ------------------------------------------------------------------
    def translate_study_id(self, study_id: str) -> str:
        return self._studies.forward(study_id)

    def translate_file_id(self, file_id: str) -> str:
        return self._files.forward(file_id)

    def translate_file_accession(self, accession: str) -> str:
        """Map a file accession back to its legacy numeric identifier."""
        return self._files.inverse(accession)

    def file_legacy_alias(self, accession: str) -> str | None:
        """Legacy numeric id of a known file accession, or ``None``."""
        return self._files.accession_to_legacy.get(accession)

    # ------------------------------------------------------------------
    # Row rewriting
    # ------------------------------------------------------------------
    def translate_source(self, row: TRow) -> TRow:
        """Rewrite the ``fileId`` and ``studyId`` of one row in place."""
        if self.translate_file_ids:
            file_id = _get_field(row, FILE_ID_FIELD)
            if isinstance(file_id, str):
                _set_field(row, FILE_ID_FIELD, self.translate_file_id(file_id))
        if self.translate_study_ids:
            study_id = _get_field(row, STUDY_ID_FIELD)
            if isinstance(study_id, str):
                _set_field(row, STUDY_ID_FIELD, self.translate_study_id(study_id))
        return row

    def translate_sources(self, rows: Iterable[TRow]) -> list[TRow]:
        return [self.translate_source(row) for row in rows]


__all__ = [
    "FILE_ID_FIELD",
    "STUDY_ID_FIELD",
    "IdentifierTranslator",
]
