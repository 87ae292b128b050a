"""Immutable bidirectional identifier tables.

Key Responsibilities:
    - Hold the legacy numeric identifier -> accession mapping and its inverse
    - Guarantee the two directions stay consistent
    - Load tables from the embedded data module or from a YAML document

Collaborators:
    - Upstream: :func:`load_translation_tables` during application start-up
    - Downstream: :class:`~eva_ws.translation.translator.IdentifierTranslator`

Side Effects:
    - None after construction; loading from YAML reads one file

Thread Safety:
    - Thread-safe: both directions are exposed through read-only
      ``MappingProxyType`` views and never mutated after construction

Example:
    >>> table = IdentifierTranslationTable.from_mapping({"52": "ERZ017134"})
    >>> table.forward("52"), table.inverse("ERZ017134"), table.forward("x")
    ('ERZ017134', '52', 'x')
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml

from .data import FILE_ACCESSIONS, STUDY_ACCESSIONS


class IdentifierTranslationTable:
    """Read-only legacy identifier -> accession table with its exact inverse."""

    __slots__ = ("_forward", "_inverse")

    def __init__(self, forward: Mapping[str, str]) -> None:
        normalised = {str(key): str(value) for key, value in forward.items()}
        inverse: dict[str, str] = {}
        for legacy, accession in normalised.items():
            previous = inverse.setdefault(accession, legacy)
            if previous != legacy:
                raise ValueError(
                    f"Accession '{accession}' is mapped from both '{previous}' and '{legacy}'"
                )
        self._forward: Mapping[str, str] = MappingProxyType(normalised)
        self._inverse: Mapping[str, str] = MappingProxyType(inverse)

    @classmethod
    def from_mapping(cls, forward: Mapping[Any, Any]) -> IdentifierTranslationTable:
        return cls(forward)

    @property
    def legacy_to_accession(self) -> Mapping[str, str]:
        return self._forward

    @property
    def accession_to_legacy(self) -> Mapping[str, str]:
        return self._inverse

    def forward(self, identifier: str) -> str:
        """Translate a legacy identifier, returning the input on a miss."""
        return self._forward.get(identifier, identifier)

    def inverse(self, accession: str) -> str:
        """Translate an accession back to its legacy identifier, or pass it through."""
        return self._inverse.get(accession, accession)

    def __len__(self) -> int:
        return len(self._forward)

    def __iter__(self) -> Iterator[str]:
        return iter(self._forward)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._forward

    def __repr__(self) -> str:
        return f"{type(self).__name__}(entries={len(self._forward)})"


@dataclass(frozen=True, slots=True)
class TranslationTables:
    """The two unrelated identifier families served by the gateway."""

    studies: IdentifierTranslationTable
    files: IdentifierTranslationTable

    @classmethod
    def embedded(cls) -> TranslationTables:
        return cls(
            studies=IdentifierTranslationTable(STUDY_ACCESSIONS),
            files=IdentifierTranslationTable(FILE_ACCESSIONS),
        )

    @classmethod
    def from_path(cls, path: Path) -> TranslationTables:
        """Load tables from a YAML document with ``studies`` and ``files`` maps."""
        raw = yaml.safe_load(path.read_text()) or {}
        if not isinstance(raw, Mapping):
            raise ValueError(f"Translation tables in '{path}' must be a mapping")
        return cls(
            studies=IdentifierTranslationTable(dict(raw.get("studies") or {})),
            files=IdentifierTranslationTable(dict(raw.get("files") or {})),
        )


def load_translation_tables(path: Path | None = None) -> TranslationTables:
    """Build the process-wide tables, preferring ``path`` when configured."""
    if path is not None:
        return TranslationTables.from_path(path)
    return TranslationTables.embedded()


__all__ = ["IdentifierTranslationTable", "TranslationTables", "load_translation_tables"]
