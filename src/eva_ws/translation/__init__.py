"""Legacy identifier translation tables and helpers."""

from __future__ import annotations

from functools import lru_cache

from eva_ws.config.settings import get_settings

from .tables import IdentifierTranslationTable, TranslationTables, load_translation_tables
from .translator import IdentifierTranslator


@lru_cache(maxsize=1)
def get_translator() -> IdentifierTranslator:
    """Return the process-wide translator built from the configured tables."""
    settings = get_settings().translation
    return IdentifierTranslator.from_tables(
        load_translation_tables(settings.tables_path),
        translate_study_ids=settings.translate_study_ids,
        translate_file_ids=settings.translate_file_ids,
    )


__all__ = [
    "IdentifierTranslationTable",
    "IdentifierTranslator",
    "TranslationTables",
    "get_translator",
    "load_translation_tables",
]
