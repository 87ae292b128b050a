"""Canonical query options shared by every endpoint.

Every ``/v1`` endpoint runs its raw query parameters through
:class:`QueryOptionsBuilder` so storage adaptors always receive the same
structure: ``species``, ``metadata``, ``exclude``, ``include``, ``limit``,
``skip`` and ``count`` are always present after normalisation.

Normalisation rules:
    - ``species`` must be non-empty (:class:`SpeciesError` otherwise)
    - the API version must be the supported one (:class:`VersionError`)
    - ``exclude``/``include`` are split on commas; blank means ``None``
    - ``limit``/``skip`` values ``<= 0`` collapse to ``-1`` ("not applied"),
      so a caller supplied ``0`` behaves exactly like an omitted value
    - ``count`` is ``True`` only for the exact string ``"true"``
    - ``metadata`` defaults to ``True``; when present it is ``True`` only for
      the exact string ``"true"``

Example:
    >>> options = QueryOptionsBuilder().build({"species": "hsapiens", "limit": "0"})
    >>> options["limit"], options["metadata"], options["exclude"]
    (-1, True, None)
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from eva_ws.config.settings import SUPPORTED_API_VERSION
from eva_ws.utils.errors import SpeciesError, ValidationError, VersionError

OPTION_KEYS = ("species", "metadata", "exclude", "include", "limit", "skip", "count")
UNSET = -1


class QueryOptions(dict[str, Any]):
    """Mapping of normalised option name to value handed to adaptors."""

    @property
    def species(self) -> str:
        return self["species"]

    @property
    def limit(self) -> int:
        return self["limit"]

    @property
    def skip(self) -> int:
        return self["skip"]


def _split_fields(raw: Any) -> list[str] | None:
    if raw is None or raw == "":
        return None
    if isinstance(raw, (list, tuple)):
        return [str(item) for item in raw] or None
    return str(raw).split(",")


def _positive_or_unset(name: str, raw: Any) -> int:
    if raw is None or raw == "":
        return UNSET
    try:
        value = int(raw)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"Parameter '{name}' must be an integer: '{raw}'") from exc
    return value if value > 0 else UNSET


def _exact_true(raw: Any) -> bool:
    if isinstance(raw, bool):
        return raw
    return raw == "true"


class QueryOptionsBuilder:
    """Validates raw request parameters into :class:`QueryOptions`."""

    def __init__(self, api_version: str | None = SUPPORTED_API_VERSION) -> None:
        self.api_version = api_version

    def build(self, raw: Mapping[str, Any]) -> QueryOptions:
        if self.api_version is None or self.api_version != SUPPORTED_API_VERSION:
            raise VersionError(f"Version not valid: '{self.api_version}'")
        species = raw.get("species")
        if species is None or species == "":
            raise SpeciesError(f"Species not valid: '{species}'")

        return QueryOptions(
            species=species,
            metadata=_exact_true(raw["metadata"]) if raw.get("metadata") is not None else True,
            exclude=_split_fields(raw.get("exclude")),
            include=_split_fields(raw.get("include")),
            limit=_positive_or_unset("limit", raw.get("limit")),
            skip=_positive_or_unset("skip", raw.get("skip")),
            count=_exact_true(raw.get("count")),
        )


__all__ = ["OPTION_KEYS", "UNSET", "QueryOptions", "QueryOptionsBuilder"]
