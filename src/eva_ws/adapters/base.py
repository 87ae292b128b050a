"""Storage adaptor contract.

This module defines the capability surface the gateway needs from the
variant/study datastore. Adaptors own persistence, indexing and query
execution; the gateway only reads the documented row shape (mappings or
objects exposing ``studyId``/``fileId`` where applicable).

Key Components:
    - QueryResult: Paged rows plus the total count reported by the datastore
    - StorageAdaptor: Abstract base class every adaptor implements

Collaborators:
    - Upstream: Study and call set services
    - Downstream: Concrete adaptors (in-memory, database backed)

Side Effects:
    - None: Pure interface definitions and data structures

Thread Safety:
    - Implementations must tolerate concurrent calls from worker threads;
      the gateway runs every adaptor call through ``asyncio.to_thread``

Example:
    >>> from eva_ws.adapters.memory import InMemoryStorageAdaptor
    >>> adaptor = InMemoryStorageAdaptor(name="example")
    >>> adaptor.find_study_by_name_or_id("PRJEB4019", {}).num_results
    0
"""

# ==============================================================================
# IMPORTS
# ==============================================================================

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

# ==============================================================================
# DATA MODELS
# ==============================================================================


@dataclass
class QueryResult:
    """Represents one page of rows returned by an adaptor."""

    rows: list[Any] = field(default_factory=list)
    num_total_results: int | None = None
    db_time_ms: int = 0
    error_msg: str | None = None

    def __post_init__(self) -> None:
        if self.num_total_results is None:
            self.num_total_results = len(self.rows)

    @property
    def num_results(self) -> int:
        return len(self.rows)

    def first(self) -> Any | None:
        return self.rows[0] if self.rows else None


# ==============================================================================
# ADAPTOR CONTRACT
# ==============================================================================


class StorageAdaptor(ABC):
    """Base class that all storage adaptors must inherit from."""

    name: str

    def __init__(self, name: str) -> None:
        self.name = name

    @abstractmethod
    def find_study_by_name_or_id(
        self, study: str, options: Mapping[str, Any]
    ) -> QueryResult:  # pragma: no cover - abstract
        """Resolve a study name or identifier to rows exposing ``studyId``."""

    @abstractmethod
    def get_study_by_id(
        self, study_id: str, options: Mapping[str, Any]
    ) -> QueryResult:  # pragma: no cover - abstract
        """Return the study document for a resolved identifier."""

    @abstractmethod
    def get_all_sources_by_study(
        self, study_id: str, options: Mapping[str, Any]
    ) -> QueryResult:  # pragma: no cover - abstract
        """Return the file sources of a study, one row per file."""

    @abstractmethod
    def get_study_summary(
        self, study_id: str, options: Mapping[str, Any], structural: bool
    ) -> QueryResult:  # pragma: no cover - abstract
        """Return the metadata summary of a study.

        ``structural`` selects the structural variant catalogue instead of
        the short variant one.
        """

    @abstractmethod
    def get_samples_by_sources(
        self, source_ids: Sequence[str], options: Mapping[str, Any]
    ) -> QueryResult:  # pragma: no cover - abstract
        """Return sample name lists, one row per requested source.

        ``options["skip"]`` and ``options["limit"]`` page the rows and
        ``num_total_results`` reports the unpaged total.
        """

    def health(self) -> bool:
        return True


__all__ = ["QueryResult", "StorageAdaptor"]
