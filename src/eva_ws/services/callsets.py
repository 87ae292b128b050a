"""GA4GH call set search over legacy and current file identifiers.

Key Responsibilities:
    - Validate and split the requested variant set (file) identifiers
    - Follow every file accession with its legacy numeric id so files stored
      under either spelling are searched
    - Page through the adaptor results with numeric page tokens
    - Group sample names into GA4GH call sets labelled with accessions

Collaborators:
    - Upstream: GET/POST ``/v1/ga4gh/callsets/search``
    - Downstream: :class:`~eva_ws.adapters.base.StorageAdaptor`,
      :class:`~eva_ws.translation.translator.IdentifierTranslator`

Side Effects:
    - One adaptor call per search

Thread Safety:
    - Thread-safe: no state is kept between searches; the result is a pure
      function of the inputs and the adaptor contents

Example:
    >>> service = CallSetSearchService(adaptors, translator, species="hsapiens_grch37")
    >>> service.expand_identifiers(["ERZ017134"])
    ['ERZ017134', '52']
"""

# ==============================================================================
# IMPORTS
# ==============================================================================

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any

import structlog

from eva_ws.adapters.registry import AdaptorRegistry
from eva_ws.models.ga4gh import CallSet, SearchCallSetsResponse
from eva_ws.translation.translator import FILE_ID_FIELD, IdentifierTranslator
from eva_ws.utils.errors import MissingIdentifiersError, ValidationError

from .adaptor_calls import call_adaptor
from .pagination import PageWindow

logger = structlog.get_logger(__name__)

SAMPLES_FIELD = "samples"
DEFAULT_PAGE_SIZE = 10


# ==============================================================================
# HELPER FUNCTIONS
# ==============================================================================


def _row_samples(row: Any) -> tuple[str | None, list[str]]:
    """Return ``(file id, sample names)`` for one adaptor row.

    Rows are either mappings carrying their own ``fileId`` and ``samples`` or
    bare sequences of sample names, which are matched to identifiers by
    position.
    """
    if isinstance(row, Mapping):
        file_id = row.get(FILE_ID_FIELD)
        samples = [str(sample) for sample in row.get(SAMPLES_FIELD) or ()]
        return (str(file_id) if file_id is not None else None), samples
    return None, [str(sample) for sample in row]


def build_call_sets(
    display_ids: Sequence[str],
    rows: Sequence[Any],
    *,
    label: Callable[[str], str] = str,
) -> list[CallSet]:
    """Group sample names into call sets, keeping first-seen order.

    ``label`` maps a file id carried by a row to its display spelling; rows
    without one take the display id at the same position.
    """
    grouped: dict[str, list[str]] = {}
    for position, row in enumerate(rows):
        file_id, samples = _row_samples(row)
        if file_id is not None:
            file_id = label(file_id)
        elif position < len(display_ids):
            file_id = display_ids[position]
        else:
            break
        for sample in samples:
            variant_sets = grouped.setdefault(sample, [])
            if file_id not in variant_sets:
                variant_sets.append(file_id)
    return [
        CallSet(id=sample, name=sample, sample_id=sample, variant_set_ids=variant_sets)
        for sample, variant_sets in grouped.items()
    ]


# ==============================================================================
# SERVICE IMPLEMENTATION
# ==============================================================================


class CallSetSearchService:
    """Paginated search of the samples recorded for a list of files."""

    def __init__(
        self,
        adaptors: AdaptorRegistry,
        translator: IdentifierTranslator,
        *,
        species: str,
        default_page_size: int = DEFAULT_PAGE_SIZE,
    ) -> None:
        self._adaptors = adaptors
        self._translator = translator
        self.species = species
        self.default_page_size = default_page_size

    def parse_identifiers(self, variant_set_ids: str | Sequence[str] | None) -> list[str]:
        if variant_set_ids is None or len(variant_set_ids) == 0:
            raise MissingIdentifiersError("The 'variantSetIds' argument must not be empty")
        raw = variant_set_ids if isinstance(variant_set_ids, str) else ",".join(variant_set_ids)
        identifiers = [identifier for identifier in raw.split(",") if identifier]
        if not identifiers:
            raise MissingIdentifiersError(
                "Please provide at least one variant set to search for"
            )
        return identifiers

    def expand_identifiers(self, identifiers: Sequence[str]) -> list[str]:
        """Append the legacy numeric id after every known accession.

        Legacy ids are not expanded. Order is preserved and duplicates are
        kept, so the alias of input ``i`` always follows it directly.
        """
        expanded: list[str] = []
        for identifier in identifiers:
            expanded.append(identifier)
            alias = self._translator.file_legacy_alias(identifier)
            if alias is not None:
                expanded.append(alias)
        return expanded

    def display_identifiers(self, identifiers: Sequence[str]) -> list[str]:
        return [self._translator.translate_file_id(identifier) for identifier in identifiers]

    def _page_window(self, page_token: str | None, page_size: int | None) -> PageWindow:
        size = self.default_page_size if page_size is None else page_size
        if size <= 0:
            raise ValidationError(f"Parameter 'pageSize' must be positive: '{size}'")
        return PageWindow.from_token(page_token, size)

    async def search(
        self,
        variant_set_ids: str | Sequence[str] | None,
        *,
        page_token: str | None = None,
        page_size: int | None = None,
        options: Mapping[str, Any] | None = None,
    ) -> SearchCallSetsResponse:
        identifiers = self.parse_identifiers(variant_set_ids)
        window = self._page_window(page_token, page_size)
        adaptor = self._adaptors.get(self.species)

        expanded = self.expand_identifiers(identifiers)
        query_options = {**dict(options or {}), "skip": window.skip, "limit": window.size}
        result = await call_adaptor(
            "get_samples_by_sources", adaptor.get_samples_by_sources, expanded, query_options
        )

        call_sets = build_call_sets(
            self.display_identifiers(expanded),
            result.rows,
            label=self._translator.translate_file_id,
        )
        next_page_token = window.next_token(result.num_total_results or 0)
        logger.info(
            "callsets.search",
            requested=len(identifiers),
            searched=len(expanded),
            page=window.index,
            page_size=window.size,
            total=result.num_total_results,
            next_page_token=next_page_token,
        )
        return SearchCallSetsResponse(call_sets=call_sets, next_page_token=next_page_token)


__all__ = ["DEFAULT_PAGE_SIZE", "CallSetSearchService", "build_call_sets"]
