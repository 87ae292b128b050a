"""GA4GH call set search models.

Field names follow the GA4GH v0.5 schema on the wire (camelCase) while the
Python attributes stay snake_case.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class _GA4GHModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class CallSet(_GA4GHModel):
    """A sample together with the variant sets (files) it appears in."""

    id: str
    name: str
    variant_set_ids: list[str] = Field(default_factory=list, alias="variantSetIds")
    sample_id: str = Field(alias="sampleId")
    created: int = -1
    updated: int = -1
    info: dict[str, list[str]] = Field(default_factory=dict)


class SearchCallSetsRequest(_GA4GHModel):
    variant_set_ids: list[str] = Field(default_factory=list, alias="variantSetIds")
    page_token: str | None = Field(default=None, alias="pageToken")
    page_size: int | None = Field(default=None, alias="pageSize")


class SearchCallSetsResponse(_GA4GHModel):
    call_sets: list[CallSet] = Field(default_factory=list, alias="callSets")
    next_page_token: str | None = Field(default=None, alias="nextPageToken")

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


__all__ = ["CallSet", "SearchCallSetsRequest", "SearchCallSetsResponse"]
