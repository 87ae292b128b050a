"""Page token handling for token paginated searches.

Page tokens are opaque to clients but are simply the decimal page index.
Anything that is not a plain run of digits (absent, empty, signed,
fractional, non-numeric) decodes to the first page instead of failing.
"""

from __future__ import annotations

from dataclasses import dataclass

FIRST_PAGE = 0


def decode_page_token(token: str | None) -> int:
    if token and token.isascii() and token.isdigit():
        return int(token)
    return FIRST_PAGE


def encode_page_token(index: int) -> str:
    return str(index)


@dataclass(frozen=True, slots=True)
class PageWindow:
    """One page of ``size`` rows starting at page ``index``."""

    index: int
    size: int

    @classmethod
    def from_token(cls, token: str | None, size: int) -> PageWindow:
        return cls(index=decode_page_token(token), size=size)

    @property
    def skip(self) -> int:
        return self.index * self.size

    @property
    def end(self) -> int:
        return self.skip + self.size

    def next_token(self, total_results: int) -> str | None:
        """Token of the following page, or ``None`` when this page is the last.

        A token is issued while rows remain beyond this page's end boundary,
        regardless of how many rows the current page actually returned.
        """
        if self.end < total_results:
            return encode_page_token(self.index + 1)
        return None


__all__ = ["FIRST_PAGE", "PageWindow", "decode_page_token", "encode_page_token"]
