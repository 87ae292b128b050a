"""Domain models exchanged with clients."""

from .ga4gh import CallSet, SearchCallSetsRequest, SearchCallSetsResponse

__all__ = ["CallSet", "SearchCallSetsRequest", "SearchCallSetsResponse"]
