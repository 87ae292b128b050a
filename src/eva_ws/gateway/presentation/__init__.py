"""Request normalisation and response rendering for the gateway."""

from .envelope import ResponseEnvelope, ResponseEnvelopeBuilder
from .query_options import QueryOptions, QueryOptionsBuilder

__all__ = ["QueryOptions", "QueryOptionsBuilder", "ResponseEnvelope", "ResponseEnvelopeBuilder"]
