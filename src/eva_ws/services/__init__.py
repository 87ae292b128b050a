"""Service layer composing adaptors, translation and pagination."""

from .callsets import CallSetSearchService
from .health import HealthService
from .pagination import PageWindow, decode_page_token
from .studies import StudyService

__all__ = [
    "CallSetSearchService",
    "HealthService",
    "PageWindow",
    "StudyService",
    "decode_page_token",
]
