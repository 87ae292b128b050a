"""Storage adaptor contract and implementations."""

from .base import QueryResult, StorageAdaptor
from .memory import InMemoryStorageAdaptor
from .registry import AdaptorFactoryRegistry, AdaptorRegistry, factories

__all__ = [
    "AdaptorFactoryRegistry",
    "AdaptorRegistry",
    "InMemoryStorageAdaptor",
    "QueryResult",
    "StorageAdaptor",
    "factories",
]
