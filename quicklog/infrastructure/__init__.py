"""Infrastructure services and cross-cutting utilities."""

from quicklog.infrastructure.cache import MemoryCache, make_cache_key
from quicklog.infrastructure.kv_store import JsonFileKeyValueStore, KeyValueStore, MemoryKeyValueStore
from quicklog.infrastructure.logging import StructuredLogger, get_logger, reset_logger

__all__ = [
    "JsonFileKeyValueStore",
    "KeyValueStore",
    "MemoryCache",
    "MemoryKeyValueStore",
    "StructuredLogger",
    "get_logger",
    "make_cache_key",
    "reset_logger",
]
