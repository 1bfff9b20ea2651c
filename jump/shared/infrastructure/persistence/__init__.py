"""Persistence adapters (DuckDB)."""

from jump.shared.infrastructure.persistence.kv_store import (
    DuckDBKeyValueStore,
    KeyValueStore,
    StorageError,
)

__all__ = ["DuckDBKeyValueStore", "KeyValueStore", "StorageError"]
