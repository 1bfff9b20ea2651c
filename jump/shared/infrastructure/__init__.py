"""
Shared Infrastructure Module
=============================

Technical adapters for external systems (local storage).
"""

# Persistence
from jump.shared.infrastructure.persistence.kv_store import (
    DuckDBKeyValueStore,
    KeyValueStore,
    StorageError,
)

__all__ = [
    # Persistence
    "DuckDBKeyValueStore",
    "KeyValueStore",
    "StorageError",
]
