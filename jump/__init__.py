"""Jump - a local bookmark launcher."""

from .shared.core.event_bus import EventBus
from .shared.domain.items import Item, ItemStore
from .shared.infrastructure.persistence import DuckDBKeyValueStore, StorageError

__all__ = ["DuckDBKeyValueStore", "EventBus", "Item", "ItemStore", "StorageError"]
