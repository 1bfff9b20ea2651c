"""Global State Store - Service Locator Pattern.

Provides centralized access to the shell state and the item store from any
UI component.
"""

from __future__ import annotations

from typing import Optional

from .app_state import AppState
from jump.shared.core.event_bus import EventBus
from jump.shared.core.configuration import SystemConfig
from jump.shared.domain.items.store import ItemStore


class Store:
    """Global state store for the launcher application.

    Usage:
        # During app initialization
        Store.initialize(event_bus, item_store, config)

        # In any UI component
        store = Store.get()
        await store.items.load()
    """

    _instance: Optional['Store'] = None

    def __init__(
        self,
        event_bus: EventBus,
        item_store: ItemStore,
        config: Optional[SystemConfig] = None,
    ) -> None:
        """Initialize store.

        Note: Do not call directly. Use Store.initialize() instead.
        """
        self.app = AppState(event_bus)
        self.items = item_store
        self.config = config or SystemConfig()

    @property
    def bus(self) -> EventBus:
        return self.app.bus

    @classmethod
    def initialize(
        cls,
        event_bus: EventBus,
        item_store: ItemStore,
        config: Optional[SystemConfig] = None,
    ) -> 'Store':
        """Initialize the global store instance.

        Raises:
            RuntimeError: If store is already initialized
        """
        if cls._instance is not None:
            raise RuntimeError("Store already initialized!")

        cls._instance = cls(event_bus, item_store, config)
        return cls._instance

    @classmethod
    def get(cls) -> 'Store':
        """Get the global store instance.

        Raises:
            RuntimeError: If store has not been initialized
        """
        if cls._instance is None:
            raise RuntimeError("Store not initialized! Call Store.initialize() first.")
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset the store instance. Used by tests."""
        cls._instance = None
