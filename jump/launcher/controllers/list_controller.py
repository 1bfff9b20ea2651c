"""Item list controller - the presenter behind the bookmark list view."""

from __future__ import annotations

import logging
from typing import Callable, List, Optional

from jump.shared.core import events
from jump.shared.core.event_bus import EventBus, EventPayload
from jump.shared.domain.items import DEFAULT_ICON, Item, ItemList, ItemStore, find_item, remove_item
from jump.shared.infrastructure.persistence import StorageError

from .editor_controller import ItemEditorController

logger = logging.getLogger(__name__)


class ItemListController:
    """Observes the stored list and turns list actions into store mutations.

    The list shown is whatever the last completed load returned. While a
    reload is running the previous items stay visible and ``is_loading`` is
    set. Every saved mutation anywhere publishes ``items.changed``, which
    makes each started controller reload.
    """

    EMPTY_TITLE = "No items yet"
    EMPTY_DESCRIPTION = "Press Ctrl+N to add a new one"

    def __init__(
        self,
        item_store: ItemStore,
        event_bus: EventBus,
        default_icon: str = DEFAULT_ICON,
    ):
        self.item_store = item_store
        self.bus = event_bus
        self.default_icon = default_icon

        self.items: ItemList = []
        self.is_loading = True
        self.has_loaded = False
        self.selected_id: Optional[str] = None

        self._load_generation = 0
        self._listeners: List[Callable[[str], None]] = []
        self._started = False

    # --- Lifecycle ---

    async def start(self) -> None:
        """Subscribe to store changes and run the initial load."""
        if not self._started:
            await self.bus.subscribe(events.TOPIC_ITEMS_CHANGED, self._on_items_changed)
            self._started = True
        await self.revalidate()

    async def stop(self) -> None:
        if self._started:
            await self.bus.unsubscribe(events.TOPIC_ITEMS_CHANGED, self._on_items_changed)
            self._started = False

    # --- View state ---

    @property
    def show_empty_state(self) -> bool:
        return not self.is_loading and not self.items

    @property
    def selected_item(self) -> Optional[Item]:
        if self.selected_id is None:
            return None
        return find_item(self.items, self.selected_id)

    def select(self, item_id: Optional[str]) -> None:
        self.selected_id = item_id
        self._notify("selection")

    def add_listener(self, listener: Callable[[str], None]) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: Callable[[str], None]) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self, change: str) -> None:
        for listener in list(self._listeners):
            try:
                listener(change)
            except Exception as e:
                logger.error(f"Error in item list listener for '{change}': {e}")

    async def _toast(self, style: events.ToastStyle, title: str, message: Optional[str] = None) -> None:
        await self.bus.publish(events.TOPIC_TOAST_SHOW, events.create_toast_event(style, title, message))

    # --- Loading ---

    async def revalidate(self) -> ItemList:
        """Re-read the list from the store.

        Only the most recently started load is applied, so an older load that
        finishes late cannot overwrite newer data.
        """
        self._load_generation += 1
        generation = self._load_generation
        self.is_loading = True
        self._notify("loading")

        try:
            items = await self.item_store.load()
        except StorageError as e:
            logger.error(f"Failed to load items: {e}")
            if generation == self._load_generation:
                self.is_loading = False
                self._notify("loading")
            await self._toast(events.TOAST_FAILURE, "Failed to load items", str(e))
            return self.items

        if generation != self._load_generation:
            logger.debug("Discarding result of a superseded load")
            return self.items

        self.items = items
        self.has_loaded = True
        self.is_loading = False
        if self.selected_id is not None and self.selected_item is None:
            self.selected_id = None
        logger.debug(f"Loaded {len(items)} item(s)")
        self._notify("items")
        return self.items

    async def _on_items_changed(self, payload: EventPayload) -> None:
        await self.revalidate()

    # --- Actions ---

    def _make_editor(self, item: Optional[Item]) -> ItemEditorController:
        return ItemEditorController(
            self.item_store,
            self.bus,
            item=item,
            on_complete=self.revalidate,
            default_icon=self.default_icon,
        )

    async def on_add(self) -> ItemEditorController:
        """Open the editor in create mode."""
        editor = self._make_editor(None)
        await self.bus.publish(events.TOPIC_NAV_PUSH, events.create_nav_push_event(events.VIEW_ITEM_EDITOR, editor))
        return editor

    async def on_edit(self, item: Item) -> ItemEditorController:
        """Open the editor in update mode, pre-filled from ``item``."""
        editor = self._make_editor(item)
        await self.bus.publish(events.TOPIC_NAV_PUSH, events.create_nav_push_event(events.VIEW_ITEM_EDITOR, editor))
        return editor

    async def on_delete(self, item_id: str) -> bool:
        """Remove the item with ``item_id`` from freshly loaded state.

        An id that is no longer stored saves the list unchanged.
        """
        try:
            items = await self.item_store.load()
            new_items = remove_item(items, item_id)
            await self.item_store.save(new_items)
        except StorageError as e:
            logger.error(f"Failed to delete item {item_id}: {e}")
            await self._toast(events.TOAST_FAILURE, "Failed to delete item", str(e))
            return False

        if len(new_items) == len(items):
            logger.info(f"Delete of {item_id} matched nothing; list saved unchanged")
        else:
            logger.info(f"Deleted item {item_id}")

        await self.bus.publish(
            events.TOPIC_ITEMS_CHANGED,
            events.create_items_changed_event("delete", [item_id], len(new_items)),
        )
        await self.revalidate()
        await self._toast(events.TOAST_SUCCESS, "Item deleted")
        return True

    async def on_open(self, item: Item) -> None:
        """Hand the item's URL to the host link opener."""
        await self.bus.publish(events.TOPIC_URL_OPEN, events.create_url_open_event(item.url, item.id))
