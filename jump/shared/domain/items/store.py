"""Item Store - the single read and write path for the bookmark list.

The whole list lives under one key as a JSON array. Callers mutate it by
loading fresh state, computing a new list and saving it back:

    items = await store.load()
    await store.save(append_item(items, new_item))

There is no version check. Two sequences that overlap resolve as
last-writer-wins.
"""

from __future__ import annotations

import json
import logging
import uuid
from typing import Optional

from pydantic import ValidationError

from jump.shared.infrastructure.persistence.kv_store import KeyValueStore, StorageError

from .models import ITEM_LIST_ADAPTER, ItemList, unique_by_id

logger = logging.getLogger(__name__)

ITEMS_KEY = "items"


class ItemStore:
    """Loads and saves the bookmark list through a key/value backend."""

    def __init__(self, backend: KeyValueStore, key: str = ITEMS_KEY):
        self.backend = backend
        self.key = key

    async def load(self) -> ItemList:
        """Read the persisted list.

        A missing or unreadable blob is an empty list. Backend failures are
        not hidden: returning an empty list there would let the next save
        wipe the stored bookmarks.

        Raises:
            StorageError: If the backend cannot be read.
        """
        raw: Optional[str] = await self.backend.get_item(self.key)
        if raw is None:
            logger.debug(f"No data under '{self.key}', starting with an empty list")
            return []

        try:
            items = ITEM_LIST_ADAPTER.validate_python(json.loads(raw))
        except (json.JSONDecodeError, ValidationError, TypeError) as e:
            logger.warning(f"Discarding unreadable data under '{self.key}': {e}")
            return []

        unique = unique_by_id(items)
        if len(unique) != len(items):
            logger.warning(f"Dropped {len(items) - len(unique)} item(s) with duplicate ids under '{self.key}'")
        return unique

    async def save(self, items: ItemList) -> None:
        """Write the whole list as one blob.

        Raises:
            StorageError: If the backend cannot be written.
        """
        blob = ITEM_LIST_ADAPTER.dump_json(items).decode("utf-8")
        try:
            await self.backend.set_item(self.key, blob)
        except StorageError:
            logger.error(f"Failed to save {len(items)} item(s) under '{self.key}'")
            raise
        logger.debug(f"Saved {len(items)} item(s) under '{self.key}'")

    @staticmethod
    def generate_id() -> str:
        """Fresh identifier for a new item."""
        return str(uuid.uuid4())
