"""Bookmark items: records, icon names and the item store."""

from .icons import DEFAULT_ICON, ICON_NAMES, icon_label
from .models import (
    EmptyFieldError,
    Item,
    ItemDraft,
    ItemList,
    append_item,
    find_item,
    remove_item,
    replace_item,
    unique_by_id,
)
from .store import ITEMS_KEY, ItemStore

__all__ = [
    "DEFAULT_ICON",
    "ICON_NAMES",
    "icon_label",
    "EmptyFieldError",
    "Item",
    "ItemDraft",
    "ItemList",
    "append_item",
    "find_item",
    "remove_item",
    "replace_item",
    "unique_by_id",
    "ITEMS_KEY",
    "ItemStore",
]
