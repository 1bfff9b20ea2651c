"""
Shared Domain Module
====================

Business logic for bookmark items.
"""

from jump.shared.domain.items import Item, ItemDraft, ItemList, ItemStore

__all__ = ["Item", "ItemDraft", "ItemList", "ItemStore"]
