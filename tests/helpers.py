"""Builders shared by the test modules."""

from __future__ import annotations

from jump.shared.domain.items import Item


def make_item(item_id: str, title: str = "Title", url: str = "https://example.test", icon: str = "cloud-16") -> Item:
    return Item(id=item_id, title=title, url=url, icon=icon)
