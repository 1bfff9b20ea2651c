"""Item records and pure list transformations.

Every mutation of the bookmark list is expressed as a function from the
freshly loaded list to a new list. Nothing here touches storage.
"""

from __future__ import annotations

from typing import Any, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, TypeAdapter

from .icons import DEFAULT_ICON


class EmptyFieldError(ValueError):
    """Title or URL was blank after trimming."""

    def __init__(self, fields: List[str]):
        self.fields = fields
        super().__init__(f"Empty field(s): {', '.join(fields)}")


class Item(BaseModel):
    """A single bookmark."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    url: str
    icon: str


ItemList = List[Item]

ITEM_LIST_ADAPTER: TypeAdapter[ItemList] = TypeAdapter(ItemList)


class ItemDraft(BaseModel):
    """Field values submitted from the editor form."""

    model_config = ConfigDict(frozen=True)

    title: str
    url: str
    icon: str

    @classmethod
    def from_values(cls, values: Mapping[str, Any], default_icon: str = DEFAULT_ICON) -> "ItemDraft":
        """Build a draft from raw form values, trimming title and url.

        Raises:
            EmptyFieldError: If title or url is blank.
        """
        title = str(values.get("title") or "").strip()
        url = str(values.get("url") or "").strip()
        icon = values.get("icon") or default_icon

        missing = [name for name, value in (("title", title), ("url", url)) if not value]
        if missing:
            raise EmptyFieldError(missing)

        return cls(title=title, url=url, icon=str(icon))


def append_item(items: ItemList, item: Item) -> ItemList:
    """Return ``items`` with ``item`` at the end."""
    return [*items, item]


def replace_item(items: ItemList, original: Item, draft: ItemDraft) -> ItemList:
    """Overlay ``draft`` onto the entry whose id matches ``original``.

    The id is kept; title, url and icon come from the draft. When no entry
    matches, the list is returned unchanged.
    """
    updated = original.model_copy(update=draft.model_dump())
    return [updated if item.id == original.id else item for item in items]


def remove_item(items: ItemList, item_id: str) -> ItemList:
    """Return ``items`` without the entry whose id is ``item_id``."""
    return [item for item in items if item.id != item_id]


def find_item(items: ItemList, item_id: str) -> Optional[Item]:
    for item in items:
        if item.id == item_id:
            return item
    return None


def unique_by_id(items: ItemList) -> ItemList:
    """Drop later entries that repeat an earlier id."""
    seen: set[str] = set()
    result: ItemList = []
    for item in items:
        if item.id in seen:
            continue
        seen.add(item.id)
        result.append(item)
    return result
