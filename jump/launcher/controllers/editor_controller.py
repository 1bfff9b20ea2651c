"""Item editor controller - create and update flows behind the form view."""

from __future__ import annotations

import inspect
import logging
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, List, Mapping, Optional, Union

from jump.shared.core import events
from jump.shared.core.event_bus import EventBus
from jump.shared.domain.items import (
    DEFAULT_ICON,
    EmptyFieldError,
    Item,
    ItemDraft,
    ItemStore,
    append_item,
    find_item,
    replace_item,
)
from jump.shared.infrastructure.persistence import StorageError

logger = logging.getLogger(__name__)

CompletionCallback = Callable[[], Union[None, Awaitable[Any]]]


class EditorMode(Enum):
    CREATE = "create"
    UPDATE = "update"


class SubmitOutcome(Enum):
    SAVED = "saved"
    INVALID = "invalid"
    FAILED = "failed"
    IGNORED = "ignored"


class ItemEditorController:
    """Drives one open editor form.

    The mode is Update when an existing item is supplied, Create otherwise.
    A submit that arrives while another one is still in flight, or after a
    successful submit has closed the editor, is ignored.
    """

    MESSAGES = {
        EditorMode.CREATE: ("Item added", "Failed to add item"),
        EditorMode.UPDATE: ("Item updated", "Failed to update item"),
    }
    EMPTY_FIELD_MESSAGE = "Title and URL cannot be empty"

    def __init__(
        self,
        item_store: ItemStore,
        event_bus: EventBus,
        item: Optional[Item] = None,
        on_complete: Optional[CompletionCallback] = None,
        default_icon: str = DEFAULT_ICON,
    ):
        self.item_store = item_store
        self.bus = event_bus
        self.item = item
        self.on_complete = on_complete
        self.default_icon = default_icon

        self.is_loading = False
        self.is_closed = False
        self._listeners: List[Callable[[str], None]] = []

    @property
    def mode(self) -> EditorMode:
        return EditorMode.UPDATE if self.item is not None else EditorMode.CREATE

    @property
    def initial_values(self) -> Dict[str, str]:
        """Values the form fields start with."""
        if self.item is None:
            return {"title": "", "url": "", "icon": self.default_icon}
        return {"title": self.item.title, "url": self.item.url, "icon": self.item.icon}

    def add_listener(self, listener: Callable[[str], None]) -> None:
        self._listeners.append(listener)

    def _set_loading(self, value: bool) -> None:
        self.is_loading = value
        for listener in list(self._listeners):
            listener("loading")

    async def _toast(self, style: events.ToastStyle, title: str, message: Optional[str] = None) -> None:
        await self.bus.publish(events.TOPIC_TOAST_SHOW, events.create_toast_event(style, title, message))

    async def submit(self, values: Mapping[str, Any]) -> SubmitOutcome:
        """Validate ``values`` and write them through load -> mutate -> save."""
        if self.is_closed:
            logger.debug("Ignoring submit on a closed editor")
            return SubmitOutcome.IGNORED
        if self.is_loading:
            logger.debug("Ignoring submit while a previous submit is in flight")
            return SubmitOutcome.IGNORED

        success_message, failure_message = self.MESSAGES[self.mode]

        try:
            draft = ItemDraft.from_values(values, self.default_icon)
        except EmptyFieldError as e:
            logger.info(f"Rejected {self.mode.value} submit: {e}")
            await self._toast(events.TOAST_FAILURE, self.EMPTY_FIELD_MESSAGE)
            return SubmitOutcome.INVALID

        self._set_loading(True)
        try:
            items = await self.item_store.load()
            if self.mode is EditorMode.CREATE:
                saved = Item(id=self.item_store.generate_id(), **draft.model_dump())
                new_items = append_item(items, saved)
            else:
                saved = self.item
                if find_item(items, self.item.id) is None:
                    logger.warning(f"Item {self.item.id} is gone from the store; saving the list unchanged")
                new_items = replace_item(items, self.item, draft)
            await self.item_store.save(new_items)
        except StorageError as e:
            logger.error(f"Editor {self.mode.value} failed: {e}")
            await self._toast(events.TOAST_FAILURE, failure_message, str(e))
            return SubmitOutcome.FAILED
        finally:
            self._set_loading(False)

        logger.info(f"Editor {self.mode.value} saved item {saved.id}")
        await self._toast(events.TOAST_SUCCESS, success_message)
        await self.bus.publish(
            events.TOPIC_ITEMS_CHANGED,
            events.create_items_changed_event(
                "add" if self.mode is EditorMode.CREATE else "update",
                [saved.id],
                len(new_items),
            ),
        )

        if self.on_complete is not None:
            result = self.on_complete()
            if inspect.isawaitable(result):
                await result

        await self.close()
        return SubmitOutcome.SAVED

    async def close(self) -> None:
        """Leave the editor view."""
        if self.is_closed:
            return
        self.is_closed = True
        await self.bus.publish(events.TOPIC_NAV_POP, events.create_nav_pop_event(events.VIEW_ITEM_EDITOR))
