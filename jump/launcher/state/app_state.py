"""Application Shell State Management.

Holds the navigation stack, toast history and status line. Controllers never
touch the UI directly; they publish events, this state folds them in and the
Flet shell re-renders from it.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from jump.shared.core import events
from jump.shared.core.event_bus import EventBus, EventPayload

logger = logging.getLogger(__name__)

StateListener = Callable[[str, Any], None]

MAX_TOASTS = 50


@dataclass
class NavEntry:
    """One view on the navigation stack."""

    view: str
    controller: Any = None
    pushed_at: float = field(default_factory=time.time)


class AppState:
    """State for the application shell.

    Listeners are called synchronously with ``(change, data)`` where change is
    one of ``"nav-push"``, ``"nav-pop"``, ``"toast"``, ``"status"`` or
    ``"url-open"``.
    """

    def __init__(self, event_bus: EventBus) -> None:
        self.bus = event_bus

        # Navigation: the list view is always at the bottom
        self.nav_stack: List[NavEntry] = [NavEntry(events.VIEW_ITEM_LIST)]

        self.toasts: List[Dict[str, Any]] = []
        self.status_text: str = "Ready"
        self.is_ready: bool = False

        self._listeners: List[StateListener] = []
        self._started = False

    async def initialize(self) -> None:
        """Bind to EventBus events. Safe to call more than once."""
        if self._started:
            return

        await self.bus.subscribe(events.TOPIC_NAV_PUSH, self._handle_nav_push)
        await self.bus.subscribe(events.TOPIC_NAV_POP, self._handle_nav_pop)
        await self.bus.subscribe(events.TOPIC_TOAST_SHOW, self._handle_toast)
        await self.bus.subscribe(events.TOPIC_STATUS_TEXT, self._handle_status_text)
        await self.bus.subscribe(events.TOPIC_URL_OPEN, self._handle_url_open)

        self._started = True
        self.is_ready = True

    # --- Listeners ---

    def add_listener(self, listener: StateListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: StateListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self, change: str, data: Any = None) -> None:
        for listener in list(self._listeners):
            try:
                listener(change, data)
            except Exception as e:
                logger.error(f"Error in app state listener for '{change}': {e}")

    # --- Public Actions ---

    @property
    def current_view(self) -> NavEntry:
        return self.nav_stack[-1]

    async def publish(self, topic: str, payload: EventPayload) -> None:
        await self.bus.publish(topic, payload)

    async def push_status(self, text: str) -> None:
        await self.publish(events.TOPIC_STATUS_TEXT, events.create_status_text_event(text))

    async def pop_view(self) -> None:
        """Return to the previous view, as the back button does."""
        await self.publish(events.TOPIC_NAV_POP, events.create_nav_pop_event(self.current_view.view))

    # --- Event Handlers ---

    async def _handle_nav_push(self, payload: EventPayload) -> None:
        view = payload.get("view")
        if not view:
            logger.warning("Ignoring nav.push without a view")
            return

        entry = NavEntry(view=str(view), controller=payload.get("controller"))
        self.nav_stack.append(entry)
        logger.debug(f"Pushed view '{entry.view}' (depth {len(self.nav_stack)})")
        self._notify("nav-push", entry)

    async def _handle_nav_pop(self, payload: EventPayload) -> None:
        if len(self.nav_stack) <= 1:
            logger.debug("Ignoring nav.pop on the root view")
            return

        expected: Optional[str] = payload.get("view")
        if expected and self.current_view.view != expected:
            logger.debug(f"Ignoring stale nav.pop for '{expected}' (top is '{self.current_view.view}')")
            return

        entry = self.nav_stack.pop()
        logger.debug(f"Popped view '{entry.view}' (depth {len(self.nav_stack)})")
        self._notify("nav-pop", entry)

    async def _handle_toast(self, payload: EventPayload) -> None:
        title = payload.get("title")
        if not title:
            return

        self.toasts.append(dict(payload))
        del self.toasts[:-MAX_TOASTS]
        self._notify("toast", payload)

    async def _handle_status_text(self, payload: EventPayload) -> None:
        text = payload.get("text")
        if text:
            self.status_text = str(text)
            self._notify("status", self.status_text)

    async def _handle_url_open(self, payload: EventPayload) -> None:
        if payload.get("url"):
            logger.debug(f"Open requested: {events.describe_event(payload)}")
            self._notify("url-open", payload)
