"""Canonical event definitions for Jump."""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from .event_bus import EventPayload

# Store events
TOPIC_ITEMS_CHANGED = "items.changed"

# UI chrome events
TOPIC_TOAST_SHOW = "toast.show"
TOPIC_NAV_PUSH = "nav.push"
TOPIC_NAV_POP = "nav.pop"
TOPIC_URL_OPEN = "url.open"
TOPIC_STATUS_TEXT = "status.text"

ToastStyle = Literal["success", "failure"]

TOAST_SUCCESS: ToastStyle = "success"
TOAST_FAILURE: ToastStyle = "failure"

# Views that can be pushed on the navigation stack
VIEW_ITEM_LIST = "item_list"
VIEW_ITEM_EDITOR = "item_editor"


def create_items_changed_event(
    action: Literal["add", "update", "delete"],
    item_ids: List[str],
    count: int,
) -> EventPayload:
    """Create an items changed event.

    Args:
        action: Mutation that produced the new list
        item_ids: Ids touched by the mutation
        count: Number of items in the list that was saved
    """
    return {
        "action": action,
        "item_ids": list(item_ids),
        "count": count,
    }


def create_toast_event(
    style: ToastStyle,
    title: str,
    message: Optional[str] = None,
) -> EventPayload:
    """Create a transient toast notification event."""
    import time

    return {
        "style": style,
        "title": title,
        "message": message,
        "ts": time.time(),
    }


def create_nav_push_event(view: str, controller: Any = None) -> EventPayload:
    """Create a navigation push event.

    The controller travels with the event so the shell can build the view
    around the same instance the caller holds.
    """
    return {
        "view": view,
        "controller": controller,
    }


def create_nav_pop_event(view: Optional[str] = None) -> EventPayload:
    """Create a navigation pop event."""
    return {"view": view}


def create_url_open_event(url: str, item_id: Optional[str] = None) -> EventPayload:
    """Create a link open request."""
    return {
        "url": url,
        "item_id": item_id,
    }


def create_status_text_event(text: str) -> EventPayload:
    """Create a status text update event."""
    return {
        "text": text,
    }


def describe_event(payload: Dict[str, Any]) -> str:
    """Short human readable form of a payload for debug logs."""
    return ", ".join(f"{key}={value!r}" for key, value in payload.items() if key != "controller")
