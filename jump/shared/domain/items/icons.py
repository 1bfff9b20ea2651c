"""Symbolic icon names offered by the editor.

Stored items reference icons by these names. Names outside this set are still
accepted and round-tripped untouched.
"""

DEFAULT_ICON = "cloud-16"

ICON_NAMES = (
    "app-window-16",
    "bell-16",
    "book-16",
    "bookmark-16",
    "bug-16",
    "calendar-16",
    "cart-16",
    "chat-16",
    "cloud-16",
    "code-16",
    "desktop-16",
    "document-16",
    "envelope-16",
    "folder-16",
    "gear-16",
    "globe-16",
    "heart-16",
    "house-16",
    "image-16",
    "key-16",
    "link-16",
    "lock-16",
    "map-16",
    "music-16",
    "network-16",
    "pencil-16",
    "person-16",
    "plus-circle-16",
    "star-16",
    "terminal-16",
    "video-16",
)


def icon_label(name: str) -> str:
    """Human readable label for an icon name, e.g. ``plus-circle-16`` -> ``Plus Circle``."""
    stem = name[:-3] if name.endswith("-16") else name
    return " ".join(part.capitalize() for part in stem.split("-") if part)
