"""
Jump Theme - Centralized color palette and icon glyph mapping.

Color Philosophy:
- Cyan accent for interactive elements
- Teal for success, red for failure
- Tinted grays for text hierarchy
"""

# =============================================================================
# PRIMARY ACCENT COLORS
# =============================================================================
CYAN_PRIMARY = "#48b0f7"       # Main accent, icons, highlights
TEAL_PRIMARY = "#4ECDC4"       # Success
RED_PRIMARY = "#FF6B6B"        # Errors

# =============================================================================
# TEXT COLORS
# =============================================================================
TEXT_BRIGHT = "#AFC5D6"
TEXT_MEDIUM = "#6E879B"
TEXT_MUTED = "#8A9BA8"

# =============================================================================
# BACKGROUNDS
# =============================================================================
BG_PAGE = "#000000"
BG_CARD = "rgba(20,20,20,0.98)"
BG_SELECTED = "rgba(72,176,247,0.15)"

# =============================================================================
# TOASTS
# =============================================================================
TOAST_SUCCESS_BG = "#1F4F4B"
TOAST_FAILURE_BG = "#5A2323"


def get_toast_color(style: str) -> str:
    """Background color for a toast style."""
    return TOAST_FAILURE_BG if style == "failure" else TOAST_SUCCESS_BG


# =============================================================================
# ICON GLYPHS
# =============================================================================
# Stored icon name -> Flet ``Icons`` member name
ICON_GLYPHS = {
    "app-window-16": "WEB_ASSET",
    "bell-16": "NOTIFICATIONS",
    "book-16": "MENU_BOOK",
    "bookmark-16": "BOOKMARK",
    "bug-16": "BUG_REPORT",
    "calendar-16": "CALENDAR_MONTH",
    "cart-16": "SHOPPING_CART",
    "chat-16": "CHAT",
    "cloud-16": "CLOUD",
    "code-16": "CODE",
    "desktop-16": "DESKTOP_WINDOWS",
    "document-16": "DESCRIPTION",
    "envelope-16": "MAIL",
    "folder-16": "FOLDER",
    "gear-16": "SETTINGS",
    "globe-16": "PUBLIC",
    "heart-16": "FAVORITE",
    "house-16": "HOME",
    "image-16": "IMAGE",
    "key-16": "KEY",
    "link-16": "LINK",
    "lock-16": "LOCK",
    "map-16": "MAP",
    "music-16": "MUSIC_NOTE",
    "network-16": "LAN",
    "pencil-16": "EDIT",
    "person-16": "PERSON",
    "plus-circle-16": "ADD_CIRCLE",
    "star-16": "STAR",
    "terminal-16": "TERMINAL",
    "video-16": "VIDEOCAM",
}
FALLBACK_GLYPH = "LINK"


def get_icon_glyph(icon_name: str) -> str:
    """Flet icon member name for a stored icon name; unknown names fall back to a link glyph."""
    return ICON_GLYPHS.get(icon_name, FALLBACK_GLYPH)
