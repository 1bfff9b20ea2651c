"""State management for the Jump launcher.

Architecture:
- AppState: shell state (navigation stack, toasts, status)
- Store: service locator for the shell state and the item store
"""

from .app_state import AppState, NavEntry
from .store import Store

__all__ = ["AppState", "NavEntry", "Store"]
