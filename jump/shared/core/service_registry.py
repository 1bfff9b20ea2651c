"""Process-exit cleanup for services opened at startup."""

from __future__ import annotations

import atexit
import logging
from typing import Callable, List

logger = logging.getLogger(__name__)

# Global cleanup management
_cleanup_registered = False
_cleanup_handlers: List[Callable[[], None]] = []


def register_cleanup_handler(handler: Callable[[], None]) -> None:
    """Register a cleanup handler to be called on application exit."""
    global _cleanup_registered
    _cleanup_handlers.append(handler)
    if not _cleanup_registered:
        atexit.register(run_cleanup_handlers)
        _cleanup_registered = True
        logger.debug("Registered atexit cleanup handler")


def run_cleanup_handlers() -> None:
    """Run and forget all registered cleanup handlers, newest first."""
    logger.info("Running application cleanup...")
    while _cleanup_handlers:
        handler = _cleanup_handlers.pop()
        try:
            handler()
        except Exception as e:
            logger.warning(f"Error in cleanup handler: {e}")
    logger.info("Application cleanup completed")
