"""
Shared Core Module
==================

Event system, configuration, and service registry.
"""

# Event System
from .event_bus import EventBus, EventPayload
from . import events

# Service Registry
from .service_registry import (
    register_cleanup_handler,
    run_cleanup_handlers,
)

# Configuration
from .configuration import (
    ConfigManager,
    SystemConfig,
    get_config_manager,
    get_config,
    resolve_db_path,
    ValidationLevel,
)

__all__ = [
    # Event System
    "EventBus",
    "EventPayload",
    "events",
    # Service Registry
    "register_cleanup_handler",
    "run_cleanup_handlers",
    # Configuration
    "ConfigManager",
    "SystemConfig",
    "get_config_manager",
    "get_config",
    "resolve_db_path",
    "ValidationLevel",
]
