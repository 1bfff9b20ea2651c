"""
Jump Shared Kernel
==================

Business logic and infrastructure shared by the Jump launcher app.

Architecture:
- core: EventBus, configuration, service registry
- infrastructure: Technical adapters (DuckDB key/value storage)
- domain: Business logic (items, item store)
"""

__version__ = "0.1.0"

__all__ = []
