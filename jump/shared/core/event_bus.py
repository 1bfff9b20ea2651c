"""Async publish/subscribe hub connecting the item store, controllers and shell."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Callable, Dict, Set, Tuple, TypeAlias

EventPayload: TypeAlias = Dict[str, Any]
EventHandler: TypeAlias = Callable[[EventPayload], Awaitable[None]]


class EventBus:
    """Topic based pub/sub.

    Each handler of a publish runs in its own task, so a slow or failing
    subscriber never blocks the publisher or the other subscribers. Handler
    tuples are replaced on every change, which lets ``publish`` read them
    without taking the lock.
    """

    def __init__(self) -> None:
        self._subscribers: Dict[str, Tuple[EventHandler, ...]] = {}
        self._lock = asyncio.Lock()
        self._pending_tasks: Set[asyncio.Task] = set()
        self._logger = logging.getLogger(__name__)

    async def subscribe(self, topic: str, handler: EventHandler) -> None:
        """Register an async handler for a topic. Registering twice is a no-op."""
        async with self._lock:
            handlers = self._subscribers.get(topic, ())
            if handler not in handlers:
                self._subscribers[topic] = handlers + (handler,)

    async def unsubscribe(self, topic: str, handler: EventHandler) -> None:
        async with self._lock:
            handlers = self._subscribers.get(topic, ())
            if handler not in handlers:
                return
            remaining = tuple(h for h in handlers if h != handler)
            if remaining:
                self._subscribers[topic] = remaining
            else:
                del self._subscribers[topic]

    def subscriber_count(self, topic: str) -> int:
        return len(self._subscribers.get(topic, ()))

    @property
    def pending_count(self) -> int:
        """Handler tasks that have been scheduled but not finished."""
        return len(self._pending_tasks)

    async def publish(self, topic: str, payload: EventPayload) -> int:
        """Schedule every handler of ``topic`` and return how many were scheduled.

        Handlers have not run yet when this returns; use :meth:`wait_until_idle`.
        """
        handlers = self._subscribers.get(topic, ())
        if not handlers:
            self._logger.debug(f"No subscribers for topic '{topic}'")
            return 0

        self._logger.debug(f"Publishing '{topic}' to {len(handlers)} handler(s)")
        for handler in handlers:
            task = asyncio.create_task(self._dispatch(topic, handler, payload), name=f"event:{topic}")
            self._pending_tasks.add(task)
            task.add_done_callback(self._pending_tasks.discard)
        return len(handlers)

    async def wait_until_idle(self, timeout: float = 5.0) -> bool:
        """Wait until no handler task is pending.

        Handlers that publish again extend the wait. Returns False if
        ``timeout`` seconds pass first.
        """
        loop = asyncio.get_running_loop()
        deadline = loop.time() + timeout
        while self._pending_tasks:
            remaining = deadline - loop.time()
            if remaining <= 0:
                self._logger.warning(f"Timed out with {len(self._pending_tasks)} event handler(s) still running")
                return False
            await asyncio.wait(set(self._pending_tasks), timeout=remaining)
            await asyncio.sleep(0)
        return True

    async def _dispatch(self, topic: str, handler: EventHandler, payload: EventPayload) -> None:
        handler_name = getattr(handler, "__qualname__", repr(handler))
        try:
            await handler(payload)
        except Exception:
            self._logger.exception(f"Event handler '{handler_name}' failed on topic '{topic}'")

    def clear(self) -> None:
        """Remove all subscriptions."""
        self._subscribers.clear()
