"""Shared fixtures: in-memory storage, failing and gated backends, event recording."""

from __future__ import annotations

import asyncio
from typing import Dict, List, Optional

import pytest

from jump.shared.core.event_bus import EventBus, EventPayload
from jump.shared.domain.items import ItemStore
from jump.shared.infrastructure.persistence import DuckDBKeyValueStore, StorageError


class FlakyBackend:
    """Wraps a real backend and fails reads or writes on demand."""

    def __init__(self, inner: DuckDBKeyValueStore):
        self.inner = inner
        self.fail_reads = False
        self.fail_writes = False
        self.writes = 0

    async def get_item(self, key: str) -> Optional[str]:
        if self.fail_reads:
            raise StorageError("backend unavailable")
        return await self.inner.get_item(key)

    async def set_item(self, key: str, value: str) -> None:
        if self.fail_writes:
            raise StorageError("backend unavailable")
        self.writes += 1
        await self.inner.set_item(key, value)

    async def remove_item(self, key: str) -> None:
        await self.inner.remove_item(key)


class GatedBackend(FlakyBackend):
    """Holds every write until ``release()`` is called."""

    def __init__(self, inner: DuckDBKeyValueStore):
        super().__init__(inner)
        self.gate = asyncio.Event()
        self.waiting = asyncio.Event()

    def release(self) -> None:
        self.gate.set()

    async def set_item(self, key: str, value: str) -> None:
        self.waiting.set()
        await self.gate.wait()
        await super().set_item(key, value)


class EventRecorder:
    """Collects payloads published on selected topics."""

    def __init__(self) -> None:
        self.events: Dict[str, List[EventPayload]] = {}

    async def attach(self, bus: EventBus, *topics: str) -> "EventRecorder":
        for topic in topics:
            self.events.setdefault(topic, [])

            async def _record(payload: EventPayload, topic: str = topic) -> None:
                self.events[topic].append(payload)

            await bus.subscribe(topic, _record)
        return self

    def titles(self, topic: str) -> List[str]:
        return [payload.get("title") for payload in self.events.get(topic, [])]


@pytest.fixture
def kv_backend():
    backend = DuckDBKeyValueStore(":memory:").connect()
    yield backend
    backend.close()


@pytest.fixture
def flaky_backend(kv_backend):
    return FlakyBackend(kv_backend)


@pytest.fixture
def gated_backend(kv_backend):
    return GatedBackend(kv_backend)


@pytest.fixture
def item_store(flaky_backend):
    return ItemStore(flaky_backend)


@pytest.fixture
def bus():
    return EventBus()


@pytest.fixture
def recorder():
    return EventRecorder()
