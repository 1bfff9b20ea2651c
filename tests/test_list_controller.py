from __future__ import annotations

import asyncio

import pytest

from jump.launcher.controllers import EditorMode, ItemEditorController, ItemListController, SubmitOutcome
from jump.shared.core import events
from tests.helpers import make_item


@pytest.fixture
def controller(item_store, bus):
    return ItemListController(item_store, bus)


@pytest.mark.asyncio
async def test_absent_store_shows_empty_state(controller) -> None:
    assert controller.is_loading
    assert not controller.show_empty_state

    await controller.revalidate()

    assert controller.items == []
    assert controller.has_loaded
    assert controller.show_empty_state
    assert controller.EMPTY_TITLE == "No items yet"


@pytest.mark.asyncio
async def test_start_loads_saved_items(controller, item_store) -> None:
    await item_store.save([make_item("1"), make_item("2")])
    changes = []
    controller.add_listener(changes.append)

    await controller.start()

    assert [item.id for item in controller.items] == ["1", "2"]
    assert not controller.is_loading
    assert changes == ["loading", "items"]
    await controller.stop()


@pytest.mark.asyncio
async def test_delete_removes_only_matching_item(controller, item_store, bus, recorder) -> None:
    await recorder.attach(bus, events.TOPIC_TOAST_SHOW, events.TOPIC_ITEMS_CHANGED)
    await item_store.save([make_item("1"), make_item("2"), make_item("3")])
    await controller.revalidate()

    assert await controller.on_delete("2")
    await bus.wait_until_idle()

    assert [item.id for item in await item_store.load()] == ["1", "3"]
    assert [item.id for item in controller.items] == ["1", "3"]
    assert recorder.titles(events.TOPIC_TOAST_SHOW) == ["Item deleted"]
    assert recorder.events[events.TOPIC_ITEMS_CHANGED][0]["action"] == "delete"


@pytest.mark.asyncio
async def test_delete_of_unknown_id_saves_unchanged(controller, item_store, flaky_backend, bus, recorder) -> None:
    await recorder.attach(bus, events.TOPIC_TOAST_SHOW)
    items = [make_item("1"), make_item("2")]
    await item_store.save(items)
    writes_before = flaky_backend.writes

    assert await controller.on_delete("9")
    await bus.wait_until_idle()

    assert flaky_backend.writes == writes_before + 1
    assert await item_store.load() == items
    assert recorder.titles(events.TOPIC_TOAST_SHOW) == ["Item deleted"]


@pytest.mark.asyncio
async def test_delete_failure_leaves_list_intact(controller, item_store, flaky_backend, bus, recorder) -> None:
    await recorder.attach(bus, events.TOPIC_TOAST_SHOW, events.TOPIC_ITEMS_CHANGED)
    await item_store.save([make_item("1"), make_item("2")])
    await controller.revalidate()
    flaky_backend.fail_writes = True

    assert not await controller.on_delete("1")
    await bus.wait_until_idle()

    assert recorder.titles(events.TOPIC_TOAST_SHOW) == ["Failed to delete item"]
    assert recorder.events[events.TOPIC_TOAST_SHOW][0]["style"] == events.TOAST_FAILURE
    assert recorder.events[events.TOPIC_ITEMS_CHANGED] == []
    assert [item.id for item in controller.items] == ["1", "2"]
    assert [item.id for item in await item_store.load()] == ["1", "2"]


@pytest.mark.asyncio
async def test_on_add_pushes_create_editor(controller, bus, recorder) -> None:
    await recorder.attach(bus, events.TOPIC_NAV_PUSH)

    editor = await controller.on_add()
    await bus.wait_until_idle()

    assert isinstance(editor, ItemEditorController)
    assert editor.mode is EditorMode.CREATE
    assert editor.initial_values == {"title": "", "url": "", "icon": "cloud-16"}
    pushed = recorder.events[events.TOPIC_NAV_PUSH]
    assert [payload["view"] for payload in pushed] == [events.VIEW_ITEM_EDITOR]
    assert pushed[0]["controller"] is editor


@pytest.mark.asyncio
async def test_on_edit_pushes_prefilled_editor(controller, bus, recorder) -> None:
    await recorder.attach(bus, events.TOPIC_NAV_PUSH)
    item = make_item("1", "Docs", "https://x.test", "globe-16")

    editor = await controller.on_edit(item)

    assert editor.mode is EditorMode.UPDATE
    assert editor.initial_values == {"title": "Docs", "url": "https://x.test", "icon": "globe-16"}


@pytest.mark.asyncio
async def test_editor_save_refreshes_the_list(controller, bus) -> None:
    await controller.start()
    editor = await controller.on_add()

    assert await editor.submit({"title": "Docs", "url": "https://x.test"}) is SubmitOutcome.SAVED
    await bus.wait_until_idle()

    assert [item.title for item in controller.items] == ["Docs"]
    assert not controller.show_empty_state
    await controller.stop()


@pytest.mark.asyncio
async def test_other_writers_trigger_reload_through_the_bus(controller, item_store, bus) -> None:
    await controller.start()
    await item_store.save([make_item("1")])

    await bus.publish(events.TOPIC_ITEMS_CHANGED, events.create_items_changed_event("add", ["1"], 1))
    await bus.wait_until_idle()

    assert [item.id for item in controller.items] == ["1"]

    await controller.stop()
    await item_store.save([])
    await bus.publish(events.TOPIC_ITEMS_CHANGED, events.create_items_changed_event("delete", ["1"], 0))
    await bus.wait_until_idle()

    assert [item.id for item in controller.items] == ["1"]


@pytest.mark.asyncio
async def test_failed_reload_keeps_previous_items(controller, item_store, flaky_backend, bus, recorder) -> None:
    await recorder.attach(bus, events.TOPIC_TOAST_SHOW)
    await item_store.save([make_item("1")])
    await controller.revalidate()
    flaky_backend.fail_reads = True

    await controller.revalidate()
    await bus.wait_until_idle()

    assert [item.id for item in controller.items] == ["1"]
    assert not controller.is_loading
    assert recorder.titles(events.TOPIC_TOAST_SHOW) == ["Failed to load items"]


@pytest.mark.asyncio
async def test_superseded_load_is_discarded(controller, item_store, flaky_backend) -> None:
    await item_store.save([make_item("old")])
    gate = asyncio.Event()
    first_read_done = asyncio.Event()
    original_get = flaky_backend.get_item
    calls = 0

    async def slow_first_read(key):
        nonlocal calls
        calls += 1
        value = await original_get(key)
        if calls == 1:
            first_read_done.set()
            await gate.wait()
        return value

    flaky_backend.get_item = slow_first_read

    first = asyncio.create_task(controller.revalidate())
    await first_read_done.wait()
    await item_store.save([make_item("new")])
    await controller.revalidate()
    gate.set()
    await first

    assert [item.id for item in controller.items] == ["new"]


@pytest.mark.asyncio
async def test_selection_is_cleared_when_item_disappears(controller, item_store) -> None:
    await item_store.save([make_item("1"), make_item("2")])
    await controller.revalidate()
    controller.select("2")

    assert controller.selected_item == make_item("2")

    await controller.on_delete("2")

    assert controller.selected_id is None


@pytest.mark.asyncio
async def test_on_open_publishes_url(controller, bus, recorder) -> None:
    await recorder.attach(bus, events.TOPIC_URL_OPEN)

    await controller.on_open(make_item("1", url="https://x.test"))
    await bus.wait_until_idle()

    assert recorder.events[events.TOPIC_URL_OPEN] == [{"url": "https://x.test", "item_id": "1"}]
