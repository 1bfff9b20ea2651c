from __future__ import annotations

import asyncio

import pytest

from jump.launcher.controllers import EditorMode, ItemEditorController, SubmitOutcome
from jump.shared.core import events
from jump.shared.domain.items import ItemStore
from tests.helpers import make_item

TOPICS = (events.TOPIC_TOAST_SHOW, events.TOPIC_NAV_POP, events.TOPIC_ITEMS_CHANGED)


@pytest.mark.asyncio
async def test_add_into_empty_list(item_store, bus, recorder) -> None:
    await recorder.attach(bus, *TOPICS)
    completed = []
    editor = ItemEditorController(item_store, bus, on_complete=lambda: completed.append(True))

    outcome = await editor.submit({"title": "Docs", "url": "https://x.test", "icon": "globe"})
    await bus.wait_until_idle()

    items = await item_store.load()
    assert outcome is SubmitOutcome.SAVED
    assert editor.mode is EditorMode.CREATE
    assert len(items) == 1
    assert (items[0].title, items[0].url, items[0].icon) == ("Docs", "https://x.test", "globe")
    assert items[0].id
    assert recorder.titles(events.TOPIC_TOAST_SHOW) == ["Item added"]
    assert recorder.events[events.TOPIC_TOAST_SHOW][0]["style"] == events.TOAST_SUCCESS
    assert completed == [True]
    assert editor.is_closed
    assert recorder.events[events.TOPIC_NAV_POP] == [{"view": events.VIEW_ITEM_EDITOR}]
    assert recorder.events[events.TOPIC_ITEMS_CHANGED][0]["item_ids"] == [items[0].id]


@pytest.mark.asyncio
async def test_add_appends_after_existing_items(item_store, bus) -> None:
    await item_store.save([make_item("1"), make_item("2")])
    editor = ItemEditorController(item_store, bus)

    await editor.submit({"title": "Third", "url": "u3"})

    items = await item_store.load()
    assert [item.id for item in items][:2] == ["1", "2"]
    assert items[2].title == "Third"
    assert items[2].icon == "cloud-16"


@pytest.mark.asyncio
async def test_repeated_adds_never_share_an_id(item_store, bus) -> None:
    for index in range(25):
        editor = ItemEditorController(item_store, bus)
        assert await editor.submit({"title": f"Item {index}", "url": f"https://{index}.test"}) is SubmitOutcome.SAVED

    ids = [item.id for item in await item_store.load()]
    assert len(ids) == 25
    assert len(set(ids)) == 25


@pytest.mark.asyncio
async def test_empty_title_leaves_store_untouched(item_store, flaky_backend, bus, recorder, monkeypatch) -> None:
    await recorder.attach(bus, *TOPICS)
    await item_store.save([make_item("1")])
    writes_before = flaky_backend.writes
    generated = []
    monkeypatch.setattr(ItemStore, "generate_id", staticmethod(lambda: generated.append(1) or "new-id"))
    editor = ItemEditorController(item_store, bus)

    outcome = await editor.submit({"title": "", "url": "https://x.test"})
    await bus.wait_until_idle()

    assert outcome is SubmitOutcome.INVALID
    assert flaky_backend.writes == writes_before
    assert [item.id for item in await item_store.load()] == ["1"]
    assert generated == []
    assert recorder.titles(events.TOPIC_TOAST_SHOW) == ["Title and URL cannot be empty"]
    assert recorder.events[events.TOPIC_TOAST_SHOW][0]["style"] == events.TOAST_FAILURE
    assert not editor.is_closed
    assert recorder.events[events.TOPIC_NAV_POP] == []


@pytest.mark.asyncio
async def test_whitespace_url_is_rejected_in_update_mode(item_store, bus) -> None:
    original = make_item("1", "Old", "u1", "i1")
    await item_store.save([original])
    editor = ItemEditorController(item_store, bus, item=original)

    assert await editor.submit({"title": "New", "url": "   ", "icon": "i2"}) is SubmitOutcome.INVALID
    assert await item_store.load() == [original]


@pytest.mark.asyncio
async def test_edit_preserves_identity(item_store, bus, recorder) -> None:
    await recorder.attach(bus, *TOPICS)
    original = make_item("1", "Old", "u1", "i1")
    await item_store.save([make_item("0"), original, make_item("2")])
    editor = ItemEditorController(item_store, bus, item=original)

    assert editor.mode is EditorMode.UPDATE
    assert editor.initial_values == {"title": "Old", "url": "u1", "icon": "i1"}

    outcome = await editor.submit({"title": "New", "url": "u2", "icon": "i2"})
    await bus.wait_until_idle()

    items = await item_store.load()
    assert outcome is SubmitOutcome.SAVED
    assert [item.id for item in items] == ["0", "1", "2"]
    assert [item for item in items if item.id == "1"] == [make_item("1", "New", "u2", "i2")]
    assert recorder.titles(events.TOPIC_TOAST_SHOW) == ["Item updated"]


@pytest.mark.asyncio
async def test_edit_uses_fresh_state_not_the_presenters_copy(item_store, bus) -> None:
    original = make_item("1", "Old", "u1", "i1")
    await item_store.save([original])
    editor = ItemEditorController(item_store, bus, item=original)

    # Another flow adds an item after the editor was opened
    await item_store.save([original, make_item("2", "Added elsewhere")])

    await editor.submit({"title": "New", "url": "u2", "icon": "i2"})

    items = await item_store.load()
    assert [(item.id, item.title) for item in items] == [("1", "New"), ("2", "Added elsewhere")]


@pytest.mark.asyncio
async def test_edit_of_deleted_item_saves_list_unchanged(item_store, bus) -> None:
    original = make_item("1", "Old", "u1", "i1")
    await item_store.save([make_item("2")])
    editor = ItemEditorController(item_store, bus, item=original)

    outcome = await editor.submit({"title": "New", "url": "u2", "icon": "i2"})

    assert outcome is SubmitOutcome.SAVED
    assert await item_store.load() == [make_item("2")]


@pytest.mark.asyncio
async def test_storage_failure_keeps_editor_open(item_store, flaky_backend, bus, recorder) -> None:
    await recorder.attach(bus, *TOPICS)
    completed = []
    flaky_backend.fail_writes = True
    editor = ItemEditorController(item_store, bus, on_complete=lambda: completed.append(True))
    loading_states = []
    editor.add_listener(lambda change: loading_states.append(editor.is_loading))

    outcome = await editor.submit({"title": "Docs", "url": "https://x.test"})
    await bus.wait_until_idle()

    assert outcome is SubmitOutcome.FAILED
    assert loading_states == [True, False]
    assert not editor.is_loading
    assert not editor.is_closed
    assert completed == []
    assert recorder.titles(events.TOPIC_TOAST_SHOW) == ["Failed to add item"]
    assert recorder.events[events.TOPIC_ITEMS_CHANGED] == []

    # Retry once storage is back
    flaky_backend.fail_writes = False
    assert await editor.submit({"title": "Docs", "url": "https://x.test"}) is SubmitOutcome.SAVED
    assert completed == [True]


@pytest.mark.asyncio
async def test_update_failure_message(item_store, flaky_backend, bus, recorder) -> None:
    await recorder.attach(bus, events.TOPIC_TOAST_SHOW)
    original = make_item("1")
    await item_store.save([original])
    flaky_backend.fail_reads = True
    editor = ItemEditorController(item_store, bus, item=original)

    assert await editor.submit({"title": "New", "url": "u"}) is SubmitOutcome.FAILED
    await bus.wait_until_idle()

    assert recorder.titles(events.TOPIC_TOAST_SHOW) == ["Failed to update item"]


@pytest.mark.asyncio
async def test_reentrant_submit_is_ignored(gated_backend, bus) -> None:
    item_store = ItemStore(gated_backend)
    editor = ItemEditorController(item_store, bus)

    first = asyncio.create_task(editor.submit({"title": "Docs", "url": "https://x.test"}))
    await gated_backend.waiting.wait()

    assert editor.is_loading
    assert await editor.submit({"title": "Docs", "url": "https://x.test"}) is SubmitOutcome.IGNORED

    gated_backend.release()
    assert await first is SubmitOutcome.SAVED
    assert len(await item_store.load()) == 1


@pytest.mark.asyncio
async def test_async_completion_callback_is_awaited(item_store, bus) -> None:
    completed = []

    async def on_complete() -> None:
        completed.append(len(await item_store.load()))

    editor = ItemEditorController(item_store, bus, on_complete=on_complete)
    await editor.submit({"title": "Docs", "url": "https://x.test"})

    assert completed == [1]


@pytest.mark.asyncio
async def test_rapid_double_submit_saves_once(kv_backend, bus) -> None:
    item_store = ItemStore(kv_backend)
    editor = ItemEditorController(item_store, bus)
    values = {"title": "Docs", "url": "https://x.test"}

    outcomes = await asyncio.gather(editor.submit(values), editor.submit(values))

    assert sorted(outcome.value for outcome in outcomes) == ["ignored", "saved"]
    assert len(await item_store.load()) == 1


@pytest.mark.asyncio
async def test_submit_after_close_is_ignored(kv_backend, bus, recorder) -> None:
    await recorder.attach(bus, *TOPICS)
    item_store = ItemStore(kv_backend)
    editor = ItemEditorController(item_store, bus)
    values = {"title": "Docs", "url": "https://x.test"}

    assert await editor.submit(values) is SubmitOutcome.SAVED
    assert await editor.submit(values) is SubmitOutcome.IGNORED
    await bus.wait_until_idle()

    assert len(await item_store.load()) == 1
    assert recorder.titles(events.TOPIC_TOAST_SHOW) == ["Item added"]
    assert len(recorder.events[events.TOPIC_NAV_POP]) == 1


@pytest.mark.asyncio
async def test_loading_is_visible_while_storage_is_pending(kv_backend, bus) -> None:
    item_store = ItemStore(kv_backend)
    editor = ItemEditorController(item_store, bus)

    pending = asyncio.create_task(editor.submit({"title": "Docs", "url": "https://x.test"}))
    await asyncio.sleep(0)

    assert editor.is_loading
    assert await pending is SubmitOutcome.SAVED
    assert not editor.is_loading
