"""Unit tests for the NoteService."""

import pytest

from tracker.application.interfaces import Table
from tracker.application.services import NoteService
from tracker.domain.exceptions import ValidationError
from tracker.infrastructure.memory import InMemoryRowStore


@pytest.fixture
def store() -> InMemoryRowStore:
    return InMemoryRowStore()


@pytest.fixture
def service(store: InMemoryRowStore) -> NoteService:
    return NoteService(store)


@pytest.mark.asyncio
async def test_save_note_upserts_per_address(service, store):
    await service.save_note("c1", "snowflake", "snowflake.connection", "first", updated_by="jane")
    note = await service.save_note("c1", "snowflake", "snowflake.connection", "second")

    assert note.note == "second"
    assert note.is_step_level
    assert len(await store.list_rows(Table.NOTES)) == 1


@pytest.mark.asyncio
async def test_step_and_item_notes_are_separate(service):
    await service.save_note("c1", "core", "core.prerequisites", "step note")
    await service.save_note("c1", "core", "core.prerequisites", "item note", item_index=0)

    step_notes = await service.get_notes("c1", "core", "core.prerequisites")
    item_notes = await service.get_notes("c1", "core", "core.prerequisites", item_index=0)

    assert [n.note for n in step_notes] == ["step note"]
    assert [(n.note, n.item_index) for n in item_notes] == [("item note", 0)]


@pytest.mark.asyncio
async def test_save_note_requires_content(service, store):
    with pytest.raises(ValidationError, match="Note content is required"):
        await service.save_note("c1", "core", "core.prerequisites", None)

    assert await store.list_rows(Table.NOTES) == []


@pytest.mark.asyncio
async def test_clear_note_keeps_an_empty_row(service, store):
    await service.save_note("c1", "core", "core.prerequisites", "keep me", item_index=2)

    cleared = await service.clear_note("c1", "core", "core.prerequisites", item_index=2)

    assert cleared.note == ""
    rows = await store.list_rows(Table.NOTES)
    assert len(rows) == 1
    assert rows[0]["note"] == ""


@pytest.mark.asyncio
async def test_delete_note_removes_the_row(service):
    await service.save_note("c1", "core", "core.prerequisites", "temporary")

    assert await service.delete_note("c1", "core", "core.prerequisites") is True
    assert await service.get_notes("c1", "core", "core.prerequisites") == []
