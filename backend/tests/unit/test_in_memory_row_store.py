"""Unit tests for the in-memory RowStore and the demo seed."""

import pytest

from tracker.application.interfaces import COLUMNS, Table
from tracker.domain.exceptions import PersistenceError
from tracker.infrastructure.memory import DEMO_ROWS, InMemoryRowStore, seed_demo_data


@pytest.mark.asyncio
async def test_upsert_inserts_full_row_with_generated_id():
    store = InMemoryRowStore()

    row = await store.upsert_row(Table.STEP_PROGRESS, {"client_id": "c1", "step_id": "s1"}, {"status": "completed"})

    assert set(row) == set(COLUMNS[Table.STEP_PROGRESS])
    assert row["id"]
    assert row["platform"] == ""


@pytest.mark.asyncio
async def test_upsert_updates_first_matching_row():
    store = InMemoryRowStore()
    first = await store.upsert_row(Table.NOTES, {"client_id": "c1", "item_index": ""}, {"note": "a"})

    second = await store.upsert_row(Table.NOTES, {"client_id": "c1", "item_index": ""}, {"note": "b"})

    assert second["id"] == first["id"]
    assert [r["note"] for r in await store.list_rows(Table.NOTES)] == ["b"]


@pytest.mark.asyncio
async def test_rows_are_copies():
    store = InMemoryRowStore({Table.CLIENTS: [{"client_id": "c1", "client_name": "Acme"}]})

    rows = await store.list_rows(Table.CLIENTS)
    rows[0]["client_name"] = "Changed"
    found = await store.find_row(Table.CLIENTS, lambda r: r["client_id"] == "c1")
    found["status"] = "completed"

    fresh = await store.find_row(Table.CLIENTS, lambda r: r["client_id"] == "c1")
    assert fresh["client_name"] == "Acme"
    assert fresh["status"] == ""


@pytest.mark.asyncio
async def test_delete_removes_only_the_first_match():
    store = InMemoryRowStore(
        {
            Table.CLIENT_PLATFORMS: [
                {"id": "p1", "client_id": "c1"},
                {"id": "p2", "client_id": "c1"},
            ]
        }
    )

    assert await store.delete_row(Table.CLIENT_PLATFORMS, lambda r: r["client_id"] == "c1") is True
    assert [r["id"] for r in await store.list_rows(Table.CLIENT_PLATFORMS)] == ["p2"]
    assert await store.delete_row(Table.CLIENT_PLATFORMS, lambda r: r["client_id"] == "c9") is False


@pytest.mark.asyncio
async def test_stores_do_not_share_state():
    first, second = InMemoryRowStore(), InMemoryRowStore()

    await first.upsert_row(Table.CLIENTS, {"client_id": "c1"}, {"client_name": "Acme"})

    assert await second.list_rows(Table.CLIENTS) == []


@pytest.mark.asyncio
async def test_seed_demo_data_is_repeatable():
    store = InMemoryRowStore()

    written = await seed_demo_data(store)
    await seed_demo_data(store)

    assert written == sum(len(rows) for rows in DEMO_ROWS.values())
    clients = await store.list_rows(Table.CLIENTS)
    assert [c["client_id"] for c in clients] == ["mock-client-1", "mock-client-2", "mock-client-3"]


@pytest.mark.asyncio
async def test_unknown_columns_are_rejected():
    store = InMemoryRowStore()

    with pytest.raises(PersistenceError, match="favourite_colour"):
        await store.upsert_row(Table.CLIENTS, {"client_id": "c1"}, {"favourite_colour": "blue"})
    with pytest.raises(PersistenceError, match="step"):
        await store.upsert_row(Table.NOTES, {"step": "s1"}, {"note": "x"})

    assert await store.list_rows(Table.CLIENTS) == []
    assert await store.list_rows(Table.NOTES) == []
