"""Integration tests for the SQLAlchemy-backed RowStore on a temporary SQLite database."""

from collections.abc import AsyncIterator

import pytest
import pytest_asyncio

from tracker.application.interfaces import COLUMNS, Table
from tracker.application.services import ProgressService
from tracker.domain.exceptions import PersistenceError
from tracker.infrastructure.database import SQLAlchemyRowStore, create_engine, get_async_url
from tracker.infrastructure.memory import seed_demo_data


@pytest_asyncio.fixture
async def store(tmp_path) -> AsyncIterator[SQLAlchemyRowStore]:
    row_store = SQLAlchemyRowStore(create_engine(f"sqlite:///{tmp_path / 'tracker.db'}"))
    yield row_store
    await row_store.dispose()


def test_async_url_picks_async_drivers():
    assert get_async_url("sqlite:///./tracker.db") == "sqlite+aiosqlite:///./tracker.db"
    assert get_async_url("postgresql://u:p@db/tracker") == "postgresql+asyncpg://u:p@db/tracker"
    assert get_async_url("sqlite+aiosqlite:///x.db") == "sqlite+aiosqlite:///x.db"


@pytest.mark.asyncio
async def test_tables_are_created_lazily(store: SQLAlchemyRowStore):
    assert await store.list_rows(Table.NOTES) == []


@pytest.mark.asyncio
async def test_upsert_insert_then_update(store: SQLAlchemyRowStore):
    key = {"client_id": "c1", "platform": "core", "step_id": "core.prerequisites"}

    inserted = await store.upsert_row(Table.STEP_PROGRESS, key, {"status": "completed", "completed_by": "a"})
    updated = await store.upsert_row(Table.STEP_PROGRESS, key, {"completed_by": "b"})

    assert set(inserted) == set(COLUMNS[Table.STEP_PROGRESS])
    assert updated["id"] == inserted["id"]
    rows = await store.list_rows(Table.STEP_PROGRESS)
    assert len(rows) == 1
    assert rows[0]["completed_by"] == "b"
    assert rows[0]["status"] == "completed"


@pytest.mark.asyncio
async def test_empty_item_index_is_matched_as_a_key(store: SQLAlchemyRowStore):
    step_key = {"client_id": "c1", "platform": "core", "step_id": "s", "item_index": ""}
    item_key = {**step_key, "item_index": "0"}

    await store.upsert_row(Table.NOTES, step_key, {"note": "step"})
    await store.upsert_row(Table.NOTES, item_key, {"note": "item"})
    await store.upsert_row(Table.NOTES, step_key, {"note": "step v2"})

    notes = {r["item_index"]: r["note"] for r in await store.list_rows(Table.NOTES)}
    assert notes == {"": "step v2", "0": "item"}


@pytest.mark.asyncio
async def test_find_and_delete(store: SQLAlchemyRowStore):
    await seed_demo_data(store)

    found = await store.find_row(Table.CLIENTS, lambda r: r["client_name"] == "TechStart Inc")
    assert found["client_id"] == "mock-client-2"

    assert await store.delete_row(Table.CLIENTS, lambda r: r["client_id"] == "mock-client-2") is True
    assert await store.delete_row(Table.CLIENTS, lambda r: r["client_id"] == "mock-client-2") is False
    assert len(await store.list_rows(Table.CLIENTS)) == 2


@pytest.mark.asyncio
async def test_unknown_columns_are_rejected(store: SQLAlchemyRowStore):
    with pytest.raises(PersistenceError):
        await store.upsert_row(Table.CLIENTS, {"client_id": "c1"}, {"favourite_colour": "blue"})


@pytest.mark.asyncio
async def test_propagation_against_the_database(store: SQLAlchemyRowStore):
    await seed_demo_data(store)
    service = ProgressService(store)

    await service.mark_step_complete("mock-client-3", "core", "core.prerequisites")
    await service.mark_step_complete("mock-client-1", "core", "core.access_token")

    client_3 = await store.find_row(Table.CLIENTS, lambda r: r["client_id"] == "mock-client-3")
    salesforce = await store.find_row(Table.CLIENT_PLATFORMS, lambda r: r["id"] == "mp-2")
    finished = await store.find_row(Table.CLIENT_PLATFORMS, lambda r: r["id"] == "mp-3")
    assert client_3["status"] == "in_progress"
    assert salesforce["status"] == "in_progress"
    assert finished["status"] == "completed"


@pytest.mark.asyncio
async def test_data_survives_a_new_store_instance(tmp_path):
    url = f"sqlite:///{tmp_path / 'durable.db'}"
    first = SQLAlchemyRowStore(create_engine(url))
    await first.upsert_row(Table.CLIENTS, {"client_id": "c1"}, {"client_name": "Acme"})
    await first.dispose()

    second = SQLAlchemyRowStore(create_engine(url))
    try:
        rows = await second.list_rows(Table.CLIENTS)
    finally:
        await second.dispose()

    assert [r["client_name"] for r in rows] == ["Acme"]
