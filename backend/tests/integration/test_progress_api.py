"""API tests for progress tracking and status propagation."""

import re
from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from tracker.application.interfaces import Table
from tracker.config import get_settings
from tracker.infrastructure.catalog import load_catalog
from tracker.infrastructure.memory import InMemoryRowStore
from tracker.main import create_app

TIMESTAMP = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z")


@pytest.fixture
def store() -> InMemoryRowStore:
    return InMemoryRowStore(
        {
            Table.CLIENTS: [
                {
                    "client_id": "c1",
                    "client_name": "Acme Corporation",
                    "contact_email": "contact@acme.com",
                    "created_at": "2024-01-15T10:00:00.000Z",
                    "status": "not_started",
                }
            ],
            Table.CLIENT_PLATFORMS: [
                {"id": "p1", "client_id": "c1", "platform": "snowflake", "status": "not_started"},
                {"id": "p2", "client_id": "c1", "platform": "salesforce", "status": "not_started"},
            ],
        }
    )


@pytest_asyncio.fixture
async def client(store: InMemoryRowStore) -> AsyncIterator[AsyncClient]:
    app = create_app(row_store=store)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


async def _platform_statuses(client: AsyncClient) -> tuple[str, dict[str, str]]:
    response = await client.get("/api/v1/clients/c1")
    assert response.status_code == 200
    data = response.json()["client"]
    return data["status"], {p["platform"]: p["status"] for p in data["platforms"]}


@pytest.mark.asyncio
async def test_core_step_fans_out_to_every_platform(client: AsyncClient):
    response = await client.post(
        "/api/v1/progress/c1/core/core.prerequisites", json={"completedBy": "jane"}
    )

    assert response.status_code == 200
    step = response.json()["step"]
    assert step["status"] == "completed"
    assert step["stepId"] == "core.prerequisites"
    assert step["completedBy"] == "jane"
    assert await _platform_statuses(client) == (
        "in_progress",
        {"snowflake": "in_progress", "salesforce": "in_progress"},
    )


@pytest.mark.asyncio
async def test_platform_step_advances_only_its_platform(client: AsyncClient):
    response = await client.post("/api/v1/progress/c1/snowflake/snowflake.connection")

    assert response.status_code == 200
    assert await _platform_statuses(client) == (
        "in_progress",
        {"snowflake": "in_progress", "salesforce": "not_started"},
    )


@pytest.mark.asyncio
async def test_unmark_removes_progress_but_keeps_statuses(client: AsyncClient):
    await client.post("/api/v1/progress/c1/snowflake/snowflake.connection")

    response = await client.delete("/api/v1/progress/c1/snowflake/snowflake.connection")
    assert response.status_code == 200
    assert response.json() == {"success": True}

    progress = await client.get("/api/v1/progress/c1/snowflake")
    assert progress.json() == {"progress": []}
    _, platforms = await _platform_statuses(client)
    assert platforms["snowflake"] == "in_progress"


@pytest.mark.asyncio
async def test_unmark_missing_step_is_404(client: AsyncClient):
    response = await client.delete("/api/v1/progress/c1/snowflake/snowflake.query")

    assert response.status_code == 404
    assert response.json()["error"]["message"] == "Progress not found"


@pytest.mark.asyncio
async def test_unknown_step_and_wrong_scope(client: AsyncClient):
    unknown = await client.post("/api/v1/progress/c1/core/core.nothing")
    wrong_scope = await client.post("/api/v1/progress/c1/snowflake/core.prerequisites")

    assert unknown.status_code == 404
    assert wrong_scope.status_code == 400
    assert "scoped to 'core'" in wrong_scope.json()["error"]["message"]


@pytest.mark.asyncio
async def test_checklist_items_roundtrip(client: AsyncClient):
    base = "/api/v1/progress/c1/snowflake/snowflake.connection/items"

    created = await client.post(f"{base}/1", json={"completedBy": "bob"})
    await client.post(f"{base}/0")
    listed = await client.get(base)

    assert created.status_code == 200
    assert created.json()["item"]["itemIndex"] == 1
    assert [i["itemIndex"] for i in listed.json()["items"]] == [0, 1]

    assert (await client.delete(f"{base}/1")).status_code == 200
    assert (await client.delete(f"{base}/1")).status_code == 404


@pytest.mark.asyncio
async def test_checklist_item_out_of_range_or_invalid(client: AsyncClient):
    base = "/api/v1/progress/c1/snowflake/snowflake.connection/items"

    assert (await client.post(f"{base}/7")).status_code == 404
    assert (await client.post(f"{base}/-1")).status_code == 400
    assert (await client.post(f"{base}/first")).status_code == 400


@pytest.mark.asyncio
async def test_client_progress_lists_every_platform(client: AsyncClient):
    await client.post("/api/v1/progress/c1/core/core.prerequisites")
    await client.post("/api/v1/progress/c1/salesforce/salesforce.connection")

    response = await client.get("/api/v1/progress/c1")

    assert {p["stepId"] for p in response.json()["progress"]} == {
        "core.prerequisites",
        "salesforce.connection",
    }


@pytest.mark.asyncio
async def test_completing_every_checklist_item_leaves_step_untouched(client: AsyncClient):
    settings = get_settings()
    catalog = load_catalog(settings.resolve_path(settings.catalog_file))
    step = catalog.get_step("snowflake.connection")
    base = "/api/v1/progress/c1/snowflake/snowflake.connection/items"

    for index in range(len(step.checklist)):
        assert (await client.post(f"{base}/{index}")).status_code == 200

    listed = await client.get(base)
    assert len(listed.json()["items"]) == len(step.checklist)
    assert (await client.get("/api/v1/progress/c1/snowflake")).json() == {"progress": []}
    assert await _platform_statuses(client) == (
        "not_started",
        {"snowflake": "not_started", "salesforce": "not_started"},
    )


@pytest.mark.asyncio
async def test_timestamps_use_millisecond_utc_format(client: AsyncClient):
    step = (await client.post("/api/v1/progress/c1/snowflake/snowflake.connection")).json()["step"]
    item = (
        await client.post("/api/v1/progress/c1/snowflake/snowflake.connection/items/0")
    ).json()["item"]
    detail = (await client.get("/api/v1/clients/c1")).json()["client"]

    assert TIMESTAMP.fullmatch(step["completedAt"])
    assert TIMESTAMP.fullmatch(item["completedAt"])
    assert detail["createdAt"] == "2024-01-15T10:00:00.000Z"
