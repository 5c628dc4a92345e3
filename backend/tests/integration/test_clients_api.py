"""API tests for client and platform-instance endpoints."""

from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from tracker.application.interfaces import Table
from tracker.domain.exceptions import PersistenceError
from tracker.infrastructure.memory import InMemoryRowStore
from tracker.main import create_app


class UnreachableRowStore(InMemoryRowStore):
    """Store that fails every read, as an unreachable backend would."""

    async def list_rows(self, table):
        raise PersistenceError("list", table.value, "backend unreachable")


@pytest_asyncio.fixture
async def client() -> AsyncIterator[AsyncClient]:
    app = create_app(row_store=InMemoryRowStore())
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


async def _create_client(client: AsyncClient) -> str:
    response = await client.post(
        "/api/v1/clients",
        json={"name": "Acme Corporation", "email": "contact@acme.com", "notes": "Enterprise"},
    )
    assert response.status_code == 201
    return response.json()["client"]["id"]


@pytest.mark.asyncio
async def test_create_and_get_client(client: AsyncClient):
    client_id = await _create_client(client)

    response = await client.get(f"/api/v1/clients/{client_id}")

    assert response.status_code == 200
    data = response.json()["client"]
    assert data["name"] == "Acme Corporation"
    assert data["status"] == "not_started"
    assert "createdAt" in data
    assert data["platforms"] == []
    assert data["progress"] == []


@pytest.mark.asyncio
async def test_create_client_validation_error_body(client: AsyncClient):
    response = await client.post("/api/v1/clients", json={"name": "A", "email": "nope"})

    assert response.status_code == 400
    error = response.json()["error"]
    assert error["message"] == "Client name must be at least 2 characters, Invalid email format"


@pytest.mark.asyncio
async def test_malformed_body_is_reported_as_400(client: AsyncClient):
    response = await client.post("/api/v1/clients", json={"name": ["not", "a", "string"]})

    assert response.status_code == 400
    assert "message" in response.json()["error"]


@pytest.mark.asyncio
async def test_invalid_json_body_reports_decode_error(client: AsyncClient):
    response = await client.post(
        "/api/v1/clients",
        content=b'{"name": "Acme"',
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json()["error"]["message"] == "JSON decode error"


@pytest.mark.asyncio
async def test_list_clients_includes_platform_counts(client: AsyncClient):
    client_id = await _create_client(client)
    await client.post(f"/api/v1/clients/{client_id}/platforms", json={"platform": "snowflake"})
    await client.post(f"/api/v1/clients/{client_id}/platforms", json={"platform": "ga4"})

    response = await client.get("/api/v1/clients")

    listed = response.json()["clients"]
    assert len(listed) == 1
    assert listed[0]["platformCount"] == 2
    assert listed[0]["completedPlatforms"] == 0


@pytest.mark.asyncio
async def test_update_and_delete_client(client: AsyncClient):
    client_id = await _create_client(client)

    updated = await client.put(f"/api/v1/clients/{client_id}", json={"status": "pending_review"})
    assert updated.status_code == 200
    assert updated.json()["client"]["status"] == "pending_review"

    deleted = await client.delete(f"/api/v1/clients/{client_id}")
    assert deleted.json() == {"success": True}
    assert (await client.get(f"/api/v1/clients/{client_id}")).status_code == 404
    assert (await client.put(f"/api/v1/clients/{client_id}", json={"notes": "x"})).status_code == 404


@pytest.mark.asyncio
async def test_platform_attach_errors(client: AsyncClient):
    client_id = await _create_client(client)
    url = f"/api/v1/clients/{client_id}/platforms"

    first = await client.post(url, json={"platform": "hubspot"})
    duplicate = await client.post(url, json={"platform": "hubspot"})
    unknown = await client.post(url, json={"platform": "myspace"})
    missing_client = await client.post("/api/v1/clients/nope/platforms", json={"platform": "hubspot"})

    assert first.status_code == 201
    assert first.json()["platform"]["status"] == "not_started"
    assert duplicate.status_code == 409
    assert unknown.status_code == 400
    assert missing_client.status_code == 404


@pytest.mark.asyncio
async def test_remove_platform(client: AsyncClient):
    client_id = await _create_client(client)
    await client.post(f"/api/v1/clients/{client_id}/platforms", json={"platform": "segment"})

    removed = await client.delete(f"/api/v1/clients/{client_id}/platforms/segment")
    again = await client.delete(f"/api/v1/clients/{client_id}/platforms/segment")

    assert removed.status_code == 200
    assert again.status_code == 404


@pytest.mark.asyncio
async def test_persistence_errors_map_to_500_with_stack():
    app = create_app(row_store=UnreachableRowStore())
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        response = await ac.get("/api/v1/clients")

    assert response.status_code == 500
    error = response.json()["error"]
    assert "backend unreachable" in error["message"]
    assert "PersistenceError" in error["stack"]


@pytest.mark.asyncio
async def test_demo_seed_runs_in_lifespan():
    store = InMemoryRowStore()
    app = create_app(row_store=store)
    app.state.seed_demo_data = True

    async with app.router.lifespan_context(app):
        rows = await store.list_rows(Table.CLIENTS)

    assert {r["client_id"] for r in rows} == {"mock-client-1", "mock-client-2", "mock-client-3"}
