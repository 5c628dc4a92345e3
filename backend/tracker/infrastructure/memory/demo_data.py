"""Demo rows loaded into the in-memory store when no database is configured."""

from tracker.application.interfaces import ID_COLUMNS, Row, RowStore, Table

DEMO_ROWS: dict[Table, list[Row]] = {
    Table.CLIENTS: [
        {
            "client_id": "mock-client-1",
            "client_name": "Acme Corporation",
            "contact_email": "contact@acme.com",
            "created_at": "2024-01-15T10:00:00.000Z",
            "status": "in_progress",
            "notes": "Large enterprise client",
        },
        {
            "client_id": "mock-client-2",
            "client_name": "TechStart Inc",
            "contact_email": "hello@techstart.io",
            "created_at": "2024-02-01T14:30:00.000Z",
            "status": "completed",
            "notes": "Completed Snowflake integration",
        },
        {
            "client_id": "mock-client-3",
            "client_name": "Global Retail",
            "contact_email": "digital@globalretail.com",
            "created_at": "2024-02-20T09:15:00.000Z",
            "status": "not_started",
            "notes": "",
        },
    ],
    Table.CLIENT_PLATFORMS: [
        {
            "id": "mp-1",
            "client_id": "mock-client-1",
            "platform": "snowflake",
            "status": "in_progress",
            "started_at": "2024-01-20T10:00:00.000Z",
        },
        {
            "id": "mp-2",
            "client_id": "mock-client-1",
            "platform": "salesforce",
            "status": "not_started",
            "started_at": "2024-01-25T10:00:00.000Z",
        },
        {
            "id": "mp-3",
            "client_id": "mock-client-2",
            "platform": "snowflake",
            "status": "completed",
            "started_at": "2024-02-01T10:00:00.000Z",
            "completed_at": "2024-02-15T10:00:00.000Z",
        },
    ],
    Table.STEP_PROGRESS: [
        {
            "id": "prog-1",
            "client_id": "mock-client-1",
            "platform": "core",
            "step_id": "core.prerequisites",
            "status": "completed",
            "completed_at": "2024-01-20T11:00:00.000Z",
        },
        {
            "id": "prog-2",
            "client_id": "mock-client-1",
            "platform": "core",
            "step_id": "core.pixel_setup",
            "status": "completed",
            "completed_at": "2024-01-20T12:00:00.000Z",
        },
        {
            "id": "prog-3",
            "client_id": "mock-client-1",
            "platform": "snowflake",
            "step_id": "snowflake.connection",
            "status": "completed",
            "completed_at": "2024-01-21T10:00:00.000Z",
        },
    ],
}


async def seed_demo_data(store: RowStore) -> int:
    """Upsert the demo rows into *store*. Returns the number of rows written."""
    written = 0
    for table, rows in DEMO_ROWS.items():
        id_column = ID_COLUMNS[table]
        for row in rows:
            await store.upsert_row(table, {id_column: row[id_column]}, row)
            written += 1
    return written
