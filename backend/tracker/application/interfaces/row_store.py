"""Abstract persistence store interface (port) for flat, spreadsheet-style rows."""

from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from enum import Enum

from tracker.domain.exceptions import PersistenceError

Row = dict[str, str]
RowPredicate = Callable[[Row], bool]


class Table(str, Enum):
    """The five logical tables (sheets) of the onboarding store."""

    CLIENTS = "Clients"
    CLIENT_PLATFORMS = "ClientPlatforms"
    STEP_PROGRESS = "StepProgress"
    CHECKLIST_PROGRESS = "ChecklistProgress"
    NOTES = "Notes"


# Column holding each table's row identifier
ID_COLUMNS: dict[Table, str] = {
    Table.CLIENTS: "client_id",
    Table.CLIENT_PLATFORMS: "id",
    Table.STEP_PROGRESS: "id",
    Table.CHECKLIST_PROGRESS: "id",
    Table.NOTES: "id",
}

COLUMNS: dict[Table, tuple[str, ...]] = {
    Table.CLIENTS: (
        "client_id", "client_name", "contact_email", "created_at", "status", "notes",
    ),
    Table.CLIENT_PLATFORMS: (
        "id", "client_id", "platform", "status", "started_at", "completed_at",
    ),
    Table.STEP_PROGRESS: (
        "id", "client_id", "platform", "step_id", "status", "completed_at", "completed_by",
    ),
    Table.CHECKLIST_PROGRESS: (
        "id", "client_id", "platform", "step_id", "item_index",
        "status", "completed_at", "completed_by",
    ),
    Table.NOTES: (
        "id", "client_id", "platform", "step_id", "item_index",
        "note", "updated_at", "updated_by",
    ),
}


def matches_key(row: Row, key: Mapping[str, str]) -> bool:
    """True when every key column of *row* equals the given value."""
    return all(row.get(column, "") == value for column, value in key.items())


def check_columns(table: Table, columns: Mapping[str, str], operation: str = "upsert") -> None:
    """Raise PersistenceError when *columns* names anything outside the table schema."""
    unknown = set(columns) - set(COLUMNS[table])
    if unknown:
        raise PersistenceError(
            operation, table.value, f"unknown columns: {', '.join(sorted(unknown))}"
        )


class RowStore(ABC):
    """Port for row persistence: implemented in the infrastructure layer.

    Rows are flat ``dict[str, str]`` mappings; callers always receive copies.
    Implementations must guarantee read-your-writes within one process but
    are not required to group writes into transactions. Failures of the
    backing store are raised as ``PersistenceError``.
    """

    @abstractmethod
    async def list_rows(self, table: Table) -> list[Row]:
        """Return every row of *table*."""
        ...

    @abstractmethod
    async def find_row(self, table: Table, predicate: RowPredicate) -> Row | None:
        """Return the first row matching *predicate*, or None."""
        ...

    @abstractmethod
    async def upsert_row(
        self, table: Table, key: Mapping[str, str], fields: Mapping[str, str]
    ) -> Row:
        """Update the first row whose columns equal *key*, or insert ``key | fields``.

        Inserted rows get a generated identifier when the table's id column
        is not part of *key* or *fields*. Returns the stored row.
        """
        ...

    @abstractmethod
    async def delete_row(self, table: Table, predicate: RowPredicate) -> bool:
        """Delete the first row matching *predicate*. Returns True if one was deleted."""
        ...
