"""Process-local implementation of the RowStore port.

Used when no database is configured, and as the store in unit tests.
State lives on the instance, so every store is independent.
"""

from collections.abc import Mapping
from uuid import uuid4

from tracker.application.interfaces import (
    COLUMNS,
    ID_COLUMNS,
    Row,
    RowPredicate,
    RowStore,
    Table,
    check_columns,
    matches_key,
)


class InMemoryRowStore(RowStore):
    """Keeps rows in insertion order per table; hands out copies only."""

    def __init__(self, rows: Mapping[Table, list[Row]] | None = None) -> None:
        self._tables: dict[Table, list[Row]] = {table: [] for table in Table}
        for table, table_rows in (rows or {}).items():
            self._tables[Table(table)] = [self._normalize(Table(table), r) for r in table_rows]

    @staticmethod
    def _normalize(table: Table, row: Mapping[str, str]) -> Row:
        normalized = {column: "" for column in COLUMNS[table]}
        normalized.update({k: "" if v is None else str(v) for k, v in row.items()})
        return normalized

    async def list_rows(self, table: Table) -> list[Row]:
        return [dict(r) for r in self._tables[table]]

    async def find_row(self, table: Table, predicate: RowPredicate) -> Row | None:
        for row in self._tables[table]:
            if predicate(dict(row)):
                return dict(row)
        return None

    async def upsert_row(
        self, table: Table, key: Mapping[str, str], fields: Mapping[str, str]
    ) -> Row:
        check_columns(table, key)
        check_columns(table, fields)
        for row in self._tables[table]:
            if matches_key(row, key):
                row.update({k: "" if v is None else str(v) for k, v in fields.items()})
                return dict(row)

        new_row = self._normalize(table, {**key, **fields})
        id_column = ID_COLUMNS[table]
        if not new_row[id_column]:
            new_row[id_column] = str(uuid4())
        self._tables[table].append(new_row)
        return dict(new_row)

    async def delete_row(self, table: Table, predicate: RowPredicate) -> bool:
        rows = self._tables[table]
        for index, row in enumerate(rows):
            if predicate(dict(row)):
                del rows[index]
                return True
        return False
