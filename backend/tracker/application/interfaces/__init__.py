from .document_store import DocumentStore
from .row_store import (
    COLUMNS,
    ID_COLUMNS,
    Row,
    RowPredicate,
    RowStore,
    Table,
    check_columns,
    matches_key,
)

__all__ = [
    "DocumentStore",
    "COLUMNS",
    "ID_COLUMNS",
    "Row",
    "RowPredicate",
    "RowStore",
    "Table",
    "check_columns",
    "matches_key",
]
