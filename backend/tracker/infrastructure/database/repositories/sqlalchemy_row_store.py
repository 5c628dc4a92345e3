"""Concrete RowStore implementation backed by SQLAlchemy async sessions.

Each write runs in its own session and commits immediately, so every row
write is durable on its own and no multi-row transaction is ever held.
"""

import logging
from collections.abc import AsyncIterator, Mapping
from contextlib import asynccontextmanager
from uuid import uuid4

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from tracker.application.interfaces import (
    COLUMNS,
    ID_COLUMNS,
    Row,
    RowPredicate,
    RowStore,
    Table,
    check_columns,
)
from tracker.domain.exceptions import PersistenceError
from tracker.infrastructure.database.base import Base
from tracker.infrastructure.database.models import (
    ChecklistProgressModel,
    ClientModel,
    ClientPlatformModel,
    NoteModel,
    StepProgressModel,
)
from tracker.infrastructure.database.session import create_session_factory

logger = logging.getLogger(__name__)

_MODELS: dict[Table, type[Base]] = {
    Table.CLIENTS: ClientModel,
    Table.CLIENT_PLATFORMS: ClientPlatformModel,
    Table.STEP_PROGRESS: StepProgressModel,
    Table.CHECKLIST_PROGRESS: ChecklistProgressModel,
    Table.NOTES: NoteModel,
}


class SQLAlchemyRowStore(RowStore):
    """Implements the RowStore port on top of the five ORM tables."""

    def __init__(self, engine: AsyncEngine):
        self._engine = engine
        self._session_factory = create_session_factory(engine)
        self._schema_ready = False

    async def create_tables(self) -> None:
        """Create all onboarding tables if they do not exist yet."""
        async with self._translate_errors("create_tables", "*"):
            async with self._engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        self._schema_ready = True
        logger.info("Onboarding tables ready")

    async def dispose(self) -> None:
        await self._engine.dispose()

    # ── Mapping ──────────────────────────────────────────────────────

    def _to_row(self, table: Table, model: Base) -> Row:
        """Map ORM model → flat row."""
        return {column: getattr(model, column) or "" for column in COLUMNS[table]}

    @asynccontextmanager
    async def _translate_errors(self, operation: str, table: str) -> AsyncIterator[None]:
        try:
            yield
        except SQLAlchemyError as exc:
            logger.error("Store %s on %s failed: %s", operation, table, exc)
            raise PersistenceError(operation, table, str(exc)) from exc

    @asynccontextmanager
    async def _session(self, operation: str, table: Table) -> AsyncIterator[AsyncSession]:
        if not self._schema_ready:
            await self.create_tables()
        async with self._translate_errors(operation, table.value):
            async with self._session_factory() as session:
                try:
                    yield session
                except Exception:
                    await session.rollback()
                    raise

    # ── RowStore ─────────────────────────────────────────────────────

    async def list_rows(self, table: Table) -> list[Row]:
        model = _MODELS[table]
        async with self._session("list", table) as session:
            result = await session.execute(select(model))
            return [self._to_row(table, m) for m in result.scalars().all()]

    async def find_row(self, table: Table, predicate: RowPredicate) -> Row | None:
        for row in await self.list_rows(table):
            if predicate(row):
                return row
        return None

    async def upsert_row(
        self, table: Table, key: Mapping[str, str], fields: Mapping[str, str]
    ) -> Row:
        check_columns(table, key)
        check_columns(table, fields)
        model = _MODELS[table]

        async with self._session("upsert", table) as session:
            stmt = select(model).where(
                *[getattr(model, column) == value for column, value in key.items()]
            ).limit(1)
            existing = (await session.execute(stmt)).scalars().first()

            if existing is None:
                values = {column: "" for column in COLUMNS[table]}
                values.update({k: "" if v is None else str(v) for k, v in key.items()})
                values.update({k: "" if v is None else str(v) for k, v in fields.items()})
                id_column = ID_COLUMNS[table]
                if not values[id_column]:
                    values[id_column] = str(uuid4())
                existing = model(**values)
                session.add(existing)
            else:
                for column, value in fields.items():
                    setattr(existing, column, "" if value is None else str(value))

            await session.commit()
            return self._to_row(table, existing)

    async def delete_row(self, table: Table, predicate: RowPredicate) -> bool:
        model = _MODELS[table]
        async with self._session("delete", table) as session:
            result = await session.execute(select(model))
            for instance in result.scalars().all():
                if predicate(self._to_row(table, instance)):
                    await session.delete(instance)
                    await session.commit()
                    return True
            return False
