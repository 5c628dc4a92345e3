"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator, Sequence

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tracker.config import get_settings
from tracker.application.interfaces import RowStore
from tracker.application.services import TipSelector
from tracker.domain.entities import OnboardingCatalog, Tip
from tracker.infrastructure.catalog import load_catalog, load_tips
from tracker.infrastructure.database import SQLAlchemyRowStore, create_engine
from tracker.infrastructure.logging.log_config import setup_logging
from tracker.infrastructure.memory import InMemoryRowStore, seed_demo_data
from tracker.infrastructure.storage.markdown_document_store import MarkdownDocumentStore
from tracker.presentation.api.error_handlers import register_error_handlers
from tracker.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


async def _ensure_database_exists(database_url: str) -> None:
    """Create the PostgreSQL database if it does not yet exist.

    Connects to the default ``postgres`` maintenance database, checks for the
    target database name, and issues ``CREATE DATABASE`` when missing.
    """
    from urllib.parse import urlparse

    import asyncpg

    plain_url = database_url.replace("+asyncpg", "")
    db_name = urlparse(plain_url).path.lstrip("/")
    if not db_name:
        return

    maintenance_url = plain_url.rsplit("/", 1)[0] + "/postgres"

    try:
        conn = await asyncpg.connect(maintenance_url)
        try:
            exists = await conn.fetchval(
                "SELECT 1 FROM pg_database WHERE datname = $1", db_name
            )
            if not exists:
                # CREATE DATABASE cannot run inside a transaction block
                await conn.execute(f'CREATE DATABASE "{db_name}"')
                logger.info("Created database '%s'", db_name)
        finally:
            await conn.close()
    except Exception as exc:
        logger.warning("Could not auto-create database '%s': %s", db_name, exc)


def _build_row_store() -> tuple[RowStore, bool]:
    """Pick the store from settings. Returns the store and whether to seed demo rows."""
    settings = get_settings()
    if not settings.database_url.strip():
        logger.warning("DATABASE_URL is not configured; using the in-memory store")
        return InMemoryRowStore(), settings.seed_demo_data
    return SQLAlchemyRowStore(create_engine(settings.database_url)), False


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan: prepare the store, seed demo data, dispose on shutdown."""
    settings = get_settings()
    setup_logging()

    store = app.state.row_store
    if isinstance(store, SQLAlchemyRowStore):
        if settings.database_url.startswith("postgresql"):
            await _ensure_database_exists(settings.database_url)
        await store.create_tables()
    elif app.state.seed_demo_data:
        written = await seed_demo_data(store)
        logger.info("Seeded %d demo rows into the in-memory store", written)

    yield

    if isinstance(store, SQLAlchemyRowStore):
        await store.dispose()


def create_app(
    row_store: RowStore | None = None,
    catalog: OnboardingCatalog | None = None,
    tips: Sequence[Tip] | None = None,
) -> FastAPI:
    """Factory function that builds and configures the FastAPI application.

    Collaborators not passed in are built from settings.
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    seed = False
    if row_store is None:
        row_store, seed = _build_row_store()
    if catalog is None:
        catalog = load_catalog(settings.resolve_path(settings.catalog_file))
        if catalog is None:
            logger.warning("No catalog loaded; step and platform ids are not validated")
    if tips is None:
        tips = load_tips(settings.resolve_path(settings.tips_file))

    app.state.row_store = row_store
    app.state.seed_demo_data = seed
    app.state.catalog = catalog
    app.state.tip_selector = TipSelector(tips)
    app.state.document_store = MarkdownDocumentStore(settings.resolve_path(settings.docs_dir))

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "tracker.main:app",
        host="0.0.0.0",
        port=3001,
        reload=True,
    )
