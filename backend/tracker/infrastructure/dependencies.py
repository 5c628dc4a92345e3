"""FastAPI dependency injection: wires infrastructure to application layer.

The store, catalog and tips are created once by the application factory and
kept on ``app.state``; services are cheap and built per request.
"""

from fastapi import Depends, Request

from tracker.application.interfaces import DocumentStore, RowStore
from tracker.application.services import (
    ClientService,
    DocumentationService,
    NoteService,
    ProgressService,
    TipSelector,
)
from tracker.domain.entities import OnboardingCatalog


def get_row_store(request: Request) -> RowStore:
    """The application-wide row store."""
    return request.app.state.row_store


def get_catalog(request: Request) -> OnboardingCatalog | None:
    return request.app.state.catalog


def get_document_store(request: Request) -> DocumentStore:
    return request.app.state.document_store


def get_tip_selector(request: Request) -> TipSelector:
    return request.app.state.tip_selector


def get_progress_service(
    store: RowStore = Depends(get_row_store),
    catalog: OnboardingCatalog | None = Depends(get_catalog),
) -> ProgressService:
    """Provides a ProgressService validating against the loaded catalog."""
    return ProgressService(store, catalog)


def get_client_service(
    store: RowStore = Depends(get_row_store),
    catalog: OnboardingCatalog | None = Depends(get_catalog),
) -> ClientService:
    return ClientService(store, catalog)


def get_note_service(store: RowStore = Depends(get_row_store)) -> NoteService:
    return NoteService(store)


def get_documentation_service(
    documents: DocumentStore = Depends(get_document_store),
    catalog: OnboardingCatalog | None = Depends(get_catalog),
) -> DocumentationService:
    return DocumentationService(documents, catalog or OnboardingCatalog())
