from .progress_service import ProgressService, tally_platform_completion
from .client_service import ClientDetail, ClientService, ClientSummary
from .note_service import NoteService
from .documentation_service import Document, DocumentationService
from .tip_selector import TipSelector

__all__ = [
    "ProgressService",
    "tally_platform_completion",
    "ClientDetail",
    "ClientService",
    "ClientSummary",
    "NoteService",
    "Document",
    "DocumentationService",
    "TipSelector",
]
