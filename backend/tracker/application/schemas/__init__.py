from .client import (
    ClientCreate,
    ClientDetailEnvelope,
    ClientDetailResponse,
    ClientEnvelope,
    ClientListEnvelope,
    ClientListItem,
    ClientResponse,
    ClientUpdate,
    PlatformAttachRequest,
    PlatformEnvelope,
    PlatformInstanceResponse,
    SuccessResponse,
)
from .progress import (
    ChecklistItemProgressResponse,
    CompletionRequest,
    ItemEnvelope,
    ItemListEnvelope,
    ProgressListEnvelope,
    StepEnvelope,
    StepProgressResponse,
)
from .note import (
    NoteDeletedResponse,
    NoteEnvelope,
    NoteListEnvelope,
    NoteResponse,
    NoteSaveRequest,
)
from .catalog import (
    ChecklistContentEnvelope,
    ChecklistContentResponse,
    ChecklistLinkResponse,
    DocumentResponse,
    PhaseResponse,
    PlatformDefinitionResponse,
    StepDefinitionResponse,
    TipEnvelope,
    TipResponse,
)

__all__ = [
    "ClientCreate",
    "ClientDetailEnvelope",
    "ClientDetailResponse",
    "ClientEnvelope",
    "ClientListEnvelope",
    "ClientListItem",
    "ClientResponse",
    "ClientUpdate",
    "PlatformAttachRequest",
    "PlatformEnvelope",
    "PlatformInstanceResponse",
    "SuccessResponse",
    "ChecklistItemProgressResponse",
    "CompletionRequest",
    "ItemEnvelope",
    "ItemListEnvelope",
    "ProgressListEnvelope",
    "StepEnvelope",
    "StepProgressResponse",
    "NoteDeletedResponse",
    "NoteEnvelope",
    "NoteListEnvelope",
    "NoteResponse",
    "NoteSaveRequest",
    "ChecklistContentEnvelope",
    "ChecklistContentResponse",
    "ChecklistLinkResponse",
    "DocumentResponse",
    "PhaseResponse",
    "PlatformDefinitionResponse",
    "StepDefinitionResponse",
    "TipEnvelope",
    "TipResponse",
]
