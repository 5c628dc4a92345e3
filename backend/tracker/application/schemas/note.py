"""Pydantic DTOs for step- and item-level notes."""

from pydantic import Field

from tracker.application.schemas.base import CamelModel, Timestamp


class NoteSaveRequest(CamelModel):
    """``note`` is required but may be empty; an empty note reads as deleted."""

    note: str | None = None
    item_index: int | None = Field(None, ge=0)
    updated_by: str | None = None


class NoteResponse(CamelModel):
    id: str
    client_id: str
    platform: str
    step_id: str
    item_index: int | None = None
    note: str
    updated_at: Timestamp
    updated_by: str = ""


class NoteEnvelope(CamelModel):
    note: NoteResponse


class NoteListEnvelope(CamelModel):
    notes: list[NoteResponse]


class NoteDeletedResponse(CamelModel):
    success: bool = True
    deleted: bool = True
