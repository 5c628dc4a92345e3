"""Step- and item-level note endpoints."""

from fastapi import APIRouter, Depends, Query

from tracker.application.schemas import (
    NoteDeletedResponse,
    NoteEnvelope,
    NoteListEnvelope,
    NoteResponse,
    NoteSaveRequest,
)
from tracker.application.services import NoteService
from tracker.infrastructure.dependencies import get_note_service

router = APIRouter(prefix="/notes", tags=["Notes"])


@router.get("/{client_id}/{platform}/{step_id}", response_model=NoteListEnvelope)
async def get_notes(
    client_id: str,
    platform: str,
    step_id: str,
    item_index: int | None = Query(None, alias="itemIndex", ge=0),
    service: NoteService = Depends(get_note_service),
) -> NoteListEnvelope:
    """Notes of the step, or of one checklist item when ``itemIndex`` is given."""
    notes = await service.get_notes(client_id, platform, step_id, item_index)
    return NoteListEnvelope(notes=[NoteResponse.model_validate(n) for n in notes])


@router.post("/{client_id}/{platform}/{step_id}", response_model=NoteEnvelope)
async def save_note(
    client_id: str,
    platform: str,
    step_id: str,
    data: NoteSaveRequest,
    service: NoteService = Depends(get_note_service),
) -> NoteEnvelope:
    note = await service.save_note(
        client_id, platform, step_id, data.note, data.item_index, data.updated_by
    )
    return NoteEnvelope(note=NoteResponse.model_validate(note))


@router.delete("/{client_id}/{platform}/{step_id}", response_model=NoteDeletedResponse)
async def delete_note(
    client_id: str,
    platform: str,
    step_id: str,
    item_index: int | None = Query(None, alias="itemIndex", ge=0),
    service: NoteService = Depends(get_note_service),
) -> NoteDeletedResponse:
    """Clears the note text; the row itself is kept."""
    await service.clear_note(client_id, platform, step_id, item_index)
    return NoteDeletedResponse()
