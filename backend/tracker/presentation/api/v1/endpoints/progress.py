"""Step and checklist-item progress endpoints."""

from fastapi import APIRouter, Body, Depends, HTTPException, status

from tracker.application.schemas import (
    ChecklistItemProgressResponse,
    CompletionRequest,
    ItemEnvelope,
    ItemListEnvelope,
    ProgressListEnvelope,
    StepEnvelope,
    StepProgressResponse,
    SuccessResponse,
)
from tracker.application.services import ProgressService
from tracker.domain.exceptions import EntityNotFoundError
from tracker.infrastructure.dependencies import get_progress_service

router = APIRouter(prefix="/progress", tags=["Progress"])


@router.get("/{client_id}", response_model=ProgressListEnvelope)
async def get_client_progress(
    client_id: str,
    service: ProgressService = Depends(get_progress_service),
) -> ProgressListEnvelope:
    """Completed steps of the client across all platforms."""
    progress = await service.get_client_progress(client_id)
    return ProgressListEnvelope(progress=[StepProgressResponse.model_validate(p) for p in progress])


@router.get("/{client_id}/{platform}", response_model=ProgressListEnvelope)
async def get_platform_progress(
    client_id: str,
    platform: str,
    service: ProgressService = Depends(get_progress_service),
) -> ProgressListEnvelope:
    progress = await service.get_platform_progress(client_id, platform)
    return ProgressListEnvelope(progress=[StepProgressResponse.model_validate(p) for p in progress])


@router.post("/{client_id}/{platform}/{step_id}", response_model=StepEnvelope)
async def mark_step_complete(
    client_id: str,
    platform: str,
    step_id: str,
    data: CompletionRequest | None = Body(None),
    service: ProgressService = Depends(get_progress_service),
) -> StepEnvelope:
    """Mark a step completed and advance not_started ancestors to in_progress."""
    try:
        step = await service.mark_step_complete(
            client_id, platform, step_id, data.completed_by if data else None
        )
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return StepEnvelope(step=StepProgressResponse.model_validate(step))


@router.delete("/{client_id}/{platform}/{step_id}", response_model=SuccessResponse)
async def unmark_step(
    client_id: str,
    platform: str,
    step_id: str,
    service: ProgressService = Depends(get_progress_service),
) -> SuccessResponse:
    """Remove the step's completion record; ancestor statuses are not reverted."""
    if not await service.unmark_step(client_id, platform, step_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Progress not found")
    return SuccessResponse()


@router.get("/{client_id}/{platform}/{step_id}/items", response_model=ItemListEnvelope)
async def get_checklist_progress(
    client_id: str,
    platform: str,
    step_id: str,
    service: ProgressService = Depends(get_progress_service),
) -> ItemListEnvelope:
    items = await service.get_checklist_progress(client_id, platform, step_id)
    return ItemListEnvelope(items=[ChecklistItemProgressResponse.model_validate(i) for i in items])


@router.post("/{client_id}/{platform}/{step_id}/items/{item_index}", response_model=ItemEnvelope)
async def mark_checklist_item_complete(
    client_id: str,
    platform: str,
    step_id: str,
    item_index: int,
    data: CompletionRequest | None = Body(None),
    service: ProgressService = Depends(get_progress_service),
) -> ItemEnvelope:
    """Mark one checklist item completed. The step itself is not affected."""
    try:
        item = await service.mark_checklist_item_complete(
            client_id, platform, step_id, item_index, data.completed_by if data else None
        )
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ItemEnvelope(item=ChecklistItemProgressResponse.model_validate(item))


@router.delete(
    "/{client_id}/{platform}/{step_id}/items/{item_index}", response_model=SuccessResponse
)
async def unmark_checklist_item(
    client_id: str,
    platform: str,
    step_id: str,
    item_index: int,
    service: ProgressService = Depends(get_progress_service),
) -> SuccessResponse:
    if not await service.unmark_checklist_item(client_id, platform, step_id, item_index):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Checklist item progress not found")
    return SuccessResponse()
