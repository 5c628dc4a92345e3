"""Pydantic DTOs for step and checklist-item progress."""

from pydantic import Field

from tracker.application.schemas.base import CamelModel, Timestamp
from tracker.domain.entities import ProgressStatus


class CompletionRequest(CamelModel):
    """Optional body of the mark-complete endpoints."""

    completed_by: str | None = Field(None, examples=["jane@agency.com"])


class StepProgressResponse(CamelModel):
    id: str
    client_id: str
    platform: str
    step_id: str
    status: ProgressStatus
    completed_at: Timestamp
    completed_by: str = ""


class ChecklistItemProgressResponse(CamelModel):
    id: str
    client_id: str
    platform: str
    step_id: str
    item_index: int
    status: ProgressStatus
    completed_at: Timestamp
    completed_by: str = ""


class StepEnvelope(CamelModel):
    step: StepProgressResponse


class ProgressListEnvelope(CamelModel):
    progress: list[StepProgressResponse]


class ItemEnvelope(CamelModel):
    item: ChecklistItemProgressResponse


class ItemListEnvelope(CamelModel):
    items: list[ChecklistItemProgressResponse]
