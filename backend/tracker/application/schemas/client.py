"""Pydantic DTOs (Data Transfer Objects) for clients and platform instances."""

from pydantic import Field

from tracker.application.schemas.base import CamelModel, Timestamp
from tracker.application.schemas.progress import StepProgressResponse
from tracker.domain.entities import OnboardingStatus


class ClientCreate(CamelModel):
    """Schema for creating a client: checked by ClientService, not by pydantic."""

    name: str | None = Field(None, examples=["Acme Corporation"])
    email: str | None = Field(None, examples=["contact@acme.com"])
    notes: str | None = Field(None, examples=["Large enterprise client"])


class ClientUpdate(CamelModel):
    """Schema for updating a client: all fields optional."""

    name: str | None = None
    email: str | None = None
    status: str | None = Field(None, examples=["in_progress"])
    notes: str | None = None


class ClientResponse(CamelModel):
    id: str
    name: str
    email: str
    notes: str
    status: OnboardingStatus
    created_at: Timestamp


class ClientListItem(ClientResponse):
    """Client plus attached/completed platform counts."""

    platform_count: int = 0
    completed_platforms: int = 0


class PlatformInstanceResponse(CamelModel):
    id: str
    client_id: str
    platform: str
    status: OnboardingStatus
    started_at: Timestamp | None = None
    completed_at: Timestamp | None = None


class ClientDetailResponse(ClientResponse):
    platforms: list[PlatformInstanceResponse] = []
    progress: list[StepProgressResponse] = []


class ClientEnvelope(CamelModel):
    client: ClientResponse


class ClientDetailEnvelope(CamelModel):
    client: ClientDetailResponse


class ClientListEnvelope(CamelModel):
    clients: list[ClientListItem]


class PlatformAttachRequest(CamelModel):
    platform: str | None = Field(None, examples=["snowflake"])


class PlatformEnvelope(CamelModel):
    platform: PlatformInstanceResponse


class SuccessResponse(CamelModel):
    success: bool = True
