"""Client and platform-instance endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from tracker.application.schemas import (
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
    StepProgressResponse,
    SuccessResponse,
)
from tracker.application.services import ClientService
from tracker.domain.exceptions import DuplicateEntityError, EntityNotFoundError
from tracker.infrastructure.dependencies import get_client_service

router = APIRouter(prefix="/clients", tags=["Clients"])


@router.get("", response_model=ClientListEnvelope)
async def list_clients(
    service: ClientService = Depends(get_client_service),
) -> ClientListEnvelope:
    """All clients with their attached and completed platform counts."""
    summaries = await service.list_clients()
    return ClientListEnvelope(
        clients=[
            ClientListItem(
                **ClientResponse.model_validate(s.client).model_dump(),
                platform_count=s.completion.total,
                completed_platforms=s.completion.completed,
            )
            for s in summaries
        ]
    )


@router.get("/{client_id}", response_model=ClientDetailEnvelope)
async def get_client(
    client_id: str,
    service: ClientService = Depends(get_client_service),
) -> ClientDetailEnvelope:
    """A client with its platforms and step progress."""
    try:
        detail = await service.get_client_detail(client_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ClientDetailEnvelope(
        client=ClientDetailResponse(
            **ClientResponse.model_validate(detail.client).model_dump(),
            platforms=[PlatformInstanceResponse.model_validate(p) for p in detail.platforms],
            progress=[StepProgressResponse.model_validate(p) for p in detail.progress],
        )
    )


@router.post("", response_model=ClientEnvelope, status_code=status.HTTP_201_CREATED)
async def create_client(
    data: ClientCreate,
    service: ClientService = Depends(get_client_service),
) -> ClientEnvelope:
    client = await service.create_client(data)
    return ClientEnvelope(client=ClientResponse.model_validate(client))


@router.put("/{client_id}", response_model=ClientEnvelope)
async def update_client(
    client_id: str,
    data: ClientUpdate,
    service: ClientService = Depends(get_client_service),
) -> ClientEnvelope:
    try:
        client = await service.update_client(client_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ClientEnvelope(client=ClientResponse.model_validate(client))


@router.delete("/{client_id}", response_model=SuccessResponse)
async def delete_client(
    client_id: str,
    service: ClientService = Depends(get_client_service),
) -> SuccessResponse:
    """Delete the client record. Platforms, progress and notes are left in place."""
    try:
        await service.delete_client(client_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return SuccessResponse()


@router.post(
    "/{client_id}/platforms",
    response_model=PlatformEnvelope,
    status_code=status.HTTP_201_CREATED,
)
async def add_platform(
    client_id: str,
    data: PlatformAttachRequest,
    service: ClientService = Depends(get_client_service),
) -> PlatformEnvelope:
    """Attach a data platform to the client; starts as not_started."""
    try:
        instance = await service.add_platform(client_id, data.platform)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except DuplicateEntityError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return PlatformEnvelope(platform=PlatformInstanceResponse.model_validate(instance))


@router.delete("/{client_id}/platforms/{platform}", response_model=SuccessResponse)
async def remove_platform(
    client_id: str,
    platform: str,
    service: ClientService = Depends(get_client_service),
) -> SuccessResponse:
    try:
        await service.remove_platform(client_id, platform)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return SuccessResponse()
