"""Documentation endpoints: structure, checklist instructions and markdown pages."""

from fastapi import APIRouter, Depends

from tracker.application.schemas import (
    ChecklistContentEnvelope,
    ChecklistContentResponse,
    ChecklistLinkResponse,
    DocumentResponse,
)
from tracker.application.services import Document, DocumentationService
from tracker.infrastructure.dependencies import get_documentation_service

router = APIRouter(prefix="/docs", tags=["Documentation"])


def _document_response(document: Document) -> DocumentResponse:
    return DocumentResponse(
        title=document.title,
        content=document.content,
        category=document.category,
        platform=document.platform,
        slug=document.slug,
        placeholder=document.placeholder,
    )


@router.get("")
async def get_structure(
    service: DocumentationService = Depends(get_documentation_service),
) -> dict:
    return {"structure": service.get_structure()}


# Declared before /{category}/{slug} so "content" is not taken as a category
@router.get("/content/{step_id}", response_model=ChecklistContentEnvelope)
async def get_checklist_content(
    step_id: str,
    service: DocumentationService = Depends(get_documentation_service),
) -> ChecklistContentEnvelope:
    """Expanded instructions and links for each checklist item of a step."""
    items = service.get_checklist_content(step_id)
    return ChecklistContentEnvelope(
        items=[
            ChecklistContentResponse(
                item_index=item.index,
                title=item.title,
                instruction=item.instruction,
                links=[ChecklistLinkResponse(title=l.title, url=l.url) for l in item.links],
            )
            for item in items
        ]
    )


@router.get("/platforms/{platform}/{slug}", response_model=DocumentResponse)
async def get_platform_document(
    platform: str,
    slug: str,
    service: DocumentationService = Depends(get_documentation_service),
) -> DocumentResponse:
    return _document_response(await service.get_platform_document(platform, slug))


@router.get("/{category}/{slug}", response_model=DocumentResponse)
async def get_document(
    category: str,
    slug: str,
    service: DocumentationService = Depends(get_documentation_service),
) -> DocumentResponse:
    """A markdown page, or placeholder content when the page is not written yet."""
    return _document_response(await service.get_document(category, slug))
