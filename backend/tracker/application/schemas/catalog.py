"""Pydantic DTOs for the onboarding catalog, documentation and assistant tips."""

from tracker.application.schemas.base import CamelModel


class PhaseResponse(CamelModel):
    id: int
    name: str
    description: str = ""


class PlatformDefinitionResponse(CamelModel):
    id: str
    name: str
    category: str
    description: str = ""
    logo: str | None = None


class ChecklistLinkResponse(CamelModel):
    title: str
    url: str


class ChecklistContentResponse(CamelModel):
    item_index: int
    title: str
    instruction: str = ""
    links: list[ChecklistLinkResponse] = []


class StepDefinitionResponse(CamelModel):
    id: str
    phase: int
    platform_scope: str
    title: str
    description: str = ""
    checklist: list[str] = []
    doc_link: str | None = None


class ChecklistContentEnvelope(CamelModel):
    items: list[ChecklistContentResponse]


class DocumentResponse(CamelModel):
    title: str
    content: str
    category: str | None = None
    platform: str | None = None
    slug: str
    placeholder: bool = False


class TipResponse(CamelModel):
    id: str
    page: str
    message: str
    priority: int
    platform: str | None = None
    phase: int | None = None
    condition: str | None = None
    animation: str | None = None


class TipEnvelope(CamelModel):
    tip: TipResponse | None = None
