"""Unit tests for the DocumentationService."""

import pytest

from tracker.application.interfaces import DocumentStore
from tracker.application.services import DocumentationService
from tracker.application.services.documentation_service import format_title
from tracker.domain.entities import ChecklistItemDefinition, OnboardingCatalog, StepDefinition
from tracker.domain.exceptions import ValidationError


class FakeDocumentStore(DocumentStore):
    """In-memory fake document store for unit testing."""

    def __init__(self, documents: dict[tuple[str, ...], str]):
        self._documents = documents
        self.reads: list[tuple[str, ...]] = []

    async def read(self, *parts: str) -> str | None:
        self.reads.append(parts)
        return self._documents.get(parts)


CATALOG = OnboardingCatalog(
    steps=(
        StepDefinition(
            step_id="core.access_token",
            phase=2,
            platform_scope="core",
            title="Access Token Generation",
            checklist=(
                ChecklistItemDefinition(index=1, title="Token stored securely"),
                ChecklistItemDefinition(index=0, title="Access token generated", instruction="Use Events Manager"),
            ),
        ),
    ),
)


@pytest.fixture
def documents() -> FakeDocumentStore:
    return FakeDocumentStore(
        {
            ("meta-capi", "overview"): "Intro\n\n# Conversions API Overview\n\nBody",
            ("platforms", "snowflake", "setup"): "No heading here",
        }
    )


@pytest.fixture
def service(documents: FakeDocumentStore) -> DocumentationService:
    return DocumentationService(documents, CATALOG)


def test_format_title():
    assert format_title("pixel-setup") == "Pixel Setup"
    assert format_title("ga4") == "Ga4"


@pytest.mark.asyncio
async def test_document_title_comes_from_first_heading(service):
    doc = await service.get_document("meta-capi", "overview")

    assert doc.title == "Conversions API Overview"
    assert doc.category == "meta-capi"
    assert not doc.placeholder


@pytest.mark.asyncio
async def test_missing_document_gets_placeholder(service):
    doc = await service.get_document("meta-capi", "event-parameters")

    assert doc.placeholder
    assert doc.title == "Event Parameters"
    assert doc.content.startswith("# Event Parameters")
    assert "coming soon" in doc.content


@pytest.mark.asyncio
async def test_platform_document_falls_back_to_formatted_title(service):
    doc = await service.get_platform_document("snowflake", "setup")

    assert doc.title == "Snowflake - Setup"
    assert doc.platform == "snowflake"
    assert not doc.placeholder


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "category, slug",
    [("..", "overview"), ("meta-capi", "../secrets"), ("meta_capi", "overview"), ("meta-capi", "")],
)
async def test_invalid_path_parameters_are_rejected(service, documents, category, slug):
    with pytest.raises(ValidationError, match="Invalid path parameters"):
        await service.get_document(category, slug)

    assert documents.reads == []


def test_checklist_content_is_sorted_by_index(service):
    items = service.get_checklist_content("core.access_token")

    assert [i.title for i in items] == ["Access token generated", "Token stored securely"]
    assert service.get_checklist_content("unknown") == []


def test_structure_lists_meta_capi_docs(service):
    structure = service.get_structure()

    slugs = [d["slug"] for d in structure["meta-capi"]["docs"]]
    assert "overview" in slugs
    assert "snowflake" in structure["platforms"]["categories"]["data-warehouses"]["platforms"]
