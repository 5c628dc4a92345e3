"""Application service for the documentation pages and checklist instructions."""

import re
from dataclasses import dataclass
from typing import Any

from tracker.application.interfaces import DocumentStore
from tracker.domain.entities import ChecklistItemDefinition, OnboardingCatalog
from tracker.domain.exceptions import ValidationError

_PATH_PARAM = re.compile(r"^[a-z0-9-]+$", re.IGNORECASE)
_TITLE = re.compile(r"^#\s+(.+)$", re.MULTILINE)

DOC_STRUCTURE: dict[str, Any] = {
    "meta-capi": {
        "title": "Meta CAPI",
        "description": "Core Conversions API documentation",
        "docs": [
            {"slug": "overview", "title": "Overview"},
            {"slug": "requirements", "title": "Requirements"},
            {"slug": "pixel-setup", "title": "Pixel Setup"},
            {"slug": "access-token", "title": "Access Token"},
            {"slug": "event-parameters", "title": "Event Parameters"},
        ],
    },
    "platforms": {
        "title": "Platform Guides",
        "description": "Platform-specific integration guides",
        "categories": {
            "data-warehouses": {
                "title": "Data Warehouses",
                "platforms": ["redshift", "snowflake", "bigquery"],
            },
            "crms-cdps": {
                "title": "CRMs & CDPs",
                "platforms": ["salesforce", "hubspot", "segment"],
            },
            "analytics": {
                "title": "Analytics",
                "platforms": ["amplitude", "mixpanel", "ga4"],
            },
        },
    },
}

_PLACEHOLDER = """# {title}

This documentation is coming soon.

For now, please refer to the official Meta documentation:
- [Conversions API Overview](https://developers.facebook.com/docs/marketing-api/conversions-api)
- [Getting Started](https://developers.facebook.com/docs/marketing-api/conversions-api/get-started)
- [API Parameters](https://developers.facebook.com/docs/marketing-api/conversions-api/parameters)

## Need Help?

If you need immediate assistance, contact your administrator or refer to the official platform documentation.
"""


@dataclass
class Document:
    title: str
    content: str
    slug: str
    category: str | None = None
    platform: str | None = None
    placeholder: bool = False


def format_title(slug: str) -> str:
    """``pixel-setup`` → ``Pixel Setup``."""
    return " ".join(word[:1].upper() + word[1:] for word in slug.replace("-", " ").split())


def _check_path_params(*params: str) -> None:
    for param in params:
        if not _PATH_PARAM.match(param) or ".." in param:
            raise ValidationError("Invalid path parameters")


class DocumentationService:
    """Serves markdown documents and falls back to placeholder content."""

    def __init__(self, document_store: DocumentStore, catalog: OnboardingCatalog):
        self._documents = document_store
        self._catalog = catalog

    def get_structure(self) -> dict[str, Any]:
        return DOC_STRUCTURE

    def get_checklist_content(self, step_id: str) -> list[ChecklistItemDefinition]:
        return self._catalog.checklist_content(step_id)

    async def get_document(self, category: str, slug: str) -> Document:
        _check_path_params(category, slug)
        content = await self._documents.read(category, slug)
        if content is None:
            return Document(
                title=format_title(slug),
                content=_PLACEHOLDER.format(title=format_title(slug)),
                category=category,
                slug=slug,
                placeholder=True,
            )
        return Document(
            title=_extract_title(content) or format_title(slug),
            content=content,
            category=category,
            slug=slug,
        )

    async def get_platform_document(self, platform: str, slug: str) -> Document:
        _check_path_params(platform, slug)
        fallback_title = f"{format_title(platform)} - {format_title(slug)}"
        content = await self._documents.read("platforms", platform, slug)
        if content is None:
            return Document(
                title=fallback_title,
                content=_PLACEHOLDER.format(title=format_title(slug)),
                platform=platform,
                slug=slug,
                placeholder=True,
            )
        return Document(
            title=_extract_title(content) or fallback_title,
            content=content,
            platform=platform,
            slug=slug,
        )


def _extract_title(content: str) -> str | None:
    match = _TITLE.search(content)
    return match.group(1).strip() if match else None
