"""Loads the onboarding catalog and the assistant tips from YAML files.

Catalog layout::

    phases:    [{id, name, description}]
    platforms: [{id, name, category, description, logo}]
    steps:
      - id: core.prerequisites
        phase: 1
        scope: core            # core | shared | <platform id>
        title: ...
        checklist:
          - "Plain item title"
          - title: Item with instructions
            instruction: ...
            links: [{title, url}]

Tips layout::

    tips: [{id, page, message, priority, platform, phase, condition, animation}]
"""

import logging
from pathlib import Path

import yaml

from tracker.domain.entities import (
    DEFAULT_TIP_PRIORITY,
    ChecklistItemDefinition,
    ChecklistLink,
    OnboardingCatalog,
    Phase,
    PlatformDefinition,
    StepDefinition,
    Tip,
)

logger = logging.getLogger(__name__)


def load_catalog(path: str | Path) -> OnboardingCatalog | None:
    """Build the catalog from *path*, or return None when the file is unusable."""
    data = _load_yaml(Path(path))
    if not isinstance(data, dict):
        return None

    phases = tuple(_build_phase(entry) for entry in data.get("phases", []))
    platforms = tuple(_build_platform(entry) for entry in data.get("platforms", []))
    steps = tuple(_build_step(entry) for entry in data.get("steps", []))

    duplicates = {s.step_id for s in steps if sum(o.step_id == s.step_id for o in steps) > 1}
    if duplicates:
        logger.warning("Duplicate step ids in %s: %s", path, ", ".join(sorted(duplicates)))

    logger.info(
        "Loaded catalog from %s: %d phases, %d platforms, %d steps",
        path, len(phases), len(platforms), len(steps),
    )
    return OnboardingCatalog(phases=phases, platforms=platforms, steps=steps)


def load_tips(path: str | Path) -> list[Tip]:
    """Read the tips file; entries without an id, page or message are skipped."""
    data = _load_yaml(Path(path))
    if not isinstance(data, dict):
        return []

    tips: list[Tip] = []
    for entry in data.get("tips", []):
        if not isinstance(entry, dict) or not all(k in entry for k in ("id", "page", "message")):
            logger.warning("Skipping malformed tip entry in %s: %r", path, entry)
            continue
        tips.append(
            Tip(
                id=str(entry["id"]),
                page=str(entry["page"]),
                message=str(entry["message"]).strip(),
                priority=int(entry.get("priority") or DEFAULT_TIP_PRIORITY),
                platform=entry.get("platform"),
                phase=entry.get("phase"),
                condition=entry.get("condition"),
                animation=entry.get("animation"),
            )
        )

    logger.info("Loaded %d tips from %s", len(tips), path)
    return tips


def _load_yaml(path: Path) -> dict | None:
    """Load and parse a YAML file, returning None on error."""
    if not path.exists():
        logger.warning("YAML file not found: %s", path)
        return None
    try:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f)
    except Exception:
        logger.exception("Failed to parse YAML file: %s", path)
        return None


def _build_phase(entry: dict) -> Phase:
    return Phase(
        id=int(entry["id"]),
        name=entry["name"],
        description=entry.get("description", ""),
    )


def _build_platform(entry: dict) -> PlatformDefinition:
    return PlatformDefinition(
        id=entry["id"],
        name=entry.get("name", entry["id"]),
        category=entry.get("category", ""),
        description=entry.get("description", ""),
        logo=entry.get("logo"),
    )


def _build_step(entry: dict) -> StepDefinition:
    """Map a raw YAML dict to a StepDefinition; checklist indexes follow list order."""
    checklist = tuple(
        _build_checklist_item(index, item)
        for index, item in enumerate(entry.get("checklist", []))
    )
    return StepDefinition(
        step_id=entry["id"],
        phase=int(entry["phase"]),
        platform_scope=entry["scope"],
        title=entry.get("title", entry["id"]),
        description=entry.get("description", "").strip(),
        checklist=checklist,
        doc_link=entry.get("doc_link"),
    )


def _build_checklist_item(index: int, item: str | dict) -> ChecklistItemDefinition:
    if isinstance(item, str):
        return ChecklistItemDefinition(index=index, title=item)
    links = tuple(
        ChecklistLink(title=link["title"], url=link["url"])
        for link in item.get("links", [])
    )
    return ChecklistItemDefinition(
        index=index,
        title=item["title"],
        instruction=item.get("instruction", "").strip(),
        links=links,
    )
