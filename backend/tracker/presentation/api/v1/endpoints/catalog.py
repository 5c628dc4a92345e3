"""Read-only catalog endpoints: wizard phases, supported platforms and steps."""

from fastapi import APIRouter, Depends, HTTPException, status

from tracker.application.schemas import (
    PhaseResponse,
    PlatformDefinitionResponse,
    StepDefinitionResponse,
)
from tracker.domain.entities import OnboardingCatalog, StepDefinition
from tracker.infrastructure.dependencies import get_catalog

router = APIRouter(prefix="/catalog", tags=["Catalog"])


def _require_catalog(catalog: OnboardingCatalog | None) -> OnboardingCatalog:
    if catalog is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="Catalog is not loaded"
        )
    return catalog


def _step_response(step: StepDefinition) -> StepDefinitionResponse:
    return StepDefinitionResponse(
        id=step.step_id,
        phase=step.phase,
        platform_scope=step.platform_scope,
        title=step.title,
        description=step.description,
        checklist=[item.title for item in step.checklist],
        doc_link=step.doc_link,
    )


@router.get("/phases", response_model=list[PhaseResponse])
async def list_phases(
    catalog: OnboardingCatalog | None = Depends(get_catalog),
) -> list[PhaseResponse]:
    return [PhaseResponse.model_validate(p) for p in _require_catalog(catalog).phases]


@router.get("/platforms", response_model=list[PlatformDefinitionResponse])
async def list_platforms(
    catalog: OnboardingCatalog | None = Depends(get_catalog),
) -> list[PlatformDefinitionResponse]:
    return [
        PlatformDefinitionResponse.model_validate(p) for p in _require_catalog(catalog).platforms
    ]


@router.get("/steps", response_model=list[StepDefinitionResponse])
async def list_steps(
    platform: str | None = None,
    catalog: OnboardingCatalog | None = Depends(get_catalog),
) -> list[StepDefinitionResponse]:
    """All steps, or the wizard sequence of one platform ordered by phase."""
    catalog = _require_catalog(catalog)
    if platform is None:
        steps = list(catalog.steps)
    elif catalog.has_platform(platform):
        steps = catalog.wizard_steps(platform)
    else:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=f"Platform '{platform}' not found"
        )
    return [_step_response(s) for s in steps]
