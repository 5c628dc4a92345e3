"""Assistant tip endpoint."""

from fastapi import APIRouter, Depends, Query

from tracker.application.schemas import TipEnvelope, TipResponse
from tracker.application.services import TipSelector
from tracker.domain.entities import TipContext
from tracker.infrastructure.dependencies import get_tip_selector

router = APIRouter(prefix="/tips", tags=["Tips"])


@router.get("/next", response_model=TipEnvelope)
async def next_tip(
    page: str,
    platform: str | None = None,
    phase: int | None = Query(None, ge=1),
    seen: list[str] | None = Query(None),
    selector: TipSelector = Depends(get_tip_selector),
) -> TipEnvelope:
    """Pick a tip for the page, preferring ids not listed in ``seen``.

    ``seen`` may be repeated or given as a comma-separated list.
    """
    seen_ids = {tip_id for value in seen or () for tip_id in value.split(",") if tip_id}
    tip = selector.select(TipContext(page=page, platform=platform, phase=phase), seen_ids)
    return TipEnvelope(tip=TipResponse.model_validate(tip) if tip else None)
