"""Context-aware tip selection for the fun-mode assistant."""

import random
from collections.abc import Iterable, Sequence

from tracker.domain.entities import ANY_PAGE, Tip, TipContext

TOP_CANDIDATES = 3


class TipSelector:
    """Picks a tip for the current page/platform/phase, preferring unseen tips.

    The random source is injectable so selection can be made deterministic.
    """

    def __init__(self, tips: Sequence[Tip], rng: random.Random | None = None):
        self._tips = tuple(tips)
        self._rng = rng or random.Random()

    @property
    def tips(self) -> tuple[Tip, ...]:
        return self._tips

    def get_tip(self, tip_id: str) -> Tip | None:
        return next((t for t in self._tips if t.id == tip_id), None)

    def tips_for_context(self, context: TipContext) -> list[Tip]:
        """Tips whose page, platform and phase filters all match *context*."""
        return [
            tip for tip in self._tips
            if (tip.page == ANY_PAGE or tip.page == context.page)
            and (tip.platform is None or tip.platform == context.platform)
            and (tip.phase is None or tip.phase == context.phase)
        ]

    def select(self, context: TipContext, seen_ids: Iterable[str] = ()) -> Tip | None:
        candidates = self.tips_for_context(context)
        if not candidates:
            return None

        seen = set(seen_ids)
        unseen = [t for t in candidates if t.id not in seen]
        pool = sorted(unseen or candidates, key=lambda t: t.priority, reverse=True)
        return self._rng.choice(pool[:TOP_CANDIDATES])
