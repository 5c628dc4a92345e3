"""Progress tracker: step/item completion and status propagation.

Completing a step ratchets ancestor statuses forward:

* a ``core`` step advances every ``not_started`` platform of the client,
* any other step advances only its own platform when ``not_started``,
* in both cases the client advances from ``not_started`` to ``in_progress``.

Nothing is ever moved back, and nothing is ever moved to ``completed`` here.
Checklist items are tracked independently and never roll up into their step.
"""

import logging

from tracker.application.interfaces import Row, RowStore, Table, matches_key
from tracker.application.row_mapping import (
    client_from_row,
    format_timestamp,
    item_progress_from_row,
    item_progress_key,
    now_utc,
    platform_from_row,
    step_progress_from_row,
    step_progress_key,
)
from tracker.domain.entities import (
    CORE_PLATFORM,
    ChecklistItemProgress,
    OnboardingCatalog,
    OnboardingStatus,
    PlatformCompletion,
    ProgressStatus,
    StepDefinition,
    StepProgress,
)
from tracker.domain.exceptions import EntityNotFoundError, ValidationError

logger = logging.getLogger(__name__)


class ProgressService:
    """Orchestrates progress writes and status propagation. Depends on the store port (DI)."""

    def __init__(self, store: RowStore, catalog: OnboardingCatalog | None = None):
        self._store = store
        self._catalog = catalog

    # ── Reads ────────────────────────────────────────────────────────

    async def get_client_progress(self, client_id: str) -> list[StepProgress]:
        _require("clientId", client_id)
        rows = await self._store.list_rows(Table.STEP_PROGRESS)
        return [step_progress_from_row(r) for r in rows if r.get("client_id") == client_id]

    async def get_platform_progress(self, client_id: str, platform: str) -> list[StepProgress]:
        _require("clientId", client_id)
        _require("platform", platform)
        rows = await self._store.list_rows(Table.STEP_PROGRESS)
        return [
            step_progress_from_row(r)
            for r in rows
            if r.get("client_id") == client_id and r.get("platform") == platform
        ]

    async def get_checklist_progress(
        self, client_id: str, platform: str, step_id: str
    ) -> list[ChecklistItemProgress]:
        _require_step_address(client_id, platform, step_id)
        key = step_progress_key(client_id, platform, step_id)
        rows = await self._store.list_rows(Table.CHECKLIST_PROGRESS)
        items = [item_progress_from_row(r) for r in rows if matches_key(r, key)]
        return sorted(items, key=lambda item: item.item_index)

    # ── Step progress ────────────────────────────────────────────────

    async def mark_step_complete(
        self,
        client_id: str,
        platform: str,
        step_id: str,
        completed_by: str | None = None,
    ) -> StepProgress:
        """Record the step as completed and propagate statuses upward.

        Re-marking an already completed step refreshes ``completed_at`` only.
        """
        _require_step_address(client_id, platform, step_id)
        self._check_step(platform, step_id)

        row = await self._store.upsert_row(
            Table.STEP_PROGRESS,
            step_progress_key(client_id, platform, step_id),
            {
                "status": ProgressStatus.COMPLETED.value,
                "completed_at": format_timestamp(now_utc()),
                "completed_by": completed_by or "",
            },
        )
        logger.info("Step %s completed for client=%s platform=%s", step_id, client_id, platform)

        await self._propagate_status(client_id, platform)
        return step_progress_from_row(row)

    async def unmark_step(self, client_id: str, platform: str, step_id: str) -> bool:
        """Delete the step's progress row. Ancestor statuses are left as they are."""
        _require_step_address(client_id, platform, step_id)
        key = step_progress_key(client_id, platform, step_id)
        deleted = await self._store.delete_row(
            Table.STEP_PROGRESS, lambda r: matches_key(r, key)
        )
        if deleted:
            logger.info("Step %s unmarked for client=%s platform=%s", step_id, client_id, platform)
        return deleted

    # ── Checklist item progress ──────────────────────────────────────

    async def mark_checklist_item_complete(
        self,
        client_id: str,
        platform: str,
        step_id: str,
        item_index: int,
        completed_by: str | None = None,
    ) -> ChecklistItemProgress:
        """Record a checklist item as completed. Does not touch the step or its ancestors."""
        _require_step_address(client_id, platform, step_id)
        _require_index(item_index)
        step = self._check_step(platform, step_id)
        if step is not None and not step.has_item(item_index):
            raise EntityNotFoundError("ChecklistItem", f"{step_id}[{item_index}]")

        row = await self._store.upsert_row(
            Table.CHECKLIST_PROGRESS,
            item_progress_key(client_id, platform, step_id, item_index),
            {
                "status": ProgressStatus.COMPLETED.value,
                "completed_at": format_timestamp(now_utc()),
                "completed_by": completed_by or "",
            },
        )
        return item_progress_from_row(row)

    async def unmark_checklist_item(
        self, client_id: str, platform: str, step_id: str, item_index: int
    ) -> bool:
        _require_step_address(client_id, platform, step_id)
        _require_index(item_index)
        key = item_progress_key(client_id, platform, step_id, item_index)
        return await self._store.delete_row(
            Table.CHECKLIST_PROGRESS, lambda r: matches_key(r, key)
        )

    # ── Aggregates ───────────────────────────────────────────────────

    async def count_platform_completion(self, client_id: str) -> PlatformCompletion:
        counts = await self.count_all_platform_completion()
        return counts.get(client_id, PlatformCompletion())

    async def count_all_platform_completion(self) -> dict[str, PlatformCompletion]:
        """Attached/completed platform counts for every client from a single bulk read."""
        rows = await self._store.list_rows(Table.CLIENT_PLATFORMS)
        return tally_platform_completion(rows)

    # ── Propagation ──────────────────────────────────────────────────

    async def _propagate_status(self, client_id: str, platform: str) -> None:
        """Advance not_started ancestors to in_progress.

        Best-effort: each write is attempted independently, and failures are
        logged rather than raised because the step write already succeeded.
        """
        try:
            platform_rows = await self._store.list_rows(Table.CLIENT_PLATFORMS)
        except Exception:
            logger.exception("Could not read platforms of client %s for propagation", client_id)
            platform_rows = []

        for row in platform_rows:
            if row.get("client_id") != client_id:
                continue
            if platform != CORE_PLATFORM and row.get("platform") != platform:
                continue
            try:
                instance = platform_from_row(row)
                if not instance.start():
                    continue
                await self._store.upsert_row(
                    Table.CLIENT_PLATFORMS,
                    {"id": instance.id},
                    {"status": instance.status.value},
                )
                logger.debug(
                    "Platform %s of client %s advanced to %s",
                    instance.platform, client_id, instance.status.value,
                )
            except Exception:
                logger.exception(
                    "Failed to advance platform %s of client %s", row.get("platform"), client_id
                )

        try:
            client_row = await self._store.find_row(
                Table.CLIENTS, lambda r: r.get("client_id") == client_id
            )
            if client_row is None:
                return
            client = client_from_row(client_row)
            if client.start():
                await self._store.upsert_row(
                    Table.CLIENTS,
                    {"client_id": client.id},
                    {"status": client.status.value},
                )
                logger.debug("Client %s advanced to %s", client_id, client.status.value)
        except Exception:
            logger.exception("Failed to advance status of client %s", client_id)

    # ── Catalog checks ───────────────────────────────────────────────

    def _check_step(self, platform: str, step_id: str) -> StepDefinition | None:
        """Validate the step against the catalog, when one is configured."""
        if self._catalog is None:
            return None
        step = self._catalog.get_step(step_id)
        if step is None:
            raise EntityNotFoundError("Step", step_id)
        if not step.accepts_platform(platform):
            raise ValidationError(
                f"Step '{step_id}' is scoped to '{step.platform_scope}' "
                f"and cannot be recorded for platform '{platform}'"
            )
        return step


def tally_platform_completion(platform_rows: list[Row]) -> dict[str, PlatformCompletion]:
    """Group ClientPlatforms rows by client and count total/completed instances."""
    totals: dict[str, list[int]] = {}
    for row in platform_rows:
        counts = totals.setdefault(row.get("client_id", ""), [0, 0])
        counts[0] += 1
        if row.get("status") == OnboardingStatus.COMPLETED.value:
            counts[1] += 1
    return {
        client_id: PlatformCompletion(total=total, completed=completed)
        for client_id, (total, completed) in totals.items()
    }


def _require(name: str, value: str | None) -> None:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{name} is required")


def _require_step_address(client_id: str, platform: str, step_id: str) -> None:
    errors = [
        f"{name} is required"
        for name, value in (("clientId", client_id), ("platform", platform), ("stepId", step_id))
        if not isinstance(value, str) or not value.strip()
    ]
    if errors:
        raise ValidationError(errors)


def _require_index(item_index: int) -> None:
    if isinstance(item_index, bool) or not isinstance(item_index, int) or item_index < 0:
        raise ValidationError("itemIndex must be a non-negative integer")
