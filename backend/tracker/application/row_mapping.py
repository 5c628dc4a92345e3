"""Adapter between typed domain entities and flat string rows.

Every cell in the store is a string. Timestamps are ISO-8601 UTC with a
``Z`` suffix and millisecond precision; an empty cell means "no value".
"""

from datetime import datetime, timezone

from tracker.application.interfaces import Row
from tracker.domain.entities import (
    ChecklistItemProgress,
    Client,
    Note,
    OnboardingStatus,
    PlatformInstance,
    ProgressStatus,
    StepProgress,
)
from tracker.domain.exceptions import PersistenceError


def format_timestamp(value: datetime | None) -> str:
    if value is None:
        return ""
    value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_timestamp(raw: str | None) -> datetime | None:
    if not raw:
        return None
    try:
        parsed = datetime.fromisoformat(raw.replace("Z", "+00:00"))
    except ValueError as exc:
        raise PersistenceError("parse", "timestamp", f"invalid timestamp {raw!r}") from exc
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def now_utc() -> datetime:
    return datetime.now(timezone.utc)


def _parse_index(raw: str | None, table: str) -> int | None:
    if raw is None or raw == "":
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise PersistenceError("parse", table, f"invalid item_index {raw!r}") from exc


def _parse_status(raw: str | None) -> OnboardingStatus:
    try:
        return OnboardingStatus(raw or OnboardingStatus.NOT_STARTED.value)
    except ValueError as exc:
        raise PersistenceError("parse", "status", f"unknown status {raw!r}") from exc


# ── Clients ──────────────────────────────────────────────────────────

def client_from_row(row: Row) -> Client:
    return Client(
        id=row["client_id"],
        name=row.get("client_name", ""),
        email=row.get("contact_email", ""),
        notes=row.get("notes", ""),
        status=_parse_status(row.get("status")),
        created_at=parse_timestamp(row.get("created_at")) or now_utc(),
    )


def client_to_row(client: Client) -> Row:
    return {
        "client_id": client.id,
        "client_name": client.name,
        "contact_email": client.email,
        "created_at": format_timestamp(client.created_at),
        "status": client.status.value,
        "notes": client.notes,
    }


# ── Platform instances ───────────────────────────────────────────────

def platform_from_row(row: Row) -> PlatformInstance:
    return PlatformInstance(
        id=row["id"],
        client_id=row["client_id"],
        platform=row["platform"],
        status=_parse_status(row.get("status")),
        started_at=parse_timestamp(row.get("started_at")),
        completed_at=parse_timestamp(row.get("completed_at")),
    )


def platform_to_row(instance: PlatformInstance) -> Row:
    return {
        "id": instance.id,
        "client_id": instance.client_id,
        "platform": instance.platform,
        "status": instance.status.value,
        "started_at": format_timestamp(instance.started_at),
        "completed_at": format_timestamp(instance.completed_at),
    }


# ── Step progress ────────────────────────────────────────────────────

def step_progress_from_row(row: Row) -> StepProgress:
    return StepProgress(
        id=row["id"],
        client_id=row["client_id"],
        platform=row["platform"],
        step_id=row["step_id"],
        status=ProgressStatus(row.get("status") or ProgressStatus.COMPLETED.value),
        completed_at=parse_timestamp(row.get("completed_at")) or now_utc(),
        completed_by=row.get("completed_by", ""),
    )


def step_progress_key(client_id: str, platform: str, step_id: str) -> Row:
    return {"client_id": client_id, "platform": platform, "step_id": step_id}


# ── Checklist item progress ──────────────────────────────────────────

def item_progress_from_row(row: Row) -> ChecklistItemProgress:
    return ChecklistItemProgress(
        id=row["id"],
        client_id=row["client_id"],
        platform=row["platform"],
        step_id=row["step_id"],
        item_index=_parse_index(row.get("item_index"), "ChecklistProgress") or 0,
        status=ProgressStatus(row.get("status") or ProgressStatus.COMPLETED.value),
        completed_at=parse_timestamp(row.get("completed_at")) or now_utc(),
        completed_by=row.get("completed_by", ""),
    )


def item_progress_key(
    client_id: str, platform: str, step_id: str, item_index: int
) -> Row:
    return {
        "client_id": client_id,
        "platform": platform,
        "step_id": step_id,
        "item_index": str(item_index),
    }


# ── Notes ────────────────────────────────────────────────────────────

def note_from_row(row: Row) -> Note:
    return Note(
        id=row["id"],
        client_id=row["client_id"],
        platform=row["platform"],
        step_id=row["step_id"],
        item_index=_parse_index(row.get("item_index"), "Notes"),
        note=row.get("note", ""),
        updated_at=parse_timestamp(row.get("updated_at")) or now_utc(),
        updated_by=row.get("updated_by", ""),
    )


def note_key(
    client_id: str, platform: str, step_id: str, item_index: int | None
) -> Row:
    """Step-level notes are stored with an empty item_index cell."""
    return {
        "client_id": client_id,
        "platform": platform,
        "step_id": step_id,
        "item_index": "" if item_index is None else str(item_index),
    }
