"""Application service (use case) for step- and item-level notes."""

from tracker.application.interfaces import RowStore, Table, matches_key
from tracker.application.row_mapping import format_timestamp, note_from_row, note_key, now_utc
from tracker.domain.entities import Note
from tracker.domain.exceptions import ValidationError


class NoteService:
    """Notes are upserted per (client, platform, step, item_index-or-None).

    Saving an empty note is the soft-delete convention used by the API.
    """

    def __init__(self, store: RowStore):
        self._store = store

    async def get_notes(
        self,
        client_id: str,
        platform: str,
        step_id: str,
        item_index: int | None = None,
    ) -> list[Note]:
        key = note_key(client_id, platform, step_id, item_index)
        rows = await self._store.list_rows(Table.NOTES)
        return [note_from_row(r) for r in rows if matches_key(r, key)]

    async def save_note(
        self,
        client_id: str,
        platform: str,
        step_id: str,
        note: str | None,
        item_index: int | None = None,
        updated_by: str | None = None,
    ) -> Note:
        if note is None:
            raise ValidationError("Note content is required")
        if item_index is not None and item_index < 0:
            raise ValidationError("itemIndex must be a non-negative integer")

        row = await self._store.upsert_row(
            Table.NOTES,
            note_key(client_id, platform, step_id, item_index),
            {
                "note": note,
                "updated_at": format_timestamp(now_utc()),
                "updated_by": updated_by or "",
            },
        )
        return note_from_row(row)

    async def clear_note(
        self,
        client_id: str,
        platform: str,
        step_id: str,
        item_index: int | None = None,
    ) -> Note:
        return await self.save_note(client_id, platform, step_id, "", item_index)

    async def delete_note(
        self,
        client_id: str,
        platform: str,
        step_id: str,
        item_index: int | None = None,
    ) -> bool:
        key = note_key(client_id, platform, step_id, item_index)
        return await self._store.delete_row(Table.NOTES, lambda r: matches_key(r, key))
