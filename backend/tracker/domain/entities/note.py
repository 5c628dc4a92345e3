"""Domain entity for freeform notes attached to a step or a checklist item."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4


@dataclass
class Note:
    """A note on a step (item_index is None) or on one of its checklist items."""

    client_id: str
    platform: str
    step_id: str
    note: str
    item_index: int | None = None
    id: str = field(default_factory=lambda: str(uuid4()))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_by: str = ""

    @property
    def is_step_level(self) -> bool:
        return self.item_index is None
