"""Domain entities for step and checklist-item progress.

A progress record exists only once the step (or item) has been completed;
absence of a record means the step is not started.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from uuid import uuid4


class ProgressStatus(str, Enum):
    """Status of a stored progress record."""

    COMPLETED = "completed"


@dataclass
class StepProgress:
    """Completion of one catalog step for a (client, platform) pair."""

    client_id: str
    platform: str
    step_id: str
    id: str = field(default_factory=lambda: str(uuid4()))
    status: ProgressStatus = ProgressStatus.COMPLETED
    completed_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    completed_by: str = ""


@dataclass
class ChecklistItemProgress:
    """Completion of one checklist item (0-based index) within a step."""

    client_id: str
    platform: str
    step_id: str
    item_index: int
    id: str = field(default_factory=lambda: str(uuid4()))
    status: ProgressStatus = ProgressStatus.COMPLETED
    completed_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    completed_by: str = ""
