"""Domain entities for clients and their attached data platforms."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from uuid import uuid4

CORE_PLATFORM = "core"


class OnboardingStatus(str, Enum):
    """Status of a client or of one of its platform instances.

    Only NOT_STARTED and IN_PROGRESS are ever set by status propagation.
    The remaining values are set through explicit updates and are otherwise
    display-only.
    """

    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    PENDING_REVIEW = "pending_review"
    NEEDS_ATTENTION = "needs_attention"
    ERROR = "error"


@dataclass
class Client:
    """A customer being onboarded."""

    name: str
    email: str
    notes: str = ""
    id: str = field(default_factory=lambda: str(uuid4()))
    status: OnboardingStatus = OnboardingStatus.NOT_STARTED
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def start(self) -> bool:
        """Advance from not_started to in_progress. Returns True if changed."""
        if self.status is not OnboardingStatus.NOT_STARTED:
            return False
        self.status = OnboardingStatus.IN_PROGRESS
        return True


@dataclass
class PlatformInstance:
    """One data platform attached to a client: unique per (client_id, platform)."""

    client_id: str
    platform: str
    id: str = field(default_factory=lambda: str(uuid4()))
    status: OnboardingStatus = OnboardingStatus.NOT_STARTED
    started_at: datetime | None = field(default_factory=lambda: datetime.now(timezone.utc))
    completed_at: datetime | None = None

    def start(self) -> bool:
        """Advance from not_started to in_progress. Returns True if changed."""
        if self.status is not OnboardingStatus.NOT_STARTED:
            return False
        self.status = OnboardingStatus.IN_PROGRESS
        return True


@dataclass(frozen=True)
class PlatformCompletion:
    """Attached-platform counts for a single client."""

    total: int = 0
    completed: int = 0
