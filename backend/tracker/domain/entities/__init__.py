from .client import (
    CORE_PLATFORM,
    Client,
    OnboardingStatus,
    PlatformCompletion,
    PlatformInstance,
)
from .progress import ChecklistItemProgress, ProgressStatus, StepProgress
from .note import Note
from .catalog import (
    SHARED_SCOPE,
    ChecklistItemDefinition,
    ChecklistLink,
    OnboardingCatalog,
    Phase,
    PlatformDefinition,
    StepDefinition,
)
from .tip import ANY_PAGE, DEFAULT_TIP_PRIORITY, Tip, TipContext

__all__ = [
    "CORE_PLATFORM",
    "Client",
    "OnboardingStatus",
    "PlatformCompletion",
    "PlatformInstance",
    "ChecklistItemProgress",
    "ProgressStatus",
    "StepProgress",
    "Note",
    "SHARED_SCOPE",
    "ChecklistItemDefinition",
    "ChecklistLink",
    "OnboardingCatalog",
    "Phase",
    "PlatformDefinition",
    "StepDefinition",
    "ANY_PAGE",
    "DEFAULT_TIP_PRIORITY",
    "Tip",
    "TipContext",
]
