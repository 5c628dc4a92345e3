from .onboarding_models import (
    ChecklistProgressModel,
    ClientModel,
    ClientPlatformModel,
    NoteModel,
    StepProgressModel,
)

__all__ = [
    "ChecklistProgressModel",
    "ClientModel",
    "ClientPlatformModel",
    "NoteModel",
    "StepProgressModel",
]
