"""Domain entities for the assistant's context-aware tips."""

from dataclasses import dataclass

ANY_PAGE = "any"
DEFAULT_TIP_PRIORITY = 5


@dataclass(frozen=True)
class Tip:
    """A scripted tip shown by the fun-mode assistant.

    ``platform`` and ``phase`` are optional filters; ``page`` may be ``"any"``.
    ``condition`` is evaluated by the caller, never by the selector.
    """

    id: str
    page: str
    message: str
    priority: int = DEFAULT_TIP_PRIORITY
    platform: str | None = None
    phase: int | None = None
    condition: str | None = None
    animation: str | None = None


@dataclass(frozen=True)
class TipContext:
    """Where the user currently is in the UI."""

    page: str
    platform: str | None = None
    phase: int | None = None
