"""Static onboarding catalog: phases, platforms, steps and their checklists.

The catalog is immutable configuration shared across all clients. It is
loaded once at startup and handed to services as a read-only collaborator.
"""

from dataclasses import dataclass, field

from .client import CORE_PLATFORM

# Scope of steps that apply to every platform individually (testing, go-live)
SHARED_SCOPE = "shared"


@dataclass(frozen=True)
class Phase:
    """One of the six wizard phases."""

    id: int
    name: str
    description: str = ""


@dataclass(frozen=True)
class PlatformDefinition:
    """An external data platform a client can connect (warehouse, CRM, ...)."""

    id: str
    name: str
    category: str
    description: str = ""
    logo: str | None = None


@dataclass(frozen=True)
class ChecklistLink:
    title: str
    url: str


@dataclass(frozen=True)
class ChecklistItemDefinition:
    """A single checklist entry of a step, addressed by its 0-based index."""

    index: int
    title: str
    instruction: str = ""
    links: tuple[ChecklistLink, ...] = ()


@dataclass(frozen=True)
class StepDefinition:
    """A setup step.

    ``platform_scope`` is ``"core"`` for client-wide steps, a platform id for
    platform-specific steps, or ``"shared"`` for steps every platform repeats.
    """

    step_id: str
    phase: int
    platform_scope: str
    title: str
    description: str = ""
    checklist: tuple[ChecklistItemDefinition, ...] = ()
    doc_link: str | None = None

    @property
    def is_core(self) -> bool:
        return self.platform_scope == CORE_PLATFORM

    def accepts_platform(self, platform: str) -> bool:
        """Whether progress for this step may be recorded under *platform*."""
        if self.platform_scope == CORE_PLATFORM:
            return platform == CORE_PLATFORM
        if self.platform_scope == SHARED_SCOPE:
            return platform != CORE_PLATFORM
        return platform == self.platform_scope

    def has_item(self, item_index: int) -> bool:
        return 0 <= item_index < len(self.checklist)


@dataclass(frozen=True)
class OnboardingCatalog:
    """Read-only lookup over the loaded catalog data."""

    phases: tuple[Phase, ...] = ()
    platforms: tuple[PlatformDefinition, ...] = ()
    steps: tuple[StepDefinition, ...] = ()
    _steps_by_id: dict[str, StepDefinition] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "_steps_by_id", {s.step_id: s for s in self.steps})

    def get_step(self, step_id: str) -> StepDefinition | None:
        return self._steps_by_id.get(step_id)

    def get_platform(self, platform_id: str) -> PlatformDefinition | None:
        return next((p for p in self.platforms if p.id == platform_id), None)

    def has_platform(self, platform_id: str) -> bool:
        return self.get_platform(platform_id) is not None

    def wizard_steps(self, platform: str) -> list[StepDefinition]:
        """Core, platform-specific and shared steps for *platform*, ordered by phase.

        The sort is stable, so within a phase core steps come first.
        """
        core = [s for s in self.steps if s.platform_scope == CORE_PLATFORM]
        own = [s for s in self.steps if s.platform_scope == platform]
        shared = [s for s in self.steps if s.platform_scope == SHARED_SCOPE]
        return sorted(core + own + shared, key=lambda s: s.phase)

    def checklist_content(self, step_id: str) -> list[ChecklistItemDefinition]:
        step = self.get_step(step_id)
        if step is None:
            return []
        return sorted(step.checklist, key=lambda item: item.index)
