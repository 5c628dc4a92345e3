"""Application service (use case) for clients and their attached platforms."""

import logging
import re
from dataclasses import dataclass, field

from tracker.application.interfaces import RowStore, Table
from tracker.application.row_mapping import (
    client_from_row,
    client_to_row,
    platform_from_row,
    platform_to_row,
    step_progress_from_row,
)
from tracker.application.schemas.client import ClientCreate, ClientUpdate
from tracker.application.services.progress_service import tally_platform_completion
from tracker.domain.entities import (
    CORE_PLATFORM,
    Client,
    OnboardingCatalog,
    OnboardingStatus,
    PlatformCompletion,
    PlatformInstance,
    StepProgress,
)
from tracker.domain.exceptions import DuplicateEntityError, EntityNotFoundError, ValidationError

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100
NOTES_MAX_LENGTH = 1000


@dataclass
class ClientSummary:
    """A client as shown in the listing, with its platform counts."""

    client: Client
    completion: PlatformCompletion = field(default_factory=PlatformCompletion)


@dataclass
class ClientDetail:
    """A client with its attached platforms and step progress."""

    client: Client
    platforms: list[PlatformInstance]
    progress: list[StepProgress]


def validate_client_fields(
    name: str | None,
    email: str | None,
    notes: str | None,
    *,
    is_update: bool = False,
) -> list[str]:
    """Return all validation messages for the given client fields.

    On update, name and email are only checked when supplied.
    """
    errors: list[str] = []

    if not is_update or name is not None:
        trimmed = (name or "").strip()
        if not trimmed:
            errors.append("Client name is required")
        elif len(trimmed) < NAME_MIN_LENGTH:
            errors.append(f"Client name must be at least {NAME_MIN_LENGTH} characters")
        elif len(trimmed) > NAME_MAX_LENGTH:
            errors.append(f"Client name must be less than {NAME_MAX_LENGTH} characters")

    if not is_update or email is not None:
        trimmed = (email or "").strip()
        if not trimmed:
            errors.append("Email is required")
        elif not EMAIL_PATTERN.match(trimmed):
            errors.append("Invalid email format")

    if notes and len(notes) > NOTES_MAX_LENGTH:
        errors.append(f"Notes must be less than {NOTES_MAX_LENGTH} characters")

    return errors


class ClientService:
    """Orchestrates client and platform-instance CRUD. Depends on the store port (DI)."""

    def __init__(self, store: RowStore, catalog: OnboardingCatalog | None = None):
        self._store = store
        self._catalog = catalog

    # ── Clients ──────────────────────────────────────────────────────

    async def list_clients(self) -> list[ClientSummary]:
        """All clients with platform counts; two bulk reads regardless of client count."""
        client_rows = await self._store.list_rows(Table.CLIENTS)
        counts = tally_platform_completion(
            await self._store.list_rows(Table.CLIENT_PLATFORMS)
        )
        return [
            ClientSummary(
                client=client,
                completion=counts.get(client.id, PlatformCompletion()),
            )
            for client in (client_from_row(r) for r in client_rows)
        ]

    async def get_client(self, client_id: str) -> Client:
        row = await self._store.find_row(
            Table.CLIENTS, lambda r: r.get("client_id") == client_id
        )
        if row is None:
            raise EntityNotFoundError("Client", client_id)
        return client_from_row(row)

    async def get_client_detail(self, client_id: str) -> ClientDetail:
        client = await self.get_client(client_id)
        platforms = await self.list_platforms(client_id)
        progress_rows = await self._store.list_rows(Table.STEP_PROGRESS)
        progress = [
            step_progress_from_row(r) for r in progress_rows if r.get("client_id") == client_id
        ]
        return ClientDetail(client=client, platforms=platforms, progress=progress)

    async def create_client(self, data: ClientCreate) -> Client:
        errors = validate_client_fields(data.name, data.email, data.notes)
        if errors:
            raise ValidationError(errors)

        client = Client(
            name=(data.name or "").strip(),
            email=(data.email or "").strip(),
            notes=(data.notes or "").strip(),
        )
        row = client_to_row(client)
        stored = await self._store.upsert_row(
            Table.CLIENTS, {"client_id": client.id}, row
        )
        logger.info("Created client %s (%s)", client.id, client.name)
        return client_from_row(stored)

    async def update_client(self, client_id: str, data: ClientUpdate) -> Client:
        errors = validate_client_fields(data.name, data.email, data.notes, is_update=True)
        status: OnboardingStatus | None = None
        if data.status is not None:
            try:
                status = OnboardingStatus(data.status)
            except ValueError:
                errors.append(f"Invalid status '{data.status}'")
        if errors:
            raise ValidationError(errors)

        client = await self.get_client(client_id)
        if data.name:
            client.name = data.name.strip()
        if data.email:
            client.email = data.email.strip()
        if status is not None:
            client.status = status
        if data.notes is not None:
            client.notes = data.notes.strip()

        stored = await self._store.upsert_row(
            Table.CLIENTS, {"client_id": client.id}, client_to_row(client)
        )
        return client_from_row(stored)

    async def delete_client(self, client_id: str) -> bool:
        """Delete the client row only; its platforms, progress and notes are kept."""
        deleted = await self._store.delete_row(
            Table.CLIENTS, lambda r: r.get("client_id") == client_id
        )
        if not deleted:
            raise EntityNotFoundError("Client", client_id)
        logger.info("Deleted client %s", client_id)
        return True

    # ── Platform instances ───────────────────────────────────────────

    async def list_platforms(self, client_id: str) -> list[PlatformInstance]:
        rows = await self._store.list_rows(Table.CLIENT_PLATFORMS)
        return [platform_from_row(r) for r in rows if r.get("client_id") == client_id]

    async def add_platform(self, client_id: str, platform: str | None) -> PlatformInstance:
        platform = (platform or "").strip()
        if not platform:
            raise ValidationError("Platform is required")
        if platform == CORE_PLATFORM:
            raise ValidationError(f"'{CORE_PLATFORM}' is a reserved scope, not a platform")
        if self._catalog is not None and not self._catalog.has_platform(platform):
            raise ValidationError(f"Unknown platform '{platform}'")

        await self.get_client(client_id)
        existing = await self._store.find_row(
            Table.CLIENT_PLATFORMS,
            lambda r: r.get("client_id") == client_id and r.get("platform") == platform,
        )
        if existing is not None:
            raise DuplicateEntityError("PlatformInstance", "platform", platform)

        instance = PlatformInstance(client_id=client_id, platform=platform)
        stored = await self._store.upsert_row(
            Table.CLIENT_PLATFORMS, {"id": instance.id}, platform_to_row(instance)
        )
        logger.info("Attached platform %s to client %s", platform, client_id)
        return platform_from_row(stored)

    async def remove_platform(self, client_id: str, platform: str) -> bool:
        """Detach the platform; its progress and notes are kept."""
        deleted = await self._store.delete_row(
            Table.CLIENT_PLATFORMS,
            lambda r: r.get("client_id") == client_id and r.get("platform") == platform,
        )
        if not deleted:
            raise EntityNotFoundError("PlatformInstance", f"{client_id}/{platform}")
        logger.info("Detached platform %s from client %s", platform, client_id)
        return True
