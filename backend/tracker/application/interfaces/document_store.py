"""Abstract interface (port) for reading markdown documentation."""

from abc import ABC, abstractmethod


class DocumentStore(ABC):
    """Port for documentation sources: implemented in the infrastructure layer."""

    @abstractmethod
    async def read(self, *parts: str) -> str | None:
        """Return the markdown document at ``parts`` (without ``.md``), or None if missing."""
        ...
