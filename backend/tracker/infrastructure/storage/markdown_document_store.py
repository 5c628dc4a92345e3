"""Local filesystem source for markdown documentation.

Layout:
    <docs_dir>/<category>/<slug>.md
    <docs_dir>/platforms/<platform>/<slug>.md
"""

import logging
from pathlib import Path

from tracker.application.interfaces import DocumentStore

logger = logging.getLogger(__name__)


class MarkdownDocumentStore(DocumentStore):
    """Infrastructure adapter reading ``.md`` files below a root directory."""

    def __init__(self, docs_dir: str | Path):
        self._docs_dir = Path(docs_dir).resolve()

    async def read(self, *parts: str) -> str | None:
        if not parts:
            return None
        path = self._docs_dir.joinpath(*parts[:-1], f"{parts[-1]}.md").resolve()
        if not path.is_relative_to(self._docs_dir):
            logger.warning("Rejected document path outside docs dir: %s", path)
            return None
        if not path.is_file():
            logger.debug("Document not found: %s", path)
            return None
        return path.read_text("utf-8")
