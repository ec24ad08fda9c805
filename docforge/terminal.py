"""Terminal output using Blessed."""

import logging
from typing import Optional

import blessed

from .storage import Storage

logger = logging.getLogger(__name__)


class TerminalStorage(Storage):
    """Storage backend that prints each rendering to the terminal.

    Nothing is persisted; this is the backend to use for previewing a
    document.
    """

    def __init__(self, terminal: Optional[blessed.Terminal] = None,
                 title: str = "Document"):
        """Initialize with a terminal instance (or create one)."""
        self.term = terminal or blessed.Terminal()
        self.title = title

    def save(self, data: str) -> None:
        stream = self.term.stream
        print(self.term.bold(self.title), file=stream)
        print(self.term.dim("-" * min(self.term.width or 80, 80)), file=stream)
        print(data, file=stream)
        stream.flush()
        logger.info(f"Document written to terminal ({len(data)} characters)")

    def __repr__(self) -> str:
        return "TerminalStorage()"
