"""Console I/O that remembers everything shown and typed."""

import logging
from typing import Callable, Optional

from rich.console import Console

from ..persistence.codec import write_text

logger = logging.getLogger(__name__)


class Transcript:
    """Wraps all session input and output, keeping an ordered log.

    Every message printed with say() and every line returned by read()
    is appended to the log in the order it happened. The log keeps the
    exact text; the console expands tabs to spaces when printing it.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        reader: Optional[Callable[[], str]] = None,
    ):
        self.console = console or Console()
        self.reader = reader or self.console.input
        self._entries: list[str] = []

    @property
    def entries(self) -> list[str]:
        return list(self._entries)

    def say(self, message: str) -> None:
        """Print a line to the user and record it."""
        self._entries.append(message)
        # User text is printed verbatim: no markup, emoji codes or wrapping
        self.console.print(message, markup=False, highlight=False, emoji=False, soft_wrap=True)

    def read(self) -> str:
        """Read one line from the user and record it."""
        line = self.reader()
        self._entries.append(line)
        return line

    def prompt(self, message: str) -> str:
        self.say(message)
        return self.read()

    def render(self) -> str:
        return "\n".join(self._entries)

    def save(self, path: str, encoding: Optional[str] = None) -> int:
        """Write the log so far to a file. Returns the number of entries."""
        write_text(self.render(), path, encoding)
        logger.info(f"Saved {len(self._entries)} transcript lines to {path}")
        return len(self._entries)
