"""Core data models."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


@dataclass
class Card:
    """A single flashcard: a term, its definition, and how often it was missed."""
    term: str
    definition: str
    missed: int = 0

    def __post_init__(self):
        if self.missed < 0:
            raise ValueError(f"missed must be >= 0, got {self.missed}")

    def is_correct(self, answer: str) -> bool:
        """Check an answer against the definition (exact match)."""
        return answer == self.definition


class Command(Enum):
    """Actions the user can pick in the interactive session."""
    ADD = "add"
    REMOVE = "remove"
    IMPORT = "import"
    EXPORT = "export"
    ASK = "ask"
    EXIT = "exit"
    LOG = "log"
    HARDEST_CARD = "hardest card"
    RESET_STATS = "reset stats"

    @classmethod
    def parse(cls, text: str) -> Optional["Command"]:
        """Look up a command from raw user input.

        Input is uppercased and spaces become underscores, so
        "hardest card" and "HARDEST CARD" both map to HARDEST_CARD.
        Returns None when nothing matches.
        """
        return COMMAND_TABLE.get(text.upper().replace(" ", "_"))

    @classmethod
    def menu(cls) -> str:
        """Comma-separated list of command names as the user types them."""
        return ", ".join(command.value for command in cls)


COMMAND_TABLE = {command.name: command for command in Command}
