"""The interactive command loop."""

import logging
import random
from enum import Enum
from typing import Callable, Optional

from ..core.config import Config
from ..core.exceptions import FlashdeckError, InvalidIntegerError
from ..core.models import Card, Command
from ..deck import Deck, QuizEngine
from ..persistence import read_cards, write_cards
from .transcript import Transcript

logger = logging.getLogger(__name__)


class SessionState(Enum):
    RUNNING = "running"
    TERMINATED = "terminated"


def describe_hardest(cards: list[Card]) -> str:
    """Render the hardest-card report."""
    if not cards:
        return "There are no cards with errors."

    names = ", ".join(f'"{card.term}"' for card in cards)
    missed = cards[0].missed
    if len(cards) == 1:
        return f"The hardest card is {names}. You have {missed} errors answering it."
    return f"The hardest cards are {names}. You have {missed} errors answering them."


class CommandLoop:
    """Reads commands and runs them against a deck until the user exits.

    Operation errors are shown to the user and never end the session.
    """

    def __init__(
        self,
        transcript: Transcript,
        deck: Optional[Deck] = None,
        config: Optional[Config] = None,
        rng: Optional[random.Random] = None,
    ):
        self.transcript = transcript
        self.deck = deck if deck is not None else Deck()
        self.config = config or Config()
        if rng is None:
            rng = random.Random(self.config.session.seed)
        self.quiz = QuizEngine(self.deck, rng)
        self.state = SessionState.RUNNING

        self._handlers: dict[Command, Callable[[], None]] = {
            Command.ADD: self.add_card,
            Command.REMOVE: self.remove_card,
            Command.IMPORT: self.import_cards,
            Command.EXPORT: self.export_cards,
            Command.ASK: self.ask,
            Command.EXIT: self.exit,
            Command.LOG: self.save_log,
            Command.HARDEST_CARD: self.hardest_card,
            Command.RESET_STATS: self.reset_stats,
        }

    @property
    def encoding(self) -> Optional[str]:
        return self.config.encoding

    def say(self, message: str) -> None:
        self.transcript.say(message)

    def read(self) -> str:
        return self.transcript.read()

    # ------------------------------------------------------------------
    # Main loop
    # ------------------------------------------------------------------

    def startup(self) -> None:
        """Import the configured deck file, if any."""
        if self.config.session.import_path:
            self._guarded(lambda: self.import_cards(self.config.session.import_path))

    def run(self) -> None:
        """Process commands until EXIT (or end of input)."""
        while self.state is SessionState.RUNNING:
            try:
                command = self.get_command()
                self._guarded(self._handlers[command])
            except EOFError:
                logger.warning("Input closed; ending session without exit export")
                self.state = SessionState.TERMINATED

    def _guarded(self, operation: Callable[[], None]) -> None:
        try:
            operation()
        except FlashdeckError as e:
            logger.info(f"{type(e).__name__}: {e}")
            self.say(str(e))

    def get_command(self) -> Command:
        """Prompt until the user types a known command."""
        self.say(f"Input the action ({Command.menu()}):")
        while True:
            command = Command.parse(self.read())
            if command is not None:
                return command
            self.say(f"Please select an action from the list ({Command.menu()}):")

    # ------------------------------------------------------------------
    # Command handlers
    # ------------------------------------------------------------------

    def add_card(self) -> None:
        term = self.transcript.prompt("The card")
        self.deck.ensure_new_term(term)

        definition = self.transcript.prompt("The definition of the card:")
        card = self.deck.add(term, definition)

        self.say(f'The pair ("{card.term}":"{card.definition}") has been added.')

    def remove_card(self) -> None:
        term = self.transcript.prompt("Which card?")
        self.deck.remove(term)
        self.say("The card has been removed.")

    def _file_name(self, given: Optional[str]) -> str:
        if given:
            return given
        return self.transcript.prompt("File name:")

    def import_cards(self, path: Optional[str] = None) -> None:
        path = self._file_name(path)
        count = self.deck.extend(read_cards(path, self.encoding))
        self.say(f"{count} cards have been loaded.")

    def export_cards(self, path: Optional[str] = None) -> None:
        path = self._file_name(path)
        count = write_cards(self.deck, path, self.encoding)
        self.say(f"{count} cards have been saved.")

    def ask(self) -> None:
        raw = self.transcript.prompt("How many times to ask?")
        try:
            times = int(raw)
        except ValueError:
            raise InvalidIntegerError(raw)

        self.quiz.ask(
            times,
            answer_for=lambda card: self.transcript.prompt(f'Print the definition of "{card.term}":'),
            report=self.say,
        )

    def save_log(self) -> None:
        path = self.transcript.prompt("File name:")
        self.transcript.save(path, self.encoding)
        self.say("The log has been saved.")

    def hardest_card(self) -> None:
        self.say(describe_hardest(self.deck.hardest_cards()))

    def reset_stats(self) -> None:
        count = self.deck.reset_stats()
        logger.debug(f"Reset stats on {count} cards")
        self.say("Card statistics have been reset.")

    def exit(self) -> None:
        """Export to the configured path, if any, and stop the loop.

        A failed export propagates and the session keeps running.
        """
        if self.config.session.export_path:
            self.export_cards(self.config.session.export_path)
        self.say("Bye bye!")
        self.state = SessionState.TERMINATED
