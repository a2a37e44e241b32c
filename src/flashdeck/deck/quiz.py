"""Quiz engine: draws random cards and grades answers."""

import logging
import random
from dataclasses import dataclass
from typing import Callable, Optional

from ..core.models import Card
from ..core.exceptions import EmptyDeckError, InvalidIntegerError
from .store import Deck

logger = logging.getLogger(__name__)


@dataclass
class QuizResult:
    """Outcome of one question."""
    card: Card
    answer: str
    correct: bool
    # Term whose definition the (wrong) answer actually is
    matched_term: Optional[str] = None

    @property
    def message(self) -> str:
        if self.correct:
            return "Correct!"
        if self.matched_term is not None:
            return (
                f'Wrong. The right answer is "{self.card.definition}", '
                f'but your definition is correct for "{self.matched_term}".'
            )
        return f'Wrong. The right answer is "{self.card.definition}".'


class QuizEngine:
    """Asks cards from a deck and keeps their miss counts.

    Cards are drawn uniformly at random with replacement, so the same
    card can come up more than once in a round.
    """

    def __init__(self, deck: Deck, rng: Optional[random.Random] = None):
        self.deck = deck
        self.rng = rng or random.Random()

    def pick(self) -> Card:
        """Draw one card uniformly from the current deck."""
        cards = self.deck.cards
        if not cards:
            raise EmptyDeckError()
        return self.rng.choice(cards)

    def hints(self) -> dict[str, str]:
        """Map each definition to the term it belongs to."""
        return {card.definition: card.term for card in self.deck}

    def grade(self, card: Card, answer: str, hints: dict[str, str]) -> QuizResult:
        """Check an answer, counting a miss on the card if it is wrong."""
        if card.is_correct(answer):
            return QuizResult(card=card, answer=answer, correct=True)

        card.missed += 1
        return QuizResult(
            card=card,
            answer=answer,
            correct=False,
            matched_term=hints.get(answer),
        )

    def ask(
        self,
        times: int,
        answer_for: Callable[[Card], str],
        report: Callable[[str], None],
    ) -> list[QuizResult]:
        """Run a round of `times` questions.

        Args:
            times: Number of questions, zero or more
            answer_for: Called with each drawn card, returns the user's answer
            report: Called with the verdict message after each answer

        Returns:
            One QuizResult per question, in order
        """
        if isinstance(times, bool) or not isinstance(times, int) or times < 0:
            raise InvalidIntegerError(str(times))
        if times > 0 and not len(self.deck):
            raise EmptyDeckError()

        # Built once per round; grading only changes miss counts
        hints = self.hints()
        results = []

        for _ in range(times):
            card = self.pick()
            answer = answer_for(card)
            result = self.grade(card, answer, hints)
            logger.debug(f"Asked {card.term!r}: {'correct' if result.correct else 'wrong'}")
            report(result.message)
            results.append(result)

        return results
