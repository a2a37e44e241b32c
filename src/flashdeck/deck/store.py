"""In-memory deck of flashcards."""

import logging
from typing import Iterable, Iterator, Optional

from ..core.models import Card
from ..core.exceptions import (
    CardNotFoundError,
    DuplicateDefinitionError,
    DuplicateTermError,
)

logger = logging.getLogger(__name__)


class Deck:
    """Ordered collection of cards for one session.

    Terms and definitions are unique among cards added through add().
    Cards loaded with extend() are taken as-is.
    """

    def __init__(self, cards: Optional[Iterable[Card]] = None):
        self._cards: list[Card] = list(cards or [])

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __contains__(self, term: str) -> bool:
        return self.find(term) is not None

    @property
    def cards(self) -> list[Card]:
        """Snapshot of the cards in insertion order."""
        return list(self._cards)

    def terms(self) -> list[str]:
        return [card.term for card in self._cards]

    def definitions(self) -> list[str]:
        return [card.definition for card in self._cards]

    def find(self, term: str) -> Optional[Card]:
        """Return the first card with this term, or None."""
        for card in self._cards:
            if card.term == term:
                return card
        return None

    def ensure_new_term(self, term: str) -> None:
        """Raise DuplicateTermError if the term is already taken."""
        if term in self.terms():
            raise DuplicateTermError(term)

    def add(self, term: str, definition: str) -> Card:
        """Append a new card.

        Raises:
            DuplicateTermError: If a card already has this term
            DuplicateDefinitionError: If a card already has this definition
        """
        self.ensure_new_term(term)
        if definition in self.definitions():
            raise DuplicateDefinitionError(definition)

        card = Card(term, definition)
        self._cards.append(card)
        logger.debug(f"Added card {term!r}")
        return card

    def extend(self, cards: Iterable[Card]) -> int:
        """Append cards without checking for duplicates. Returns how many."""
        added = list(cards)
        self._cards.extend(added)
        return len(added)

    def remove(self, term: str) -> Card:
        """Remove the card with this term and return it.

        Raises:
            CardNotFoundError: If no card has this term
        """
        card = self.find(term)
        if card is None:
            raise CardNotFoundError(term)

        self._cards.remove(card)
        logger.debug(f"Removed card {term!r}")
        return card

    def reset_stats(self) -> int:
        """Zero every card's miss count. Returns the number of cards."""
        for card in self._cards:
            card.missed = 0
        return len(self._cards)

    def hardest_cards(self) -> list[Card]:
        """Cards sharing the highest miss count, if that count is above zero."""
        max_missed = max((card.missed for card in self._cards), default=0)
        if max_missed == 0:
            return []
        return [card for card in self._cards if card.missed == max_missed]
