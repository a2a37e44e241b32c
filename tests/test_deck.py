"""Tests for the in-memory deck."""

import pytest
from flashdeck.core.models import Card
from flashdeck.core.exceptions import (
    CardNotFoundError,
    DuplicateDefinitionError,
    DuplicateTermError,
)
from flashdeck.deck import Deck


class TestAdd:
    """Tests for adding cards."""

    def test_distinct_adds(self):
        """Test every distinct add lands in the deck in order."""
        deck = Deck()
        pairs = [("France", "Paris"), ("Japan", "Tokyo"), ("Peru", "Lima")]
        for term, definition in pairs:
            deck.add(term, definition)

        assert len(deck) == 3
        assert [(c.term, c.definition) for c in deck] == pairs
        assert all(c.missed == 0 for c in deck)

    def test_returns_card(self):
        """Test add returns the stored card."""
        deck = Deck()
        card = deck.add("France", "Paris")
        assert deck.find("France") is card

    def test_duplicate_term(self, capitals_deck):
        """Test a repeated term is rejected and the deck is unchanged."""
        before = capitals_deck.cards
        with pytest.raises(DuplicateTermError) as exc_info:
            capitals_deck.add("France", "Lyon")
        assert str(exc_info.value) == 'The card "France" already exists.'
        assert exc_info.value.term == "France"
        assert capitals_deck.cards == before

    def test_duplicate_definition(self, capitals_deck):
        """Test a repeated definition is rejected and the deck is unchanged."""
        before = capitals_deck.cards
        with pytest.raises(DuplicateDefinitionError) as exc_info:
            capitals_deck.add("Texas", "Paris")
        assert str(exc_info.value) == 'The definition "Paris" already exists.'
        assert capitals_deck.cards == before

    def test_term_checked_first(self, capitals_deck):
        """Test a card duplicating both fields reports the term."""
        with pytest.raises(DuplicateTermError):
            capitals_deck.add("France", "Paris")

    def test_ensure_new_term(self, capitals_deck):
        """Test the standalone term check."""
        capitals_deck.ensure_new_term("Chile")
        with pytest.raises(DuplicateTermError):
            capitals_deck.ensure_new_term("Peru")


class TestRemove:
    """Tests for removing cards."""

    def test_remove(self, capitals_deck):
        """Test removing an existing card."""
        removed = capitals_deck.remove("Japan")
        assert removed.term == "Japan"
        assert capitals_deck.terms() == ["France", "Peru"]
        assert "Japan" not in capitals_deck

    def test_remove_missing(self, capitals_deck):
        """Test removing an unknown term fails and leaves the deck alone."""
        with pytest.raises(CardNotFoundError) as exc_info:
            capitals_deck.remove("Chile")
        assert str(exc_info.value) == 'Can\'t remove "Chile": there is no such card.'
        assert len(capitals_deck) == 3


class TestExtend:
    """Tests for bulk loading."""

    def test_extend_keeps_duplicates(self, capitals_deck):
        """Test loaded cards are not checked against existing ones."""
        count = capitals_deck.extend([Card("France", "Paris", 4)])
        assert count == 1
        assert capitals_deck.terms() == ["France", "Japan", "Peru", "France"]


class TestStats:
    """Tests for miss statistics."""

    def test_hardest_none_when_all_zero(self, capitals_deck):
        """Test no hardest cards without any misses."""
        assert capitals_deck.hardest_cards() == []

    def test_hardest_empty_deck(self):
        """Test an empty deck has no hardest cards."""
        assert Deck().hardest_cards() == []

    def test_hardest_ties(self):
        """Test all cards sharing the top count are returned in order."""
        deck = Deck([Card("a", "1", 3), Card("b", "2", 1), Card("c", "3", 3)])
        assert [c.term for c in deck.hardest_cards()] == ["a", "c"]

    def test_hardest_single(self):
        """Test a single worst card."""
        deck = Deck([Card("a", "1", 1), Card("b", "2", 5)])
        assert [c.term for c in deck.hardest_cards()] == ["b"]

    def test_reset_stats(self):
        """Test reset zeroes every count and is idempotent."""
        deck = Deck([Card("a", "1", 3), Card("b", "2", 0), Card("c", "3", 7)])
        assert deck.reset_stats() == 3
        assert [c.missed for c in deck] == [0, 0, 0]

        deck.reset_stats()
        assert [c.missed for c in deck] == [0, 0, 0]
        assert deck.hardest_cards() == []
