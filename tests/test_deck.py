"""Tests for the deck."""

import random
from collections import Counter

import pytest

from gofish.models.card import Card, Rank, Suit
from gofish.models.deck import Deck, EmptyDeckError


class TestDeck:
    """Tests for Deck class."""

    def test_empty_deck(self):
        """Test empty deck."""
        deck = Deck()
        assert deck.is_empty()
        assert deck.count() == 0

    def test_standard_deck(self):
        """Test that a standard deck is complete."""
        deck = Deck.standard()
        assert deck.count() == 52
        assert len(set(deck)) == 52

    def test_initialize_replaces_cards(self):
        """Test that initialize populates one card per pair."""
        deck = Deck([Card(rank=Rank.ACE, suit=Suit.SPADE)])
        deck.initialize([Rank.TWO, Rank.THREE], [Suit.HEART])

        assert deck.to_list() == [
            Card(rank=Rank.TWO, suit=Suit.HEART),
            Card(rank=Rank.THREE, suit=Suit.HEART),
        ]

    def test_duplicates_rejected(self):
        """Test that a deck cannot hold the same card twice."""
        card = Card(rank=Rank.ACE, suit=Suit.SPADE)
        with pytest.raises(ValueError):
            Deck([card, card])

    def test_draw_top(self):
        """Test that drawing takes the front card."""
        first = Card(rank=Rank.ACE, suit=Suit.SPADE)
        second = Card(rank=Rank.KING, suit=Suit.HEART)
        deck = Deck([first, second])

        assert deck.draw_top() == first
        assert deck.to_list() == [second]
        assert first not in deck

    def test_draw_from_empty(self):
        """Test that drawing from an empty deck fails."""
        deck = Deck()
        with pytest.raises(EmptyDeckError):
            deck.draw_top()

    def test_draw_until_empty(self):
        """Test that the deck shrinks by one per draw."""
        deck = Deck.standard([Rank.ACE], list(Suit))
        for remaining in range(3, -1, -1):
            deck.draw_top()
            assert deck.count() == remaining
        with pytest.raises(EmptyDeckError):
            deck.draw_top()


class TestShuffle:
    """Tests for Deck.shuffle."""

    def test_shuffle_keeps_cards(self):
        """Test that shuffling preserves the multiset of cards."""
        deck = Deck.standard()
        before = Counter(deck)

        deck.shuffle(random.Random(7))

        assert Counter(deck) == before

    def test_shuffle_changes_order(self):
        """Test that shuffling permutes the deck."""
        deck = Deck.standard()
        before = deck.to_list()

        deck.shuffle(random.Random(7))

        assert deck.to_list() != before

    def test_seeded_shuffle_is_reproducible(self):
        """Test that the same seed gives the same order."""
        deck1 = Deck.standard()
        deck2 = Deck.standard()

        deck1.shuffle(random.Random(123))
        deck2.shuffle(random.Random(123))

        assert deck1.to_list() == deck2.to_list()
