"""Tests for card models."""

import pytest
from pydantic import ValidationError

from gofish.models.card import Card, Rank, Suit, create_full_deck


class TestCard:
    """Tests for Card class."""

    def test_create_card(self):
        """Test creating a card."""
        card = Card(rank=Rank.ACE, suit=Suit.SPADE)
        assert card.rank == Rank.ACE
        assert card.suit == Suit.SPADE

    def test_card_is_immutable(self):
        """Test that cards cannot be modified."""
        card = Card(rank=Rank.ACE, suit=Suit.SPADE)
        with pytest.raises(ValidationError):
            card.rank = Rank.KING

    def test_card_string(self):
        """Test card string representation."""
        assert str(Card(rank=Rank.ACE, suit=Suit.SPADE)) == "A♠"
        assert str(Card(rank=Rank.TEN, suit=Suit.HEART)) == "10♥"

    def test_card_equality(self):
        """Test card equality by rank and suit."""
        card1 = Card(rank=Rank.ACE, suit=Suit.SPADE)
        card2 = Card(rank=Rank.ACE, suit=Suit.SPADE)
        card3 = Card(rank=Rank.ACE, suit=Suit.HEART)

        assert card1 == card2
        assert card1 != card3

    def test_card_hashable(self):
        """Test that cards can be used in sets."""
        card1 = Card(rank=Rank.ACE, suit=Suit.SPADE)
        card2 = Card(rank=Rank.ACE, suit=Suit.SPADE)

        assert len({card1, card2}) == 1


class TestCreateFullDeck:
    """Tests for create_full_deck function."""

    def test_deck_size(self):
        """Test that a full deck has 52 cards."""
        assert len(create_full_deck()) == 52

    def test_no_duplicates(self):
        """Test that every (rank, suit) pair appears once."""
        cards = create_full_deck()
        assert len(set(cards)) == len(cards)

    def test_deck_has_all_ranks(self):
        """Test that every rank has one card per suit."""
        cards = create_full_deck()
        for rank in Rank:
            assert len([c for c in cards if c.rank == rank]) == 4

    @pytest.mark.parametrize(
        "ranks,suits",
        [
            ([Rank.ACE], [Suit.SPADE]),
            ([Rank.ACE, Rank.KING, Rank.SEVEN], list(Suit)),
            (list(Rank), [Suit.HEART, Suit.CLUB]),
        ],
    )
    def test_subset_deck(self, ranks, suits):
        """Test that a restricted deck has exactly ranks x suits cards."""
        cards = create_full_deck(ranks, suits)

        assert len(cards) == len(ranks) * len(suits)
        assert len(set(cards)) == len(cards)
        assert {(c.rank, c.suit) for c in cards} == {(r, s) for r in ranks for s in suits}
