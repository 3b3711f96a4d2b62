"""Card model and full-deck construction."""

from enum import IntEnum
from typing import Iterable

from pydantic import BaseModel


class Suit(IntEnum):
    """Card suit."""

    SPADE = 0
    HEART = 1
    DIAMOND = 2
    CLUB = 3


class Rank(IntEnum):
    """Card rank (face value).

    Values follow the usual face value, Ace low. The order is also
    the order in which completed sets are detected.
    """

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13


# Map rank to display string
RANK_NAMES = {
    Rank.ACE: "A",
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "10",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
}

SUIT_SYMBOLS = {
    Suit.SPADE: "♠",
    Suit.HEART: "♥",
    Suit.DIAMOND: "♦",
    Suit.CLUB: "♣",
}


class Card(BaseModel, frozen=True):
    """Single card representation."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{RANK_NAMES[self.rank]}{SUIT_SYMBOLS[self.suit]}"

    def __repr__(self) -> str:
        return str(self)


def create_full_deck(
    ranks: Iterable[Rank] | None = None,
    suits: Iterable[Suit] | None = None,
) -> list[Card]:
    """Create one card per (rank, suit) pair.

    Args:
        ranks: Ranks to include. Defaults to all 13.
        suits: Suits to include. Defaults to all 4.

    Returns:
        Cards ordered by rank, then suit.
    """
    rank_list = sorted(set(ranks)) if ranks is not None else list(Rank)
    suit_list = sorted(set(suits)) if suits is not None else list(Suit)
    return [Card(rank=rank, suit=suit) for rank in rank_list for suit in suit_list]
