"""Draw pile."""

import random
from typing import Iterable, Iterator

from .card import Card, Rank, Suit, create_full_deck


class GoFishError(Exception):
    """Base class for game errors."""


class EmptyDeckError(GoFishError):
    """Raised when drawing from a deck with no cards left."""


class Deck:
    """Ordered, shrinking pile of cards.

    Cards are drawn from the front. The deck never grows once it has been
    initialized.
    """

    def __init__(self, cards: Iterable[Card] | None = None):
        """Initialize deck.

        Args:
            cards: Initial cards, top first. Must not contain duplicates.
        """
        self._cards: list[Card] = list(cards) if cards is not None else []
        if len(set(self._cards)) != len(self._cards):
            raise ValueError("Deck must not contain duplicate cards")

    @classmethod
    def standard(
        cls,
        ranks: Iterable[Rank] | None = None,
        suits: Iterable[Suit] | None = None,
    ) -> "Deck":
        """Create an initialized, unshuffled deck."""
        deck = cls()
        deck.initialize(ranks, suits)
        return deck

    def initialize(
        self,
        ranks: Iterable[Rank] | None = None,
        suits: Iterable[Suit] | None = None,
    ) -> None:
        """Replace the contents with one card per (rank, suit) pair."""
        self._cards = create_full_deck(ranks, suits)

    def shuffle(self, rng: random.Random | None = None) -> None:
        """Shuffle the deck in place.

        Args:
            rng: Random source. Uses the module-level generator if omitted.
        """
        (rng or random).shuffle(self._cards)

    def draw_top(self) -> Card:
        """Remove and return the top card.

        Raises:
            EmptyDeckError: If the deck is empty.
        """
        if not self._cards:
            raise EmptyDeckError("Cannot draw from an empty deck")
        return self._cards.pop(0)

    def is_empty(self) -> bool:
        """Check if the deck has no cards left."""
        return len(self._cards) == 0

    def count(self) -> int:
        """Get number of cards left."""
        return len(self._cards)

    def to_list(self) -> list[Card]:
        """Get a copy of the remaining cards, top first."""
        return list(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __contains__(self, card: Card) -> bool:
        return card in self._cards

    def __str__(self) -> str:
        return f"Deck({len(self._cards)} cards)"
