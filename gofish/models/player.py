"""Player, hand and completed-set tracking."""

from collections import Counter
from typing import Iterable, Iterator

from pydantic import BaseModel, ConfigDict, Field

from .card import Card, Rank

# Cards of one rank needed to complete a set
SET_SIZE = 4


class Hand:
    """Ordered collection of cards held by one player."""

    def __init__(self, cards: Iterable[Card] | None = None):
        """Initialize hand.

        Args:
            cards: Initial cards.
        """
        self._cards: list[Card] = list(cards) if cards is not None else []

    def receive(self, cards: Iterable[Card]) -> None:
        """Append cards to the hand."""
        for card in cards:
            assert card not in self._cards, f"{card} is already in this hand"
            self._cards.append(card)

    def remove_matching(self, rank: Rank) -> list[Card]:
        """Remove and return every card of the given rank.

        Returns:
            Removed cards in hand order. Empty if none matched.
        """
        matching = [c for c in self._cards if c.rank == rank]
        if matching:
            self._cards = [c for c in self._cards if c.rank != rank]
        return matching

    def rank_counts(self) -> Counter[Rank]:
        """Count cards per rank."""
        return Counter(c.rank for c in self._cards)

    def first_rank(self) -> Rank | None:
        """Get the rank of the first card, or None if the hand is empty."""
        return self._cards[0].rank if self._cards else None

    def clear(self) -> None:
        """Remove all cards."""
        self._cards.clear()

    def count(self) -> int:
        """Get number of cards."""
        return len(self._cards)

    def is_empty(self) -> bool:
        """Check if hand is empty."""
        return len(self._cards) == 0

    def to_list(self) -> list[Card]:
        """Get a copy of the cards in hand order."""
        return list(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __contains__(self, card: Card) -> bool:
        return card in self._cards

    def __str__(self) -> str:
        return "[" + ", ".join(str(c) for c in self._cards) + "]"

    def __repr__(self) -> str:
        return f"Hand({self._cards!r})"


class Player(BaseModel):
    """Player state."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    player_id: int
    name: str = "Player"

    hand: Hand = Field(default_factory=Hand)
    completed_sets: list[Rank] = Field(default_factory=list)

    @property
    def set_count(self) -> int:
        """Number of completed sets."""
        return len(self.completed_sets)

    def hand_count(self) -> int:
        """Get number of cards in hand."""
        return self.hand.count()

    def receive(self, cards: Iterable[Card]) -> None:
        """Add cards to this player's hand."""
        self.hand.receive(cards)

    def remove_matching(self, rank: Rank) -> list[Card]:
        """Give up every card of the given rank."""
        return self.hand.remove_matching(rank)

    def detect_and_extract_sets(self, set_size: int = SET_SIZE) -> list[Rank]:
        """Move every complete rank from the hand into the set tracker.

        Must run after each transfer or draw into the hand, since that is
        the only way a rank can reach ``set_size`` copies.

        Args:
            set_size: Copies of one rank that make a set.

        Returns:
            Newly completed ranks, in rank order.
        """
        counts = self.hand.rank_counts()
        completed: list[Rank] = []
        for rank in sorted(counts):
            count = counts[rank]
            assert count <= set_size, f"{self.name} holds {count} cards of {rank.name}"
            if count == set_size:
                assert rank not in self.completed_sets, (
                    f"{self.name} already completed {rank.name}"
                )
                self.hand.remove_matching(rank)
                self.completed_sets.append(rank)
                completed.append(rank)
        return completed

    def reset_game_state(self) -> None:
        """Reset game-related state (called at start of new game)."""
        self.hand.clear()
        self.completed_sets.clear()

    def __str__(self) -> str:
        return f"Player{self.player_id}[{self.name}]"

    def __repr__(self) -> str:
        return (
            f"Player(id={self.player_id}, name={self.name!r}, "
            f"cards={self.hand.count()}, sets={self.set_count})"
        )
