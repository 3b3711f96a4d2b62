"""Formatters for game log output."""

from typing import Iterable

from gofish.models.card import Card, Rank, Suit
from gofish.models.player import Player

# Suit codes for log output
SUIT_CODES: dict[Suit, str] = {
    Suit.SPADE: "S",
    Suit.HEART: "H",
    Suit.DIAMOND: "D",
    Suit.CLUB: "C",
}

# Rank codes for log output
RANK_CODES: dict[Rank, str] = {
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


def format_card(card: Card) -> str:
    """Format a single card to string.

    Args:
        card: Card to format.

    Returns:
        Formatted string (e.g., "AS" for Ace of Spades, "10H").
    """
    return f"{RANK_CODES[card.rank]}{SUIT_CODES[card.suit]}"


def format_rank(rank: Rank | None) -> str | None:
    """Format a rank code, passing None through."""
    return RANK_CODES[rank] if rank is not None else None


def format_cards(cards: Iterable[Card]) -> str:
    """Format cards to comma-separated string.

    Args:
        cards: Cards to format, kept in their given order.

    Returns:
        Comma-separated card strings (e.g., "8S,8H,8D").
        Empty string if no cards.
    """
    return ",".join(format_card(c) for c in cards)


def format_hands(players: list[Player]) -> dict[str, str]:
    """Format all players' hands to dict.

    Args:
        players: Players in turn order.

    Returns:
        Dict mapping player_id (as string) to formatted hand string.
    """
    return {str(p.player_id): format_cards(p.hand) for p in players}
