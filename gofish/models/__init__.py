"""Game models."""

from .card import Card, Rank, Suit, create_full_deck
from .deck import Deck, EmptyDeckError, GoFishError
from .game_state import EventAction, GameResult, GameState, PlayerScore, TurnEvent
from .player import SET_SIZE, Hand, Player

__all__ = [
    "Card",
    "Rank",
    "Suit",
    "create_full_deck",
    "Deck",
    "EmptyDeckError",
    "GoFishError",
    "Hand",
    "Player",
    "SET_SIZE",
    "GameState",
    "GameResult",
    "PlayerScore",
    "EventAction",
    "TurnEvent",
]
