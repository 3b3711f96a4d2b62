"""Game logic."""

from .engine import GameEngine

__all__ = [
    "GameEngine",
]
