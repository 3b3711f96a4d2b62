"""Game logging module."""

from .formatters import format_card, format_cards, format_hands, format_rank
from .game_logger import GameLogConfig, GameLogger
from .replay import (
    ReplayState,
    build_states,
    find_next,
    find_previous,
    load_events,
    set_totals,
)

__all__ = [
    "GameLogConfig",
    "GameLogger",
    "ReplayState",
    "build_states",
    "find_next",
    "find_previous",
    "load_events",
    "set_totals",
    "format_card",
    "format_cards",
    "format_hands",
    "format_rank",
]
