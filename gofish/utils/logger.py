"""Logging utilities and game narration display."""

import logging
import sys
from typing import TYPE_CHECKING

from gofish.models.card import RANK_NAMES
from gofish.models.game_state import EventAction

if TYPE_CHECKING:
    from gofish.models.game_state import GameResult, TurnEvent
    from gofish.models.player import Player


def setup_logging(level: str = "INFO") -> None:
    """Configure logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stdout,
    )


class GameDisplay:
    """Display game narration to stdout."""

    def __init__(self, players: list["Player"] | None = None, show_hands: bool = False):
        """Initialize display.

        Args:
            players: Players whose hands are shown at turn start
            show_hands: Whether to show player hands
        """
        self.players = players or []
        self.show_hands = show_hands

    def print_separator(self) -> None:
        """Print a separator line."""
        print("=" * 60)

    def print_event(self, event: "TurnEvent") -> None:
        """Print one turn event."""
        name = event.player_name
        rank = RANK_NAMES[event.rank] if event.rank is not None else ""

        if event.action == EventAction.TURN_START:
            print(f"\nTurn {event.turn}: {name}")
            self.print_hand(event.player_id)
        elif event.action == EventAction.DRAW:
            print(f"  {name} draws a card")
        elif event.action == EventAction.ASK:
            print(f"  {name} asks {event.target_name} for {rank}s")
        elif event.action == EventAction.TRANSFER:
            print(f"  {event.target_name} gives {name} {event.count_transferred} card(s)")
        elif event.action == EventAction.GO_FISH:
            if event.target_name:
                print(f'  {event.target_name} says, "Go Fish!"')
            else:
                print(f"  {name} has nobody to ask and goes fishing")
        elif event.action == EventAction.SET_COMPLETED:
            sets = ", ".join(RANK_NAMES[r] for r in event.sets_completed)
            print(f"  {name} completes a set of {sets}!")

    def print_hand(self, player_id: int) -> None:
        """Print a player's hand and sets (if show_hands is enabled)."""
        if not self.show_hands:
            return

        for player in self.players:
            if player.player_id == player_id:
                sets = ", ".join(RANK_NAMES[r] for r in player.completed_sets)
                print(f"  Hand: {player.hand}")
                print(f"  Sets: [{sets}]")

    def print_game_end(self, result: "GameResult") -> None:
        """Print game end results."""
        print(f"\nGame {result.game_number} finished after {result.turns} turns!")
        for score in result.scores:
            print(f"  {score.player_name} has {score.set_count} sets.")
        if result.is_tie:
            print("It's a tie!")
        else:
            print(f"{result.winner} wins the game!")

    def print_final_results(
        self,
        wins: dict[int, int],
        players: list["Player"],
    ) -> None:
        """Print wins over a series of games."""
        self.print_separator()
        print("FINAL RESULTS")
        self.print_separator()

        sorted_players = sorted(wins.items(), key=lambda x: x[1], reverse=True)

        for rank, (player_id, count) in enumerate(sorted_players, 1):
            player = players[player_id]
            print(f"  #{rank}: {player.name} - {count} wins")
