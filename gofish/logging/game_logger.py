"""Game logger for detailed game replay."""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, TextIO

from pydantic import BaseModel

from gofish.models.game_state import GameResult, TurnEvent
from gofish.models.player import Player

from .formatters import format_hands, format_rank


class GameLogConfig(BaseModel):
    """Configuration for game logging."""

    enabled: bool = False
    output_path: str = "game_log.jsonl"


class GameLogger:
    """Logger for detailed game events in JSONL format.

    Each line in the output file is a JSON object representing one event.
    This allows step-by-step replay of the game.
    """

    def __init__(self, config: GameLogConfig | None = None):
        """Initialize game logger.

        Args:
            config: Logging configuration. If None, logging is disabled.
        """
        self.config = config or GameLogConfig()
        self._file: TextIO | None = None

    def __enter__(self) -> "GameLogger":
        """Context manager entry."""
        if self.config.enabled and self.config.output_path:
            path = Path(self.config.output_path)
            path.parent.mkdir(parents=True, exist_ok=True)
            self._file = open(path, "a", encoding="utf-8")
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit."""
        self.close()

    def close(self) -> None:
        """Close the log file."""
        if self._file:
            self._file.close()
            self._file = None

    def _write(self, event: dict[str, Any]) -> None:
        """Write an event to the log file.

        Args:
            event: Event dictionary to write as JSON.
        """
        if self._file:
            self._file.write(json.dumps(event, ensure_ascii=False) + "\n")
            self._file.flush()

    def log_session_start(self, players: list[Player]) -> None:
        """Log session start with player information."""
        self._write({
            "type": "session_start",
            "timestamp": datetime.now().isoformat(),
            "players": [
                {"id": p.player_id, "name": p.name}
                for p in players
            ],
        })

    def log_game_start(
        self,
        game_num: int,
        players: list[Player],
        deck_count: int,
    ) -> None:
        """Log game start with the dealt hands.

        Args:
            game_num: Game number.
            players: Players after the deal.
            deck_count: Cards left in the deck after the deal.
        """
        self._write({
            "type": "game_start",
            "game": game_num,
            "hands": format_hands(players),
            "deck": deck_count,
        })

    def log_event(
        self,
        event: TurnEvent,
        players: list[Player],
        deck_count: int,
    ) -> None:
        """Log a single turn event with the table state after it.

        Args:
            event: Event emitted by the engine.
            players: All players (hands after the event).
            deck_count: Cards left in the deck.
        """
        record: dict[str, Any] = {
            "type": "event",
            "game": event.game,
            "turn": event.turn,
            "player": event.player_id,
            "action": event.action.value,
        }
        if event.rank is not None:
            record["rank"] = format_rank(event.rank)
        if event.target_name is not None:
            record["target"] = event.target_name
        if event.count_transferred is not None:
            record["count"] = event.count_transferred
        if event.sets_completed:
            record["sets"] = [format_rank(r) for r in event.sets_completed]
        record["hands"] = format_hands(players)
        record["deck"] = deck_count
        self._write(record)

    def log_game_end(self, result: GameResult) -> None:
        """Log game end with results."""
        self._write({
            "type": "game_end",
            "game": result.game_number,
            "turns": result.turns,
            "scores": {str(s.player_id): s.set_count for s in result.scores},
            "winner": result.winner_id,
            "tie": result.is_tie,
        })

    def log_session_end(
        self,
        total_games: int,
        wins: dict[int, int],
    ) -> None:
        """Log session end with final results.

        Args:
            total_games: Total number of games played.
            wins: Dict mapping player_id to games won.
        """
        ranking = sorted(wins.keys(), key=lambda p: wins[p], reverse=True)
        self._write({
            "type": "session_end",
            "total_games": total_games,
            "wins": {str(k): v for k, v in wins.items()},
            "ranking": ranking,
        })
