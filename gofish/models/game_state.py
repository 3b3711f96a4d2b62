"""Game state, turn events and results."""

from enum import Enum

from pydantic import BaseModel, Field

from .card import Rank


class EventAction(str, Enum):
    """Kind of turn event."""

    DEAL = "deal"  # Initial hand dealt
    TURN_START = "turn_start"
    DRAW = "draw"  # Card drawn from the deck
    ASK = "ask"  # Player asks an opponent for a rank
    TRANSFER = "transfer"  # Opponent hands over matching cards
    GO_FISH = "go_fish"  # Opponent had none of the rank
    SET_COMPLETED = "set_completed"
    TURN_END = "turn_end"


class TurnEvent(BaseModel):
    """One narration record emitted by the engine."""

    game: int = 1
    turn: int = 0
    player_id: int
    player_name: str
    action: EventAction
    rank: Rank | None = None
    target_name: str | None = None
    count_transferred: int | None = None
    sets_completed: list[Rank] = Field(default_factory=list)


class PlayerScore(BaseModel):
    """Final set count of one player."""

    player_id: int
    player_name: str
    set_count: int
    sets: list[Rank] = Field(default_factory=list)


class GameResult(BaseModel):
    """Outcome of a single game."""

    game_number: int = 1
    turns: int = 0
    scores: list[PlayerScore] = Field(default_factory=list)
    winner_id: int | None = None
    winner: str | None = None

    @property
    def is_tie(self) -> bool:
        """True when no single player has the most sets."""
        return self.winner_id is None

    def __str__(self) -> str:
        if self.is_tie:
            return f"Game {self.game_number}: tie"
        return f"Game {self.game_number}: {self.winner} wins"


class GameState(BaseModel):
    """Overall game state."""

    game_number: int = 1
    turn_number: int = 0
    current_player: int = 0  # Turn-order pointer

    def reset_for_new_game(self) -> None:
        """Reset state for a new game."""
        self.turn_number = 0
        self.current_player = 0

    def __str__(self) -> str:
        return (
            f"Game {self.game_number}, Turn {self.turn_number} "
            f"Player {self.current_player}'s turn"
        )
