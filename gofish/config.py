"""Configuration management."""

from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from gofish.models.card import Rank, Suit
from gofish.models.deck import GoFishError


class GameConfigError(GoFishError, ValueError):
    """Raised for game settings that cannot produce a valid game."""


def default_hand_size(num_players: int) -> int:
    """Standard deal: 7 cards for up to 3 players, 5 otherwise."""
    return 7 if num_players <= 3 else 5


def _parse_names(enum_cls, value):
    """Accept enum member names (any case) alongside enum values."""
    if value is None:
        return None
    try:
        return [enum_cls[v.upper()] if isinstance(v, str) else v for v in value]
    except KeyError as e:
        raise ValueError(f"Unknown {enum_cls.__name__.lower()}: {e.args[0]}") from None


class GameConfig(BaseModel):
    """Game configuration."""

    num_players: int = Field(default=2, ge=1)
    player_names: list[str] = Field(default_factory=list)
    hand_size: int | None = Field(default=None, ge=0)  # None = standard deal
    num_games: int = Field(default=1, ge=1)
    seed: int | None = None

    # Restrict the deck (None = all ranks / all suits)
    ranks: list[Rank] | None = None
    suits: list[Suit] | None = None

    @field_validator("ranks", mode="before")
    @classmethod
    def _parse_ranks(cls, value):
        return _parse_names(Rank, value)

    @field_validator("suits", mode="before")
    @classmethod
    def _parse_suits(cls, value):
        return _parse_names(Suit, value)

    @model_validator(mode="after")
    def _check_deal_fits(self) -> "GameConfig":
        if len(self.player_names) > self.num_players:
            raise ValueError(
                f"{len(self.player_names)} names given for {self.num_players} players"
            )
        needed = self.effective_hand_size() * self.num_players
        if needed > self.deck_size():
            raise ValueError(
                f"Dealing {needed} cards needs a bigger deck than {self.deck_size()}"
            )
        return self

    def deck_size(self) -> int:
        """Number of cards in the configured deck."""
        num_ranks = len(set(self.ranks)) if self.ranks is not None else len(Rank)
        num_suits = len(set(self.suits)) if self.suits is not None else len(Suit)
        return num_ranks * num_suits

    def effective_hand_size(self) -> int:
        """Cards dealt to each player."""
        if self.hand_size is None:
            return default_hand_size(self.num_players)
        return self.hand_size


class StrategyConfig(BaseModel):
    """Player decision policies."""

    rank: Literal["first_card"] = "first_card"
    target: Literal["after_current", "after_self"] = "after_current"


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    show_hands: bool = False


class GameLogSettings(BaseModel):
    """JSONL game log configuration."""

    enabled: bool = False
    output_path: str = "logs"


class Config(BaseModel):
    """Root configuration."""

    game: GameConfig = GameConfig()
    strategy: StrategyConfig = StrategyConfig()
    logging: LoggingConfig = LoggingConfig()
    game_log: GameLogSettings = GameLogSettings()


def load_config(path: Path | str | None = None) -> Config:
    """Load configuration from YAML file.

    Args:
        path: Path to config file. If None, uses default config.

    Returns:
        Config object.

    Raises:
        pydantic.ValidationError: If the file holds invalid settings.
    """
    if path is None:
        return Config()

    config_path = Path(path)
    if not config_path.exists():
        return Config()

    with open(config_path) as f:
        data = yaml.safe_load(f)

    return Config(**data) if data else Config()
