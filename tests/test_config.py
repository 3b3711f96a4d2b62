"""Tests for configuration loading."""

import pytest
from pydantic import ValidationError

from gofish.config import Config, GameConfig, load_config
from gofish.models.card import Rank, Suit


class TestGameConfig:
    """Tests for GameConfig validation."""

    def test_defaults(self):
        """Test default settings."""
        config = GameConfig()
        assert config.num_players == 2
        assert config.effective_hand_size() == 7
        assert config.deck_size() == 52

    def test_hand_size_for_large_tables(self):
        """Test that four or more players get five cards."""
        assert GameConfig(num_players=3).effective_hand_size() == 7
        assert GameConfig(num_players=4).effective_hand_size() == 5

    @pytest.mark.parametrize("num_players", [0, -1])
    def test_invalid_player_count(self, num_players):
        """Test that player counts below one are rejected."""
        with pytest.raises(ValidationError):
            GameConfig(num_players=num_players)

    def test_too_many_names(self):
        """Test that more names than players is rejected."""
        with pytest.raises(ValidationError):
            GameConfig(num_players=2, player_names=["A", "B", "C"])

    def test_deal_larger_than_deck(self):
        """Test that a deal that cannot fit the deck is rejected."""
        with pytest.raises(ValidationError):
            GameConfig(num_players=10, hand_size=6)

    def test_rank_and_suit_names(self):
        """Test restricting the deck by name."""
        config = GameConfig(ranks=["ace", "King"], suits=["HEART"], hand_size=1)

        assert config.ranks == [Rank.ACE, Rank.KING]
        assert config.suits == [Suit.HEART]
        assert config.deck_size() == 2

    def test_unknown_rank_name(self):
        """Test that unknown rank names are rejected."""
        with pytest.raises(ValidationError):
            GameConfig(ranks=["joker"])


class TestLoadConfig:
    """Tests for load_config."""

    def test_none_path(self):
        """Test defaults without a file."""
        assert load_config(None) == Config()

    def test_missing_file(self, tmp_path):
        """Test defaults for a missing file."""
        assert load_config(tmp_path / "missing.yaml") == Config()

    def test_empty_file(self, tmp_path):
        """Test defaults for an empty file."""
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(path) == Config()

    def test_load_yaml(self, tmp_path):
        """Test loading settings from YAML."""
        path = tmp_path / "config.yaml"
        path.write_text(
            "game:\n"
            "  num_players: 3\n"
            "  player_names: [Ann, Bob]\n"
            "  seed: 5\n"
            "strategy:\n"
            "  target: after_self\n"
            "logging:\n"
            "  level: DEBUG\n"
        )

        config = load_config(path)

        assert config.game.num_players == 3
        assert config.game.player_names == ["Ann", "Bob"]
        assert config.game.seed == 5
        assert config.strategy.target == "after_self"
        assert config.logging.level == "DEBUG"

    def test_invalid_yaml_values(self, tmp_path):
        """Test that invalid values surface as validation errors."""
        path = tmp_path / "config.yaml"
        path.write_text("game:\n  num_players: 0\n")

        with pytest.raises(ValidationError):
            load_config(path)

    def test_unknown_strategy(self, tmp_path):
        """Test that unknown strategy names are rejected."""
        path = tmp_path / "config.yaml"
        path.write_text("strategy:\n  target: random\n")

        with pytest.raises(ValidationError):
            load_config(path)
