"""Tests for the command-line entry point."""

from gofish.config import GameConfig
from gofish.main import collect_player_names, generate_log_filename, main


class TestCollectPlayerNames:
    """Tests for collect_player_names."""

    def test_default_names(self):
        """Test generated names when none are configured."""
        assert collect_player_names(GameConfig(num_players=3)) == [
            "Player 1",
            "Player 2",
            "Player 3",
        ]

    def test_configured_names_first(self):
        """Test that configured names fill the first seats."""
        config = GameConfig(num_players=3, player_names=["Ann"])
        assert collect_player_names(config) == ["Ann", "Player 2", "Player 3"]

    def test_interactive_prompt(self):
        """Test prompting for missing names."""
        answers = iter(["Bob", ""])
        prompts = []

        def fake_input(prompt):
            prompts.append(prompt)
            return next(answers)

        config = GameConfig(num_players=3, player_names=["Ann"])
        names = collect_player_names(config, interactive=True, input_fn=fake_input)

        assert names == ["Ann", "Bob", "Player 3"]
        assert prompts == ["Enter player 2 name: ", "Enter player 3 name: "]


class TestGenerateLogFilename:
    """Tests for generate_log_filename."""

    def test_sorted_names(self, tmp_path):
        """Test that player names are sorted into the filename."""
        path = generate_log_filename(str(tmp_path), ["Zed", "Ann"])
        assert path.startswith(str(tmp_path))
        assert path.endswith("_Ann_Zed.jsonl")


class TestMain:
    """Tests for main."""

    def test_run_game(self, capsys):
        """Test a full run from the command line."""
        exit_code = main(["--names", "Ann", "Bob", "--seed", "3"])

        out = capsys.readouterr().out
        assert exit_code == 0
        assert "Players: Ann, Bob" in out
        assert "Game 1 finished" in out

    def test_invalid_player_count(self, capsys):
        """Test that a bad player count fails before the game starts."""
        exit_code = main(["--num-players", "0"])

        assert exit_code == 1
        assert "Invalid configuration" in capsys.readouterr().err

    def test_game_log(self, tmp_path):
        """Test that --game-log writes a JSONL file."""
        exit_code = main(["--names", "Ann", "Bob", "--seed", "3", "--game-log", str(tmp_path)])

        assert exit_code == 0
        assert len(list(tmp_path.glob("*_Ann_Bob.jsonl"))) == 1

    def test_series(self, capsys):
        """Test that several games print a final summary."""
        exit_code = main(["-n", "3", "-g", "3", "--seed", "1", "--target", "after_self"])

        assert exit_code == 0
        assert "FINAL RESULTS" in capsys.readouterr().out
