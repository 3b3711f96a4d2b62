"""Main entry point for the Go Fish simulator."""

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Callable

from pydantic import ValidationError

from gofish.config import Config, GameConfig, GameConfigError, load_config
from gofish.game.engine import GameEngine
from gofish.logging import GameLogConfig, GameLogger
from gofish.utils.logger import GameDisplay, setup_logging

logger = logging.getLogger(__name__)


def generate_log_filename(log_dir: str, names: list[str]) -> str:
    """Generate log filename with timestamp and player names.

    Format: {ISO timestamp}_{player1}_{player2}_..._{playerN}.jsonl
    Player names are sorted alphabetically.

    Args:
        log_dir: Directory for log files.
        names: Player names.

    Returns:
        Full path to log file.
    """
    timestamp = datetime.now().strftime("%Y%m%dT%H%M%S")
    player_names = "_".join(sorted(names))
    filename = f"{timestamp}_{player_names}.jsonl"
    return str(Path(log_dir) / filename)


def collect_player_names(
    game_config: GameConfig,
    interactive: bool = False,
    input_fn: Callable[[str], str] = input,
) -> list[str]:
    """Get one name per player.

    Configured names are used first. Remaining seats are prompted for when
    interactive, otherwise they get a default name.

    Args:
        game_config: Game settings (player count and configured names)
        interactive: Prompt for missing names
        input_fn: Prompt function

    Returns:
        Names in turn order
    """
    names = list(game_config.player_names)
    for i in range(len(names), game_config.num_players):
        name = ""
        if interactive:
            name = input_fn(f"Enter player {i + 1} name: ").strip()
        names.append(name or f"Player {i + 1}")
    return names


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Go Fish card game simulator")
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Path to config file (YAML)",
    )
    parser.add_argument(
        "-n",
        "--num-players",
        type=int,
        help="Number of players (overrides config)",
    )
    parser.add_argument(
        "--names",
        nargs="+",
        help="Player names in turn order (overrides config)",
    )
    parser.add_argument(
        "-g",
        "--num-games",
        type=int,
        help="Number of games to play (overrides config)",
    )
    parser.add_argument(
        "-s",
        "--seed",
        type=int,
        help="Shuffle seed (overrides config)",
    )
    parser.add_argument(
        "--hand-size",
        type=int,
        help="Cards dealt to each player (overrides config)",
    )
    parser.add_argument(
        "--target",
        choices=["after_current", "after_self"],
        help="Opponent selection policy (overrides config)",
    )
    parser.add_argument(
        "-i",
        "--interactive",
        action="store_true",
        help="Prompt for player names",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "--show-hands",
        action="store_true",
        help="Show player hands in output",
    )
    parser.add_argument(
        "--game-log",
        type=Path,
        help="Directory for game log files (filename auto-generated)",
    )
    return parser.parse_args(argv)


def apply_overrides(config: Config, args: argparse.Namespace) -> Config:
    """Apply command-line overrides to the loaded config.

    Game settings are re-validated after the overrides are merged.
    """
    game_data = config.game.model_dump()
    if args.num_players is not None:
        game_data["num_players"] = args.num_players
    if args.names:
        game_data["player_names"] = args.names
        if args.num_players is None:
            game_data["num_players"] = len(args.names)
    if args.num_games is not None:
        game_data["num_games"] = args.num_games
    if args.seed is not None:
        game_data["seed"] = args.seed
    if args.hand_size is not None:
        game_data["hand_size"] = args.hand_size
    config.game = GameConfig(**game_data)

    if args.target:
        config.strategy.target = args.target
    if args.verbose:
        config.logging.level = "DEBUG"
    if args.show_hands:
        config.logging.show_hands = True
    return config


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success)
    """
    args = parse_args(argv)

    try:
        config = apply_overrides(load_config(args.config), args)
    except ValidationError as e:
        print(f"Invalid configuration:\n{e}", file=sys.stderr)
        return 1

    # Determine game log directory (CLI argument overrides config file)
    game_log_enabled = args.game_log is not None or config.game_log.enabled
    game_log_dir = str(args.game_log) if args.game_log else config.game_log.output_path

    setup_logging(config.logging.level)

    try:
        names = collect_player_names(config.game, interactive=args.interactive)

        if game_log_enabled:
            log_path = generate_log_filename(game_log_dir, names)
            game_log_config = GameLogConfig(enabled=True, output_path=log_path)
            print(f"Game log: {log_path}")
        else:
            game_log_config = GameLogConfig(enabled=False)

        with GameLogger(game_log_config) as game_logger:
            engine = GameEngine(names, config, game_logger)
            display = GameDisplay(engine.players, show_hands=config.logging.show_hands)
            engine.set_callbacks(
                on_event=display.print_event,
                on_game_end=display.print_game_end,
            )

            print(f"Players: {', '.join(names)}")
            print(f"Games: {config.game.num_games}")
            display.print_separator()

            wins = engine.run_games()

            if config.game.num_games > 1:
                display.print_final_results(wins, engine.players)

        return 0

    except GameConfigError as e:
        logger.error(f"Configuration error: {e}")
        return 1
    except KeyboardInterrupt:
        print("\nGame interrupted by user")
        return 1


if __name__ == "__main__":
    sys.exit(main())
