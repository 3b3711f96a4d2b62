#!/usr/bin/env python3
"""Interactive log viewer for Go Fish game logs.

Usage:
    python scripts/log_viewer.py game_log.jsonl

Keys:
    n: Next step
    p: Previous step
    s: Next completed set
    f: Next "Go Fish"
    e: End of the current game
    b: Back to the start of the current game
    q: Quit
"""

import argparse
import curses
import sys
from pathlib import Path

from gofish.logging.replay import (
    ReplayState,
    build_states,
    find_next,
    find_previous,
    get_player_name,
    load_events,
    set_totals,
)

JUMP_KEYS = {
    ord("s"): {"set_completed"},
    ord("f"): {"go_fish"},
    ord("e"): {"game_end"},
}


def draw_screen(stdscr, state: ReplayState, step: int, total: int) -> None:
    """Draw the current state to the screen."""
    stdscr.clear()
    height, width = stdscr.getmaxyx()
    width = min(width, 100)

    line = 0
    sep = "=" * 80

    stdscr.addnstr(line, 0, sep, width - 1)
    line += 1

    game_info = f"Game {state.game} / Turn {state.turn} / Deck {state.deck}"
    step_info = f"Step {step + 1}/{total}"
    middle_space = 80 - len(game_info) - len(step_info) - 2
    stdscr.addnstr(line, 0, f"{game_info}{' ' * max(middle_space, 1)}{step_info}", width - 1)
    line += 1

    stdscr.addnstr(line, 0, sep, width - 1)
    line += 2

    stdscr.addnstr(line, 0, f"Last: {state.last_action}", width - 1)
    line += 2

    totals = set_totals(state)
    score = "  ".join(
        f"{get_player_name(state, p.get('id', -1))}: {totals.get(str(p.get('id')), 0)}"
        for p in state.players
    )
    stdscr.addnstr(line, 0, f"Sets: {score}", width - 1)
    line += 2

    dash_sep = "-" * 80
    stdscr.addnstr(line, 0, dash_sep, width - 1)
    line += 1

    for p in state.players:
        player_id = p.get("id", -1)
        key = str(player_id)
        marker = " <<<" if state.current_player == player_id else ""
        name = get_player_name(state, player_id)
        sets = ",".join(state.sets.get(key, []))
        stdscr.addnstr(line, 0, f"Player {player_id} ({name}) sets: [{sets}]{marker}", width - 1)
        line += 1

        hand = state.hands.get(key, "")
        count = len(hand.split(",")) if hand else 0
        stdscr.addnstr(line, 0, f"  {hand} ({count} cards)", width - 1)
        line += 1

        stdscr.addnstr(line, 0, dash_sep, width - 1)
        line += 1

    stdscr.addnstr(line, 0, sep, width - 1)
    line += 1

    help_line = "[n]ext [p]rev [s]et [f]ish [e]nd [b]egin [q]uit"
    stdscr.addnstr(line, 0, help_line, width - 1)

    stdscr.refresh()


def main_loop(stdscr, states: list[ReplayState]) -> None:
    """Main event loop."""
    curses.curs_set(0)

    step = 0
    total = len(states)

    while True:
        draw_screen(stdscr, states[step], step, total)

        try:
            key = stdscr.getch()
        except curses.error:
            continue

        if key == ord("q"):
            break
        elif key == ord("n"):
            if step < total - 1:
                step += 1
        elif key == ord("p"):
            if step > 0:
                step -= 1
        elif key == ord("b"):
            idx = find_previous(states, step + 1, {"game_start"})
            if idx is not None:
                step = idx
        elif key in JUMP_KEYS:
            idx = find_next(states, step, JUMP_KEYS[key])
            if idx is not None:
                step = idx


def main() -> int:
    """Entry point."""
    parser = argparse.ArgumentParser(
        description="Interactive viewer for Go Fish game logs"
    )
    parser.add_argument("logfile", type=Path, help="Path to game log file (JSONL)")
    args = parser.parse_args()

    try:
        events = load_events(args.logfile)
    except FileNotFoundError:
        print(f"Error: File not found: {args.logfile}", file=sys.stderr)
        return 1

    states = build_states(events)
    games = sum(1 for s in states if s.kind == "game_start")
    print(f"Loaded {len(events)} records from {games} game(s)")

    if not states:
        print("Error: No states to display", file=sys.stderr)
        return 1

    curses.wrapper(lambda stdscr: main_loop(stdscr, states))
    return 0


if __name__ == "__main__":
    sys.exit(main())
