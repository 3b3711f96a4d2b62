"""Rebuild displayable table snapshots from a JSONL game log."""

import json
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class ReplayState:
    """Table state after one logged record."""

    game: int = 0
    turn: int = 0
    players: list[dict] = field(default_factory=list)
    hands: dict[str, str] = field(default_factory=dict)
    sets: dict[str, list[str]] = field(default_factory=dict)
    deck: int = 0
    last_action: str = ""
    kind: str = ""  # Record type, or the action for turn events
    current_player: int = -1


def load_events(path: Path) -> list[dict]:
    """Load all events from JSONL file."""
    events = []
    with open(path, encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if line:
                events.append(json.loads(line))
    return events


def get_player_name(state: ReplayState, player_id: int) -> str:
    """Get player name by ID."""
    for p in state.players:
        if p.get("id") == player_id:
            return p.get("name", f"Player {player_id}")
    return f"Player {player_id}"


def describe_event(state: ReplayState, event: dict) -> str:
    """One-line narration of a logged turn event."""
    name = get_player_name(state, event.get("player", -1))
    action = event.get("action", "")
    rank = event.get("rank", "?")

    if action == "deal":
        return f"{name} is dealt a hand"
    if action == "turn_start":
        return f"{name}'s turn"
    if action == "draw":
        return f"{name} draws a card"
    if action == "ask":
        return f"{name} asks {event.get('target', '?')} for {rank}s"
    if action == "transfer":
        return f"{event.get('target', '?')} gives {name} {event.get('count', 0)} card(s)"
    if action == "go_fish":
        return f"{event.get('target', '?')} says \"Go Fish!\""
    if action == "set_completed":
        return f"{name} completes a set of {', '.join(event.get('sets', []))}"
    if action == "turn_end":
        return f"{name}'s turn is over"
    return f"{name}: {action}"


def build_states(events: list[dict]) -> list[ReplayState]:
    """Build displayable states from events."""
    states: list[ReplayState] = []
    current = ReplayState()

    for event in events:
        event_type = event.get("type")
        kind = event.get("action", "") if event_type == "event" else event_type

        if event_type == "session_start":
            current = ReplayState()
            current.players = event.get("players", [])
            current.last_action = "Session started"
            current.kind = kind
            states.append(_copy_state(current))

        elif event_type == "game_start":
            current.game = event.get("game", 0)
            current.turn = 0
            current.hands = event.get("hands", {})
            current.sets = {str(p.get("id")): [] for p in current.players}
            current.deck = event.get("deck", 0)
            current.current_player = 0
            current.last_action = "Game started"
            current.kind = kind
            states.append(_copy_state(current))

        elif event_type == "event":
            current.game = event.get("game", current.game)
            current.turn = event.get("turn", current.turn)
            current.hands = event.get("hands", current.hands)
            current.deck = event.get("deck", current.deck)

            player = event.get("player", -1)
            if event.get("action") == "set_completed":
                current.sets.setdefault(str(player), []).extend(event.get("sets", []))
            if event.get("action") != "deal":
                current.current_player = player
            current.last_action = describe_event(current, event)
            current.kind = kind
            states.append(_copy_state(current))

        elif event_type == "game_end":
            winner = event.get("winner")
            if event.get("tie", winner is None):
                current.last_action = "Game ended in a tie"
            else:
                current.last_action = f"Game ended. {get_player_name(current, winner)} wins"
            current.kind = kind
            states.append(_copy_state(current))

        elif event_type == "session_end":
            wins = event.get("wins", {})
            wins_str = ", ".join(f"P{k}:{v}" for k, v in sorted(wins.items()))
            current.last_action = f"Session ended. Wins: {wins_str}"
            current.kind = kind
            states.append(_copy_state(current))

    return states


def _copy_state(state: ReplayState) -> ReplayState:
    """Create a copy of the replay state."""
    return ReplayState(
        game=state.game,
        turn=state.turn,
        players=list(state.players),
        hands=dict(state.hands),
        sets={k: list(v) for k, v in state.sets.items()},
        deck=state.deck,
        last_action=state.last_action,
        kind=state.kind,
        current_player=state.current_player,
    )


def find_next(states: list[ReplayState], step: int, kinds: set[str]) -> int | None:
    """Find the first step after ``step`` whose record is one of ``kinds``."""
    for i in range(step + 1, len(states)):
        if states[i].kind in kinds:
            return i
    return None


def find_previous(states: list[ReplayState], step: int, kinds: set[str]) -> int | None:
    """Find the last step before ``step`` whose record is one of ``kinds``."""
    for i in range(step - 1, -1, -1):
        if states[i].kind in kinds:
            return i
    return None


def set_totals(state: ReplayState) -> dict[str, int]:
    """Completed sets per player id."""
    return {key: len(ranks) for key, ranks in state.sets.items()}
