"""Deterministic default strategies.

- Rank: ask for the rank of the first card in hand
- Target: ask the player after the turn-order pointer, or the player
  after oneself
"""

from gofish.models.card import Rank
from gofish.models.player import Player
from gofish.strategy.base import RankChooser, TargetChooser


class FirstCardRankChooser(RankChooser):
    """Always ask for the rank of the first card in hand."""

    def choose_rank(self, player: Player, players: list[Player]) -> Rank:
        rank = player.hand.first_rank()
        if rank is None:
            raise ValueError(f"{player.name} has no cards to ask with")
        return rank


class NextAfterCurrentTargetChooser(TargetChooser):
    """Ask the player after the game's turn-order pointer.

    Ignores who is actually executing the turn. When the executing player
    is the pointer holder this is the same as asking one's successor.
    """

    def choose_target(
        self, players: list[Player], player_index: int, current_index: int
    ) -> int:
        return (current_index + 1) % len(players)


class NextAfterSelfTargetChooser(TargetChooser):
    """Ask the player seated after the executing player."""

    def choose_target(
        self, players: list[Player], player_index: int, current_index: int
    ) -> int:
        return (player_index + 1) % len(players)


RANK_CHOOSERS: dict[str, type[RankChooser]] = {
    "first_card": FirstCardRankChooser,
}

TARGET_CHOOSERS: dict[str, type[TargetChooser]] = {
    "after_current": NextAfterCurrentTargetChooser,
    "after_self": NextAfterSelfTargetChooser,
}


def create_rank_chooser(name: str) -> RankChooser:
    """Build a rank chooser by config name."""
    try:
        return RANK_CHOOSERS[name]()
    except KeyError:
        raise ValueError(f"Unknown rank strategy: {name}") from None


def create_target_chooser(name: str) -> TargetChooser:
    """Build a target chooser by config name."""
    try:
        return TARGET_CHOOSERS[name]()
    except KeyError:
        raise ValueError(f"Unknown target strategy: {name}") from None
