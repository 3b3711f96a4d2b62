"""Base strategy classes.

Defines the choices a player makes during a turn. The engine only talks
to these interfaces, so human or smarter players can be plugged in
without touching the turn logic.
"""

from abc import ABC, abstractmethod

from gofish.models.card import Rank
from gofish.models.player import Player


class RankChooser(ABC):
    """Decides which rank the executing player asks for."""

    @abstractmethod
    def choose_rank(self, player: Player, players: list[Player]) -> Rank:
        """Select the rank to ask for.

        Args:
            player: Executing player (hand is never empty here)
            players: All players in turn order

        Returns:
            Rank to request
        """
        pass


class TargetChooser(ABC):
    """Decides which opponent the executing player asks."""

    @abstractmethod
    def choose_target(
        self, players: list[Player], player_index: int, current_index: int
    ) -> int:
        """Select the player to ask.

        Args:
            players: All players in turn order
            player_index: Index of the executing player
            current_index: Turn-order pointer of the game

        Returns:
            Index of the player to ask
        """
        pass
