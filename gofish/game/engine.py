"""Game engine for Go Fish."""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING, Callable, Sequence

from gofish.config import Config, GameConfigError, default_hand_size
from gofish.logging import GameLogger
from gofish.models.card import Card, Rank
from gofish.models.deck import Deck, EmptyDeckError
from gofish.models.game_state import (
    EventAction,
    GameResult,
    GameState,
    PlayerScore,
    TurnEvent,
)
from gofish.models.player import SET_SIZE, Player
from gofish.strategy import create_rank_chooser, create_target_chooser

if TYPE_CHECKING:
    from gofish.strategy import RankChooser, TargetChooser

logger = logging.getLogger(__name__)


class GameEngine:
    """Main game engine for Go Fish."""

    def __init__(
        self,
        player_names: Sequence[str],
        config: Config | None = None,
        game_logger: GameLogger | None = None,
        rank_chooser: RankChooser | None = None,
        target_chooser: TargetChooser | None = None,
        rng: random.Random | None = None,
    ):
        """Initialize game engine.

        Args:
            player_names: Names in turn order
            config: Configuration (uses defaults if not provided)
            game_logger: GameLogger instance for detailed logging
            rank_chooser: Rank policy (built from config if not provided)
            target_chooser: Opponent policy (built from config if not provided)
            rng: Random source for shuffling (seeded from config if not provided)

        Raises:
            GameConfigError: If no players are given
        """
        if not player_names:
            raise GameConfigError("At least one player is required")

        self.config = config or Config()
        self.game_logger = game_logger

        self.players = [
            Player(player_id=i, name=name) for i, name in enumerate(player_names)
        ]
        self.rank_chooser = rank_chooser or create_rank_chooser(self.config.strategy.rank)
        self.target_chooser = target_chooser or create_target_chooser(
            self.config.strategy.target
        )
        self.rng = rng or random.Random(self.config.game.seed)

        self.state = GameState()
        self.deck = Deck()
        self.set_size = SET_SIZE
        self.total_cards = 0

        self._on_event: Callable[[TurnEvent], None] | None = None
        self._on_game_end: Callable[[GameResult], None] | None = None

    def set_callbacks(
        self,
        on_event: Callable[[TurnEvent], None] | None = None,
        on_game_end: Callable[[GameResult], None] | None = None,
    ) -> None:
        """Set event callbacks.

        Args:
            on_event: Called for every turn event
            on_game_end: Called with the result when a game ends
        """
        self._on_event = on_event
        self._on_game_end = on_game_end

    def run_games(self, num_games: int | None = None) -> dict[int, int]:
        """Run multiple games.

        Args:
            num_games: Number of games (uses config if not specified)

        Returns:
            Dict of player_id -> games won (ties count for nobody)
        """
        if num_games is None:
            num_games = self.config.game.num_games
        wins: dict[int, int] = {p.player_id: 0 for p in self.players}

        if self.game_logger:
            self.game_logger.log_session_start(self.players)

        for game_num in range(1, num_games + 1):
            self.state.game_number = game_num
            logger.info(f"Starting game {game_num}/{num_games}")

            result = self.run_game()
            if result.winner_id is not None:
                wins[result.winner_id] += 1

        if self.game_logger:
            self.game_logger.log_session_end(num_games, wins)

        return wins

    def run_game(
        self,
        deck: Deck | None = None,
        hands: Sequence[Sequence[Card]] | None = None,
    ) -> GameResult:
        """Run a single game to completion.

        Args:
            deck: Stacked deck to play with (see init_game)
            hands: Starting hands (see init_game)

        Returns:
            Final scores and winner
        """
        self.init_game(deck, hands)

        while not self.deck.is_empty() and self._any_cards_in_hand():
            self.play_turn()

        result = self.determine_winner()
        logger.info(f"Game {self.state.game_number} finished after {result.turns} turns: {result}")

        if self.game_logger:
            self.game_logger.log_game_end(result)

        if self._on_game_end:
            self._on_game_end(result)

        return result

    def init_game(
        self,
        deck: Deck | None = None,
        hands: Sequence[Sequence[Card]] | None = None,
    ) -> None:
        """Initialize state for a new game.

        Without arguments the deck is built from config, shuffled once and
        dealt. A supplied deck is used as-is (already in draw order), and
        supplied hands replace the deal, which allows stacked positions.

        Args:
            deck: Deck in draw order
            hands: One card list per player

        Raises:
            GameConfigError: If the deal does not fit the deck, or hands do
                not match the players
        """
        self.state.reset_for_new_game()
        for player in self.players:
            player.reset_game_state()

        game_config = self.config.game
        self.set_size = (
            len(set(game_config.suits)) if game_config.suits is not None else SET_SIZE
        )

        if deck is None:
            self.deck = Deck.standard(game_config.ranks, game_config.suits)
            self.deck.shuffle(self.rng)
        else:
            self.deck = deck

        if hands is not None:
            if len(hands) != len(self.players):
                raise GameConfigError(
                    f"Got {len(hands)} hands for {len(self.players)} players"
                )
            for player, cards in zip(self.players, hands):
                player.receive(cards)
        else:
            self._deal_cards()

        if self.game_logger:
            self.game_logger.log_game_start(
                self.state.game_number,
                self.players,
                self.deck.count(),
            )

        for player in self.players:
            self._emit(EventAction.DEAL, player)
            self._collect_sets(player)

        self.total_cards = self.count_cards()
        self.check_conservation()

        logger.info(
            f"Game {self.state.game_number} initialized: "
            f"{len(self.players)} players, {self.deck.count()} cards in deck"
        )

    def _deal_cards(self) -> None:
        """Deal cards round-robin starting from player 0."""
        hand_size = self.config.game.hand_size
        if hand_size is None:
            hand_size = default_hand_size(len(self.players))

        needed = hand_size * len(self.players)
        if needed > self.deck.count():
            raise GameConfigError(
                f"Cannot deal {hand_size} cards to {len(self.players)} players "
                f"from {self.deck.count()} cards"
            )

        for i in range(needed):
            self.players[i % len(self.players)].receive([self.deck.draw_top()])

        logger.debug(f"Dealt {hand_size} cards to each player")

    def play_turn(self) -> None:
        """Play one turn for the pointer holder, then advance the pointer.

        Raises:
            EmptyDeckError: If the player has no cards and the deck is empty
        """
        self.state.turn_number += 1
        self.take_turn(self.state.current_player)
        self._advance_player()

    def take_turn(self, player_index: int) -> None:
        """Resolve one turn for the given player.

        The turn-order pointer is passed to the target chooser separately,
        so the executing player does not have to be the pointer holder.

        Args:
            player_index: Index of the executing player

        Raises:
            EmptyDeckError: If the player has no cards and the deck is empty
        """
        player = self.players[player_index]
        self._emit(EventAction.TURN_START, player)
        logger.debug(f"{player} turn: hand={player.hand} sets={player.completed_sets}")

        # Empty hand: draw first, then ask with whatever was drawn
        if player.hand.is_empty():
            card = self.deck.draw_top()
            player.receive([card])
            self._emit(EventAction.DRAW, player, rank=card.rank)
            self._collect_sets(player)
            if player.hand.is_empty():
                self._end_turn(player)
                return

        rank = self.rank_chooser.choose_rank(player, self.players)
        if rank not in player.hand.rank_counts():
            raise ValueError(f"{player.name} asked for {rank.name} without holding one")

        target_index = self.target_chooser.choose_target(
            self.players, player_index, self.state.current_player
        )
        target = self.players[target_index]

        if target_index == player_index:
            # Nobody else to ask
            logger.debug(f"{player} has no opponent to ask")
            self._emit(EventAction.GO_FISH, player, rank=rank, count_transferred=0)
            self._go_fish(player)
        else:
            self._emit(EventAction.ASK, player, rank=rank, target_name=target.name)
            received = target.remove_matching(rank)
            player.receive(received)
            self._emit(
                EventAction.TRANSFER,
                player,
                rank=rank,
                target_name=target.name,
                count_transferred=len(received),
            )

            if received:
                self._collect_sets(player)
            else:
                self._emit(
                    EventAction.GO_FISH,
                    player,
                    rank=rank,
                    target_name=target.name,
                    count_transferred=0,
                )
                self._go_fish(player)

        self._end_turn(player)

    def _go_fish(self, player: Player) -> None:
        """Draw one card if the deck has any left."""
        try:
            card = self.deck.draw_top()
        except EmptyDeckError:
            logger.debug(f"{player} cannot fish: deck is empty")
            return

        player.receive([card])
        self._emit(EventAction.DRAW, player, rank=card.rank)
        self._collect_sets(player)

    def _collect_sets(self, player: Player) -> list[Rank]:
        """Extract completed sets from a player's hand and report them."""
        completed = player.detect_and_extract_sets(self.set_size)
        if completed:
            names = ", ".join(r.name for r in completed)
            logger.info(f"{player} completed a set of {names}")
            self._emit(EventAction.SET_COMPLETED, player, sets_completed=completed)
        return completed

    def _end_turn(self, player: Player) -> None:
        """Finish a turn and verify no card was lost or duplicated."""
        self._emit(EventAction.TURN_END, player)
        self.check_conservation()

    def _advance_player(self) -> None:
        """Advance to next player."""
        self.state.current_player = (self.state.current_player + 1) % len(self.players)

    def _any_cards_in_hand(self) -> bool:
        """Check if at least one player still holds cards."""
        return any(not p.hand.is_empty() for p in self.players)

    def count_cards(self) -> int:
        """Count cards in the deck, in hands and inside completed sets."""
        in_hands = sum(p.hand_count() for p in self.players)
        in_sets = sum(p.set_count for p in self.players) * self.set_size
        return self.deck.count() + in_hands + in_sets

    def check_conservation(self) -> None:
        """Fail fast if a card was lost, created or held twice."""
        held = self.deck.to_list()
        for p in self.players:
            held.extend(p.hand)
        assert len(set(held)) == len(held), "A card is held in two places"
        assert self.count_cards() == self.total_cards, (
            f"Card count changed: {self.count_cards()} != {self.total_cards}"
        )

    def determine_winner(self) -> GameResult:
        """Rank players by completed sets.

        The strictly highest set count wins. A shared maximum, or nobody
        having any set, is a tie.
        """
        scores = [
            PlayerScore(
                player_id=p.player_id,
                player_name=p.name,
                set_count=p.set_count,
                sets=list(p.completed_sets),
            )
            for p in self.players
        ]
        result = GameResult(
            game_number=self.state.game_number,
            turns=self.state.turn_number,
            scores=scores,
        )

        best = max(s.set_count for s in scores)
        leaders = [s for s in scores if s.set_count == best]
        if best > 0 and len(leaders) == 1:
            result.winner_id = leaders[0].player_id
            result.winner = leaders[0].player_name

        return result

    def _emit(
        self,
        action: EventAction,
        player: Player,
        rank: Rank | None = None,
        target_name: str | None = None,
        count_transferred: int | None = None,
        sets_completed: list[Rank] | None = None,
    ) -> None:
        """Send a turn event to the callback and the game log."""
        event = TurnEvent(
            game=self.state.game_number,
            turn=self.state.turn_number,
            player_id=player.player_id,
            player_name=player.name,
            action=action,
            rank=rank,
            target_name=target_name,
            count_transferred=count_transferred,
            sets_completed=sets_completed or [],
        )

        if self.game_logger:
            self.game_logger.log_event(event, self.players, self.deck.count())

        if self._on_event:
            self._on_event(event)
