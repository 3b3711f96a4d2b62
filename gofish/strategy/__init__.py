"""Player decision strategies."""

from gofish.strategy.base import RankChooser, TargetChooser
from gofish.strategy.simple import (
    FirstCardRankChooser,
    NextAfterCurrentTargetChooser,
    NextAfterSelfTargetChooser,
    create_rank_chooser,
    create_target_chooser,
)

__all__ = [
    "RankChooser",
    "TargetChooser",
    "FirstCardRankChooser",
    "NextAfterCurrentTargetChooser",
    "NextAfterSelfTargetChooser",
    "create_rank_chooser",
    "create_target_chooser",
]
