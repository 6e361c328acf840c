"""Data models for Squad Builder."""

from squad_builder.models.player import POSITION_ATTRIBUTES, Player
from squad_builder.models.team import Team
from squad_builder.models.match import BalanceRating, Match, MatchType

__all__ = [
    "POSITION_ATTRIBUTES",
    "Player",
    "Team",
    "BalanceRating",
    "Match",
    "MatchType",
]
