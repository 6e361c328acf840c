"""Team-composition services."""

from squad_builder.services.team_balancer import (
    TEAM_COLORS,
    classify_balance,
    composite_score,
    generate_teams,
    get_balance,
    select_players,
    snake_order,
    team_average,
)
from squad_builder.services.composition_editor import CompositionEditor
from squad_builder.services.match_service import apply_match_result, build_match

__all__ = [
    "TEAM_COLORS",
    "classify_balance",
    "composite_score",
    "generate_teams",
    "get_balance",
    "select_players",
    "snake_order",
    "team_average",
    "CompositionEditor",
    "apply_match_result",
    "build_match",
]
