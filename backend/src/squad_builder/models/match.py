"""Match and balance classification models."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from squad_builder.models.team import Team


class BalanceRating(str, Enum):
    """Qualitative bucket for a balance spread."""

    EXCELLENT = "excellent"  # spread <= 1.0
    GOOD = "good"  # spread <= 2.0
    FAIR = "fair"


class MatchType(str, Enum):
    """Sport played in a match."""

    FOOTBALL = "football"
    VOLLEYBALL = "volleyball"
    BASKETBALL = "basketball"
    TENNIS = "tennis"
    BADMINTON = "badminton"
    OTHER = "other"


@dataclass
class Match:
    """A finalized set of teams ready for persistence."""

    id: str
    name: str
    teams: list[Team]
    date: datetime
    is_public: bool = False
    winner_id: str | None = None
    match_type: MatchType | None = None
    created_by: str | None = None

    @property
    def winning_team(self) -> Team | None:
        if self.winner_id is None:
            return None
        return next((t for t in self.teams if t.id == self.winner_id), None)

    @property
    def player_ids(self) -> set[str]:
        """Ids of every player taking part."""
        return {p.id for team in self.teams for p in team.players}

