"""Request bodies shared by the API routes and dataclass conversion helpers."""

from dataclasses import asdict

from pydantic import BaseModel, Field

from squad_builder.models.match import Match
from squad_builder.models.player import Player
from squad_builder.models.team import Team
from squad_builder.services.team_balancer import classify_balance, get_balance, refresh_average


class PlayerIn(BaseModel):
    """Player as supplied by the roster store."""

    id: str
    skill_rating: int
    position_skills: dict[str, int] | None = None
    name: str = ""
    avatar: str = ""
    wins: int = 0
    matches_played: int = 0

    def to_player(self) -> Player:
        return Player(**self.model_dump())


class TeamIn(BaseModel):
    """Team as previously returned by this API."""

    id: str
    name: str
    color: str
    players: list[PlayerIn] = Field(default_factory=list)
    average_skill: float = 0.0

    def to_team(self) -> Team:
        """Build a Team; ``average_skill`` is recomputed from the players."""
        team = Team(
            id=self.id,
            name=self.name,
            color=self.color,
            players=[p.to_player() for p in self.players],
        )
        return refresh_average(team)


def serialize_team(team: Team) -> dict:
    """Serialize Team to dict."""
    return asdict(team)


def serialize_player(player: Player) -> dict:
    """Serialize Player to dict."""
    return asdict(player)


def serialize_teams(teams: list[Team]) -> dict:
    """Teams plus their balance summary."""
    balance = get_balance(teams)
    return {
        "teams": [serialize_team(t) for t in teams],
        "balance": balance,
        "rating": classify_balance(balance).value,
    }


def serialize_match(match: Match) -> dict:
    """Serialize Match to dict."""
    return {
        "id": match.id,
        "name": match.name,
        "teams": [serialize_team(t) for t in match.teams],
        "date": match.date.isoformat(),
        "is_public": match.is_public,
        "winner_id": match.winner_id,
        "match_type": match.match_type.value if match.match_type else None,
        "created_by": match.created_by,
    }
