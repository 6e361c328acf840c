"""Package finalized teams into matches and apply match results."""
import copy
import uuid
from dataclasses import replace
from datetime import datetime
from typing import Optional, Sequence

from squad_builder.exceptions import TeamNotFoundError
from squad_builder.models.match import Match, MatchType
from squad_builder.models.player import Player
from squad_builder.models.team import Team


def default_match_name(when: datetime) -> str:
    return f"Match - {when.date().isoformat()}"


def build_match(
    teams: Sequence[Team],
    name: Optional[str] = None,
    winner_id: Optional[str] = None,
    is_public: bool = False,
    match_type: Optional[MatchType] = None,
    created_by: Optional[str] = None,
    now: Optional[datetime] = None,
) -> Match:
    """Create a match record from a final team set.

    The teams are copied, so later edits by the caller do not leak into the
    record handed to persistence.

    Raises:
        TeamNotFoundError: If ``winner_id`` is not one of the teams.
    """
    now = now or datetime.now()
    if winner_id is not None and winner_id not in {t.id for t in teams}:
        raise TeamNotFoundError(f"Winner is not a team in this match: {winner_id}")

    match_name = name.strip() if name else ""
    return Match(
        id=uuid.uuid4().hex,
        name=match_name or default_match_name(now),
        teams=copy.deepcopy(list(teams)),
        date=now,
        is_public=is_public,
        winner_id=winner_id,
        match_type=match_type,
        created_by=created_by,
    )


def apply_match_result(players: Sequence[Player], match: Match) -> list[Player]:
    """Return the roster with win/played counters updated for ``match``.

    Matches without a recorded winner leave the roster unchanged.
    """
    winning_team = match.winning_team
    if winning_team is None:
        return list(players)

    participants = match.player_ids
    winners = set(winning_team.player_ids)

    updated = []
    for player in players:
        if player.id in participants:
            player = replace(
                player,
                matches_played=player.matches_played + 1,
                wins=player.wins + 1 if player.id in winners else player.wins,
            )
        updated.append(player)
    return updated
