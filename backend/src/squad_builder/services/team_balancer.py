"""Skill-balanced team generation using a snake draft."""
import logging
from typing import Iterable, Iterator, Sequence

from squad_builder.exceptions import InsufficientPlayersError, PlayerNotFoundError
from squad_builder.models.match import BalanceRating
from squad_builder.models.player import POSITION_ATTRIBUTES, Player
from squad_builder.models.team import Team

logger = logging.getLogger(__name__)

TEAM_COLORS = (
    "#8B5CF6",  # Purple
    "#3B82F6",  # Blue
    "#06B6D4",  # Cyan
    "#8B5A2B",  # Brown
    "#F59E0B",  # Amber
    "#10B981",  # Emerald
)

EXCELLENT_BALANCE_THRESHOLD = 1.0
GOOD_BALANCE_THRESHOLD = 2.0


def composite_score(player: Player) -> float:
    """Effective skill of a player.

    Players rated in every position get the mean of those three ratings and
    their base rating; everyone else is scored by ``skill_rating`` alone.
    """
    if player.has_position_skills:
        position_total = sum(player.position_skills[a] for a in POSITION_ATTRIBUTES)
        return (position_total + player.skill_rating) / 4
    return float(player.skill_rating)


def team_average(players: Sequence[Player]) -> float:
    """Mean composite score rounded to one decimal, 0.0 when empty."""
    if not players:
        return 0.0
    total = sum(composite_score(p) for p in players)
    return round(total / len(players), 1)


def refresh_average(team: Team) -> Team:
    """Recompute ``team.average_skill`` from its current players."""
    team.average_skill = team_average(team.players)
    return team


def snake_order(num_picks: int, num_teams: int) -> Iterator[int]:
    """Yield the receiving team index for each successive pick.

    Direction flips at either end of the team list, so the boundary team
    picks twice in a row: for two teams the order is 0, 1, 1, 0, 0, 1, ...
    """
    current = 0
    direction = 1
    for _ in range(num_picks):
        yield current
        current += direction
        if current >= num_teams:
            current = num_teams - 1
            direction = -1
        elif current < 0:
            current = 0
            direction = 1


def generate_teams(players: Sequence[Player], num_teams: int = 2) -> list[Team]:
    """Split ``players`` into ``num_teams`` skill-balanced teams.

    Args:
        players: Candidate roster. Not modified.
        num_teams: Number of teams to form (at least 1).

    Returns:
        Teams in index order, ids ``team-1`` .. ``team-N``.

    Raises:
        InsufficientPlayersError: If fewer players than teams were supplied.
    """
    if num_teams < 1:
        raise InsufficientPlayersError(f"Cannot create {num_teams} teams")
    if len(players) < num_teams:
        raise InsufficientPlayersError(
            f"Not enough players to create teams: {len(players)} players for {num_teams} teams"
        )

    # sorted() is stable, so equal scores keep their input order
    ranked = sorted(players, key=composite_score, reverse=True)

    teams = [
        Team(
            id=f"team-{index + 1}",
            name=f"Team {index + 1}",
            color=TEAM_COLORS[index % len(TEAM_COLORS)],
        )
        for index in range(num_teams)
    ]

    for player, team_index in zip(ranked, snake_order(len(ranked), num_teams)):
        teams[team_index].players.append(player)

    for team in teams:
        refresh_average(team)

    logger.debug(
        f"Generated {num_teams} teams from {len(players)} players, "
        f"averages={[t.average_skill for t in teams]}"
    )
    return teams


def get_balance(teams: Sequence[Team]) -> float:
    """Spread between the strongest and weakest team average (lower is better).

    The spread is rounded to one decimal. Averages from ``refresh_average``
    already carry one decimal, so this only strips float noise; hand-built
    teams with unrounded averages get a rounded spread.
    """
    if len(teams) < 2:
        return 0.0
    averages = [team.average_skill for team in teams]
    return round(max(averages) - min(averages), 1)


def classify_balance(balance: float) -> BalanceRating:
    """Bucket a balance spread: <= 1.0 excellent, <= 2.0 good, else fair."""
    if balance <= EXCELLENT_BALANCE_THRESHOLD:
        return BalanceRating.EXCELLENT
    if balance <= GOOD_BALANCE_THRESHOLD:
        return BalanceRating.GOOD
    return BalanceRating.FAIR


def select_players(pool: Iterable[Player], player_ids: Iterable[str]) -> list[Player]:
    """Pick the selected players out of a roster, keeping roster order.

    Raises:
        PlayerNotFoundError: If any id is not in the roster.
    """
    wanted = set(player_ids)
    selected = [p for p in pool if p.id in wanted]
    missing = wanted - {p.id for p in selected}
    if missing:
        raise PlayerNotFoundError(f"Players not in roster: {sorted(missing)}")
    return selected
