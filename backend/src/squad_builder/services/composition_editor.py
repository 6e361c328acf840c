"""Interactive editing of a generated team set.

A ``CompositionEditor`` owns a private working copy of the teams it was
opened with. Every operation validates all referenced ids before touching
the working copy and refreshes ``average_skill`` on each team whose roster
changed, so callers never observe a half-applied edit or a stale average.

Usage:
    editor = CompositionEditor()
    editor.open(generate_teams(players, 2))
    editor.move_player("p7", "team-1", "team-2")
    final_teams = editor.commit()

The editor is not thread-safe; callers sharing one across threads must
serialize access themselves.
"""
import copy
import logging
from typing import Sequence

from squad_builder.exceptions import (
    EditorSessionError,
    InvalidTeamSetError,
    PlayerNotFoundError,
    PositionOutOfRangeError,
    TeamNotFoundError,
)
from squad_builder.models.team import Team
from squad_builder.services.team_balancer import get_balance, refresh_average

logger = logging.getLogger(__name__)


class CompositionEditor:
    """Editable working copy of a team set."""

    def __init__(self, teams: Sequence[Team] | None = None):
        self._original: list[Team] | None = None
        self._working: list[Team] | None = None
        if teams is not None:
            self.open(teams)

    # ------------------------------------------------------------------
    # Session lifecycle
    # ------------------------------------------------------------------

    @property
    def is_open(self) -> bool:
        return self._working is not None

    @property
    def teams(self) -> list[Team]:
        """Current working copy.

        This and every operation return the editor's live list. Change teams
        only through the editor, or averages will go stale.
        """
        return self._require_open()

    @property
    def balance(self) -> float:
        return get_balance(self._require_open())

    def open(self, teams: Sequence[Team]) -> list[Team]:
        """Start a session on an independent deep copy of ``teams``.

        Raises:
            InvalidTeamSetError: If a team id repeats or a player is in more
                than one team. Any session already open is left as it was.
        """
        _validate_team_set(teams)
        self._original = copy.deepcopy(list(teams))
        self._working = copy.deepcopy(self._original)
        for team in self._working:
            refresh_average(team)
        logger.debug(f"Opened editor session with {len(self._working)} teams")
        return self._working

    def reset(self) -> list[Team]:
        """Discard all edits and return to the snapshot taken at open."""
        self._require_open()
        self._working = copy.deepcopy(self._original)
        for team in self._working:
            refresh_average(team)
        return self._working

    def commit(self) -> list[Team]:
        """Return the edited teams and close the session."""
        teams = self._require_open()
        self._close()
        return teams

    def discard(self) -> None:
        """Close the session without keeping any edits."""
        self._require_open()
        self._close()

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def move_player(self, player_id: str, from_team_id: str, to_team_id: str) -> list[Team]:
        """Move a player to the end of another team's roster."""
        source = self._get_team(from_team_id)
        target = self._get_team(to_team_id)
        index = self._locate(source, player_id)

        if source is target:
            return self._working

        player = source.players.pop(index)
        target.players.append(player)
        refresh_average(source)
        refresh_average(target)
        return self._working

    def swap_players(
        self,
        player_a_id: str,
        team_a_id: str,
        player_b_id: str,
        team_b_id: str,
    ) -> list[Team]:
        """Exchange two players, each taking the other's slot."""
        team_a = self._get_team(team_a_id)
        team_b = self._get_team(team_b_id)
        index_a = self._locate(team_a, player_a_id)
        index_b = self._locate(team_b, player_b_id)

        if team_a is team_b and index_a == index_b:
            return self._working

        player_a = team_a.players[index_a]
        team_a.players[index_a] = team_b.players[index_b]
        team_b.players[index_b] = player_a
        refresh_average(team_a)
        refresh_average(team_b)
        return self._working

    def reorder_within_team(self, team_id: str, from_index: int, to_index: int) -> list[Team]:
        """Move the player at ``from_index`` to ``to_index`` in the same team."""
        team = self._get_team(team_id)
        size = len(team.players)
        for index in (from_index, to_index):
            if not 0 <= index < size:
                raise PositionOutOfRangeError(
                    f"Index {index} out of range for team {team_id} with {size} players"
                )

        player = team.players.pop(from_index)
        team.players.insert(to_index, player)
        return self._working

    def rename_team(self, team_id: str, new_name: str) -> list[Team]:
        """Set a team's display name. Names need not be unique."""
        team = self._get_team(team_id)
        team.name = new_name
        return self._working

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _require_open(self) -> list[Team]:
        if self._working is None:
            raise EditorSessionError("No open editing session")
        return self._working

    def _close(self) -> None:
        self._original = None
        self._working = None

    def _get_team(self, team_id: str) -> Team:
        for team in self._require_open():
            if team.id == team_id:
                return team
        raise TeamNotFoundError(f"Team not found: {team_id}")

    @staticmethod
    def _locate(team: Team, player_id: str) -> int:
        index = team.index_of(player_id)
        if index is None:
            raise PlayerNotFoundError(f"Player {player_id} is not in team {team.id}")
        return index


def _validate_team_set(teams: Sequence[Team]) -> None:
    team_ids: set[str] = set()
    player_ids: set[str] = set()
    for team in teams:
        if team.id in team_ids:
            raise InvalidTeamSetError(f"Duplicate team id: {team.id}")
        team_ids.add(team.id)
        for player in team.players:
            if player.id in player_ids:
                raise InvalidTeamSetError(f"Player {player.id} appears in more than one team")
            player_ids.add(player.id)
