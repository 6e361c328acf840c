"""Tests for the snake-draft team balancer."""
import pytest

from squad_builder.exceptions import InsufficientPlayersError, PlayerNotFoundError
from squad_builder.models.match import BalanceRating
from squad_builder.models.player import Player
from squad_builder.models.team import Team
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


def make_players(ratings: list[int]) -> list[Player]:
    return [Player(id=f"p{i}", skill_rating=r, name=f"Player {i}") for i, r in enumerate(ratings)]


@pytest.fixture
def six_players():
    return make_players([10, 8, 6, 4, 2, 1])


class TestCompositeScore:
    def test_plain_rating(self):
        assert composite_score(Player(id="a", skill_rating=7)) == 7

    def test_plain_rating_is_float(self):
        assert isinstance(composite_score(Player(id="a", skill_rating=7)), float)

    def test_position_skills_averaged_with_rating(self):
        player = Player(
            id="a",
            skill_rating=6,
            position_skills={"forward": 8, "midfield": 6, "defender": 4},
        )
        assert composite_score(player) == 6.0

    def test_partial_position_skills_ignored(self):
        player = Player(id="a", skill_rating=5, position_skills={"forward": 10, "midfield": 10})
        assert composite_score(player) == 5

    def test_non_numeric_position_skill_ignored(self):
        player = Player(
            id="a",
            skill_rating=5,
            position_skills={"forward": 10, "midfield": "high", "defender": 10},
        )
        assert composite_score(player) == 5

    def test_extra_attributes_do_not_count(self):
        player = Player(
            id="a",
            skill_rating=4,
            position_skills={"forward": 4, "midfield": 4, "defender": 4, "goalkeeper": 10},
        )
        assert composite_score(player) == 4.0


class TestSnakeOrder:
    def test_two_teams(self):
        assert list(snake_order(8, 2)) == [0, 1, 1, 0, 0, 1, 1, 0]

    def test_three_teams(self):
        assert list(snake_order(9, 3)) == [0, 1, 2, 2, 1, 0, 0, 1, 2]

    def test_single_team(self):
        assert list(snake_order(4, 1)) == [0, 0, 0, 0]

    def test_no_picks(self):
        assert list(snake_order(0, 3)) == []


class TestGenerateTeams:
    def test_worked_example(self, six_players):
        teams = generate_teams(six_players, 2)

        assert [p.skill_rating for p in teams[0].players] == [10, 4, 2]
        assert [p.skill_rating for p in teams[1].players] == [8, 6, 1]
        assert teams[0].average_skill == 5.3
        assert teams[1].average_skill == 5.0
        assert get_balance(teams) == 0.3

    def test_team_identity_fields(self, six_players):
        teams = generate_teams(six_players, 3)

        assert [t.id for t in teams] == ["team-1", "team-2", "team-3"]
        assert [t.name for t in teams] == ["Team 1", "Team 2", "Team 3"]
        assert [t.color for t in teams] == list(TEAM_COLORS[:3])

    def test_colors_cycle_through_palette(self):
        players = make_players([5] * 8)
        teams = generate_teams(players, 8)
        assert teams[6].color == TEAM_COLORS[0]
        assert teams[7].color == TEAM_COLORS[1]

    def test_every_player_assigned_exactly_once(self):
        players = make_players([3, 9, 1, 7, 7, 2, 5, 10, 4, 6, 8])
        teams = generate_teams(players, 4)

        assigned = [p.id for team in teams for p in team.players]
        assert len(assigned) == len(players)
        assert sorted(assigned) == sorted(p.id for p in players)

    def test_averages_match_members(self):
        players = make_players([3, 9, 1, 7, 7, 2, 5, 10, 4, 6, 8])
        for team in generate_teams(players, 3):
            expected = round(sum(composite_score(p) for p in team.players) / len(team.players), 1)
            assert team.average_skill == expected

    def test_deterministic(self, six_players):
        first = generate_teams(six_players, 2)
        second = generate_teams(six_players, 2)
        assert first == second

    def test_ties_keep_input_order(self):
        players = make_players([5, 5, 5, 5])
        teams = generate_teams(players, 2)
        assert [p.id for p in teams[0].players] == ["p0", "p3"]
        assert [p.id for p in teams[1].players] == ["p1", "p2"]

    def test_sorts_by_composite_score(self):
        strong = Player(
            id="strong",
            skill_rating=5,
            position_skills={"forward": 10, "midfield": 10, "defender": 9},
        )
        players = [Player(id="plain", skill_rating=7), strong]
        teams = generate_teams(players, 2)
        assert teams[0].players[0].id == "strong"
        assert teams[0].average_skill == 8.5

    def test_input_not_modified(self, six_players):
        before = list(six_players)
        generate_teams(six_players, 2)
        assert six_players == before

    def test_single_team_takes_everyone(self, six_players):
        teams = generate_teams(six_players, 1)
        assert len(teams) == 1
        assert len(teams[0].players) == 6

    def test_one_player_per_team(self):
        teams = generate_teams(make_players([1, 2, 3]), 3)
        assert [len(t.players) for t in teams] == [1, 1, 1]

    def test_insufficient_players(self):
        with pytest.raises(InsufficientPlayersError):
            generate_teams(make_players([5, 6]), 3)

    def test_zero_teams_rejected(self, six_players):
        with pytest.raises(InsufficientPlayersError):
            generate_teams(six_players, 0)


class TestBalance:
    def test_fewer_than_two_teams(self):
        assert get_balance([]) == 0.0
        assert get_balance([Team(id="team-1", name="A", color="#fff", average_skill=7.5)]) == 0.0

    def test_spread(self):
        teams = [
            Team(id="team-1", name="A", color="#fff", average_skill=6.1),
            Team(id="team-2", name="B", color="#fff", average_skill=4.0),
            Team(id="team-3", name="C", color="#fff", average_skill=5.5),
        ]
        assert get_balance(teams) == 2.1

    def test_unrounded_averages_give_rounded_spread(self):
        teams = [
            Team(id="team-1", name="A", color="#fff", average_skill=6.33),
            Team(id="team-2", name="B", color="#fff", average_skill=4.0),
        ]
        assert get_balance(teams) == 2.3

    @pytest.mark.parametrize(
        "balance,expected",
        [
            (0.0, BalanceRating.EXCELLENT),
            (1.0, BalanceRating.EXCELLENT),
            (1.1, BalanceRating.GOOD),
            (2.0, BalanceRating.GOOD),
            (2.1, BalanceRating.FAIR),
        ],
    )
    def test_classify_balance(self, balance, expected):
        assert classify_balance(balance) == expected


def test_team_average_empty():
    assert team_average([]) == 0.0


class TestSelectPlayers:
    def test_keeps_roster_order(self, six_players):
        selected = select_players(six_players, ["p4", "p0", "p2"])
        assert [p.id for p in selected] == ["p0", "p2", "p4"]

    def test_unknown_id(self, six_players):
        with pytest.raises(PlayerNotFoundError):
            select_players(six_players, ["p0", "ghost"])
