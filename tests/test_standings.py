"""
tests/test_standings.py

Purpose:
    League table computation: scoring, ranking, orphaned fixtures and the
    bookkeeping identities every row must satisfy.
"""

from __future__ import annotations

from leaguehub_backend.core.standings import compute_standings

from factories import make_match, make_team


def _by_id(table):
    return {row.team_id: row for row in table}


def test_simple_home_win():
    teams = [make_team("a"), make_team("b")]
    table = compute_standings(teams, [make_match("m1", "a", "b", 3, 1)])

    assert [row.team_id for row in table] == ["a", "b"]
    home, away = _by_id(table)["a"], _by_id(table)["b"]
    assert (home.played, home.won, home.points, home.goals_for, home.goals_against, home.goal_difference) == (1, 1, 3, 3, 1, 2)
    assert (away.played, away.lost, away.points, away.goals_for, away.goals_against, away.goal_difference) == (1, 1, 0, 1, 3, -2)


def test_away_win_ranks_away_side_first():
    teams = [make_team("a"), make_team("b")]
    table = compute_standings(teams, [make_match("m1", "a", "b", 0, 2)])

    assert table[0].team_id == "b"
    assert table[0].won == 1 and table[1].lost == 1


def test_draw_gives_each_side_a_point():
    teams = [make_team("a"), make_team("b")]
    rows = _by_id(compute_standings(teams, [make_match("m1", "a", "b", 2, 2)]))

    for row in rows.values():
        assert (row.played, row.drawn, row.points, row.goal_difference) == (1, 1, 1, 0)


def test_tie_break_on_goal_difference():
    teams = [make_team("b"), make_team("a"), make_team("c"), make_team("d")]
    matches = [
        make_match("m1", "b", "c", 1, 0),
        make_match("m2", "a", "d", 5, 0),
    ]
    table = compute_standings(teams, matches)

    assert table[0].team_id == "a"
    assert table[1].team_id == "b"
    assert table[0].points == table[1].points == 3


def test_tie_break_on_goals_for():
    teams = [make_team("a"), make_team("b"), make_team("c"), make_team("d")]
    matches = [
        make_match("m1", "a", "c", 1, 0),
        make_match("m2", "b", "d", 3, 2),
    ]
    table = compute_standings(teams, matches)

    assert [row.team_id for row in table[:2]] == ["b", "a"]


def test_full_tie_keeps_team_list_order():
    teams = [make_team("z"), make_team("y"), make_team("x")]
    table = compute_standings(teams, [])

    assert [row.team_id for row in table] == ["z", "y", "x"]


def test_team_without_matches_has_zero_row():
    teams = [make_team("a"), make_team("b"), make_team("idle")]
    rows = _by_id(compute_standings(teams, [make_match("m1", "a", "b", 1, 0)]))

    idle = rows["idle"]
    assert idle.model_dump(exclude={"team_id", "team_name"}) == {
        "played": 0, "won": 0, "drawn": 0, "lost": 0,
        "goals_for": 0, "goals_against": 0, "goal_difference": 0, "points": 0,
    }


def test_scheduled_matches_are_ignored():
    teams = [make_team("a"), make_team("b")]
    table = compute_standings(teams, [make_match("m1", "a", "b", 4, 0, completed=False)])

    assert all(row.played == 0 for row in table)


def test_missing_scores_count_as_zero():
    teams = [make_team("a"), make_team("b")]
    rows = _by_id(compute_standings(teams, [make_match("m1", "a", "b", None, None)]))

    assert rows["a"].drawn == 1 and rows["b"].drawn == 1
    assert rows["a"].goals_for == 0


def test_orphaned_match_is_skipped():
    teams = [make_team("a"), make_team("b")]
    matches = [
        make_match("m1", "a", "ghost", 7, 0),
        make_match("m2", "ghost", "b", 0, 7),
        make_match("m3", "a", "b", 1, 1),
    ]
    rows = _by_id(compute_standings(teams, matches))

    assert rows["a"].played == 1 and rows["a"].goals_for == 1
    assert rows["b"].played == 1 and rows["b"].goals_against == 1


def test_empty_team_list_gives_empty_table():
    assert compute_standings([], [make_match("m1", "a", "b", 1, 0)]) == []


def test_aggregation_is_pure_and_repeatable():
    teams = [make_team("a"), make_team("b"), make_team("c")]
    matches = [
        make_match("m1", "a", "b", 2, 1),
        make_match("m2", "b", "c", 0, 0),
        make_match("m3", "c", "a", 3, 3),
    ]
    before = [m.model_copy(deep=True) for m in matches]

    first = compute_standings(teams, matches)
    second = compute_standings(teams, matches)

    assert first == second
    assert matches == before


def test_table_invariants_hold():
    teams = [make_team(t) for t in ("a", "b", "c", "d")]
    matches = [
        make_match("m1", "a", "b", 2, 1),
        make_match("m2", "c", "d", 0, 0),
        make_match("m3", "a", "c", 1, 4),
        make_match("m4", "b", "d", 3, 3),
        make_match("m5", "d", "a", 2, 0),
        make_match("m6", "b", "ghost", 9, 0),
        make_match("m7", "c", "b", 1, 2, completed=False),
    ]
    table = compute_standings(teams, matches)

    counted = [m for m in matches if m.is_completed and "ghost" not in (m.home_team_id, m.away_team_id)]
    assert sum(row.played for row in table) == 2 * len(counted)

    for row in table:
        assert row.points == 3 * row.won + row.drawn
        assert row.goal_difference == row.goals_for - row.goals_against
        assert row.played == row.won + row.drawn + row.lost

    for higher, lower in zip(table, table[1:]):
        assert (higher.points, higher.goal_difference, higher.goals_for) >= (
            lower.points, lower.goal_difference, lower.goals_for
        )
