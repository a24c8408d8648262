"""
tests/test_generate_fixtures.py

Purpose:
    Double round-robin generation: every pairing twice (home and away),
    byes for odd team counts, one match week per round.
"""

from __future__ import annotations

from collections import Counter
from datetime import date

import pytest

from leaguehub_backend.core.exceptions import LeagueValidationError
from leaguehub_backend.services.generate_fixtures import build_fixtures, round_robin_pairings

from factories import make_team


def test_every_pair_meets_home_and_away():
    rounds = round_robin_pairings(["a", "b", "c", "d"])

    assert len(rounds) == 6
    pairs = Counter(pair for r in rounds for pair in r)
    for home in "abcd":
        for away in "abcd":
            if home != away:
                assert pairs[(home, away)] == 1


def test_odd_team_count_gets_a_bye_each_round():
    rounds = round_robin_pairings(["a", "b", "c"])

    assert len(rounds) == 6
    assert all(len(r) == 1 for r in rounds)
    assert all(None not in pair for r in rounds for pair in r)


def test_build_fixtures_assigns_weeks_venues_and_slots():
    teams = [make_team("a"), make_team("b"), make_team("c"), make_team("d")]
    fixtures = build_fixtures(teams, date(2024, 6, 3), first_week=3)  # a Monday

    assert len(fixtures) == 12
    assert {f.match_week for f in fixtures} == set(range(3, 9))
    assert all(f.venue == f"{f.home_team_id} Park" for f in fixtures)
    assert all(not f.is_completed for f in fixtures)
    assert fixtures[0].date == "2024-06-04"  # first Tuesday
    assert [f.time for f in fixtures[:2]] == ["10:00", "18:00"]
    assert fixtures[2].date == "2024-06-06"  # then Thursday


def test_build_fixtures_needs_two_teams():
    with pytest.raises(LeagueValidationError):
        build_fixtures([make_team("a")], date(2024, 6, 3))
