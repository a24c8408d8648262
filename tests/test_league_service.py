"""
tests/test_league_service.py

Purpose:
    Service-level read-modify-write flows against a real (temporary) SQLite
    store: registration, squads, fixtures, result entry and persistence of
    recomputed goal tallies.
"""

from __future__ import annotations

from datetime import date

import pytest

from leaguehub_backend.core.exceptions import LeagueValidationError, NotFoundError
from leaguehub_backend.core.league_config import MAX_SQUAD_SIZE
from leaguehub_backend.models.match_model import MatchCreate, MatchResultSubmit
from leaguehub_backend.models.snapshot_model import LeagueSnapshot
from leaguehub_backend.models.team_model import TeamRegister
from leaguehub_backend.services import league_service
from leaguehub_backend.services.generate_fixtures import generate_fixtures_for_league

from factories import goal, make_match, make_player, make_team, player_write


async def _two_teams(store):
    home = await league_service.register_team(store, TeamRegister(name="Thunder FC", home_ground="Storm Arena"))
    away = await league_service.register_team(store, TeamRegister(name="Gale Warriors", home_ground="Windy Park"))
    return home, away


@pytest.mark.asyncio
async def test_register_team_persists_and_rejects_duplicates(store):
    team = await league_service.register_team(store, TeamRegister(name="Thunder FC"))

    assert (await store.get_team(team.id)).name == "Thunder FC"
    with pytest.raises(LeagueValidationError):
        await league_service.register_team(store, TeamRegister(name="THUNDER fc"))
    assert len(await store.list_teams()) == 1


@pytest.mark.asyncio
async def test_teams_are_listed_in_registration_order(store):
    names = ["Zulu", "Alpha", "Mike"]
    for name in names:
        await league_service.register_team(store, TeamRegister(name=name))

    assert [t.name for t in await store.list_teams()] == names


@pytest.mark.asyncio
async def test_player_rules_are_enforced_before_saving(store):
    team, _ = await _two_teams(store)
    player = await league_service.add_player(store, team.id, player_write(jersey=9))

    with pytest.raises(LeagueValidationError):
        await league_service.add_player(store, team.id, player_write(jersey=9, name="Copycat"))
    with pytest.raises(LeagueValidationError):
        await league_service.add_player(store, team.id, player_write(jersey=11, age=30))

    stored = await store.get_team(team.id)
    assert [p.id for p in stored.players] == [player.id]


@pytest.mark.asyncio
async def test_update_and_remove_player(store):
    team, _ = await _two_teams(store)
    player = await league_service.add_player(store, team.id, player_write(jersey=9))

    edited = await league_service.update_player(store, team.id, player.id, player_write(jersey=10, age=60))
    assert (edited.jersey_number, edited.age) == (10, 60)

    await league_service.remove_player(store, team.id, player.id)
    assert (await store.get_team(team.id)).players == []

    with pytest.raises(NotFoundError):
        await league_service.remove_player(store, team.id, player.id)


@pytest.mark.asyncio
async def test_adjust_player_stat_floors_at_zero(store):
    team, _ = await _two_teams(store)
    player = await league_service.add_player(store, team.id, player_write())

    bumped = await league_service.adjust_player_stat(store, team.id, player.id, "assists", 2)
    assert bumped.assists == 2
    floored = await league_service.adjust_player_stat(store, team.id, player.id, "assists", -5)
    assert floored.assists == 0

    with pytest.raises(LeagueValidationError):
        await league_service.adjust_player_stat(store, team.id, player.id, "age", 1)


@pytest.mark.asyncio
async def test_schedule_match_rejects_same_team(store):
    team, _ = await _two_teams(store)

    with pytest.raises(LeagueValidationError):
        await league_service.schedule_match(
            store, MatchCreate(date="2024-06-01", home_team_id=team.id, away_team_id=team.id)
        )
    assert await store.list_matches() == []


@pytest.mark.asyncio
async def test_record_result_updates_table_and_scorer_tallies(store):
    home, away = await _two_teams(store)
    striker = await league_service.add_player(store, home.id, player_write(jersey=9))
    m1 = await league_service.schedule_match(store, MatchCreate(date="2024-06-01", home_team_id=home.id, away_team_id=away.id))
    m2 = await league_service.schedule_match(store, MatchCreate(date="2024-06-08", home_team_id=away.id, away_team_id=home.id))

    await league_service.record_result(
        store, m1.id, MatchResultSubmit(home_score=1, away_score=0, scorers=[goal(striker.id, home.id)])
    )
    await league_service.record_result(
        store, m2.id,
        MatchResultSubmit(home_score=0, away_score=2, scorers=[goal(striker.id, home.id, 30), goal(striker.id, home.id, 60)]),
    )

    stored = await store.get_team(home.id)
    assert stored.players[0].goals == 3

    table = await league_service.get_standings(store)
    assert table[0].team_id == home.id
    assert (table[0].won, table[0].points, table[0].goals_for) == (2, 6, 3)

    scorers = await league_service.get_top_scorers(store)
    assert [(s.player_id, s.goals) for s in scorers] == [(striker.id, 3)]


@pytest.mark.asyncio
async def test_score_correction_without_scorers_keeps_tallies(store):
    home, away = await _two_teams(store)
    striker = await league_service.add_player(store, home.id, player_write(jersey=9))
    match = await league_service.schedule_match(store, MatchCreate(date="2024-06-01", home_team_id=home.id, away_team_id=away.id))

    await league_service.record_result(
        store, match.id, MatchResultSubmit(home_score=1, away_score=0, scorers=[goal(striker.id, home.id)])
    )
    corrected = await league_service.record_result(store, match.id, MatchResultSubmit(home_score=2, away_score=0))

    assert (corrected.home_score, len(corrected.scorers)) == (2, 1)
    assert (await store.get_team(home.id)).players[0].goals == 1


@pytest.mark.asyncio
async def test_record_result_unknown_match(store):
    with pytest.raises(NotFoundError):
        await league_service.record_result(store, "nope", MatchResultSubmit(home_score=1, away_score=1))


@pytest.mark.asyncio
async def test_generate_fixtures_replaces_only_unplayed(store):
    home, away = await _two_teams(store)
    played = await league_service.schedule_match(store, MatchCreate(date="2024-05-01", home_team_id=home.id, away_team_id=away.id))
    await league_service.record_result(store, played.id, MatchResultSubmit(home_score=1, away_score=1))
    await league_service.schedule_match(store, MatchCreate(date="2024-05-08", home_team_id=away.id, away_team_id=home.id))

    fixtures = await generate_fixtures_for_league(store, date(2024, 6, 3), replace_existing=True)

    stored = await store.list_matches()
    assert len(fixtures) == 2
    assert len(stored) == 3
    assert played.id in {m.id for m in stored}
    assert {f.match_week for f in fixtures} == {2, 3}


@pytest.mark.asyncio
async def test_reset_restores_demo_league(store):
    await league_service.register_team(store, TeamRegister(name="Temporary"))

    snapshot = await league_service.reset_league(store)

    names = [t.name for t in await store.list_teams()]
    assert names == ["Thunder FC", "Lightning United", "Gale Warriors"]
    assert len(snapshot.matches) == 2
    assert (await store.get_settings()).name == snapshot.settings.name


@pytest.mark.asyncio
async def test_export_then_import_round_trip(store):
    home, away = await _two_teams(store)
    await league_service.schedule_match(store, MatchCreate(date="2024-06-01", home_team_id=home.id, away_team_id=away.id))
    snapshot = await league_service.export_snapshot(store)

    await store.reset()
    await league_service.import_snapshot(store, snapshot)

    assert await league_service.export_snapshot(store) == snapshot


@pytest.mark.asyncio
async def test_import_rejects_squad_with_shared_jersey(store):
    squad = [make_player("p1", 9), make_player("p2", 9)]
    snapshot = LeagueSnapshot(teams=[make_team("a", players=squad)])

    with pytest.raises(LeagueValidationError, match="#9"):
        await league_service.import_snapshot(store, snapshot)
    assert await store.list_teams() == []


@pytest.mark.asyncio
async def test_import_rejects_ineligible_or_oversized_squads(store):
    youngster = make_player("p1", 9).model_copy(update={"age": 25})
    crowd = [make_player(f"p{i}", i) for i in range(1, MAX_SQUAD_SIZE + 2)]

    for team in (make_team("a", players=[youngster]), make_team("b", players=crowd)):
        with pytest.raises(LeagueValidationError):
            await league_service.import_snapshot(store, LeagueSnapshot(teams=[team]))
    assert await store.list_teams() == []


@pytest.mark.asyncio
async def test_import_rejects_team_name_clashes(store):
    stored = await league_service.register_team(store, TeamRegister(name="Thunder FC"))

    clash_with_stored = LeagueSnapshot(teams=[make_team("x", name="thunder fc")])
    with pytest.raises(LeagueValidationError, match="already exists"):
        await league_service.import_snapshot(store, clash_with_stored)

    clash_inside = LeagueSnapshot(teams=[make_team("x", name="Gale"), make_team("y", name="GALE")])
    with pytest.raises(LeagueValidationError, match="already exists"):
        await league_service.import_snapshot(store, clash_inside)

    assert [t.id for t in await store.list_teams()] == [stored.id]


@pytest.mark.asyncio
async def test_import_may_overwrite_a_team_with_its_own_name(store):
    stored = await league_service.register_team(store, TeamRegister(name="Thunder FC"))
    with_squad = stored.model_copy(update={"players": [make_player("p1", 9)]})

    await league_service.import_snapshot(store, LeagueSnapshot(teams=[with_squad]))

    assert [p.id for p in (await store.get_team(stored.id)).players] == ["p1"]


@pytest.mark.asyncio
async def test_rejected_generation_keeps_existing_fixtures(store):
    await store.upsert_many(
        teams=[make_team("a"), make_team("b")],
        matches=[make_match("m1", "a", "b", completed=False)],
    )
    await store.delete_team("b")

    with pytest.raises(LeagueValidationError):
        await generate_fixtures_for_league(store, date(2024, 6, 1), replace_existing=True)

    assert [m.id for m in await store.list_matches()] == ["m1"]


@pytest.mark.asyncio
async def test_delete_team_reports_whether_it_existed(store):
    await store.upsert_team(make_team("a"))

    assert await store.delete_team("a") is True
    assert await store.delete_team("a") is False
    assert await store.get_team("a") is None


@pytest.mark.asyncio
async def test_record_result_rejects_scorer_outside_squad(store):
    home, away = await _two_teams(store)
    match = await league_service.schedule_match(store, MatchCreate(date="2024-06-01", home_team_id=home.id, away_team_id=away.id))

    with pytest.raises(LeagueValidationError, match="not in the squad"):
        await league_service.record_result(
            store, match.id, MatchResultSubmit(home_score=1, away_score=0, scorers=[goal("ghost", home.id)])
        )
    assert (await store.get_match(match.id)).is_completed is False
