# league_service.py
# Read-modify-write orchestration for teams, squads, fixtures and results.
# Loads snapshots from the store, runs the league rules / core computations,
# and persists whatever changed.

import logging
import uuid
from typing import List, Optional, Tuple

from leaguehub_backend.core.eligibility import (
    check_player_write, check_squad, check_team_name, check_fixture, check_result_events,
)
from leaguehub_backend.core.exceptions import LeagueValidationError, NotFoundError
from leaguehub_backend.core.league_config import (
    ADJUSTABLE_PLAYER_STATS, DEFAULT_LEAGUE_SETTINGS, INITIAL_TEAMS, INITIAL_MATCHES,
)
from leaguehub_backend.core.result_reconciler import reconcile_result
from leaguehub_backend.core.standings import compute_standings
from leaguehub_backend.models.bulletin_model import LeagueSettings
from leaguehub_backend.models.match_model import Match, MatchCreate, MatchResultSubmit
from leaguehub_backend.models.snapshot_model import LeagueSnapshot
from leaguehub_backend.models.standing_model import Standing
from leaguehub_backend.models.team_model import Player, PlayerWrite, Team, TeamRegister, TopScorer
from leaguehub_backend.services.league_store import LeagueStore

logger = logging.getLogger("leaguehub.league")


def new_id(prefix: str) -> str:
    return f"{prefix}-{uuid.uuid4().hex[:10]}"


def build_demo_league() -> Tuple[List[Team], List[Match], LeagueSettings]:
    """The seed league: three teams, two fixtures, default branding."""
    teams = [Team.model_validate(t) for t in INITIAL_TEAMS]
    matches = [Match.model_validate(m) for m in INITIAL_MATCHES]
    return teams, matches, LeagueSettings.model_validate(DEFAULT_LEAGUE_SETTINGS)


async def _require_team(store: LeagueStore, team_id: str) -> Team:
    team = await store.get_team(team_id)
    if team is None:
        raise NotFoundError(f"Team {team_id} not found.")
    return team


def _find_player(team: Team, player_id: str) -> Player:
    for player in team.players:
        if player.id == player_id:
            return player
    raise NotFoundError(f"Player {player_id} not found in {team.name}.")


# =========================================
# TEAMS
# =========================================
async def register_team(store: LeagueStore, data: TeamRegister) -> Team:
    check_team_name(await store.list_teams(), data.name)

    team = Team(id=new_id("t"), players=[], **data.model_dump())
    await store.upsert_team(team)
    logger.info("Registered team %s (%s)", team.name, team.id)
    return team


async def update_team(store: LeagueStore, team_id: str, data: TeamRegister) -> Team:
    """Edit a team's profile. The squad is left as it is."""
    team = await _require_team(store, team_id)
    check_team_name(await store.list_teams(), data.name, editing_team_id=team_id)

    updated = team.model_copy(update=data.model_dump())
    await store.upsert_team(updated)
    return updated


# =========================================
# SQUADS
# =========================================
async def add_player(store: LeagueStore, team_id: str, data: PlayerWrite) -> Player:
    team = await _require_team(store, team_id)
    check_player_write(team, data)

    player = Player(id=new_id("p"), **data.model_dump())
    await store.upsert_team(team.model_copy(update={"players": team.players + [player]}))
    logger.info("Added #%d %s to %s", player.jersey_number, player.name, team.name)
    return player


async def update_player(store: LeagueStore, team_id: str, player_id: str, data: PlayerWrite) -> Player:
    team = await _require_team(store, team_id)
    _find_player(team, player_id)
    check_player_write(team, data, editing_player_id=player_id)

    updated = Player(id=player_id, **data.model_dump())
    players = [updated if p.id == player_id else p for p in team.players]
    await store.upsert_team(team.model_copy(update={"players": players}))
    return updated


async def remove_player(store: LeagueStore, team_id: str, player_id: str) -> None:
    team = await _require_team(store, team_id)
    player = _find_player(team, player_id)

    players = [p for p in team.players if p.id != player_id]
    await store.upsert_team(team.model_copy(update={"players": players}))
    logger.info("Removed %s from %s", player.name, team.name)


async def adjust_player_stat(store: LeagueStore, team_id: str, player_id: str, field: str, delta: int) -> Player:
    """Nudge goals/assists/appearances up or down; never below zero."""
    if field not in ADJUSTABLE_PLAYER_STATS:
        raise LeagueValidationError(
            f"Unknown stat '{field}'. Choose one of: {', '.join(ADJUSTABLE_PLAYER_STATS)}."
        )

    team = await _require_team(store, team_id)
    player = _find_player(team, player_id)

    updated = player.model_copy(update={field: max(0, getattr(player, field) + delta)})
    players = [updated if p.id == player_id else p for p in team.players]
    await store.upsert_team(team.model_copy(update={"players": players}))
    return updated


# =========================================
# FIXTURES AND RESULTS
# =========================================
async def schedule_match(store: LeagueStore, data: MatchCreate) -> Match:
    check_fixture(await store.list_teams(), data.home_team_id, data.away_team_id)

    match = Match(id=new_id("m"), **data.model_dump())
    await store.upsert_match(match)
    logger.info("Scheduled %s vs %s on %s (week %d)",
                match.home_team_id, match.away_team_id, match.date, match.match_week)
    return match


async def list_fixtures(store: LeagueStore, team_id: Optional[str] = None) -> List[Match]:
    """All fixtures by date and kick-off, optionally only those of one team."""
    matches = await store.list_matches()
    if team_id is not None:
        matches = [m for m in matches if team_id in (m.home_team_id, m.away_team_id)]
    return sorted(matches, key=lambda m: (m.date, m.time))


async def record_result(store: LeagueStore, match_id: str, result: MatchResultSubmit) -> Match:
    """
    Enter (or correct) a match result.
    Player goal tallies are recomputed only when the submission carries a
    scorer list; otherwise players are left untouched.
    """
    match = await store.get_match(match_id)
    if match is None:
        raise NotFoundError(f"Match {match_id} not found.")
    teams = await store.list_teams()
    check_result_events(match, teams, result.scorers, result.cards)

    matches = await store.list_matches()
    reconciled = reconcile_result(
        teams,
        matches,
        match_id,
        result.home_score,
        result.away_score,
        scorers=result.scorers,
        cards=result.cards,
        referee_name=result.referee_name,
    )

    updated = next(m for m in reconciled.matches if m.id == match_id)
    await store.upsert_match(updated)

    if reconciled.teams is not None:
        changed = [new for old, new in zip(teams, reconciled.teams) if new != old]
        await store.upsert_many(teams=changed)
        logger.info("Recomputed goal tallies (%d teams changed)", len(changed))

    logger.info("Result %s: %s %d-%d %s",
                match_id, updated.home_team_id, updated.home_score,
                updated.away_score, updated.away_team_id)
    return updated


# =========================================
# TABLES
# =========================================
async def get_standings(store: LeagueStore) -> List[Standing]:
    return compute_standings(await store.list_teams(), await store.list_matches())


async def get_top_scorers(store: LeagueStore, limit: int = 10) -> List[TopScorer]:
    """Players with at least one goal, most goals first (ties by name)."""
    scorers = [
        TopScorer(
            player_id=p.id,
            player_name=p.name,
            team_id=team.id,
            team_name=team.name,
            goals=p.goals,
            assists=p.assists,
            appearances=p.appearances,
            photo_url=p.photo_url or None,
        )
        for team in await store.list_teams()
        for p in team.players
        if p.goals > 0
    ]
    scorers.sort(key=lambda s: (-s.goals, s.player_name))
    return scorers[:limit]


# =========================================
# ADMIN: RESET / BACKUP / RESTORE
# =========================================
async def reset_league(store: LeagueStore) -> LeagueSnapshot:
    """Wipe league data and restore the demo league."""
    await store.reset()
    teams, matches, settings = build_demo_league()
    await store.upsert_many(teams=teams, matches=matches, settings=settings)
    return LeagueSnapshot(teams=teams, matches=matches, settings=settings)


async def export_snapshot(store: LeagueStore) -> LeagueSnapshot:
    return LeagueSnapshot(
        teams=await store.list_teams(),
        matches=await store.list_matches(),
        settings=await store.get_settings(),
    )


async def import_snapshot(store: LeagueStore, snapshot: LeagueSnapshot) -> None:
    """
    Write every record in the snapshot over what is stored (records missing
    from the snapshot are kept). The whole snapshot is checked against the
    league rules first; any violation rejects it before anything is written.
    """
    snapshot_ids = {team.id for team in snapshot.teams}
    kept = [team for team in await store.list_teams() if team.id not in snapshot_ids]

    for team in snapshot.teams:
        others = kept + [t for t in snapshot.teams if t.id != team.id]
        check_team_name(others, team.name)
        check_squad(team)

    for match in snapshot.matches:
        if match.home_team_id == match.away_team_id:
            raise LeagueValidationError(f"Match {match.id}: home and away teams must differ.")
    await store.upsert_many(teams=snapshot.teams, matches=snapshot.matches, settings=snapshot.settings)
