# league_routes.py
# Defines API routes for the league table, fixtures and result entry.

from datetime import date
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from leaguehub_backend.core.auth import get_current_user, require_admin, can_manage_team
from leaguehub_backend.core.database import get_db
from leaguehub_backend.core.exceptions import NotFoundError
from leaguehub_backend.models.match_model import FixtureGenerateRequest, Match, MatchCreate, MatchResultSubmit
from leaguehub_backend.models.standing_model import Standing
from leaguehub_backend.models.team_model import TopScorer
from leaguehub_backend.models.user_model import LoginResult
from leaguehub_backend.services import league_service
from leaguehub_backend.services.generate_fixtures import generate_fixtures_for_league
from leaguehub_backend.services.league_store import LeagueStore

router = APIRouter()


# =========================================
# GET LEAGUE STANDINGS
# =========================================
@router.get("/standings", response_model=List[Standing])
async def get_standings(db: AsyncSession = Depends(get_db)):
    """
    Current league table, computed from every completed match.
    Ranked by points, goal difference, then goals scored.
    """
    return await league_service.get_standings(LeagueStore(db))


@router.get("/top-scorers", response_model=List[TopScorer])
async def get_top_scorers(limit: int = Query(10, ge=1, le=100), db: AsyncSession = Depends(get_db)):
    return await league_service.get_top_scorers(LeagueStore(db), limit=limit)


# =========================================
# FIXTURES
# =========================================
@router.get("/fixtures", response_model=List[Match])
async def get_fixtures(team_id: Optional[str] = None, db: AsyncSession = Depends(get_db)):
    """All fixtures (played and scheduled) by date; filter with ?team_id=."""
    return await league_service.list_fixtures(LeagueStore(db), team_id=team_id)


@router.get("/fixtures/{match_id}", response_model=Match)
async def get_fixture(match_id: str, db: AsyncSession = Depends(get_db)):
    match = await LeagueStore(db).get_match(match_id)
    if not match:
        raise HTTPException(status_code=404, detail="Fixture not found")
    return match


@router.post("/fixtures", response_model=Match, status_code=201)
async def schedule_fixture(
    data: MatchCreate,
    db: AsyncSession = Depends(get_db),
    _: LoginResult = Depends(require_admin),
):
    try:
        return await league_service.schedule_match(LeagueStore(db), data)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/fixtures/generate", response_model=List[Match], status_code=201)
async def generate_fixtures(
    data: FixtureGenerateRequest,
    db: AsyncSession = Depends(get_db),
    _: LoginResult = Depends(require_admin),
):
    """
    Generate a double round-robin for every registered team.
    - Each round is one match week.
    - replace_existing drops unplayed fixtures first.
    """
    try:
        start = date.fromisoformat(data.start_date)
    except ValueError:
        raise HTTPException(status_code=400, detail="start_date must be an ISO date (YYYY-MM-DD).")

    try:
        return await generate_fixtures_for_league(LeagueStore(db), start, replace_existing=data.replace_existing)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


# =========================================
# RESULT ENTRY
# =========================================
@router.post("/fixtures/{match_id}/result", response_model=Match)
async def submit_result(
    match_id: str,
    data: MatchResultSubmit,
    db: AsyncSession = Depends(get_db),
    user: LoginResult = Depends(get_current_user),
):
    """
    Enter or correct a match result (admin, or the manager of either team).
    Supplying `scorers` recomputes every player's goal tally; leaving it out
    keeps player tallies as they are.
    """
    store = LeagueStore(db)
    match = await store.get_match(match_id)
    if not match:
        raise HTTPException(status_code=404, detail="Fixture not found")

    if not (can_manage_team(user, match.home_team_id) or can_manage_team(user, match.away_team_id)):
        raise HTTPException(status_code=403, detail="Only an admin or a manager of either team can enter this result.")

    try:
        return await league_service.record_result(store, match_id, data)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
