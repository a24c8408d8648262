# team_routes.py
# Defines API routes for team registration, profiles and squad management.

from typing import List
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from leaguehub_backend.core.auth import get_current_user, can_manage_team
from leaguehub_backend.core.database import get_db
from leaguehub_backend.core.exceptions import NotFoundError
from leaguehub_backend.models.team_model import Player, PlayerWrite, Team, TeamRegister
from leaguehub_backend.models.user_model import LoginResult
from leaguehub_backend.services import league_service
from leaguehub_backend.services.league_store import LeagueStore

router = APIRouter()


def ensure_can_manage(user: LoginResult, team_id: str) -> None:
    if not can_manage_team(user, team_id):
        raise HTTPException(status_code=403, detail="You can only manage your own team.")


# =========================================
# TEAMS
# =========================================
@router.get("", response_model=List[Team])
async def list_teams(db: AsyncSession = Depends(get_db)):
    return await LeagueStore(db).list_teams()


@router.get("/{team_id}", response_model=Team)
async def get_team(team_id: str, db: AsyncSession = Depends(get_db)):
    team = await LeagueStore(db).get_team(team_id)
    if not team:
        raise HTTPException(status_code=404, detail="Team not found.")
    return team


@router.post("", response_model=Team, status_code=201)
async def register_team(data: TeamRegister, db: AsyncSession = Depends(get_db)):
    """Public registration: anyone may enter a team into the league."""
    try:
        return await league_service.register_team(LeagueStore(db), data)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.put("/{team_id}", response_model=Team)
async def update_team(
    team_id: str,
    data: TeamRegister,
    db: AsyncSession = Depends(get_db),
    user: LoginResult = Depends(get_current_user),
):
    ensure_can_manage(user, team_id)
    try:
        return await league_service.update_team(LeagueStore(db), team_id, data)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


# =========================================
# SQUAD
# =========================================
@router.post("/{team_id}/players", response_model=Player, status_code=201)
async def add_player(
    team_id: str,
    data: PlayerWrite,
    db: AsyncSession = Depends(get_db),
    user: LoginResult = Depends(get_current_user),
):
    """
    Register a player. Rejected (400) when:
    - age is outside the league's eligibility window
    - the jersey number is already taken in this squad
    - the squad is full
    """
    ensure_can_manage(user, team_id)
    try:
        return await league_service.add_player(LeagueStore(db), team_id, data)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.put("/{team_id}/players/{player_id}", response_model=Player)
async def update_player(
    team_id: str,
    player_id: str,
    data: PlayerWrite,
    db: AsyncSession = Depends(get_db),
    user: LoginResult = Depends(get_current_user),
):
    ensure_can_manage(user, team_id)
    try:
        return await league_service.update_player(LeagueStore(db), team_id, player_id, data)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.delete("/{team_id}/players/{player_id}")
async def remove_player(
    team_id: str,
    player_id: str,
    db: AsyncSession = Depends(get_db),
    user: LoginResult = Depends(get_current_user),
):
    ensure_can_manage(user, team_id)
    try:
        await league_service.remove_player(LeagueStore(db), team_id, player_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"message": "Player removed from squad."}


@router.post("/{team_id}/players/{player_id}/stats/{stat_name}", response_model=Player)
async def adjust_player_stat(
    team_id: str,
    player_id: str,
    stat_name: str,
    delta: int = Query(1, description="Amount to add (negative to subtract)"),
    db: AsyncSession = Depends(get_db),
    user: LoginResult = Depends(get_current_user),
):
    """
    Quick +/- on a player's goals, assists or appearances.
    Example: /teams/t1/players/p-1/stats/assists?delta=1
    """
    ensure_can_manage(user, team_id)
    try:
        return await league_service.adjust_player_stat(LeagueStore(db), team_id, player_id, stat_name, delta)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
