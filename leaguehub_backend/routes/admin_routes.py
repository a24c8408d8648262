# admin_routes.py
# League settings, backup/restore and full reset. Admin only, except reading
# the settings (the public pages show the league's branding).

import logging
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from leaguehub_backend.core.auth import require_admin
from leaguehub_backend.core.database import get_db
from leaguehub_backend.models.bulletin_model import LeagueSettings
from leaguehub_backend.models.snapshot_model import LeagueSnapshot
from leaguehub_backend.models.user_model import LoginResult
from leaguehub_backend.services import league_service
from leaguehub_backend.services.league_service import build_demo_league
from leaguehub_backend.services.league_store import LeagueStore

logger = logging.getLogger("leaguehub.admin")

router = APIRouter()


@router.get("/settings", response_model=LeagueSettings)
async def get_settings(db: AsyncSession = Depends(get_db)):
    settings = await LeagueStore(db).get_settings()
    if settings is None:
        _, _, settings = build_demo_league()
    return settings


@router.put("/settings", response_model=LeagueSettings)
async def update_settings(
    data: LeagueSettings,
    db: AsyncSession = Depends(get_db),
    _: LoginResult = Depends(require_admin),
):
    return await LeagueStore(db).save_settings(data)


@router.get("/export", response_model=LeagueSnapshot)
async def export_league(db: AsyncSession = Depends(get_db), _: LoginResult = Depends(require_admin)):
    return await league_service.export_snapshot(LeagueStore(db))


@router.post("/import")
async def import_league(
    snapshot: LeagueSnapshot,
    db: AsyncSession = Depends(get_db),
    _: LoginResult = Depends(require_admin),
):
    """Push a full snapshot into storage (records are overwritten by id)."""
    try:
        await league_service.import_snapshot(LeagueStore(db), snapshot)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {
        "message": "Snapshot imported",
        "teams": len(snapshot.teams),
        "matches": len(snapshot.matches),
    }


@router.post("/reset", response_model=LeagueSnapshot)
async def reset_league(db: AsyncSession = Depends(get_db), _: LoginResult = Depends(require_admin)):
    """⚠️ Wipes every team, match, news post and sponsor, then restores the demo league."""
    snapshot = await league_service.reset_league(LeagueStore(db))
    logger.warning("League reset to demo data")
    return snapshot
