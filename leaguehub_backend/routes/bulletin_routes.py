# bulletin_routes.py
# Defines API routes for league news and sponsor ads.

from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from leaguehub_backend.core.auth import require_admin
from leaguehub_backend.core.database import get_db
from leaguehub_backend.models.bulletin_model import NewsCreate, NewsPost, SponsorAd, SponsorCreate
from leaguehub_backend.models.user_model import LoginResult
from leaguehub_backend.services import bulletin_service
from leaguehub_backend.services.league_store import LeagueStore

router = APIRouter()


# =========================================
# NEWS
# =========================================
@router.get("/news", response_model=List[NewsPost])
async def list_news(limit: Optional[int] = Query(None, ge=1), db: AsyncSession = Depends(get_db)):
    return await bulletin_service.list_news(LeagueStore(db), limit=limit)


@router.post("/news", response_model=NewsPost, status_code=201)
async def publish_news(
    data: NewsCreate,
    db: AsyncSession = Depends(get_db),
    user: LoginResult = Depends(require_admin),
):
    return await bulletin_service.publish_news(LeagueStore(db), data, author=user.username or "admin")


@router.delete("/news/{post_id}")
async def delete_news(post_id: str, db: AsyncSession = Depends(get_db), _: LoginResult = Depends(require_admin)):
    if not await LeagueStore(db).delete_news(post_id):
        raise HTTPException(status_code=404, detail="News post not found")
    return {"message": "News post deleted"}


# =========================================
# SPONSORS
# =========================================
@router.get("/sponsors", response_model=List[SponsorAd])
async def list_sponsors(db: AsyncSession = Depends(get_db)):
    return await LeagueStore(db).list_sponsors()


@router.get("/sponsors/rotation", response_model=Optional[SponsorAd])
async def sponsor_rotation(slot: int = Query(0, ge=0), db: AsyncSession = Depends(get_db)):
    """
    The ad to show in rotation slot `slot` (e.g. a page-view counter).
    Returns null when no sponsor is active.
    """
    return await bulletin_service.sponsor_for_slot(LeagueStore(db), slot)


@router.post("/sponsors", response_model=SponsorAd, status_code=201)
async def add_sponsor(
    data: SponsorCreate,
    db: AsyncSession = Depends(get_db),
    _: LoginResult = Depends(require_admin),
):
    return await bulletin_service.add_sponsor(LeagueStore(db), data)


@router.delete("/sponsors/{ad_id}")
async def delete_sponsor(ad_id: str, db: AsyncSession = Depends(get_db), _: LoginResult = Depends(require_admin)):
    if not await LeagueStore(db).delete_sponsor(ad_id):
        raise HTTPException(status_code=404, detail="Sponsor not found")
    return {"message": "Sponsor removed"}
