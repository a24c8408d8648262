# bulletin_service.py
# League news feed and sponsor-ad rotation.

from datetime import datetime, timezone
from typing import List, Optional

from leaguehub_backend.models.bulletin_model import NewsCreate, NewsPost, SponsorAd, SponsorCreate
from leaguehub_backend.services.league_service import new_id
from leaguehub_backend.services.league_store import LeagueStore


async def publish_news(store: LeagueStore, data: NewsCreate, author: str) -> NewsPost:
    post = NewsPost(
        id=new_id("n"),
        author=author,
        published_at=datetime.now(timezone.utc),
        **data.model_dump(),
    )
    return await store.upsert_news(post)


async def list_news(store: LeagueStore, limit: Optional[int] = None) -> List[NewsPost]:
    """Pinned posts first, then newest first."""
    posts = sorted(await store.list_news(), key=lambda p: p.published_at, reverse=True)
    posts.sort(key=lambda p: not p.pinned)
    return posts[:limit] if limit else posts


async def add_sponsor(store: LeagueStore, data: SponsorCreate) -> SponsorAd:
    return await store.upsert_sponsor(SponsorAd(id=new_id("s"), **data.model_dump()))


def pick_sponsor(ads: List[SponsorAd], slot: int) -> Optional[SponsorAd]:
    """
    Round-robin over active ads: slot n shows ad n mod (number of active ads).
    The same slot always shows the same ad while the ad list is unchanged.
    """
    active = [ad for ad in ads if ad.active]
    if not active:
        return None
    return active[slot % len(active)]


async def sponsor_for_slot(store: LeagueStore, slot: int) -> Optional[SponsorAd]:
    return pick_sponsor(await store.list_sponsors(), slot)
