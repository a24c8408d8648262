# league_store.py
# Key/value persistence for league entities. Every record is stored whole as
# a JSON blob keyed by id; upserts replace the full record (last write wins).

import logging
from typing import Iterable, List, Optional, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy import delete, text
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel, select

from leaguehub_backend.models.blob_model import TeamBlob, MatchBlob, SettingsBlob, NewsBlob, SponsorBlob
from leaguehub_backend.models.bulletin_model import LeagueSettings, NewsPost, SponsorAd
from leaguehub_backend.models.match_model import Match
from leaguehub_backend.models.team_model import Team

logger = logging.getLogger("leaguehub.store")

SETTINGS_KEY = "global"

RecordT = TypeVar("RecordT", bound=BaseModel)


class LeagueStore:
    """
    Async storage collaborator over the blob tables.
    Callers read whole records, modify them and write them back; there is no
    partial-field update at this layer.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    # ---------------------------------------------
    # Generic blob helpers
    # ---------------------------------------------
    async def _list(self, table: Type[SQLModel], model: Type[RecordT]) -> List[RecordT]:
        # rowid keeps records in the order they were first inserted
        result = await self.session.execute(select(table).order_by(text("rowid")))
        return [model.model_validate_json(row.data) for row in result.scalars().all()]

    async def _get(self, table: Type[SQLModel], model: Type[RecordT], key: str) -> Optional[RecordT]:
        row = await self.session.get(table, key)
        if row is None:
            return None
        return model.model_validate_json(row.data)

    async def _put(self, table: Type[SQLModel], key: str, record: BaseModel, commit: bool = True) -> None:
        await self.session.merge(table(id=key, data=record.model_dump_json()))
        if commit:
            await self.session.commit()

    async def _delete(self, table: Type[SQLModel], key: str, commit: bool = True) -> bool:
        row = await self.session.get(table, key)
        if row is None:
            return False
        await self.session.delete(row)
        if commit:
            await self.session.commit()
        return True

    # ---------------------------------------------
    # Teams
    # ---------------------------------------------
    async def list_teams(self) -> List[Team]:
        return await self._list(TeamBlob, Team)

    async def get_team(self, team_id: str) -> Optional[Team]:
        return await self._get(TeamBlob, Team, team_id)

    async def upsert_team(self, team: Team) -> Team:
        await self._put(TeamBlob, team.id, team)
        logger.debug("Saved team %s", team.id)
        return team

    async def delete_team(self, team_id: str) -> bool:
        return await self._delete(TeamBlob, team_id)

    # ---------------------------------------------
    # Matches
    # ---------------------------------------------
    async def list_matches(self) -> List[Match]:
        return await self._list(MatchBlob, Match)

    async def get_match(self, match_id: str) -> Optional[Match]:
        return await self._get(MatchBlob, Match, match_id)

    async def upsert_match(self, match: Match) -> Match:
        await self._put(MatchBlob, match.id, match)
        logger.debug("Saved match %s", match.id)
        return match

    async def delete_match(self, match_id: str, commit: bool = True) -> bool:
        return await self._delete(MatchBlob, match_id, commit=commit)

    # ---------------------------------------------
    # Bulk write ("force push" of full snapshots)
    # ---------------------------------------------
    async def upsert_many(
        self,
        teams: Iterable[Team] = (),
        matches: Iterable[Match] = (),
        settings: Optional[LeagueSettings] = None,
    ) -> None:
        """Write every given record, then commit once."""
        team_count = match_count = 0
        for team in teams:
            await self._put(TeamBlob, team.id, team, commit=False)
            team_count += 1
        for match in matches:
            await self._put(MatchBlob, match.id, match, commit=False)
            match_count += 1
        if settings is not None:
            await self._put(SettingsBlob, SETTINGS_KEY, settings, commit=False)
        await self.session.commit()
        logger.info("Pushed %d teams and %d matches to storage", team_count, match_count)

    # ---------------------------------------------
    # League settings (single row)
    # ---------------------------------------------
    async def get_settings(self) -> Optional[LeagueSettings]:
        return await self._get(SettingsBlob, LeagueSettings, SETTINGS_KEY)

    async def save_settings(self, settings: LeagueSettings) -> LeagueSettings:
        await self._put(SettingsBlob, SETTINGS_KEY, settings)
        return settings

    # ---------------------------------------------
    # News and sponsors
    # ---------------------------------------------
    async def list_news(self) -> List[NewsPost]:
        return await self._list(NewsBlob, NewsPost)

    async def upsert_news(self, post: NewsPost) -> NewsPost:
        await self._put(NewsBlob, post.id, post)
        return post

    async def delete_news(self, post_id: str) -> bool:
        return await self._delete(NewsBlob, post_id)

    async def list_sponsors(self) -> List[SponsorAd]:
        return await self._list(SponsorBlob, SponsorAd)

    async def upsert_sponsor(self, ad: SponsorAd) -> SponsorAd:
        await self._put(SponsorBlob, ad.id, ad)
        return ad

    async def delete_sponsor(self, ad_id: str) -> bool:
        return await self._delete(SponsorBlob, ad_id)

    # ---------------------------------------------
    # Full reset
    # ---------------------------------------------
    async def reset(self) -> None:
        """Wipe all league data (users are kept)."""
        for table in (TeamBlob, MatchBlob, SettingsBlob, NewsBlob, SponsorBlob):
            await self.session.execute(delete(table))
        await self.session.commit()
        self.session.expunge_all()
        logger.warning("League data wiped")
