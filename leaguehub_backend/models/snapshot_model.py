# snapshot_model.py
# Full league state, used for export/import (backup and restore).

from typing import List, Optional
from pydantic import BaseModel, Field

from leaguehub_backend.models.bulletin_model import LeagueSettings
from leaguehub_backend.models.match_model import Match
from leaguehub_backend.models.team_model import Team


class LeagueSnapshot(BaseModel):
    teams: List[Team] = Field(default_factory=list)
    matches: List[Match] = Field(default_factory=list)
    settings: Optional[LeagueSettings] = None
