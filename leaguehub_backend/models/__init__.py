# leaguehub_backend/models/__init__.py
# Centralized imports for all database models and schemas

# Teams and players
from .team_model import Team, Player, Position, TeamRegister, PlayerWrite, TopScorer

# Matches and results
from .match_model import (
    Match, GoalScorer, CardEvent, CardType, MatchCreate, MatchResultSubmit,
    FixtureGenerateRequest,
)

# League table
from .standing_model import Standing

# Settings, news, sponsors
from .bulletin_model import LeagueSettings, NewsPost, NewsCreate, SponsorAd, SponsorCreate

# Storage tables
from .blob_model import TeamBlob, MatchBlob, SettingsBlob, NewsBlob, SponsorBlob

# Users
from .user_model import User, UserRole, LoginRequest, LoginResult, StaffCreate, StaffRead

# Backup / restore
from .snapshot_model import LeagueSnapshot
