# match_model.py
# Defines the Match record (fixtures and results) and the match events
# (goal scorers, disciplinary cards) recorded with a result.

from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field

from leaguehub_backend.core.league_config import MAX_EVENT_MINUTE


class CardType(str, Enum):
    YELLOW = "yellow"
    RED = "red"


class GoalScorer(BaseModel):
    """One goal event. A brace is two entries, not goals=2."""
    player_id: str
    player_name: str
    team_id: str
    minute: int = Field(ge=0, le=MAX_EVENT_MINUTE)
    goals: int = 1


class CardEvent(BaseModel):
    player_id: str
    player_name: str
    team_id: str
    type: CardType
    minute: int = Field(ge=0, le=MAX_EVENT_MINUTE)


class Match(BaseModel):
    """
    A scheduled fixture between two teams.
    Scores stay None until a result is entered; is_completed then flips to
    True and never goes back.
    """
    id: str
    date: str                       # ISO date, e.g. "2024-06-01"
    time: str = ""                  # Kick-off, e.g. "15:00"
    venue: str = ""
    match_week: int = Field(default=1, ge=1)

    home_team_id: str
    away_team_id: str
    referee_name: Optional[str] = None

    # Outcome (populated when a result is entered)
    home_score: Optional[int] = None
    away_score: Optional[int] = None
    scorers: List[GoalScorer] = Field(default_factory=list)
    cards: List[CardEvent] = Field(default_factory=list)
    is_completed: bool = False


# -------------------------------
# Request schemas
# -------------------------------
class MatchCreate(BaseModel):
    """Request model for scheduling a fixture."""
    date: str
    time: str = ""
    venue: str = ""
    match_week: int = Field(default=1, ge=1)
    home_team_id: str
    away_team_id: str


class MatchResultSubmit(BaseModel):
    """
    Request model for entering a result.
    Omitted scorers/cards/referee_name mean "leave unchanged"; an empty
    scorers list means "nobody scored" and still recomputes player goals.
    """
    home_score: int = Field(ge=0)
    away_score: int = Field(ge=0)
    scorers: Optional[List[GoalScorer]] = None
    cards: Optional[List[CardEvent]] = None
    referee_name: Optional[str] = None


class FixtureGenerateRequest(BaseModel):
    start_date: str                 # ISO date the first round may be played on
    replace_existing: bool = False  # Drop unplayed fixtures before generating
