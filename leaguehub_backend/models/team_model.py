# team_model.py
# Defines the Team and Player records (stored as JSON blobs) and the request
# schemas used to create or edit them.

from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator

from leaguehub_backend.core.league_config import MIN_JERSEY_NUMBER, MAX_JERSEY_NUMBER


class Position(str, Enum):
    GOALKEEPER = "Goalkeeper"
    DEFENDER = "Defender"
    MIDFIELDER = "Midfielder"
    FORWARD = "Forward"


class Player(BaseModel):
    """
    A registered squad member.
    Age is not constrained here: the eligibility window is checked when a
    player is written, not re-validated when stored records are loaded.
    """
    id: str
    name: str
    jersey_number: int = Field(ge=MIN_JERSEY_NUMBER, le=MAX_JERSEY_NUMBER)
    position: Position
    age: int
    photo_url: str = ""

    # Cumulative stats
    goals: int = Field(default=0, ge=0)
    assists: int = Field(default=0, ge=0)
    appearances: int = Field(default=0, ge=0)


class Team(BaseModel):
    """A registered team and its squad (players kept in insertion order)."""
    id: str
    name: str
    logo: str = ""           # Crest image reference
    manager: str = ""
    contact: str = ""
    home_ground: str = ""
    players: List[Player] = Field(default_factory=list)


# -------------------------------
# Request schemas
# -------------------------------
class TeamRegister(BaseModel):
    """Request model for registering a team or editing its profile."""
    name: str = Field(min_length=1)
    logo: str = ""
    manager: str = ""
    contact: str = ""
    home_ground: str = ""

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, value):
        # Surrounding whitespace is dropped; a blank name then fails min_length
        return value.strip() if isinstance(value, str) else value


class PlayerWrite(BaseModel):
    """Request model for adding or editing a player."""
    name: str = Field(min_length=1)
    jersey_number: int = Field(ge=MIN_JERSEY_NUMBER, le=MAX_JERSEY_NUMBER)
    position: Position = Position.GOALKEEPER
    age: int
    photo_url: str = ""
    goals: int = Field(default=0, ge=0)
    assists: int = Field(default=0, ge=0)
    appearances: int = Field(default=0, ge=0)


class TopScorer(BaseModel):
    player_id: str
    player_name: str
    team_id: str
    team_name: str
    goals: int
    assists: int = 0
    appearances: int = 0
    photo_url: Optional[str] = None
