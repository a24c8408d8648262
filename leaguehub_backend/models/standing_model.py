# standing_model.py
# Derived league-table row. Never stored; recomputed from matches on demand.

from pydantic import BaseModel


class Standing(BaseModel):
    team_id: str
    team_name: str
    played: int = 0
    won: int = 0
    drawn: int = 0
    lost: int = 0
    goals_for: int = 0
    goals_against: int = 0
    goal_difference: int = 0
    points: int = 0
