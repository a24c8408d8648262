# leaguehub_backend/core/league_config.py
"""
league_config.py
----------------
League rules and the demo data used to seed an empty league.

Eligibility:
- Players must be between MIN_PLAYER_AGE and MAX_PLAYER_AGE (inclusive).
  This is a masters league, so the window starts at 33.
- A squad holds at most MAX_SQUAD_SIZE players.
- Jersey numbers run from MIN_JERSEY_NUMBER to MAX_JERSEY_NUMBER and are
  unique within a squad.
"""

# ==========================================
# Eligibility and squad rules
# ==========================================
MIN_PLAYER_AGE = 33
MAX_PLAYER_AGE = 75
MAX_SQUAD_SIZE = 30
MIN_JERSEY_NUMBER = 1
MAX_JERSEY_NUMBER = 99

# Match events may be logged up to the end of extra time
MAX_EVENT_MINUTE = 120

# ==========================================
# Points awarded per result
# ==========================================
POINTS_FOR_WIN = 3
POINTS_FOR_DRAW = 1
POINTS_FOR_LOSS = 0

# Player counters that managers may nudge up/down from the squad screen
ADJUSTABLE_PLAYER_STATS = ("goals", "assists", "appearances")

# ==========================================
# Demo league (seeded into an empty store)
# ==========================================
DEFAULT_LEAGUE_SETTINGS = {
    "name": "Masters Football League",
    "description": "Weekend football for players who still have it.",
    "logo": "",
    "season": "2024",
}

INITIAL_TEAMS = [
    {
        "id": "t1",
        "name": "Thunder FC",
        "logo": "https://picsum.photos/seed/thunder/100/100",
        "manager": "Alex Ferguson",
        "contact": "alex@thunder.com",
        "home_ground": "Storm Arena",
        "players": [],
    },
    {
        "id": "t2",
        "name": "Lightning United",
        "logo": "https://picsum.photos/seed/lightning/100/100",
        "manager": "Pep Guardiola",
        "contact": "pep@lightning.com",
        "home_ground": "Voltage Stadium",
        "players": [],
    },
    {
        "id": "t3",
        "name": "Gale Warriors",
        "logo": "https://picsum.photos/seed/gale/100/100",
        "manager": "Jurgen Klopp",
        "contact": "jurgen@gale.com",
        "home_ground": "Windy Park",
        "players": [],
    },
]

INITIAL_MATCHES = [
    {
        "id": "m1",
        "date": "2024-06-01",
        "time": "15:00",
        "venue": "Storm Arena",
        "home_team_id": "t1",
        "away_team_id": "t2",
        "is_completed": False,
        "match_week": 1,
    },
    {
        "id": "m2",
        "date": "2024-06-02",
        "time": "18:00",
        "venue": "Windy Park",
        "home_team_id": "t3",
        "away_team_id": "t1",
        "is_completed": False,
        "match_week": 2,
    },
]
