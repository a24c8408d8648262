# generate_fixtures.py
# Service for generating a double round-robin season for the registered teams.

import logging
from datetime import date, timedelta
from typing import List, Optional, Sequence, Tuple

from leaguehub_backend.core.exceptions import LeagueValidationError
from leaguehub_backend.models.match_model import Match
from leaguehub_backend.models.team_model import Team
from leaguehub_backend.services.league_service import new_id
from leaguehub_backend.services.league_store import LeagueStore

logger = logging.getLogger("leaguehub.fixtures")

MATCHDAYS = ["Tuesday", "Thursday", "Saturday", "Sunday"]
AM_KICKOFF = "10:00"
PM_KICKOFF = "18:00"


def round_robin_pairings(team_ids: Sequence[str]) -> List[List[Tuple[str, str]]]:
    """
    Pairings per round for a double round-robin (home & away).
    Algorithm: "Circle Method"; with an odd number of teams one team sits
    out (bye) each round.
    """
    ids: List[Optional[str]] = list(team_ids)
    if len(ids) % 2 != 0:
        ids.append(None)  # Dummy "bye" slot

    half = len(ids) // 2
    rounds = []

    for cycle in range(2):  # Two cycles (home/away)
        rotated = ids[:]
        for _ in range(len(ids) - 1):
            round_pairs = []
            for i in range(half):
                home = rotated[i]
                away = rotated[-i - 1]

                if home is None or away is None:
                    continue  # Bye

                # Swap home/away in second cycle
                if cycle == 1:
                    home, away = away, home

                round_pairs.append((home, away))

            # Rotate (keep the first team fixed)
            rotated = [rotated[0]] + [rotated[-1]] + rotated[1:-1]
            rounds.append(round_pairs)

    return rounds


def build_fixtures(teams: Sequence[Team], start_date: date, first_week: int = 1) -> List[Match]:
    """
    Build (unsaved) fixtures for `teams`.
    - Each round becomes one match week, starting at `first_week`.
    - Played at the home team's ground.
    - Dates rotate through Tue/Thu/Sat/Sun, two kick-off slots per day.
    """
    if len(teams) < 2:
        raise LeagueValidationError("At least two teams are needed to generate fixtures.")

    venues = {team.id: team.home_ground for team in teams}
    rounds = round_robin_pairings([team.id for team in teams])

    fixtures = []
    current_date = start_date
    match_index = 0

    for round_offset, round_pairs in enumerate(rounds):
        for home_id, away_id in round_pairs:
            weekday = MATCHDAYS[(match_index // 2) % len(MATCHDAYS)]

            # Advance to the correct weekday
            while current_date.strftime("%A") != weekday:
                current_date += timedelta(days=1)

            # Pick AM or PM slot
            if match_index % 2 == 0:
                kickoff = AM_KICKOFF
            else:
                kickoff = PM_KICKOFF

            fixtures.append(Match(
                id=new_id("m"),
                date=current_date.isoformat(),
                time=kickoff,
                venue=venues[home_id],
                match_week=first_week + round_offset,
                home_team_id=home_id,
                away_team_id=away_id,
            ))

            if kickoff == PM_KICKOFF:
                current_date += timedelta(days=1)  # After PM, next day
            match_index += 1

    return fixtures


async def generate_fixtures_for_league(store: LeagueStore, start_date: date, replace_existing: bool = False) -> List[Match]:
    """
    Generate and save a full season of fixtures.
    With replace_existing, unplayed fixtures are replaced; completed matches
    are always kept. New match weeks continue after the highest week still on
    the calendar. A rejected request leaves the calendar untouched.
    """
    teams = await store.list_teams()
    existing = await store.list_matches()

    unplayed = [m for m in existing if not m.is_completed] if replace_existing else []
    kept = [m for m in existing if m.is_completed or not replace_existing]

    first_week = max((m.match_week for m in kept), default=0) + 1
    fixtures = build_fixtures(teams, start_date, first_week=first_week)

    # Drop and insert in one commit, only once the new season has been built
    for match in unplayed:
        await store.delete_match(match.id, commit=False)
    await store.upsert_many(matches=fixtures)
    logger.info("Fixtures generated for %d teams (%d matches, weeks %d-%d)",
                len(teams), len(fixtures), first_week, fixtures[-1].match_week)
    return fixtures
