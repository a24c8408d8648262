# eligibility.py
# Write-time league rules. Every check raises LeagueValidationError before
# anything is changed; none of them mutate their inputs.

from typing import Iterable, Optional, Sequence

from leaguehub_backend.core.exceptions import LeagueValidationError
from leaguehub_backend.core.league_config import MIN_PLAYER_AGE, MAX_PLAYER_AGE, MAX_SQUAD_SIZE
from leaguehub_backend.models.match_model import CardEvent, GoalScorer, Match
from leaguehub_backend.models.team_model import PlayerWrite, Team


def check_player_write(team: Team, player: PlayerWrite, editing_player_id: Optional[str] = None) -> None:
    """
    Validate adding (editing_player_id=None) or editing a player in `team`.

    - Age must be within the league window (inclusive).
    - Jersey number must not be worn by another teammate.
    - A new player may not push the squad past MAX_SQUAD_SIZE.
    """
    if not MIN_PLAYER_AGE <= player.age <= MAX_PLAYER_AGE:
        raise LeagueValidationError(
            f"League eligibility error: players must be between {MIN_PLAYER_AGE} "
            f"and {MAX_PLAYER_AGE} years old."
        )

    jersey_taken = any(
        p.jersey_number == player.jersey_number and p.id != editing_player_id
        for p in team.players
    )
    if jersey_taken:
        raise LeagueValidationError(
            f"Jersey number #{player.jersey_number} is already assigned to another player."
        )

    if editing_player_id is None and len(team.players) >= MAX_SQUAD_SIZE:
        raise LeagueValidationError(f"Squad limit reached ({MAX_SQUAD_SIZE} players max).")


def check_team_name(existing_teams: Iterable[Team], name: str, editing_team_id: Optional[str] = None) -> None:
    """Team names are unique, compared case-insensitively."""
    wanted = name.strip().lower()
    for team in existing_teams:
        if team.id == editing_team_id:
            continue
        if team.name.strip().lower() == wanted:
            raise LeagueValidationError(f"Team name '{name}' already exists.")


def check_fixture(teams: Sequence[Team], home_team_id: str, away_team_id: str) -> None:
    if home_team_id == away_team_id:
        raise LeagueValidationError("A team cannot play itself: home and away teams must differ.")

    known = {team.id for team in teams}
    for team_id in (home_team_id, away_team_id):
        if team_id not in known:
            raise LeagueValidationError(f"Team {team_id} is not registered in this league.")


def check_squad(team: Team) -> None:
    """
    Validate a whole stored squad (e.g. one arriving in an imported snapshot):
    every age in the window, no shared jersey numbers, no more than
    MAX_SQUAD_SIZE players.
    """
    if len(team.players) > MAX_SQUAD_SIZE:
        raise LeagueValidationError(
            f"{team.name}: squad limit exceeded ({len(team.players)} players, {MAX_SQUAD_SIZE} max)."
        )

    seen = set()
    for player in team.players:
        if not MIN_PLAYER_AGE <= player.age <= MAX_PLAYER_AGE:
            raise LeagueValidationError(
                f"{team.name}: {player.name} is {player.age}; players must be between "
                f"{MIN_PLAYER_AGE} and {MAX_PLAYER_AGE} years old."
            )
        if player.jersey_number in seen:
            raise LeagueValidationError(
                f"{team.name}: jersey number #{player.jersey_number} is assigned to more than one player."
            )
        seen.add(player.jersey_number)


def check_result_events(
    match: Match,
    teams: Sequence[Team],
    scorers: Optional[Sequence[GoalScorer]],
    cards: Optional[Sequence[CardEvent]],
) -> None:
    """
    Goal and card events must name a player from the squad of one of the two
    teams in the match.
    """
    squads = {
        team.id: {player.id for player in team.players}
        for team in teams
        if team.id in (match.home_team_id, match.away_team_id)
    }
    for event in list(scorers or []) + list(cards or []):
        if event.team_id not in (match.home_team_id, match.away_team_id):
            raise LeagueValidationError(
                f"{event.player_name} ({event.team_id}) did not take part in match {match.id}."
            )
        if event.player_id not in squads.get(event.team_id, set()):
            raise LeagueValidationError(
                f"{event.player_name} ({event.player_id}) is not in the squad of team {event.team_id}."
            )
