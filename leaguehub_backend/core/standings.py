# standings.py
# Folds completed matches into a ranked league table.

from typing import Dict, Iterable, List

from leaguehub_backend.core.league_config import POINTS_FOR_WIN, POINTS_FOR_DRAW, POINTS_FOR_LOSS
from leaguehub_backend.models.match_model import Match
from leaguehub_backend.models.standing_model import Standing
from leaguehub_backend.models.team_model import Team


def compute_standings(teams: Iterable[Team], matches: Iterable[Match]) -> List[Standing]:
    """
    Calculate the league table from the full team and match lists.

    Rules:
    - Only completed matches count. A missing score counts as 0.
    - Matches that reference a team not in `teams` are skipped.
    - Win = 3 pts, draw = 1 pt, loss = 0.
    - Ranked by points, then goal difference, then goals scored (all desc).
      Teams level on all three keep their order in `teams`.

    Pure: the inputs are not modified and equal inputs give equal output.
    """
    # 1. One zeroed row per team, in team-list order
    table: Dict[str, Standing] = {}
    for team in teams:
        table[team.id] = Standing(team_id=team.id, team_name=team.name)

    # 2. Fold in every completed match
    for match in matches:
        if not match.is_completed:
            continue

        home = table.get(match.home_team_id)
        away = table.get(match.away_team_id)
        if home is None or away is None:
            continue  # Orphaned fixture (team no longer registered)

        home_goals = match.home_score or 0
        away_goals = match.away_score or 0

        home.played += 1
        away.played += 1
        home.goals_for += home_goals
        home.goals_against += away_goals
        away.goals_for += away_goals
        away.goals_against += home_goals

        if home_goals > away_goals:
            home.won += 1
            home.points += POINTS_FOR_WIN
            away.lost += 1
            away.points += POINTS_FOR_LOSS
        elif away_goals > home_goals:
            away.won += 1
            away.points += POINTS_FOR_WIN
            home.lost += 1
            home.points += POINTS_FOR_LOSS
        else:
            home.drawn += 1
            away.drawn += 1
            home.points += POINTS_FOR_DRAW
            away.points += POINTS_FOR_DRAW

        home.goal_difference = home.goals_for - home.goals_against
        away.goal_difference = away.goals_for - away.goals_against

    # 3. Sort (stable, so full ties keep team-list order)
    return sorted(
        table.values(),
        key=lambda s: (s.points, s.goal_difference, s.goals_for),
        reverse=True,
    )
