# result_reconciler.py
# Merges an entered result into the match list and, when scorers are given,
# recomputes every player's goal tally from all matches.

from collections import Counter
from dataclasses import dataclass
from typing import List, Optional, Sequence

from leaguehub_backend.models.match_model import CardEvent, GoalScorer, Match
from leaguehub_backend.models.team_model import Team


@dataclass(frozen=True)
class ReconciledResult:
    matches: List[Match]
    # None when no scorer list was passed: player records must be left alone
    teams: Optional[List[Team]] = None


def recompute_player_goals(teams: Sequence[Team], matches: Sequence[Match]) -> List[Team]:
    """
    Return copies of `teams` where each player's goals equal the number of
    GoalScorer entries for that player across all `matches`.
    """
    tally = Counter(
        scorer.player_id
        for match in matches
        for scorer in match.scorers
    )
    return [
        team.model_copy(update={
            "players": [
                player.model_copy(update={"goals": tally.get(player.id, 0)})
                for player in team.players
            ]
        })
        for team in teams
    ]


def reconcile_result(
    teams: Sequence[Team],
    matches: Sequence[Match],
    match_id: str,
    home_score: int,
    away_score: int,
    scorers: Optional[List[GoalScorer]] = None,
    cards: Optional[List[CardEvent]] = None,
    referee_name: Optional[str] = None,
) -> ReconciledResult:
    """
    Apply a result to match `match_id`.

    - The match gets the new scores and is marked completed; every other match
      passes through as-is. An unknown id changes nothing.
    - scorers/cards/referee_name left as None keep the match's current values.
    - Passing a scorer list (even an empty one) triggers a full recompute of
      player goals over the updated match list. Not passing one leaves players
      untouched, even if the score changed.
    """
    update = {
        "home_score": home_score,
        "away_score": away_score,
        "is_completed": True,
    }
    if scorers is not None:
        update["scorers"] = list(scorers)
    if cards is not None:
        update["cards"] = list(cards)
    if referee_name is not None:
        update["referee_name"] = referee_name

    updated_matches = [
        match.model_copy(update=update) if match.id == match_id else match
        for match in matches
    ]

    if scorers is None:
        return ReconciledResult(matches=updated_matches)

    return ReconciledResult(
        matches=updated_matches,
        teams=recompute_player_goals(teams, updated_matches),
    )
