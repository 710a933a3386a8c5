from typing import List

from matchcast.features.form_summary import compute_streaks
from matchcast.prediction.types import FormSummary, MatchResult, Outcome


class FixedRandom:
    """Random source with pinned draws: ``factor`` for the (-5, 5) term,
    ``jitter`` for the (0, 1) goal terms."""

    def __init__(self, factor: float = 0.0, jitter: float = 0.0):
        self.factor = factor
        self.jitter = jitter

    def uniform(self, low: float, high: float) -> float:
        if low < 0:
            return self.factor
        return self.jitter


def make_results(markers: str) -> List[MatchResult]:
    """'WWDL' -> MatchResults, most recent first."""
    goals = {"W": (2, 0), "D": (1, 1), "L": (0, 1)}
    return [
        MatchResult(
            outcome=Outcome(m),
            goals_for=goals[m][0],
            goals_against=goals[m][1],
        )
        for m in markers
    ]


def make_form(form_score: float, markers: str) -> FormSummary:
    results = make_results(markers)
    win_streak, unbeaten_streak = compute_streaks(results)
    return FormSummary(
        form_score=form_score,
        last_results=results,
        win_streak=win_streak,
        unbeaten_streak=unbeaten_streak,
    )
