# path: src/matchcast/features/form_summary.py
"""
Recent-form summaries for MatchCast.

This module turns a team's recent results into a FormSummary:

- Counts the leading win and unbeaten streaks (most recent result first).
- Scores the window: 20 points per win, 10 per draw, capped at 100.
- Builds summaries straight from a match-history DataFrame, seen from the
  requested team's perspective.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Tuple

import pandas as pd

from matchcast.config import (
    DRAW_POINTS,
    MAX_FORM_SCORE,
    NEUTRAL_FORM_SCORE,
    RECENT_FORM_WINDOW,
    WIN_POINTS,
)
from matchcast.prediction.types import FormSummary, MatchResult, Outcome
from matchcast.utils.logging_utils import get_logger

logger = get_logger(__name__)


def compute_streaks(results: Sequence[MatchResult]) -> Tuple[int, int]:
    """
    Count the leading win and unbeaten runs.

    Parameters
    ----------
    results : Sequence[MatchResult]
        Results ordered most recent first.

    Returns
    -------
    (win_streak, unbeaten_streak)
    """
    win_streak = 0
    for result in results:
        if result.outcome is not Outcome.WIN:
            break
        win_streak += 1

    unbeaten_streak = 0
    for result in results:
        if result.outcome is Outcome.LOSS:
            break
        unbeaten_streak += 1

    return win_streak, unbeaten_streak


def compute_form_score(results: Iterable[MatchResult]) -> float:
    """Score a run of results: 20 per win, 10 per draw, capped at 100."""
    points = 0
    for result in results:
        if result.outcome is Outcome.WIN:
            points += WIN_POINTS
        elif result.outcome is Outcome.DRAW:
            points += DRAW_POINTS
    return float(min(MAX_FORM_SCORE, points))


def neutral_form() -> FormSummary:
    """Form used for a side we know nothing about."""
    return FormSummary(
        form_score=NEUTRAL_FORM_SCORE,
        last_results=[],
        win_streak=0,
        unbeaten_streak=0,
    )


def summarize_form(
    results: Sequence[MatchResult],
    window: int = RECENT_FORM_WINDOW,
) -> FormSummary:
    """
    Build a FormSummary from results ordered most recent first.

    Only the first ``window`` results are kept.
    """
    recent = list(results)[:window]
    win_streak, unbeaten_streak = compute_streaks(recent)
    return FormSummary(
        form_score=compute_form_score(recent),
        last_results=recent,
        win_streak=win_streak,
        unbeaten_streak=unbeaten_streak,
    )


def _outcome_for(goals_for: int, goals_against: int) -> Outcome:
    if goals_for > goals_against:
        return Outcome.WIN
    if goals_for < goals_against:
        return Outcome.LOSS
    return Outcome.DRAW


def team_results_from_history(
    matches_df: pd.DataFrame,
    team: str,
    before: Optional[pd.Timestamp | str] = None,
) -> List[MatchResult]:
    """
    Extract a team's results from a match-history DataFrame.

    Parameters
    ----------
    matches_df : pandas.DataFrame
        Validated history with date, home_team, away_team, home_goals and
        away_goals columns.
    team : str
        Team name (matched case-insensitively).
    before : pandas.Timestamp | str | None
        If given, only matches strictly before this date are used.

    Returns
    -------
    List[MatchResult]
        Results from the team's perspective, most recent first.
    """
    key = team.strip().lower()
    home_mask = matches_df["home_team"].str.strip().str.lower() == key
    away_mask = matches_df["away_team"].str.strip().str.lower() == key
    df = matches_df.loc[home_mask | away_mask].copy()

    if before is not None:
        df = df[df["date"] < pd.to_datetime(before)]

    df = df.sort_values("date", ascending=False, kind="stable")

    results: List[MatchResult] = []
    for row in df.itertuples(index=False):
        is_home = str(row.home_team).strip().lower() == key
        goals_for = int(row.home_goals if is_home else row.away_goals)
        goals_against = int(row.away_goals if is_home else row.home_goals)
        results.append(
            MatchResult(
                outcome=_outcome_for(goals_for, goals_against),
                goals_for=goals_for,
                goals_against=goals_against,
                opponent=str(row.away_team if is_home else row.home_team),
                home=is_home,
            )
        )
    return results


def form_from_history(
    matches_df: pd.DataFrame,
    team: str,
    window: int = RECENT_FORM_WINDOW,
    before: Optional[pd.Timestamp | str] = None,
) -> FormSummary | None:
    """
    Summarize a team's recent form from a match-history DataFrame.

    Returns None when the team has no matches in the history, so callers can
    fall back to ``neutral_form()``.
    """
    results = team_results_from_history(matches_df, team, before=before)
    if not results:
        logger.info("No history found for team %r; form unknown.", team)
        return None

    summary = summarize_form(results, window=window)
    logger.info(
        "Form for %s over last %d: score=%.0f, win_streak=%d, unbeaten_streak=%d",
        team,
        len(summary.last_results),
        summary.form_score,
        summary.win_streak,
        summary.unbeaten_streak,
    )
    return summary
