import pytest
from pydantic import ValidationError

from matchcast.data.data_loader import load_match_history
from matchcast.features.form_summary import (
    compute_form_score,
    compute_streaks,
    form_from_history,
    neutral_form,
    summarize_form,
)
from matchcast.prediction.types import FormSummary

from helpers import make_results


@pytest.mark.parametrize(
    "markers, expected",
    [
        ("", (0, 0)),
        ("WWDLW", (2, 3)),
        ("LWWWW", (0, 0)),
        ("DWWW", (0, 4)),
        ("WWWWW", (5, 5)),
        ("DDL", (0, 2)),
    ],
)
def test_compute_streaks(markers, expected):
    assert compute_streaks(make_results(markers)) == expected


def test_streak_invariant_holds_for_all_short_sequences():
    from itertools import product

    for length in range(6):
        for combo in product("WDL", repeat=length):
            results = make_results("".join(combo))
            win_streak, unbeaten_streak = compute_streaks(results)
            assert win_streak <= unbeaten_streak <= len(results)


def test_compute_form_score():
    assert compute_form_score(make_results("WDL")) == 30
    assert compute_form_score(make_results("LLL")) == 0
    assert compute_form_score(make_results("WWWWWW")) == 100


def test_summarize_form_keeps_most_recent_window():
    summary = summarize_form(make_results("WWDLLW"), window=5)
    assert len(summary.last_results) == 5
    assert summary.form_score == 50
    assert summary.win_streak == 2
    assert summary.unbeaten_streak == 3


def test_neutral_form():
    form = neutral_form()
    assert form.form_score == 50
    assert form.win_streak == 0
    assert form.unbeaten_streak == 0
    assert form.last_results == []


def test_form_summary_accepts_streaks_without_results():
    form = FormSummary(form_score=70, win_streak=4)
    assert form.win_streak == 4
    assert form.unbeaten_streak == 4
    assert form.last_results == []


def test_form_summary_rejects_inconsistent_streaks():
    with pytest.raises(ValidationError):
        FormSummary(
            form_score=60,
            last_results=make_results("WL"),
            win_streak=1,
            unbeaten_streak=3,
        )
    with pytest.raises(ValidationError):
        FormSummary(
            form_score=60,
            last_results=make_results("WWW"),
            win_streak=3,
            unbeaten_streak=2,
        )


def test_form_summary_accepts_camel_case():
    form = FormSummary.model_validate(
        {
            "formScore": 70,
            "lastResults": [{"outcome": "W", "goalsFor": 2, "goalsAgainst": 1}],
            "winStreak": 1,
            "unbeatenStreak": 1,
        }
    )
    assert form.form_score == 70
    assert form.last_results[0].goals_for == 2


def test_form_from_history(sample_history_path):
    df = load_match_history(sample_history_path)

    arsenal = form_from_history(df, "Arsenal")
    assert arsenal is not None
    assert [r.outcome.value for r in arsenal.last_results] == ["W", "W", "W", "D", "L"]
    assert arsenal.form_score == 70
    assert arsenal.win_streak == 3
    assert arsenal.unbeaten_streak == 4
    assert arsenal.last_results[0].opponent == "Everton"
    assert arsenal.last_results[0].home is False
    assert sum(r.goals_for for r in arsenal.last_results) == 8

    chelsea = form_from_history(df, "chelsea")
    assert chelsea is not None
    assert chelsea.form_score == 50
    assert chelsea.win_streak == 0
    assert chelsea.unbeaten_streak == 0


def test_form_from_history_before_date(sample_history_path):
    df = load_match_history(sample_history_path)
    arsenal = form_from_history(df, "Arsenal", before="2024-09-14")
    assert [r.outcome.value for r in arsenal.last_results] == ["W", "D", "L", "W"]
    assert arsenal.win_streak == 1
    assert arsenal.unbeaten_streak == 2


def test_form_from_history_unknown_team(sample_history_path):
    df = load_match_history(sample_history_path)
    assert form_from_history(df, "Nobody FC") is None
