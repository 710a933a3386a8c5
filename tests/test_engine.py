import numpy as np
import pytest
from pydantic import ValidationError

from matchcast.data.data_loader import load_match_history
from matchcast.exceptions import ProviderError
from matchcast.prediction.engine import predict_match, request_from_history
from matchcast.prediction.normalizer import NormalizerConfig
from matchcast.prediction.types import Fixture, PredictionRequest

from helpers import FixedRandom, make_form


class UnreachableProvider:
    def complete(self, messages, temperature, max_tokens):
        raise ProviderError("connection refused", code="network_error")


def _assert_valid(result):
    assert result.home_win + result.draw + result.away_win == 100
    assert all(0 <= v <= 100 for v in (result.home_win, result.draw, result.away_win))
    assert 0 <= result.predicted_score.home <= 5
    assert 0 <= result.predicted_score.away <= 4
    assert 55 <= result.confidence <= 85
    assert result.analysis
    assert 3 <= len(result.key_factors) <= 4


def test_predict_without_any_form_is_valid():
    request = PredictionRequest(home_team="Arsenal", away_team="Chelsea")
    for _ in range(100):
        _assert_valid(predict_match(request))


def test_unreachable_provider_matches_heuristic_contract():
    request = PredictionRequest(
        home_team="Arsenal",
        away_team="Chelsea",
        home_form=make_form(70, "WWWWD"),
        away_form=make_form(40, "LDLWD"),
    )
    rng = np.random.default_rng(3)
    for _ in range(50):
        via_ai = predict_match(request, provider=UnreachableProvider(), rng=rng)
        _assert_valid(via_ai)
        assert via_ai.confidence == 55

    assert predict_match(
        request, provider=UnreachableProvider(), rng=FixedRandom(0.0)
    ) == predict_match(request, rng=FixedRandom(0.0))


def test_scenario_strong_home_form_favors_home():
    request = PredictionRequest(
        home_team="Arsenal",
        away_team="Chelsea",
        home_form=make_form(70, "WWWWD"),
        away_form=make_form(40, "LDLWD"),
    )
    result = predict_match(request, rng=FixedRandom(0.0))
    assert 15 <= result.home_win <= 70
    assert 10 <= result.away_win <= 60
    assert result.draw == 100 - result.home_win - result.away_win >= 0
    assert result.home_win > result.away_win


def test_streak_only_forms_are_accepted():
    request = PredictionRequest.model_validate(
        {
            "homeTeam": "Arsenal",
            "awayTeam": "Chelsea",
            "homeForm": {"formScore": 70, "winStreak": 4},
            "awayForm": {"formScore": 40, "winStreak": 0},
        }
    )
    result = predict_match(request, rng=FixedRandom(0.0))

    assert (result.home_win, result.draw, result.away_win) == (54, 21, 25)
    assert (result.predicted_score.home, result.predicted_score.away) == (2, 1)


def test_identical_requests_are_not_memoized():
    request = PredictionRequest(home_team="Arsenal", away_team="Chelsea")
    low = predict_match(request, rng=FixedRandom(-5.0))
    high = predict_match(request, rng=FixedRandom(5.0))
    assert low.home_win != high.home_win


def test_custom_normalizer_config_is_applied():
    request = PredictionRequest(home_team="Arsenal", away_team="Chelsea")
    config = NormalizerConfig(confidence_bounds=(60, 80))
    assert predict_match(request, rng=FixedRandom(), normalizer_config=config).confidence == 60


@pytest.mark.parametrize(
    "payload",
    [
        {"home_team": "", "away_team": "Chelsea"},
        {"home_team": "Arsenal", "away_team": "   "},
        {"home_team": "Arsenal"},
        {},
    ],
)
def test_missing_team_names_are_rejected(payload):
    with pytest.raises(ValidationError):
        PredictionRequest(**payload)


def test_request_normalizes_names_and_competition():
    request = PredictionRequest(home_team=" Arsenal ", away_team="Chelsea", competition=" ")
    assert request.home_team == "Arsenal"
    assert request.competition is None


def test_request_from_history(sample_history_path):
    df = load_match_history(sample_history_path)
    fixture = Fixture(home_team="Arsenal", away_team="Nobody FC", home_rank=1)

    request = request_from_history(fixture, df)

    assert request.home_form is not None
    assert request.home_form.win_streak == 3
    assert request.away_form is None
    assert request.home_rank == 1
    _assert_valid(predict_match(request))
