# path: src/matchcast/prediction/types.py
"""
Wire types for the MatchCast prediction engine.

Python attributes are snake_case; JSON uses camelCase aliases
(``homeWin``, ``predictedScore``, ``formScore`` ...). Both spellings are
accepted on input.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Outcome(str, Enum):
    """Match outcome from the subject team's perspective."""

    WIN = "W"
    DRAW = "D"
    LOSS = "L"


class MatchResult(CamelModel):
    """A single historical match seen from one team's side."""

    outcome: Outcome
    goals_for: int = Field(ge=0)
    goals_against: int = Field(ge=0)
    opponent: Optional[str] = None
    home: Optional[bool] = None


class FormSummary(CamelModel):
    """
    Compact recent-form signal for one team.

    ``last_results`` is ordered most recent first. When it is given, the
    streak counters must satisfy
    ``win_streak <= unbeaten_streak <= len(last_results)``. Streaks may also
    be supplied without the match list; ``unbeaten_streak`` is then raised to
    at least ``win_streak``.
    """

    form_score: float = Field(default=50.0, ge=0, le=100)
    last_results: List[MatchResult] = Field(default_factory=list)
    win_streak: int = Field(default=0, ge=0)
    unbeaten_streak: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def _check_streaks(self) -> "FormSummary":
        if not self.last_results:
            self.unbeaten_streak = max(self.unbeaten_streak, self.win_streak)
            return self
        if self.win_streak > self.unbeaten_streak:
            raise ValueError("win_streak cannot exceed unbeaten_streak")
        if self.unbeaten_streak > len(self.last_results):
            raise ValueError(
                "unbeaten_streak cannot exceed the number of last_results"
            )
        return self


class Fixture(CamelModel):
    """A fixture to predict. Only the two team names are required."""

    home_team: str
    away_team: str
    competition: Optional[str] = None
    home_rank: Optional[int] = Field(default=None, ge=1)
    away_rank: Optional[int] = Field(default=None, ge=1)

    @field_validator("home_team", "away_team")
    @classmethod
    def _require_team_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("team name must not be blank")
        return value

    @field_validator("competition")
    @classmethod
    def _blank_competition_is_none(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return value.strip() or None


class PredictionRequest(Fixture):
    """A fixture plus optional recent form for each side."""

    home_form: Optional[FormSummary] = None
    away_form: Optional[FormSummary] = None


class PredictedScore(CamelModel):
    home: int
    away: int


class PredictionResult(CamelModel):
    """
    Prediction returned to callers.

    Candidates produced by either predictor may break the output bounds;
    ``normalizer.normalize_result`` is what makes them hold.
    """

    home_win: int
    draw: int
    away_win: int
    predicted_score: PredictedScore
    confidence: int
    analysis: str
    key_factors: List[str]
