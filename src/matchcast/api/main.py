# path: src/matchcast/api/main.py
"""
FastAPI app exposing MatchCast prediction endpoints.

Endpoints:
- GET  /health               -> simple health check
- POST /predict              -> predict a fixture from caller-supplied form
- POST /predict_fixture      -> predict a fixture using form from match history
- GET  /teams/{team}/form    -> recent form summary for a team
"""

from __future__ import annotations

from typing import Any, Dict

import pandas as pd
from fastapi import FastAPI, HTTPException

from matchcast.config import RECENT_FORM_WINDOW
from matchcast.data.data_loader import load_match_history
from matchcast.features.form_summary import form_from_history
from matchcast.prediction.engine import predict_match, request_from_history
from matchcast.prediction.provider import provider_from_env
from matchcast.prediction.types import Fixture, PredictionRequest
from matchcast.utils.logging_utils import get_logger

logger = get_logger(__name__)

app = FastAPI(
    title="MatchCast API",
    version="0.1.0",
    description="Football match outcome predictor",
)

# Read-only match history, loaded once
HISTORY_DF: pd.DataFrame | None = None


def _load_history() -> pd.DataFrame:
    """Load the match-history CSV into a DataFrame."""
    global HISTORY_DF
    if HISTORY_DF is not None:
        return HISTORY_DF

    try:
        HISTORY_DF = load_match_history()
    except FileNotFoundError as exc:
        raise HTTPException(status_code=503, detail=str(exc)) from exc
    return HISTORY_DF


@app.on_event("startup")
def startup_event() -> None:
    """Load match history at application startup."""
    try:
        _load_history()
    except Exception as exc:  # noqa: BLE001
        logger.error("Failed to load match history on startup: %s", exc)


@app.get("/health")
def health() -> Dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok"}


@app.post("/predict")
def predict(payload: PredictionRequest) -> Dict[str, Any]:
    """
    Predict a fixture from the form data supplied in the request.

    Request (camelCase):
        {
          "homeTeam": "...", "awayTeam": "...", "competition": "...",
          "homeForm": {"formScore": 70, "lastResults": [...], "winStreak": 3,
                       "unbeatenStreak": 4},
          "awayForm": {...}, "homeRank": 2, "awayRank": 9
        }

    Response:
        {
          "homeWin": 48, "draw": 27, "awayWin": 25,
          "predictedScore": {"home": 2, "away": 1},
          "confidence": 55,
          "analysis": "...",
          "keyFactors": ["...", "...", "..."]
        }
    """
    result = predict_match(payload, provider=provider_from_env())
    return result.model_dump(by_alias=True)


@app.post("/predict_fixture")
def predict_fixture(payload: Fixture) -> Dict[str, Any]:
    """Predict a fixture, building both teams' form from match history."""
    df = _load_history()
    request = request_from_history(payload, df)
    result = predict_match(request, provider=provider_from_env())
    return result.model_dump(by_alias=True)


@app.get("/teams/{team}/form")
def team_form(team: str, window: int = RECENT_FORM_WINDOW) -> Dict[str, Any]:
    """Return the recent form summary of a team."""
    if window < 1:
        raise HTTPException(status_code=422, detail="window must be at least 1")

    df = _load_history()
    summary = form_from_history(df, team, window=window)
    if summary is None:
        raise HTTPException(
            status_code=404,
            detail=f"No match history found for team={team!r}",
        )
    return summary.model_dump(by_alias=True, mode="json")
