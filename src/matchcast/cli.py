"""
Command-line predictions for MatchCast.

Usage (with the package installed):

    matchcast-predict --home Arsenal --away Chelsea --history data/raw/sample_matches.csv

This will:
- Build both teams' recent form from the history CSV (if given).
- Ask the configured reasoning provider, or use the heuristic model with --no-ai
  or when no API key is set.
- Print the prediction as JSON.
"""

from __future__ import annotations

import argparse
import json
from typing import List, Optional

import numpy as np
from pydantic import ValidationError

from matchcast.config import RECENT_FORM_WINDOW
from matchcast.data.data_loader import load_match_history
from matchcast.prediction.engine import predict_match, request_from_history
from matchcast.prediction.provider import provider_from_env
from matchcast.prediction.types import Fixture, PredictionRequest
from matchcast.utils.logging_utils import get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Predict a football match outcome.")
    parser.add_argument("--home", required=True, help="Home team name.")
    parser.add_argument("--away", required=True, help="Away team name.")
    parser.add_argument("--competition", default=None, help="Competition name.")
    parser.add_argument("--home-rank", type=int, default=None, help="Home league rank.")
    parser.add_argument("--away-rank", type=int, default=None, help="Away league rank.")
    parser.add_argument(
        "--history",
        default=None,
        help="Match-history CSV used to build each team's recent form. "
        "Without it both teams get neutral form.",
    )
    parser.add_argument(
        "--window",
        type=int,
        default=RECENT_FORM_WINDOW,
        help="Number of recent matches per team to summarize.",
    )
    parser.add_argument(
        "--no-ai",
        action="store_true",
        help="Skip the reasoning provider and use the heuristic model only.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the heuristic's random term (for reproducible output).",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        fixture = Fixture(
            home_team=args.home,
            away_team=args.away,
            competition=args.competition,
            home_rank=args.home_rank,
            away_rank=args.away_rank,
        )
    except ValidationError as exc:
        parser.error(str(exc))

    if args.history is not None:
        try:
            df = load_match_history(args.history)
        except (FileNotFoundError, ValueError) as exc:
            parser.error(f"cannot use --history {args.history}: {exc}")
        request = request_from_history(fixture, df, window=args.window)
    else:
        request = PredictionRequest(**fixture.model_dump())

    provider = None if args.no_ai else provider_from_env()
    rng = np.random.default_rng(args.seed) if args.seed is not None else None

    result = predict_match(request, provider=provider, rng=rng)
    print(json.dumps(result.model_dump(by_alias=True), indent=2))


if __name__ == "__main__":
    main()
