"""
Schema and validation utilities for match-history data.
"""

from __future__ import annotations

from typing import List

import pandas as pd

from matchcast.utils.logging_utils import get_logger

logger = get_logger(__name__)

# Expected columns in the history dataset
HISTORY_COLUMNS: List[str] = [
    "date",
    "home_team",
    "away_team",
    "home_goals",
    "away_goals",
]


def validate_history_df(df: pd.DataFrame) -> pd.DataFrame:
    """
    Validate that a DataFrame conforms to the expected match-history schema.

    Checks:
    - All required columns are present.
    - Dates parse; rows without a usable date or score are dropped.
    - Goals are non-negative integers.
    - No duplicate rows (based on all columns).

    Parameters
    ----------
    df : pandas.DataFrame
        Raw history DataFrame.

    Returns
    -------
    pandas.DataFrame
        A validated (and possibly slightly adjusted) DataFrame.

    Raises
    ------
    ValueError
        If required columns are missing or goals are negative.
    """
    missing = [col for col in HISTORY_COLUMNS if col not in df.columns]
    if missing:
        raise ValueError(f"Missing required history columns: {missing}")

    df = df.copy()
    df["date"] = pd.to_datetime(df["date"], errors="coerce")
    df["home_goals"] = pd.to_numeric(df["home_goals"], errors="coerce")
    df["away_goals"] = pd.to_numeric(df["away_goals"], errors="coerce")

    unusable = df["date"].isna() | df["home_goals"].isna() | df["away_goals"].isna()
    if unusable.any():
        logger.warning(
            "Dropping %d history rows with invalid date or score values.",
            int(unusable.sum()),
        )
        df = df[~unusable]

    if (df["home_goals"] < 0).any() or (df["away_goals"] < 0).any():
        raise ValueError("Goals must be non-negative in match history.")

    df["home_goals"] = df["home_goals"].astype(int)
    df["away_goals"] = df["away_goals"].astype(int)

    # Drop duplicate rows if any (warn but don't fail)
    before = len(df)
    df = df.drop_duplicates()
    after = len(df)
    if after < before:
        logger.info("Dropped %d duplicate history rows.", before - after)

    return df
