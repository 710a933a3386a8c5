"""
Data loading utilities for MatchCast.

This module loads the match-history CSV that team form summaries are built
from.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import pandas as pd

from matchcast.data.schema import validate_history_df
from matchcast.utils.logging_utils import get_logger
from matchcast.utils.paths import get_history_path

logger = get_logger(__name__)


def load_match_history(path: Optional[Path | str] = None) -> pd.DataFrame:
    """
    Load match history from a CSV file and validate it.

    Parameters
    ----------
    path : pathlib.Path | str | None
        Path to the CSV file. If None, uses MATCHCAST_HISTORY_PATH or the
        bundled sample dataset.

    Returns
    -------
    pandas.DataFrame
        Validated match-history DataFrame.

    Raises
    ------
    FileNotFoundError
        If the CSV file does not exist.
    """
    csv_path = Path(path) if path is not None else get_history_path()
    if not csv_path.exists():
        raise FileNotFoundError(f"Match history file not found: {csv_path}")

    logger.info("Loading match history from %s", csv_path)
    df = pd.read_csv(csv_path)
    df = validate_history_df(df)
    logger.info("Loaded %d valid history rows.", len(df))
    return df
