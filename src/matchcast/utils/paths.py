"""
Helper functions for file and directory paths used in MatchCast.
"""

import os
from pathlib import Path

from matchcast.config import HISTORY_FILENAME, RAW_DATA_DIR


def get_raw_data_path(filename: str | None = None) -> Path:
    """
    Return the path to a raw data file.

    Parameters
    ----------
    filename : str | None
        Specific filename, or None for the default match-history CSV.

    Returns
    -------
    Path
        Full path to the raw data file.
    """
    if filename is None:
        filename = HISTORY_FILENAME
    return RAW_DATA_DIR / filename


def get_history_path() -> Path:
    """
    Return the match-history CSV used by the API and CLI.

    The MATCHCAST_HISTORY_PATH environment variable wins over the bundled
    sample dataset.
    """
    override = os.getenv("MATCHCAST_HISTORY_PATH")
    if override:
        return Path(override)
    return get_raw_data_path()
