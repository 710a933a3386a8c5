from pathlib import Path

import pytest


@pytest.fixture
def sample_history_path() -> Path:
    return Path(__file__).resolve().parents[1] / "data" / "raw" / "sample_matches.csv"


@pytest.fixture
def no_provider_env(monkeypatch):
    """Make sure no reasoning provider is configured from the environment."""
    monkeypatch.delenv("MATCHCAST_LLM_API_KEY", raising=False)
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
