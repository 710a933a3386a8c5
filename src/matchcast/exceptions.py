"""
Exception types raised inside the MatchCast prediction engine.

Only caller input errors (pydantic ``ValidationError``) and data-file errors
reach the caller. ``ProviderError`` and ``ReplyParseError`` are recovered by
the AI-assisted predictor, which falls back to the heuristic model.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class MatchCastError(Exception):
    """Base class for MatchCast errors."""


class ProviderError(MatchCastError):
    """Raised when the reasoning provider cannot produce a reply."""

    def __init__(
        self,
        message: str,
        *,
        code: str = "provider_error",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.details = details or {}


class ReplyParseError(MatchCastError):
    """Raised when a provider reply does not contain a usable prediction."""
