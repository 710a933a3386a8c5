# path: src/matchcast/prediction/provider.py
"""
Reasoning-provider capability.

The engine only relies on ``complete(messages, temperature, max_tokens)``
returning the reply text. ``ChatCompletionProvider`` implements it against
any OpenAI-compatible ``/chat/completions`` endpoint; every transport or
payload problem surfaces as ``ProviderError``.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Protocol

import requests

from matchcast.config import ProviderSettings
from matchcast.exceptions import ProviderError
from matchcast.utils.logging_utils import get_logger

logger = get_logger(__name__)

Message = Dict[str, str]


class ReasoningProvider(Protocol):
    def complete(
        self,
        messages: List[Message],
        temperature: float,
        max_tokens: int,
    ) -> str: ...


class ChatCompletionProvider:
    """Chat-completion client over HTTP (one POST per call, no retries)."""

    def __init__(
        self,
        settings: ProviderSettings,
        session: Optional[requests.Session] = None,
    ) -> None:
        if not settings.is_configured:
            raise ProviderError(
                "Missing API key for the reasoning provider.",
                code="missing_credentials",
            )
        self.settings = settings
        self._post = session.post if session is not None else requests.post

    @property
    def url(self) -> str:
        return f"{self.settings.base_url}/chat/completions"

    def complete(
        self,
        messages: List[Message],
        temperature: float,
        max_tokens: int,
    ) -> str:
        headers = {
            "Authorization": f"Bearer {self.settings.api_key}",
            "Content-Type": "application/json",
        }
        payload: Dict[str, Any] = {
            "model": self.settings.model,
            "messages": messages,
            "temperature": temperature,
            "max_tokens": max_tokens,
            "stream": False,
        }

        try:
            response = self._post(
                self.url,
                headers=headers,
                json=payload,
                timeout=self.settings.timeout,
            )
            response.raise_for_status()
        except requests.HTTPError as exc:
            status_code = exc.response.status_code if exc.response is not None else None
            raise ProviderError(
                f"POST {self.url} failed with status "
                f"{status_code if status_code is not None else 'unknown'}",
                code="http_error",
                details={"status_code": status_code, "url": self.url},
            ) from exc
        except requests.RequestException as exc:
            raise ProviderError(
                f"POST {self.url} failed: {exc}",
                code="network_error",
                details={"url": self.url, "error": str(exc)},
            ) from exc

        try:
            data = response.json()
            content = data["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as exc:
            raise ProviderError(
                "Provider returned an unexpected payload.", code="invalid_response"
            ) from exc

        if not isinstance(content, str) or not content.strip():
            raise ProviderError("Provider returned an empty reply.", code="empty_reply")
        return content


def provider_from_env() -> ChatCompletionProvider | None:
    """
    Build the default provider from environment settings.

    Returns None when no API key is configured; callers then use the
    heuristic predictor directly.
    """
    settings = ProviderSettings.from_env()
    if not settings.is_configured:
        logger.info("No reasoning provider configured; using heuristic predictions.")
        return None
    logger.info(
        "Using reasoning provider %s (model %s).", settings.base_url, settings.model
    )
    return ChatCompletionProvider(settings)
