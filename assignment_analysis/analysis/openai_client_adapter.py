from typing import Any

import httpx
import openai

from assignment_analysis.analysis.client_base import BaseAnalysisClient
from assignment_analysis.analysis.exceptions import (
    AnalysisRateLimitedError,
    AnalysisServiceError,
    AnalysisTimeoutError,
)
from assignment_analysis.logging.logger import Log

_RATE_LIMITED_MARKER = "rate-limited"


class OpenAIClientAdapter(BaseAnalysisClient):
    """Analysis client for OpenAI-compatible chat-completion APIs (OpenRouter by default)."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
        max_retries: int = 0,
        site_url: str = "",
        site_name: str = "",
    ) -> None:
        headers = {}
        if site_url:
            headers["HTTP-Referer"] = site_url
        if site_name:
            headers["X-Title"] = site_name
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
            max_retries=max_retries,
            default_headers=headers or None,
        )

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        max_tokens: int,
        user_prompt: str,
    ) -> str:
        try:
            response = self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                max_tokens=max_tokens,
                messages=[{"role": "user", "content": user_prompt}],
            )
        except (openai.APITimeoutError, httpx.TimeoutException) as exc:
            Log.error(f"AI service timed out: {exc}")
            raise AnalysisTimeoutError() from exc
        except (openai.APIConnectionError, httpx.ConnectError) as exc:
            Log.error(f"AI service unreachable: {exc}")
            raise AnalysisServiceError(f"AI analysis failed: {exc}") from exc
        except openai.APIError as exc:
            Log.error(f"AI service error: {exc.body or exc.message}")
            raise _map_api_error(exc) from exc

        if not response.choices:
            raise AnalysisServiceError("AI analysis failed: provider returned no choices")
        content = response.choices[0].message.content
        if content is None:
            raise AnalysisServiceError("AI analysis failed: provider returned an empty response")
        return content


def _map_api_error(exc: openai.APIError) -> AnalysisServiceError:
    error = _upstream_error(exc.body)
    message = str(error.get("message") or exc.message)
    metadata = error.get("metadata")
    raw = str(metadata.get("raw") or "") if isinstance(metadata, dict) else ""

    if isinstance(exc, openai.RateLimitError) or error.get("code") == 429:
        return AnalysisRateLimitedError(
            "AI service is temporarily rate limited. Please try again in a few moments."
        )
    if _RATE_LIMITED_MARKER in message:
        return AnalysisRateLimitedError(
            "AI service is currently busy. Please wait a moment and try again."
        )
    if _RATE_LIMITED_MARKER in raw:
        return AnalysisRateLimitedError(
            "AI service is temporarily unavailable due to high demand. Please try again shortly."
        )
    return AnalysisServiceError(f"AI analysis failed: {message}")


def _upstream_error(body: object) -> dict[str, Any]:
    """Return the provider's error object whether or not the SDK unwrapped it."""
    if not isinstance(body, dict):
        return {}
    inner = body.get("error")
    if isinstance(inner, dict):
        return inner
    return body
