"""Offline analysis client.

Returns a fixed, well-formed analysis so the pipeline can run without an
API key (local development and integration tests).
"""

from typing import ClassVar

from assignment_analysis.analysis.client_base import BaseAnalysisClient


class ExampleClientAdapter(BaseAnalysisClient):
    """Client that answers every prompt with DEFAULT_RESPONSE."""

    DEFAULT_RESPONSE: ClassVar[str] = (
        "AI Detection Score: 25%\n"
        "Confidence Level: Medium\n"
        "Originality Assessment: High\n"
        "Writing Quality Evaluation: Good"
    )

    def __init__(self, response: str | None = None) -> None:
        self._response = self.DEFAULT_RESPONSE if response is None else response

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        max_tokens: int,
        user_prompt: str,
    ) -> str:
        _ = model, temperature, max_tokens, user_prompt
        return self._response
