"""AI-assisted originality and quality analysis of assignment text."""

from pathlib import Path

from assignment_analysis.analysis.client_base import BaseAnalysisClient
from assignment_analysis.analysis.prompt_loader import load_prompt_template
from assignment_analysis.logging.logger import Log

TRUNCATION_SUFFIX = "... [content truncated]"


class Analyzer:
    """Sends assignment text to an AI provider and returns its verbatim answer."""

    def __init__(
        self,
        *,
        client: BaseAnalysisClient,
        model: str,
        temperature: float = 0.1,
        max_tokens: int = 1000,
        max_content_chars: int = 3500,
        prompt_template_path: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = temperature
        self._max_tokens = max_tokens
        self._max_content_chars = max_content_chars
        self._prompt_template = load_prompt_template(prompt_template_path)

    def analyze(self, content: str) -> str:
        """Return the provider's raw analysis text for content.

        Raises:
            AnalysisServiceError: if the provider call fails.
        """
        prompt = self._build_prompt(content)
        Log.info(f"Sending {len(content)} chars to {self._model} for analysis")
        Log.debug(f"Analysis prompt:\n{prompt}")

        analysis = self._client.create_chat_completion(
            model=self._model,
            temperature=self._temperature,
            max_tokens=self._max_tokens,
            user_prompt=prompt,
        )
        Log.debug(f"AI raw response:\n{analysis}")
        return analysis

    def _build_prompt(self, content: str) -> str:
        return self._prompt_template.format(content=self._truncate(content))

    def _truncate(self, content: str) -> str:
        if len(content) <= self._max_content_chars:
            return content
        return content[: self._max_content_chars] + TRUNCATION_SUFFIX
