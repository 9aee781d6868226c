from typing import ClassVar

from assignment_analysis.analysis.analyzer import Analyzer
from assignment_analysis.analysis.client_base import BaseAnalysisClient
from assignment_analysis.analysis.example_client_adapter import ExampleClientAdapter
from assignment_analysis.analysis.openai_client_adapter import OpenAIClientAdapter
from assignment_analysis.config.settings import Settings


class AnalyzerFactory:
    """Creates the analyzer for the configured AI provider."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "deepseek": "https://api.deepseek.com/v1",
        "ollama": "http://localhost:11434/v1",
    }

    @classmethod
    def create(cls, settings: Settings) -> Analyzer:
        """Create a configured analyzer from application settings."""
        return Analyzer(
            client=cls.create_client(settings),
            model=settings.analysis_model_name,
            temperature=settings.analysis_temperature,
            max_tokens=settings.analysis_max_tokens,
            max_content_chars=settings.analysis_max_content_chars,
        )

    @classmethod
    def create_client(cls, settings: Settings) -> BaseAnalysisClient:
        provider = settings.analysis_provider.strip().lower()
        if provider == "example":
            return ExampleClientAdapter()
        return OpenAIClientAdapter(
            api_key=settings.analysis_api_key,
            timeout_seconds=settings.analysis_timeout_seconds,
            base_url=cls._resolve_base_url(provider, settings),
            max_retries=settings.analysis_max_retries,
            site_url=settings.site_url,
            site_name=settings.site_name,
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        override = settings.analysis_base_url.strip()
        if provider == "openai":
            return override or None
        if provider == "openai_compatible":
            if not override:
                raise ValueError(
                    "analysis_base_url is required for analysis_provider=openai_compatible"
                )
            return override
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return override or default_base_url
        supported = [
            "example",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ValueError(
            f"Unknown analysis provider '{provider}'. Choose from: {supported}"
        )
