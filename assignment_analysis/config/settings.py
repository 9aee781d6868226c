from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    pdf_engine: str = "heuristic"
    max_upload_bytes: int = 50 * 1024 * 1024

    analysis_provider: str = "openrouter"
    analysis_api_key: str = Field(
        default="",
        validation_alias=AliasChoices("analysis_api_key", "openrouter_api_key"),
    )
    analysis_base_url: str = ""
    analysis_model_name: str = "deepseek/deepseek-r1:free"
    analysis_timeout_seconds: int = 30
    analysis_max_tokens: int = 1000
    analysis_temperature: float = 0.1
    analysis_max_retries: int = 0
    analysis_max_content_chars: int = 3500

    site_url: str = Field(
        default="",
        validation_alias=AliasChoices("site_url", "your_site_url"),
    )
    site_name: str = Field(
        default="",
        validation_alias=AliasChoices("site_name", "your_site_name"),
    )
