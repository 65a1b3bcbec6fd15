"""Application configuration and settings management."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_DEFAULT_HISTORY_PATH = Path(__file__).resolve().parent.parent / "data" / "history.json"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="CONTENT_WRITER_",
        extra="ignore",
        populate_by_name=True,
    )

    app_name: str = Field(default="AI Content Writer API", description="Human readable application name.")
    environment: Literal["local", "development", "staging", "production"] = Field(
        default="local",
        description="Deployment environment name.",
    )
    gemini_api_key: str = Field(
        default="",
        validation_alias=AliasChoices("CONTENT_WRITER_GEMINI_API_KEY", "GEMINI_API_KEY"),
        description="API key for the Gemini generative language API.",
    )
    gemini_model: str = Field(
        default="gemini-2.5-flash-preview-09-2025",
        description="Model used to generate content.",
    )
    gemini_base_url: str = Field(
        default="https://generativelanguage.googleapis.com",
        description="Base URL of the generative language API.",
    )
    gemini_timeout: float = Field(default=60.0, description="Timeout in seconds for generation requests.")
    rate_limit: int = Field(default=10, description="Generation requests allowed per client and window.")
    rate_limit_window: float = Field(default=60.0, description="Rate limit window length in seconds.")
    history_path: Path = Field(
        default=_DEFAULT_HISTORY_PATH,
        description="JSON file holding the generation history.",
    )
    history_max_items: int = Field(default=50, description="Maximum number of history entries kept.")
    cors_origins: list[str] = Field(default_factory=lambda: ["*"], description="Allowed CORS origins.")


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings."""

    return Settings()


settings = get_settings()
