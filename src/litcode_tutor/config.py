"""Centralized application configuration via environment variables."""

from enum import StrEnum
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(StrEnum):
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    API keys are deliberately absent: credentials belong to the caller
    and are passed into every call (see ``TutorConfig``).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- App ---
    environment: Environment = Environment.DEVELOPMENT
    log_level: str = "INFO"

    # --- LLM Default Models ---
    gemini_default_model: str = "gemini-2.5-flash"
    openai_default_model: str = "gpt-4o"
    claude_default_model: str = "claude-3-5-sonnet-latest"

    # --- OpenAI ---
    # None means the SDK's built-in endpoint.
    openai_base_url: str | None = None

    # --- Generation ---
    request_timeout_s: float = Field(default=60.0, gt=0)
    max_tokens: int = Field(default=1024, gt=0)
    temperature: float = Field(default=0.7, ge=0.0, le=2.0)

    @property
    def is_prod(self) -> bool:
        return self.environment == Environment.PRODUCTION


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached settings singleton.

    Usage::

        from litcode_tutor.config import get_settings
        settings = get_settings()
    """
    return Settings()
