"""Application configuration via environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "Real Estate Remix"
    debug: bool = False
    environment: Literal["development", "staging", "production"] = "development"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Firecrawl API
    firecrawl_api_key: str | None = None
    firecrawl_base_url: str = "https://api.firecrawl.dev/v1"
    firecrawl_search_limit: int = 5
    firecrawl_timeout_seconds: float = 60.0

    # Scraped content handed to the prompt is truncated to this many chars
    max_content_chars: int = 15000

    # LLM
    llm_provider: Literal["openrouter", "openai", "anthropic"] = "openrouter"
    llm_model: str = "openai/gpt-4o-mini"
    llm_temperature: float = 0.4
    llm_max_tokens: int = 4096

    # LLM API Keys
    openrouter_api_key: str | None = None
    openrouter_base_url: str = "https://openrouter.ai/api/v1"
    openai_api_key: str | None = None
    anthropic_api_key: str | None = None

    # Sent to OpenRouter as attribution headers
    app_url: str = "http://localhost:3000"
    app_title: str = "Open-Precense Real Estate Remix"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
