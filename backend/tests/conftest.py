import pytest

from app.config import Settings


@pytest.fixture
def settings():
    """Settings with fake keys; nothing here talks to the network."""
    return Settings(
        _env_file=None,
        firecrawl_api_key="fc-test",
        firecrawl_base_url="https://firecrawl.test/v1",
        openrouter_api_key="sk-or-test",
        llm_provider="openrouter",
        llm_model="openai/gpt-4o-mini",
    )
