"""LLM prompts for page generation."""

from app.prompts.page_generation import (
    AGENT_ROLE_PROMPT,
    LOAN_ROLE_PROMPT,
    PAGE_SYSTEM_PROMPT,
    PAGE_USER_PROMPT,
    PROFILE_ROLE_PROMPT,
)

__all__ = [
    "PAGE_SYSTEM_PROMPT",
    "PAGE_USER_PROMPT",
    "AGENT_ROLE_PROMPT",
    "LOAN_ROLE_PROMPT",
    "PROFILE_ROLE_PROMPT",
]
