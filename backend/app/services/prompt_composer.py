"""Build the system/user prompt pair for page generation."""

from dataclasses import dataclass

from app.models import Role
from app.prompts import (
    AGENT_ROLE_PROMPT,
    LOAN_ROLE_PROMPT,
    PAGE_SYSTEM_PROMPT,
    PAGE_USER_PROMPT,
    PROFILE_ROLE_PROMPT,
)

ROLE_PROMPTS = {
    Role.AGENT: AGENT_ROLE_PROMPT,
    Role.LOAN: LOAN_ROLE_PROMPT,
    Role.PROFILE: PROFILE_ROLE_PROMPT,
}


@dataclass(frozen=True)
class PromptPair:
    """Instructions sent to the LLM for one request."""
    system: str
    user: str


def compose(role: Role, query: str, content: str, max_content_chars: int = 15000) -> PromptPair:
    """Compose the prompt pair for ``role``.

    The suggested sections only bias the model; nothing checks that the
    response follows them.
    """
    user = PAGE_USER_PROMPT.format(
        query=query,
        content=(content or "")[:max_content_chars],
    )
    return PromptPair(system=PAGE_SYSTEM_PROMPT, user=user + ROLE_PROMPTS[Role(role)])
