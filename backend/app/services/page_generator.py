"""LLM-backed generation of landing page JSON."""

import hashlib
import json
import logging
from typing import Any

from app.config import Settings
from app.exceptions import GenerationParseError, GenerationRequestError

logger = logging.getLogger(__name__)

JSON_RESPONSE_FORMAT = {"type": "json_object"}


class PageGenerator:
    """Generates raw page candidates using the configured LLM provider.

    Providers:
    - openrouter: OpenAI-compatible chat completions routed through OpenRouter
    - openai: OpenAI chat completions
    - anthropic: Anthropic messages (no JSON mode; the system prompt asks for JSON)
    """

    def __init__(self, settings: Settings):
        self.settings = settings
        self._openai_client = None
        self._openrouter_client = None
        self._anthropic_client = None

    def _get_openai_client(self):
        """Lazy load OpenAI client."""
        if self._openai_client is None:
            from openai import OpenAI
            self._openai_client = OpenAI(api_key=self.settings.openai_api_key)
        return self._openai_client

    def _get_openrouter_client(self):
        """Lazy load an OpenAI client pointed at OpenRouter."""
        if self._openrouter_client is None:
            from openai import OpenAI
            self._openrouter_client = OpenAI(
                api_key=self.settings.openrouter_api_key,
                base_url=self.settings.openrouter_base_url,
                default_headers={
                    "HTTP-Referer": self.settings.app_url,
                    "X-Title": self.settings.app_title,
                },
            )
        return self._openrouter_client

    def _get_anthropic_client(self):
        """Lazy load Anthropic client."""
        if self._anthropic_client is None:
            from anthropic import Anthropic
            self._anthropic_client = Anthropic(api_key=self.settings.anthropic_api_key)
        return self._anthropic_client

    def _call_chat_completions(self, get_client, system: str, user: str) -> str:
        """Call an OpenAI-compatible chat completions endpoint in JSON mode."""
        from openai import APIConnectionError, APIStatusError, OpenAIError

        try:
            client = get_client()
            response = client.chat.completions.create(
                model=self.settings.llm_model,
                messages=[
                    {"role": "system", "content": system},
                    {"role": "user", "content": user},
                ],
                temperature=self.settings.llm_temperature,
                response_format=JSON_RESPONSE_FORMAT,
            )
        except APIStatusError as e:
            raise GenerationRequestError(
                f"{self.settings.llm_provider} failed: {e.status_code} {e.response.text}",
                status=e.status_code,
                body=e.response.text,
            ) from e
        except APIConnectionError as e:
            raise GenerationRequestError(
                f"{self.settings.llm_provider} request failed: {e}",
                body=str(e),
            ) from e
        except OpenAIError as e:
            # Raised before any request is sent, e.g. no API key configured
            raise GenerationRequestError(
                f"{self.settings.llm_provider} client error: {e}",
                body=str(e),
            ) from e

        if not response.choices:
            return "{}"
        return response.choices[0].message.content or "{}"

    def _call_anthropic(self, system: str, user: str) -> str:
        """Call Anthropic API."""
        from anthropic import AnthropicError, APIConnectionError, APIStatusError

        try:
            client = self._get_anthropic_client()
            response = client.messages.create(
                model=self.settings.llm_model,
                max_tokens=self.settings.llm_max_tokens,
                system=system,
                messages=[{"role": "user", "content": user}],
                temperature=self.settings.llm_temperature,
            )
        except APIStatusError as e:
            raise GenerationRequestError(
                f"anthropic failed: {e.status_code} {e.response.text}",
                status=e.status_code,
                body=e.response.text,
            ) from e
        except APIConnectionError as e:
            raise GenerationRequestError(f"anthropic request failed: {e}", body=str(e)) from e
        except AnthropicError as e:
            raise GenerationRequestError(f"anthropic client error: {e}", body=str(e)) from e

        if not response.content:
            return "{}"
        return getattr(response.content[0], "text", None) or "{}"

    def _call_llm(self, system: str, user: str) -> str:
        """Call configured LLM provider."""
        provider = self.settings.llm_provider
        model = self.settings.llm_model

        logger.info(f"Calling {provider} {model}...")

        if provider == "openrouter":
            return self._call_chat_completions(self._get_openrouter_client, system, user)
        elif provider == "openai":
            return self._call_chat_completions(self._get_openai_client, system, user)
        elif provider == "anthropic":
            return self._call_anthropic(system, user)
        else:
            raise ValueError(f"Unknown LLM provider: {provider}")

    def _parse_json(self, response: str) -> Any:
        """Parse JSON from LLM response, handling code fences."""
        content = response.strip()

        # Remove markdown code fences if present
        if content.startswith("```"):
            first_newline = content.find("\n")
            if first_newline != -1:
                content = content[first_newline + 1:]
            if content.endswith("```"):
                content = content[:-3].rstrip()

        try:
            return json.loads(content)
        except json.JSONDecodeError as e:
            logger.error(f"LLM returned invalid JSON: {e}")
            raise GenerationParseError(f"LLM returned invalid JSON: {e}", raw=response) from e

    def generate(self, system: str, user: str) -> Any:
        """Generate a raw page candidate.

        Returns:
            Whatever JSON value the model produced; shape is not checked here

        Raises:
            GenerationRequestError: If the provider call fails
            GenerationParseError: If the response is not valid JSON
        """
        response = self._call_llm(system, user)
        response_hash = hashlib.md5(response.encode()).hexdigest()[:8]
        logger.info(f"LLM response hash: {response_hash} ({len(response)} chars)")
        return self._parse_json(response)
