"""Client for the Firecrawl scrape and search endpoints."""

import logging
from typing import Any

import httpx

from app.config import Settings
from app.exceptions import AggregationError

logger = logging.getLogger(__name__)


class FirecrawlClient:
    """Thin REST client for Firecrawl's /scrape and /search endpoints.

    Responses are returned as decoded JSON without any reshaping; the
    aggregator decides how to read them.

    API Documentation: https://docs.firecrawl.dev/api-reference/introduction
    """

    def __init__(self, settings: Settings):
        self.base_url = settings.firecrawl_base_url.rstrip("/")
        self.api_key = settings.firecrawl_api_key
        self.timeout = settings.firecrawl_timeout_seconds

    def _get_headers(self) -> dict[str, str]:
        """Get request headers with optional bearer token."""
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    def _post(self, endpoint: str, json_data: dict[str, Any]) -> Any:
        """POST to a Firecrawl endpoint and return the decoded body."""
        url = f"{self.base_url}/{endpoint.lstrip('/')}"

        try:
            with httpx.Client(timeout=self.timeout) as client:
                response = client.post(url, headers=self._get_headers(), json=json_data)
                response.raise_for_status()
                return response.json()

        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            body = e.response.text
            logger.error(f"Firecrawl /{endpoint} error: {status} - {body}")
            raise AggregationError(
                f"Firecrawl /{endpoint} failed: {status} {body}",
                status=status,
                body=body,
            ) from e
        except httpx.RequestError as e:
            logger.error(f"Firecrawl /{endpoint} request failed: {e}")
            raise AggregationError(
                f"Firecrawl /{endpoint} failed: {e}",
                body=str(e),
            ) from e
        except ValueError as e:
            # 2xx with a body that is not JSON
            logger.error(f"Firecrawl /{endpoint} returned invalid JSON: {e}")
            raise AggregationError(
                f"Firecrawl /{endpoint} returned invalid JSON",
                status=response.status_code,
                body=response.text,
            ) from e

    def scrape(self, url: str) -> Any:
        """Scrape a single URL."""
        logger.info(f"Scraping {url}")
        return self._post("scrape", {"url": url})

    def search(self, query: str, limit: int = 5) -> Any:
        """Run a web search and return up to ``limit`` results."""
        logger.info(f"Searching for {query!r} (limit {limit})")
        return self._post("search", {"query": query, "limit": limit})
