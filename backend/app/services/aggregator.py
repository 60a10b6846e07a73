"""Turn a free-form query into source text via Firecrawl scrape or search."""

import json
import logging
import re
from typing import Any, Literal

from app.config import Settings
from app.services.firecrawl_client import FirecrawlClient

logger = logging.getLogger(__name__)

URL_PATTERN = re.compile(r"^https?://", re.IGNORECASE)
RECORD_SEPARATOR = "\n\n---\n\n"


def classify_query(query: str) -> Literal["url", "keywords"]:
    """Classify a query as an absolute http(s) URL or a keyword phrase."""
    return "url" if URL_PATTERN.match(query.strip()) else "keywords"


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False, default=str)


def normalize_response(data: Any) -> str:
    """Reduce a provider response of unknown shape to one text blob.

    ``{"results": [...]}`` becomes title/content pairs joined by a separator,
    ``{"content": ...}`` becomes that content, and anything else is
    serialized to JSON as-is. Never raises.
    """
    if isinstance(data, dict):
        results = data.get("results")
        if isinstance(results, list):
            records = []
            for record in results:
                if not isinstance(record, dict):
                    record = {}
                records.append(f"{_as_text(record.get('title'))}\n{_as_text(record.get('content'))}")
            return RECORD_SEPARATOR.join(records)

        if data.get("content") is not None:
            return _as_text(data["content"])

    return json.dumps(data, ensure_ascii=False, separators=(",", ":"), default=str)


class ContentAggregator:
    """Fetch and normalize source material for a query."""

    def __init__(self, settings: Settings, client: FirecrawlClient | None = None):
        self.client = client or FirecrawlClient(settings)
        self.search_limit = settings.firecrawl_search_limit
        self.max_chars = settings.max_content_chars

    def fetch(self, query: str) -> Any:
        """Call scrape for URLs and search for everything else."""
        query = query.strip()
        if classify_query(query) == "url":
            return self.client.scrape(query)
        return self.client.search(query, limit=self.search_limit)

    def aggregate(self, query: str) -> str:
        """Return normalized source text for ``query``, truncated to the cap.

        Raises:
            AggregationError: If the Firecrawl call fails
        """
        text = normalize_response(self.fetch(query))
        if len(text) > self.max_chars:
            logger.info(f"Truncating scraped content from {len(text)} to {self.max_chars} chars")
            text = text[: self.max_chars]
        return text
