"""Business logic services."""

from app.services.aggregator import ContentAggregator, classify_query, normalize_response
from app.services.exporters import html_to_text, to_html, to_json, to_markdown
from app.services.firecrawl_client import FirecrawlClient
from app.services.page_defaults import to_page
from app.services.page_generator import PageGenerator
from app.services.pipeline import PagePipeline
from app.services.prompt_composer import PromptPair, compose
from app.services.renderer import render_frame, render_preview

__all__ = [
    "FirecrawlClient",
    "ContentAggregator",
    "classify_query",
    "normalize_response",
    "PromptPair",
    "compose",
    "PageGenerator",
    "to_page",
    "to_json",
    "to_html",
    "to_markdown",
    "html_to_text",
    "render_preview",
    "render_frame",
    "PagePipeline",
]
