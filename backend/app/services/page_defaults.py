"""Reconcile a raw LLM candidate into a complete Page."""

import logging
from typing import Any

from app.models import Page, PageMeta
from app.models.page import DEFAULT_HTML, DEFAULT_TITLE

logger = logging.getLogger(__name__)


def to_page(raw: Any) -> Page:
    """Build a Page from whatever the model returned. Never raises.

    Only missing or wrongly typed top-level fields are replaced; sections are
    passed through untouched. A candidate that is not a JSON object at all is
    treated like ``{}``.
    """
    if not isinstance(raw, dict):
        logger.warning(f"LLM returned {type(raw).__name__} instead of an object, using defaults")
        raw = {}

    meta = raw.get("meta")
    if not isinstance(meta, dict):
        meta = {}
    title = meta.get("title")
    description = meta.get("description")

    sections = raw.get("sections")
    if not isinstance(sections, list):
        sections = []

    html = raw.get("html")
    if not isinstance(html, str) or not html.strip():
        html = DEFAULT_HTML

    return Page(
        meta=PageMeta(
            title=title if isinstance(title, str) else DEFAULT_TITLE,
            description=description if isinstance(description, str) else "",
        ),
        sections=sections,
        html=html,
    )
