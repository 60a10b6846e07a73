"""Export a generated Page as JSON, HTML or Markdown."""

import json
from dataclasses import dataclass
from typing import Any

from bs4 import BeautifulSoup

from app.models import Page, PageSection
from app.models.page import DEFAULT_TITLE

EMPTY_MARKDOWN = "# Generated Page\n\n_No content yet._"
NO_SECTIONS_MARKDOWN = "_No sections provided._"
EMPTY_JSON_INFO = {"info": "Submit a query to generate…"}


@dataclass(frozen=True)
class ExportFormat:
    """A downloadable export."""
    filename: str
    media_type: str


EXPORT_FORMATS = {
    "json": ExportFormat("page.json", "application/json"),
    "html": ExportFormat("page.html", "text/html"),
    "md": ExportFormat("page.md", "text/markdown"),
}


def html_to_text(html: str) -> str:
    """Reduce an HTML fragment to its text content.

    Markup, links and formatting are dropped; scripts are never executed.
    """
    if not html:
        return ""
    soup = BeautifulSoup(html, "html.parser")
    return soup.get_text().strip()


def to_json(page: Page | None) -> str:
    """Pretty-printed JSON of the page."""
    data = page.model_dump(mode="json") if page is not None else EMPTY_JSON_INFO
    return json.dumps(data, indent=2, ensure_ascii=False)


def to_html(page: Page | None) -> str:
    """The page's HTML fragment, unwrapped."""
    return page.html if page is not None else ""


def _section_field(section: Any, name: str) -> str:
    value = section.get(name) if isinstance(section, dict) else None
    return value if isinstance(value, str) else ""


def to_markdown(page: Page | None) -> str:
    """Readable Markdown digest of a page.

    Section HTML is flattened to plain text, so this is a summary rather than
    a faithful conversion.
    """
    if page is None:
        return EMPTY_MARKDOWN

    parts: list[str] = []
    parts.extend([f"# {page.meta.title or DEFAULT_TITLE}", ""])
    if page.meta.description:
        parts.extend([f"> {page.meta.description}", ""])

    written = 0
    for section in page.sections:
        if isinstance(section, PageSection):
            section = section.model_dump()
        if not isinstance(section, dict):
            continue
        heading = _section_field(section, "title") or _section_field(section, "id")
        parts.extend([f"## {heading}", ""])
        parts.extend([html_to_text(_section_field(section, "html")), ""])
        written += 1

    if not written:
        parts.append(NO_SECTIONS_MARKDOWN)

    return "\n".join(parts).strip()


def export_page(page: Page | None, fmt: str) -> str:
    """Render ``page`` in one of the EXPORT_FORMATS."""
    if fmt == "json":
        return to_json(page)
    elif fmt == "html":
        return to_html(page)
    elif fmt == "md":
        return to_markdown(page)
    else:
        raise ValueError(f"Unknown export format: {fmt}")
