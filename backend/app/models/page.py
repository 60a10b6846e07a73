"""Page model for generated landing pages."""

from typing import Any

from pydantic import BaseModel, Field

from app.models.role import Role

DEFAULT_TITLE = "Generated Page"
DEFAULT_HTML = "<main class='container'><h1>Generated Page</h1></main>"


class PageMeta(BaseModel):
    """Title and description of a generated page."""

    title: str = DEFAULT_TITLE
    description: str = ""


class PageSection(BaseModel):
    """One section of a generated page, in reading order."""

    id: str
    title: str
    html: str


class Page(BaseModel):
    """A fully defaulted landing page.

    Sections are kept exactly as the model returned them; items are expected
    to look like ``PageSection`` but are not validated here.
    """

    meta: PageMeta = Field(default_factory=PageMeta)
    sections: list[Any] = Field(default_factory=list)
    html: str = DEFAULT_HTML


class GenerationResult(BaseModel):
    """Envelope returned for one generation request."""

    page: Page
    q: str
    role: Role
    scraped: str | None = None
