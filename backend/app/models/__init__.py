"""Pydantic models."""

from app.models.page import GenerationResult, Page, PageMeta, PageSection
from app.models.role import Role

__all__ = [
    "Role",
    "Page",
    "PageMeta",
    "PageSection",
    "GenerationResult",
]
