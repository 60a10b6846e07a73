"""Dependency injection for FastAPI routes."""

from typing import Annotated

from fastapi import Depends

from app.config import Settings, get_settings
from app.services.pipeline import PagePipeline


def get_pipeline(settings: Annotated[Settings, Depends(get_settings)]) -> PagePipeline:
    """Build a pipeline for one request."""
    return PagePipeline(settings)


# Type aliases for dependency injection
AppSettings = Annotated[Settings, Depends(get_settings)]
Pipeline = Annotated[PagePipeline, Depends(get_pipeline)]
