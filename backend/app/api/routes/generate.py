"""Landing page generation, export and preview routes."""

import logging
from typing import Literal

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import HTMLResponse, Response
from pydantic import BaseModel

from app.api.deps import Pipeline
from app.exceptions import InputError, PipelineError
from app.models import GenerationResult, Page, Role
from app.services.exporters import EXPORT_FORMATS, export_page
from app.services.renderer import PREVIEW_HEADERS, render_frame, render_preview

logger = logging.getLogger(__name__)

router = APIRouter()


class GenerateRequest(BaseModel):
    """Query to turn into a landing page."""

    q: str | None = None
    role: Role = Role.AGENT


class PageRequest(BaseModel):
    """A previously generated page, sent back for export or preview."""

    page: Page | None = None


@router.post("/generate", response_model=GenerationResult)
def generate_page(
    request: GenerateRequest,
    pipeline: Pipeline,
) -> GenerationResult:
    """Scrape or search for the query and generate a role-specific page."""
    try:
        return pipeline.run(request.q, request.role)
    except InputError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except PipelineError as e:
        logger.error(f"generate error: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e) or "Generation failed.",
        )


@router.post("/export/{fmt}")
def export(
    fmt: Literal["json", "html", "md"],
    request: PageRequest,
) -> Response:
    """Download the page as page.json, page.html or page.md."""
    export_format = EXPORT_FORMATS[fmt]
    return Response(
        content=export_page(request.page, fmt),
        media_type=export_format.media_type,
        headers={
            "Content-Disposition": f'attachment; filename="{export_format.filename}"',
        },
    )


@router.post("/preview", response_class=HTMLResponse)
def preview(request: PageRequest) -> HTMLResponse:
    """Standalone preview document for loading into a sandboxed iframe."""
    page_html = request.page.html if request.page else None
    return HTMLResponse(content=render_preview(page_html), headers=PREVIEW_HEADERS)


@router.post("/preview/frame", response_class=HTMLResponse)
def preview_frame(request: PageRequest) -> HTMLResponse:
    """Sandboxed iframe element carrying the preview document, for embedding in the host UI."""
    page_html = request.page.html if request.page else None
    return HTMLResponse(content=render_frame(page_html))
