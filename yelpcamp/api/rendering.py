"""Renderer — Jinja2 templates behind a single render() call."""

from pathlib import Path

from fastapi import Request
from fastapi.templating import Jinja2Templates
from starlette.responses import Response

from yelpcamp.core.domain_types import RequestPhase

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def render(
    request: Request, name: str, context: dict | None = None,
    status_code: int = 200,
) -> Response:
    """Render a template by name with handler data."""
    if getattr(request.state, "phase", None) is not RequestPhase.FAILED:
        request.state.phase = RequestPhase.RESPONDING
    return templates.TemplateResponse(
        request, name, context or {}, status_code=status_code,
    )
