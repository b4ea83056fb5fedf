# =============================================================================
# app/templating.py - Jinja2 Template Setup
# =============================================================================
# Shared Jinja2Templates instance for the HTML routes.
# =============================================================================

from pathlib import Path

from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from core.models.page import PageView

APP_DIR = Path(__file__).resolve().parent
TEMPLATES_DIR = APP_DIR / "templates"
STATIC_DIR = APP_DIR / "static"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def render_landing_page(
    request: Request,
    page: PageView,
    status_code: int = 200,
) -> HTMLResponse:
    """Render the landing page template for a resolved PageView."""
    return templates.TemplateResponse(
        request,
        "index.html",
        {"page": page},
        status_code=status_code,
    )
