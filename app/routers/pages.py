# =============================================================================
# app/routers/pages.py - Landing Page Routes
# =============================================================================
# Server-rendered HTML:
# - GET  /         the landing page
# - POST /contact  contact form post; re-renders the page with the outcome
# =============================================================================

import logging
from typing import Annotated

from fastapi import APIRouter, Form, Request
from fastapi.responses import HTMLResponse

from app.config import settings
from app.dependencies import ContactSubmitterDep, ContentStoreDep
from app.templating import render_landing_page
from core.services.page_renderer import build_contact_view, render_page

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def landing_page(request: Request, store: ContentStoreDep):
    """
    Render the landing page.

    Uses the backend copy if the startup fetch has resolved, static copy
    otherwise.
    """
    page = render_page(store.content, site_name=settings.SITE_NAME)
    return render_landing_page(request, page)


@router.post("/contact", response_class=HTMLResponse)
async def submit_contact(
    request: Request,
    store: ContentStoreDep,
    submitter: ContactSubmitterDep,
    name: Annotated[str, Form()] = "",
    email: Annotated[str, Form()] = "",
    company: Annotated[str, Form()] = "",
    message: Annotated[str, Form()] = "",
):
    """
    Handle the contact form post.

    Required fields are enforced by the form inputs themselves. The page
    comes back with a success message and an empty form, or with an error
    message and the visitor's input intact.
    """
    submitter.update_field("name", name)
    submitter.update_field("email", email)
    submitter.update_field("company", company)
    submitter.update_field("message", message)

    status = await submitter.submit()
    logger.debug(f"Contact form post finished with status={status.value}")

    contact = build_contact_view(submitter.form, status)
    page = render_page(store.content, contact, site_name=settings.SITE_NAME)
    return render_landing_page(request, page)
