# =============================================================================
# app/routers/content.py - JSON Content API
# =============================================================================
# JSON views of the same data the HTML page renders:
# - GET  /content  raw backend copy (or null)
# - GET  /page     fully resolved page view
# - POST /contact  contact submission
# =============================================================================

import logging

from fastapi import APIRouter
from pydantic import BaseModel

from app.config import settings
from app.dependencies import ContactSubmitterDep, ContentStoreDep
from app.exceptions import SubmissionFailedError
from core.models.contact import ContactSubmission, SubmissionStatus
from core.models.content import ContentModel
from core.models.page import PageView
from core.services.page_renderer import render_page

logger = logging.getLogger(__name__)

router = APIRouter()


class ContactResponse(BaseModel):
    """Result of a successful submission."""
    status: SubmissionStatus


@router.get("/content", response_model=ContentModel | None)
async def get_content(store: ContentStoreDep):
    """
    Return the page copy loaded from the backend.

    `null` until the startup fetch succeeds, and for good if it failed.
    """
    return store.content


@router.get("/page", response_model=PageView)
async def get_page(store: ContentStoreDep):
    """Return the landing page with every fallback applied."""
    return render_page(store.content, site_name=settings.SITE_NAME)


@router.post("/contact", response_model=ContactResponse)
async def post_contact(body: ContactSubmission, submitter: ContactSubmitterDep):
    """
    Submit the contact form.

    Forwards the fields to the backend once. Rejection and network failure
    both answer 502 with the same message.
    """
    submitter.form = body.to_form_state()

    status = await submitter.submit()
    if status != SubmissionStatus.SENT:
        raise SubmissionFailedError()

    return ContactResponse(status=status)
