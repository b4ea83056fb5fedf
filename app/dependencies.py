# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
#
# The backend client, content store and liveness scope live on app.state
# and are created by the lifespan handler in main.py.
# =============================================================================

from typing import Annotated

import httpx
from fastapi import Depends, Request

from app.config import Settings, get_settings
from core.services.content_store import ContentStore
from core.services.contact_submitter import ContactFormSubmitter
from lib.utils import Liveness


def get_content_store(request: Request) -> ContentStore:
    """Return the process-wide page content store."""
    return request.app.state.content_store


def get_backend_client(request: Request) -> httpx.AsyncClient:
    """Return the shared backend HTTP client."""
    return request.app.state.backend_client


def get_liveness(request: Request) -> Liveness:
    return request.app.state.liveness


def get_contact_submitter(
    settings: Annotated[Settings, Depends(get_settings)],
    client: Annotated[httpx.AsyncClient, Depends(get_backend_client)],
    liveness: Annotated[Liveness, Depends(get_liveness)],
) -> ContactFormSubmitter:
    """
    Build a submitter for one incoming form post.

    Each request owns its own form state.
    """
    return ContactFormSubmitter(settings.backend_base_url, client, liveness)


# Type aliases for dependency injection
SettingsDep = Annotated[Settings, Depends(get_settings)]
ContentStoreDep = Annotated[ContentStore, Depends(get_content_store)]
ContactSubmitterDep = Annotated[ContactFormSubmitter, Depends(get_contact_submitter)]
