# =============================================================================
# lib/backend_client.py - Content Backend HTTP Client
# =============================================================================
# Builds the shared httpx.AsyncClient used for the two backend calls:
# - GET  <backend>/api/scrape   (page copy + navigation)
# - POST <backend>/api/contact  (contact form submission)
#
# One client is created in the app lifespan and closed on shutdown.
#
# Usage:
#   client = create_backend_client(timeout=settings.BACKEND_TIMEOUT_SECONDS)
#   fetcher = ContentFetcher(settings.backend_base_url, client)
# =============================================================================

import logging
from typing import Any

import httpx

from lib.utils import ApplicationError

logger = logging.getLogger(__name__)

SCRAPE_PATH = "/api/scrape"
CONTACT_PATH = "/api/contact"


class BackendError(ApplicationError):
    """Error talking to the content backend."""

    def __init__(
        self,
        message: str,
        code: str = "BACKEND_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code=code, suggestion=suggestion, details=details)


class ContentFetchError(BackendError):
    """Raised when the page content cannot be fetched or parsed."""

    def __init__(self, url: str, error: str):
        super().__init__(
            message=f"Failed to load page content: {error}",
            code="CONTENT_FETCH_FAILED",
            suggestion="Check that BACKEND_URL points at a running content backend",
            details={"url": url, "error": error},
        )


class SubmissionError(BackendError):
    """Raised when the contact submission is rejected or never arrives."""

    def __init__(self, url: str, error: str, status_code: int | None = None):
        details: dict[str, Any] = {"url": url, "error": error}
        if status_code is not None:
            details["status_code"] = status_code
        super().__init__(
            message=f"Failed to submit contact form: {error}",
            code="CONTACT_SUBMIT_FAILED",
            suggestion="Try again later",
            details=details,
        )


def build_url(base_url: str, path: str) -> str:
    """Join the backend base URL and an endpoint path."""
    return f"{base_url.rstrip('/')}{path}"


def create_backend_client(
    timeout: float | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """
    Create the shared async client for backend calls.

    Args:
        timeout: Seconds before a request is abandoned. None means no
            timeout, leaving limits to the network stack.
        transport: Optional transport override (tests use httpx.MockTransport)

    Returns:
        httpx.AsyncClient: Caller owns it and must `aclose()` it
    """
    logger.debug(f"Creating backend client (timeout={timeout})")
    return httpx.AsyncClient(
        timeout=timeout,
        transport=transport,
        headers={"Accept": "application/json"},
    )
