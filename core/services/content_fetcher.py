# =============================================================================
# core/services/content_fetcher.py - Page Content Fetching
# =============================================================================
# Issues the single GET <backend>/api/scrape request made at startup and
# turns the result into a ContentModel. Every failure is normalized to
# "no content" so the page falls back to its static copy.
# =============================================================================

import logging

import httpx

from core.models.content import ContentModel
from lib.backend_client import SCRAPE_PATH, ContentFetchError, build_url

logger = logging.getLogger(__name__)


class ContentFetcher:
    """
    Fetches optional page copy from the content backend.

    The HTTP status of the response is not checked unless
    `require_success` is set: a JSON body is accepted whatever the status.
    Non-success statuses are still logged.

    Example:
        fetcher = ContentFetcher("http://localhost:8000", client)
        content = await fetcher.fetch()  # ContentModel or None
    """

    def __init__(
        self,
        base_url: str,
        client: httpx.AsyncClient,
        require_success: bool = False,
    ):
        self.base_url = base_url
        self.client = client
        self.require_success = require_success

    @property
    def url(self) -> str:
        return build_url(self.base_url, SCRAPE_PATH)

    async def fetch(self) -> ContentModel | None:
        """
        Fetch and parse the page content.

        Returns:
            ContentModel, or None on any failure
        """
        try:
            content = await self._request()
        except ContentFetchError as e:
            logger.warning(f"{e} details={e.details}")
            return None

        logger.info(f"Loaded page content from {self.url}")
        return content

    async def _request(self) -> ContentModel:
        """
        Perform the request.

        Raises:
            ContentFetchError: On transport errors, unusable bodies, or (when
                required) a non-success status
        """
        try:
            response = await self.client.get(self.url)
        except httpx.HTTPError as e:
            raise ContentFetchError(self.url, f"{type(e).__name__}: {e}") from e

        if not response.is_success:
            if self.require_success:
                raise ContentFetchError(self.url, f"HTTP {response.status_code}")
            logger.warning(
                f"Content backend returned HTTP {response.status_code}; using body anyway"
            )

        try:
            data = response.json()
        except ValueError as e:
            raise ContentFetchError(self.url, "response body is not JSON") from e

        content = ContentModel.from_payload(data)
        if content is None:
            raise ContentFetchError(self.url, "response body is not a JSON object")

        return content
