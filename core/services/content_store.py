# =============================================================================
# core/services/content_store.py - Loaded Page Content
# =============================================================================
# Holds the page content for the lifetime of the process. The content is
# absent until the startup fetch resolves, is set at most once, and is
# never changed afterwards.
# =============================================================================

import logging

from core.models.content import ContentModel
from core.services.content_fetcher import ContentFetcher
from lib.utils import Liveness

logger = logging.getLogger(__name__)


class ContentStore:
    """Write-once holder for the fetched ContentModel."""

    def __init__(self):
        self._content: ContentModel | None = None
        self._resolved = False

    @property
    def content(self) -> ContentModel | None:
        return self._content

    @property
    def resolved(self) -> bool:
        """True once the startup fetch has finished (successfully or not)."""
        return self._resolved

    def set(self, content: ContentModel | None) -> bool:
        """
        Record the fetch result.

        Returns:
            True if stored, False if a result was already recorded
        """
        if self._resolved:
            logger.warning("Page content already resolved; ignoring second result")
            return False

        self._content = content
        self._resolved = True
        return True


async def load_content(
    fetcher: ContentFetcher,
    store: ContentStore,
    liveness: Liveness,
) -> ContentModel | None:
    """
    Run the one startup fetch and store its result.

    The result is dropped if the owning scope closed while the request was
    outstanding.
    """
    content = await fetcher.fetch()

    if not liveness.alive:
        logger.debug(f"Discarding page content: {liveness!r}")
        return None

    store.set(content)
    return content
