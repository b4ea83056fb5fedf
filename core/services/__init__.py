# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .content_fetcher import ContentFetcher
from .content_store import ContentStore, load_content
from .contact_submitter import ContactFormSubmitter
from .page_renderer import (
    DEFAULT_NAV_LINKS,
    FallbackChain,
    build_contact_view,
    render_page,
)

__all__ = [
    "ContentFetcher",
    "ContentStore",
    "load_content",
    "ContactFormSubmitter",
    "DEFAULT_NAV_LINKS",
    "FallbackChain",
    "build_contact_view",
    "render_page",
]
