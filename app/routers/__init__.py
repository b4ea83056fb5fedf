# =============================================================================
# app/routers/ - Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - pages.py: Server-rendered landing page and contact form post
# - content.py: JSON content, page view and contact endpoints
# - health.py: Health check endpoints
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import content
from . import health
from . import pages

__all__ = [
    "content",
    "health",
    "pages",
]
