# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - backend_client.py: Shared httpx client and backend error types
# - utils.py: Shared utilities (error base class, liveness scope)
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.backend_client import (
    BackendError,
    ContentFetchError,
    SubmissionError,
    build_url,
    create_backend_client,
)
from lib.utils import ApplicationError, Liveness

__all__ = [
    # Backend
    "BackendError",
    "ContentFetchError",
    "SubmissionError",
    "build_url",
    "create_backend_client",
    # Utils
    "ApplicationError",
    "Liveness",
]
