# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the JSON API.
# Errors tell HOW to fix, not just WHAT failed.
# =============================================================================

from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse


class SiteException(Exception):
    """
    Base exception for the site API.

    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "SITE_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Contact Exceptions
# =============================================================================

class SubmissionFailedError(SiteException):
    """
    Raised when the contact backend rejected a submission or was unreachable.

    Both cases carry the same message; the visitor just tries again.
    """

    def __init__(self):
        super().__init__(
            message="Something went wrong. Please try again.",
            code="CONTACT_SUBMIT_FAILED",
            status_code=502,
            suggestion="Resubmit the form; your message was not delivered",
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def site_exception_handler(
    request: Request,
    exc: SiteException
) -> JSONResponse:
    """
    Convert SiteException to JSON response.

    Returns structured error with:
    - detail: Human-readable message
    - code: Machine-readable error code
    - suggestion: How to fix (if available)
    - details: Additional context
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )
