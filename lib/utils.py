# =============================================================================
# lib/utils.py - Shared Utilities
# =============================================================================
# Common utilities used across the application:
# - ApplicationError: base error with actionable suggestions
# - Liveness: owning-scope token that guards late async completions
# =============================================================================

from typing import Any


# =============================================================================
# Base Error Class
# =============================================================================

class ApplicationError(Exception):
    """
    Base error class for application-specific errors.

    Provides actionable error messages following the principle:
    "Errors should tell HOW to fix, not just WHAT failed."

    Attributes:
        code: Error code for categorization
        message: Human-readable error message
        suggestion: Actionable suggestion for fixing the error
        details: Additional context for debugging

    Example:
        class MyServiceError(ApplicationError):
            def __init__(self, message: str, **kwargs):
                super().__init__(message, code="MY_SERVICE_ERROR", **kwargs)
    """

    def __init__(
        self,
        message: str,
        code: str = "APPLICATION_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f"\n  Suggestion: {self.suggestion}"
        return result


# =============================================================================
# Liveness Scope
# =============================================================================

class Liveness:
    """
    Cancellation token for an owning scope (the app lifespan).

    Async work checks `alive` after every await before it touches shared
    state. Once `close()` is called, completions are discarded.

    Example:
        scope = Liveness("lifespan")
        result = await fetcher.fetch()
        if scope.alive:
            store.set(result)
    """

    def __init__(self, name: str = "scope"):
        self.name = name
        self._closed = False

    @property
    def alive(self) -> bool:
        return not self._closed

    def close(self) -> None:
        self._closed = True

    def __repr__(self) -> str:
        state = "alive" if self.alive else "closed"
        return f"Liveness({self.name!r}, {state})"
