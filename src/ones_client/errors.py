"""Typed exception hierarchy for ONES wiki errors.

This module defines all custom exceptions used by the ONES client library.
All exceptions inherit from the WikiError base class for easy catching and
include descriptive messages with context to help with debugging. None of
them ever reaches the MCP caller: the tool facade turns them into strings.
"""

from typing import List, Optional


class WikiError(Exception):
    """Base exception for all ones-wiki-mcp errors.

    Use this to catch any application-level error from the wiki tool.
    """
    pass


class ConfigurationError(WikiError):
    """Raised when required connection settings are missing."""

    def __init__(self, missing: List[str]):
        super().__init__(
            f"Missing required configuration: {', '.join(missing)}"
        )
        self.missing = missing


class InvalidWikiUrlError(WikiError, ValueError):
    """Raised when a wiki URL does not match the page URL pattern."""

    def __init__(self, url: str):
        super().__init__("Invalid wiki URL format")
        self.url = url


class AuthenticationError(WikiError):
    """Raised when the login call does not yield a usable session."""

    def __init__(self, host: str, reason: str):
        super().__init__(f"Login failed at {host}: {reason}")
        self.host = host
        self.reason = reason


class FetchError(WikiError):
    """Base exception for a single failed content request."""
    pass


class APIUnreachableError(FetchError):
    """Raised when the wiki API cannot be reached or times out."""

    def __init__(self, endpoint: str, reason: Optional[str] = None):
        message = f"API is not available at {endpoint}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)
        self.endpoint = endpoint


class SessionRejectedError(FetchError):
    """Raised when the API refuses the session cookie (401/403)."""

    def __init__(self, endpoint: str, status_code: int):
        super().__init__(
            f"Session rejected with HTTP {status_code} at {endpoint}"
        )
        self.endpoint = endpoint
        self.status_code = status_code


class PageNotFoundError(FetchError):
    """Raised when the requested page does not exist at an endpoint."""

    def __init__(self, endpoint: str):
        super().__init__(f"Page not found at {endpoint}")
        self.endpoint = endpoint


class EmptyContentError(FetchError):
    """Raised when a response carries no content field."""

    def __init__(self, endpoint: str):
        super().__init__(f"No Wiki content retrieved from {endpoint}")
        self.endpoint = endpoint


class APIAccessError(FetchError):
    """Raised for any other failed request."""

    def __init__(self, message: str = "ONES API failure"):
        super().__init__(message)


class FetchFailedError(WikiError):
    """Raised when both the primary and the alternative endpoint failed."""

    def __init__(self, primary_error: Exception, alternative_error: Exception):
        super().__init__(
            "Both primary and alternative APIs failed. "
            f"Primary: {primary_error}, Alternative: {alternative_error}"
        )
        self.primary_error = primary_error
        self.alternative_error = alternative_error


class ContentParseError(WikiError):
    """Raised when raw page content cannot be parsed by a renderer."""

    def __init__(self, message: str):
        super().__init__(message)
