"""ONES client library for the wiki MCP server.

This package provides the URL translation, login session and content
fetching needed to read ONES wiki pages, plus the typed exception hierarchy
shared by the whole project.
"""

from .errors import (
    WikiError,
    ConfigurationError,
    InvalidWikiUrlError,
    AuthenticationError,
    FetchError,
    APIUnreachableError,
    SessionRejectedError,
    PageNotFoundError,
    EmptyContentError,
    APIAccessError,
    FetchFailedError,
    ContentParseError,
)

__all__ = [
    "WikiError",
    "ConfigurationError",
    "InvalidWikiUrlError",
    "AuthenticationError",
    "FetchError",
    "APIUnreachableError",
    "SessionRejectedError",
    "PageNotFoundError",
    "EmptyContentError",
    "APIAccessError",
    "FetchFailedError",
    "ContentParseError",
]
