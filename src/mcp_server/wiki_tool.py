"""The getWikiContent tool: fetch a wiki page and return AI-readable text.

This is the only operation exposed to MCP callers. It orchestrates login,
URL translation, content fetching and rendering, and turns every failure into
a descriptive string; it never raises.
"""

import logging
from enum import Enum
from typing import NamedTuple

from src.content_converter.wiki_renderer import WikiContentRenderer
from src.ones_client.auth import DEFAULT_TIMEOUT, Credentials
from src.ones_client.content_fetcher import ContentFetcher
from src.ones_client.errors import FetchFailedError, InvalidWikiUrlError
from src.ones_client.http_client import create_http_session, sanitize_credentials
from src.ones_client.session import SessionManager
from src.ones_client.url_translator import translate

logger = logging.getLogger(__name__)

LOGIN_FAILED_MESSAGE = "Login failed, unable to get Wiki content"
URL_ERROR_PREFIX = "URL format error: "
FAILURE_PREFIX = "Failed to get Wiki content: "

TOOL_NAME = "getWikiContent"
TOOL_DESCRIPTION = "Retrieve ONES Wiki page content and convert it to AI-friendly text format"
WIKI_URL_DESCRIPTION = (
    "Wiki page URL, format like: "
    "https://example.com/wiki/#/team/AQzvsooq/space/EYvdiwVh/page/4RwySM6h"
)


class ContentStatus(Enum):
    """Which path produced a tool result."""

    RENDERED = "rendered"
    LOGIN_FAILED = "login_failed"
    INVALID_URL = "invalid_url"
    FETCH_FAILED = "fetch_failed"
    UNEXPECTED_ERROR = "unexpected_error"


class ContentResult(NamedTuple):
    """Text returned to the caller plus the status that produced it."""
    text: str
    status: ContentStatus


class WikiContentTool:
    """Facade over session, fetcher and renderer.

    Example:
        >>> tool = WikiContentTool.from_credentials(creds)
        >>> print(tool.get_wiki_content(url))
    """

    def __init__(
        self,
        session_manager: SessionManager,
        fetcher: ContentFetcher,
        renderer: WikiContentRenderer,
    ):
        self._session_manager = session_manager
        self._fetcher = fetcher
        self._renderer = renderer

    @classmethod
    def from_credentials(
        cls,
        credentials: Credentials,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> "WikiContentTool":
        """Wire the tool with one shared HTTP session."""
        http = create_http_session()
        return cls(
            session_manager=SessionManager(http, credentials, timeout=timeout),
            fetcher=ContentFetcher(http, timeout=timeout),
            renderer=WikiContentRenderer(),
        )

    def get_wiki_content(self, wiki_url: str) -> str:
        """Retrieve a wiki page and convert it to AI-friendly text.

        Args:
            wiki_url: Wiki page URL, e.g.
                https://example.com/wiki/#/team/AQzvsooq/space/EYvdiwVh/page/4RwySM6h

        Returns:
            The rendered page, or a message describing what went wrong
        """
        return self.fetch_wiki_content(wiki_url).text

    def fetch_wiki_content(self, wiki_url: str) -> ContentResult:
        """Like get_wiki_content, but also report which path produced the text."""
        try:
            session = self._session_manager.ensure_session()
            if session is None:
                return ContentResult(LOGIN_FAILED_MESSAGE, ContentStatus.LOGIN_FAILED)

            try:
                ref = translate(wiki_url)
            except InvalidWikiUrlError as e:
                logger.info(f"Rejected wiki URL: {wiki_url!r}")
                return ContentResult(URL_ERROR_PREFIX + str(e), ContentStatus.INVALID_URL)

            try:
                raw = self._fetcher.fetch(ref, session)
            except FetchFailedError as e:
                return ContentResult(sanitize_credentials(str(e)), ContentStatus.FETCH_FAILED)

            return ContentResult(self._renderer.render(raw), ContentStatus.RENDERED)

        except Exception as e:
            logger.exception("Unexpected error while getting wiki content")
            return ContentResult(
                FAILURE_PREFIX + sanitize_credentials(str(e)),
                ContentStatus.UNEXPECTED_ERROR,
            )
