"""Fetching raw page content from the ONES wiki API.

The content fetcher tries the primary endpoint first and falls back to the
alternative endpoint on any failure. A rejected session (401) is treated like
any other failure: it triggers the fallback, not a re-login.
"""

import json
import logging

import requests
from requests.exceptions import RequestException

from src.models.wiki_reference import WikiReference

from .auth import DEFAULT_TIMEOUT
from .errors import APIAccessError, EmptyContentError, FetchError, FetchFailedError
from .http_client import translate_error
from .session import Session
from .url_translator import candidate_content_urls

logger = logging.getLogger(__name__)


def build_auth_headers(ref: WikiReference, session: Session) -> dict:
    """Build the Referer and session cookie headers for a content request."""
    return {
        'Referer': ref.referer,
        'Cookie': (
            f"language=en; ones-uid={session.user_id}; "
            f"ones-lt={session.token}; timezone=Asia/Shanghai"
        ),
    }


class ContentFetcher:
    """Retrieves the raw content string of a wiki page.

    Example:
        >>> fetcher = ContentFetcher(create_http_session())
        >>> raw = fetcher.fetch(ref, session)
    """

    def __init__(self, http: requests.Session, timeout: float = DEFAULT_TIMEOUT):
        self._http = http
        self._timeout = timeout

    def fetch(self, ref: WikiReference, session: Session) -> str:
        """Fetch the page content, trying each candidate endpoint in order.

        Args:
            ref: Page to fetch
            session: Authenticated session supplying the cookie

        Returns:
            The raw content string (block JSON or HTML)

        Raises:
            FetchFailedError: If both endpoints failed; carries both errors
        """
        headers = build_auth_headers(ref, session)
        primary_url, alternative_url = candidate_content_urls(ref)

        try:
            return self._fetch_content(primary_url, headers)
        except FetchError as primary_error:
            logger.info(
                f"Primary endpoint failed for page {ref.page_id}: {primary_error}; "
                "trying alternative endpoint"
            )
            try:
                return self._fetch_content(alternative_url, headers)
            except FetchError as alternative_error:
                logger.warning(
                    f"Both endpoints failed for page {ref.page_id}"
                )
                raise FetchFailedError(primary_error, alternative_error) from alternative_error

    def _fetch_content(self, url: str, headers: dict) -> str:
        """GET one endpoint and return its content field.

        Raises:
            FetchError: Translated failure of this single request
        """
        logger.debug(f"GET {url}")
        try:
            response = self._http.get(url, headers=headers, timeout=self._timeout)
            response.raise_for_status()
        except RequestException as e:
            raise translate_error(e, url) from e

        try:
            body = response.json()
        except ValueError as e:
            # requests.JSONDecodeError is a ValueError as well
            raise APIAccessError(f"Invalid JSON body from {url}") from e

        content = body.get('content') if isinstance(body, dict) else None
        if content is None:
            raise EmptyContentError(url)
        if not isinstance(content, str):
            # Decoded documents are re-serialized for the renderer
            content = json.dumps(content, ensure_ascii=False)
        return content
