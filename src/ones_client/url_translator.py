"""Translation of ONES wiki page URLs into API endpoint URLs.

Browser URLs look like:

    https://ones.example.com/wiki/#/team/AQzvsooq/space/EYvdiwVh/page/4RwySM6h

Only full matches are accepted; the space segment is captured but the content
API does not need it.
"""

import re
from typing import List

from src.models.wiki_reference import WikiReference

from .errors import InvalidWikiUrlError

WIKI_URL_PATTERN = re.compile(
    r'https://(?P<host>[^/]+)/wiki/#/team/(?P<team>[^/]+)'
    r'/space/(?P<space>[^/]+)/page/(?P<page>[^/]+)'
)


def translate(wiki_url: str) -> WikiReference:
    """Parse a wiki page URL into a WikiReference.

    Args:
        wiki_url: Browser URL of a wiki page

    Returns:
        WikiReference with host, team, space and page identifiers

    Raises:
        InvalidWikiUrlError: If the URL does not match the page URL pattern
    """
    if not isinstance(wiki_url, str):
        raise InvalidWikiUrlError(repr(wiki_url))

    match = WIKI_URL_PATTERN.fullmatch(wiki_url.strip())
    if not match:
        raise InvalidWikiUrlError(wiki_url)

    return WikiReference(
        host=match.group('host'),
        team_id=match.group('team'),
        space_id=match.group('space'),
        page_id=match.group('page'),
    )


def primary_content_url(ref: WikiReference) -> str:
    """Build the primary (online page content) endpoint for a page."""
    return ref.primary_content_url


def alternative_content_url(ref: WikiReference) -> str:
    """Build the alternative (page detail) endpoint for a page."""
    return ref.alternative_content_url


def candidate_content_urls(ref: WikiReference) -> List[str]:
    """Return the content endpoints in the order they should be tried."""
    return [primary_content_url(ref), alternative_content_url(ref)]
