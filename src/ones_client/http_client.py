"""Shared HTTP session and error translation for the ONES API.

This module builds the requests.Session used for login and content calls
and translates requests exceptions into our typed exception hierarchy.
Error messages are sanitized before they are logged or surfaced so session
tokens, passwords and email addresses never leak into tool output.
"""

import logging
import re

import requests
from requests.exceptions import ConnectionError, HTTPError, Timeout

from .errors import (
    APIAccessError,
    APIUnreachableError,
    PageNotFoundError,
    SessionRejectedError,
)

logger = logging.getLogger(__name__)

# Headers the ONES web front end sends; some deployments reject bare clients.
DEFAULT_HEADERS = {
    'Content-Type': 'application/json',
    'Accept': 'application/json, text/plain, */*',
    'accept-language': 'en',
    'sec-ch-ua': '"Google Chrome";v="135", "Not-A.Brand";v="8", "Chromium";v="135"',
    'sec-ch-ua-mobile': '?0',
    'sec-ch-ua-platform': '"macOS"',
    'sec-fetch-dest': 'empty',
    'sec-fetch-mode': 'cors',
    'sec-fetch-site': 'same-origin',
    'user-agent': (
        'Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 '
        '(KHTML, like Gecko) Chrome/135.0.0.0 Safari/537.36'
    ),
}


def create_http_session() -> requests.Session:
    """Create a requests.Session preloaded with the default headers."""
    session = requests.Session()
    session.headers.update(DEFAULT_HEADERS)
    return session


def sanitize_credentials(text: str) -> str:
    """Sanitize error messages to prevent credential leakage.

    Masks ONES session cookies, passwords, tokens and shows only domains for
    email addresses.

    Example:
        >>> sanitize_credentials("Cookie: ones-uid=u1; ones-lt=abc123")
        'Cookie: ones-uid=***REDACTED***; ones-lt=***REDACTED***'
    """
    if not text:
        return text

    sanitized = text

    # Passwords in URLs (user:pass@host)
    sanitized = re.sub(r'://([\w.-]+):([\w.-]+)@', r'://***:***@', sanitized)

    # ONES session cookies
    sanitized = re.sub(
        r'(ones-(?:lt|uid))=([^;\s"\']+)',
        r'\1=***REDACTED***',
        sanitized,
        flags=re.IGNORECASE
    )

    sanitized = re.sub(
        r'Authorization:\s*[^\n\r]+',
        'Authorization: ***REDACTED***',
        sanitized,
        flags=re.IGNORECASE
    )

    sanitized = re.sub(
        r'password["\']?\s*[:=]\s*["\']?([^"\'\s&,}]+)',
        r'password=***REDACTED***',
        sanitized,
        flags=re.IGNORECASE
    )

    sanitized = re.sub(
        r'(?<![\w-])(token)["\']?\s*[:=]\s*["\']?([^"\'\s&,}]+)',
        r'\1=***REDACTED***',
        sanitized,
        flags=re.IGNORECASE
    )

    # Email addresses (show domain only)
    sanitized = re.sub(
        r'\b[\w.+-]+@([\w.-]+\.[a-z]{2,})\b',
        r'***@\1',
        sanitized,
        flags=re.IGNORECASE
    )

    return sanitized


def translate_error(exception: Exception, endpoint: str) -> Exception:
    """Translate a requests exception into a typed fetch error.

    Args:
        exception: The original exception from requests
        endpoint: URL of the request that failed

    Returns:
        Exception: One of our typed FetchError subclasses
    """
    if isinstance(exception, (Timeout, ConnectionError)):
        reason = 'timed out' if isinstance(exception, Timeout) else 'connection failed'
        return APIUnreachableError(endpoint=endpoint, reason=reason)

    status_code = None
    if isinstance(exception, HTTPError) and exception.response is not None:
        status_code = exception.response.status_code
    elif hasattr(exception, 'response') and hasattr(exception.response, 'status_code'):
        status_code = exception.response.status_code

    if status_code in (401, 403):
        return SessionRejectedError(endpoint=endpoint, status_code=status_code)
    if status_code == 404:
        return PageNotFoundError(endpoint=endpoint)

    safe_error_msg = sanitize_credentials(str(exception))
    logger.debug(f"Request to {endpoint} failed: {safe_error_msg}")
    if status_code is not None:
        return APIAccessError(f"HTTP {status_code} from {endpoint}")
    return APIAccessError(f"Request to {endpoint} failed: {safe_error_msg}")
