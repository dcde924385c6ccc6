"""Lazy, process-wide ONES login session.

The session manager logs in on first need, caches the returned token and user
UUID, and hands the same Session to every later caller. There is no expiry
detection: the cached session lives until the process exits or invalidate()
is called explicitly.
"""

import logging
import threading
from typing import NamedTuple, Optional

import requests
from requests.exceptions import RequestException

from .auth import DEFAULT_TIMEOUT, Credentials
from .errors import AuthenticationError
from .http_client import sanitize_credentials

logger = logging.getLogger(__name__)


class Session(NamedTuple):
    """Authenticated ONES session."""
    token: str
    user_id: str


class SessionManager:
    """Creates and caches the ONES login session.

    Login happens only when ensure_session() is first called, never at
    construction. A lock guards the check-then-login sequence so concurrent
    callers racing on first use trigger a single login call.

    Example:
        >>> manager = SessionManager(create_http_session(), creds)
        >>> session = manager.ensure_session()
        >>> if session is None:
        ...     print("login failed")
    """

    def __init__(
        self,
        http: requests.Session,
        credentials: Credentials,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self._http = http
        self._credentials = credentials
        self._timeout = timeout
        self._session: Optional[Session] = None
        self._lock = threading.Lock()

    @property
    def login_url(self) -> str:
        return f"https://{self._credentials.host}/project/api/project/auth/login"

    @property
    def session(self) -> Optional[Session]:
        """The cached session, or None before the first successful login."""
        return self._session

    def ensure_session(self) -> Optional[Session]:
        """Return the cached session, logging in first if there is none.

        Returns:
            The Session, or None if the login failed. A failed login is
            retried on the next call.
        """
        session = self._session
        if session is not None:
            return session

        with self._lock:
            if self._session is None:
                self.login()
            return self._session

    def login(self) -> bool:
        """Log in and cache the resulting session.

        Returns:
            True if a session was obtained, False otherwise. No exception
            escapes this method.
        """
        try:
            self._session = self._request_session()
        except AuthenticationError as e:
            logger.warning(sanitize_credentials(str(e)))
            return False

        logger.info(f"Logged in to {self._credentials.host}")
        return True

    def invalidate(self) -> None:
        """Drop the cached session so the next ensure_session() logs in again."""
        with self._lock:
            self._session = None

    def _request_session(self) -> Session:
        """Perform the login call.

        Raises:
            AuthenticationError: On network errors, non-2xx responses or a
                response body without user token and uuid
        """
        host = self._credentials.host
        payload = {
            'email': self._credentials.email,
            'password': self._credentials.password,
        }

        try:
            response = self._http.post(
                self.login_url, json=payload, timeout=self._timeout
            )
            response.raise_for_status()
        except RequestException as e:
            raise AuthenticationError(host, str(e)) from e

        try:
            body = response.json()
        except ValueError as e:
            raise AuthenticationError(host, f"invalid response body: {e}") from e

        user = body.get('user') if isinstance(body, dict) else None
        if not isinstance(user, dict):
            raise AuthenticationError(host, "response has no user")

        token = user.get('token')
        user_id = user.get('uuid')
        if not token or not user_id:
            raise AuthenticationError(host, "response has no token or uuid")

        return Session(token=str(token), user_id=str(user_id))
