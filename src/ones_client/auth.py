"""Authentication settings for the ONES wiki client.

This module handles loading ONES credentials from environment variables
using python-dotenv. It validates that all required credentials are present
and raises ConfigurationError if any are missing. Explicit values (e.g. from
CLI flags) take precedence over the environment.
"""

import os
from typing import NamedTuple, Optional

from dotenv import load_dotenv

from .errors import ConfigurationError

DEFAULT_TIMEOUT = 30.0


class Credentials(NamedTuple):
    """ONES login credentials."""
    host: str
    email: str
    password: str


class Authenticator:
    """Loads and validates ONES credentials from environment variables.

    Credentials are loaded from a .env file using python-dotenv and are never
    logged to prevent security risks.

    Required environment variables:
        ONES_HOST: ONES instance host name (e.g., ones.example.com)
        ONES_EMAIL: Login email address
        ONES_PASSWORD: Login password

    Optional environment variables:
        ONES_TIMEOUT: HTTP request timeout in seconds (default: 30)

    Example:
        >>> auth = Authenticator()
        >>> creds = auth.get_credentials()
        >>> print(f"Connecting to {creds.host}")
    """

    def __init__(self):
        """Initialize the authenticator by loading environment variables from .env file."""
        load_dotenv()

    def get_credentials(
        self,
        host: Optional[str] = None,
        email: Optional[str] = None,
        password: Optional[str] = None,
    ) -> Credentials:
        """Get ONES credentials, preferring explicit values over the environment.

        Args:
            host: Explicit host, overrides ONES_HOST
            email: Explicit email, overrides ONES_EMAIL
            password: Explicit password, overrides ONES_PASSWORD

        Returns:
            Credentials: A named tuple containing host, email and password

        Raises:
            ConfigurationError: If any required credential is missing
        """
        host = host or os.getenv('ONES_HOST')
        email = email or os.getenv('ONES_EMAIL')
        password = password or os.getenv('ONES_PASSWORD')

        missing = []
        if not host:
            missing.append('ONES_HOST')
        if not email:
            missing.append('ONES_EMAIL')
        if not password:
            missing.append('ONES_PASSWORD')

        if missing:
            raise ConfigurationError(missing)

        host = _strip_scheme(host)  # type: ignore[arg-type]
        return Credentials(host=host, email=email, password=password)  # type: ignore[arg-type]

    def get_timeout(self, timeout: Optional[float] = None) -> float:
        """Get the request timeout in seconds.

        Args:
            timeout: Explicit timeout, overrides ONES_TIMEOUT

        Returns:
            Timeout in seconds

        Raises:
            ConfigurationError: If ONES_TIMEOUT is not a positive number
        """
        if timeout is not None:
            return timeout

        raw = os.getenv('ONES_TIMEOUT')
        if not raw:
            return DEFAULT_TIMEOUT

        try:
            value = float(raw)
        except ValueError:
            raise ConfigurationError(['ONES_TIMEOUT (not a number)'])
        if value <= 0:
            raise ConfigurationError(['ONES_TIMEOUT (must be positive)'])
        return value


def _strip_scheme(host: str) -> str:
    """Reduce 'https://host/' to 'host' so URLs are formatted consistently."""
    host = host.strip()
    for prefix in ('https://', 'http://'):
        if host.startswith(prefix):
            host = host[len(prefix):]
    return host.rstrip('/')
