"""Data models for CLI operations."""

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes for CLI operations.

    These exit codes provide meaningful feedback about the operation result:
    - SUCCESS (0): Page fetched and rendered
    - GENERAL_ERROR (1): Invalid URL or unexpected failure
    - CONFIG_ERROR (2): Missing or invalid connection settings
    - AUTH_ERROR (3): Login failed
    - NETWORK_ERROR (4): Both content endpoints failed

    Example:
        >>> exit_code = ExitCode.SUCCESS
        >>> sys.exit(exit_code)
    """
    SUCCESS = 0
    GENERAL_ERROR = 1
    CONFIG_ERROR = 2
    AUTH_ERROR = 3
    NETWORK_ERROR = 4
