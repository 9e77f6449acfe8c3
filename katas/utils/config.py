"""Utility functions for runtime configuration.

All configuration comes from environment variables; their names live in
`katas.constants`. Nothing is read at import time, so tests can change the
environment with `monkeypatch` between calls.

Environment variables:
    KATAS_ENV           – runtime environment, 'local' by default.
    KATAS_LOG_LEVEL     – logging level name, 'INFO' by default.
    KATAS_LOG_FORMAT    – 'json' or 'text'. Defaults to 'text' locally, 'json' elsewhere.

Functions:
    app_env() -> str
        Return the current runtime environment.

    running_locally() -> bool
        True when running in the local environment.

    log_level() -> str
        Return the configured logging level name.

    log_format() -> str
        Return the configured log output format.

Example:
    >>> os.environ['KATAS_ENV'] = 'ci'
    >>> log_format()
    'json'
"""

import os

from katas.constants import APP_ENV_ENV, LOG_LEVEL_ENV, LOG_FORMAT_ENV, LOG_FORMATS


def app_env() -> str:
    """Return the current runtime environment by reading 'KATAS_ENV'

    Returns:
        str:
            Lowercased value of `KATAS_ENV`, `'local'` by default.

    Example:
        >>> os.environ['KATAS_ENV'] = 'CI'
        >>> app_env()
        'ci'
    """
    return os.environ.get(APP_ENV_ENV, 'local').lower()


def running_locally() -> bool:
    return app_env() == 'local'


def log_level() -> str:
    """Return the logging level name by reading 'KATAS_LOG_LEVEL'

    Returns:
        str: Uppercased level name, `'INFO'` by default.
    """
    return os.environ.get(LOG_LEVEL_ENV, 'INFO').upper()


def log_format() -> str:
    """Return the log output format by reading 'KATAS_LOG_FORMAT'

    Falls back to human readable text when running locally, JSON otherwise.

    Returns:
        str: Either 'json' or 'text'.

    Raises:
        ValueError: If `KATAS_LOG_FORMAT` names an unknown format.

    Example:
        >>> os.environ['KATAS_LOG_FORMAT'] = 'json'
        >>> log_format()
        'json'
    """
    default = 'text' if running_locally() else 'json'
    fmt = os.environ.get(LOG_FORMAT_ENV, default).lower()
    if fmt not in LOG_FORMATS:
        raise ValueError(f'Unknown log format {fmt!r} (expected one of: {", ".join(sorted(LOG_FORMATS))}).')
    return fmt
