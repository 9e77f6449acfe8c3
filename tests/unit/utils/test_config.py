"""Unit tests for configuration helpers in config.py.

Test coverage includes:

1. app_env() and running_locally()
2. log_level()
3. log_format()
   - Ensures the default depends on the runtime environment.
   - Ensures explicit formats override the default.
   - Ensures unknown formats raise ValueError.
"""

import pytest

from katas.utils.config import app_env, running_locally, log_level, log_format
from katas.constants import APP_ENV_ENV, LOG_LEVEL_ENV, LOG_FORMAT_ENV


# -------------------------------
# 1. app_env() and running_locally()
# -------------------------------


def test_app_env_default(monkeypatch):
    """Ensure app_env() defaults to 'local'."""
    monkeypatch.delenv(APP_ENV_ENV, raising=False)
    assert app_env() == 'local'
    assert running_locally() is True


@pytest.mark.parametrize(
    'env, expected_env, expected_local',
    [
        ('local', 'local', True),
        ('LOCAL', 'local', True),
        ('ci', 'ci', False),
        ('Prod', 'prod', False),
    ],
)
def test_app_env_from_environment(monkeypatch, env, expected_env, expected_local):
    """Ensure app_env() lowercases KATAS_ENV and running_locally() follows it."""
    monkeypatch.setenv(APP_ENV_ENV, env)
    assert app_env() == expected_env
    assert running_locally() is expected_local


# -------------------------------
# 2. log_level()
# -------------------------------


def test_log_level_default(monkeypatch):
    """Ensure log_level() defaults to INFO."""
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    assert log_level() == 'INFO'


def test_log_level_from_environment(monkeypatch):
    """Ensure log_level() uppercases KATAS_LOG_LEVEL."""
    monkeypatch.setenv(LOG_LEVEL_ENV, 'debug')
    assert log_level() == 'DEBUG'


# -------------------------------
# 3. log_format()
# -------------------------------


@pytest.mark.parametrize('env, expected', [('local', 'text'), ('ci', 'json')])
def test_log_format_default(monkeypatch, env, expected):
    """Ensure text logs locally and JSON logs elsewhere by default."""
    monkeypatch.setenv(APP_ENV_ENV, env)
    monkeypatch.delenv(LOG_FORMAT_ENV, raising=False)
    assert log_format() == expected


@pytest.mark.parametrize('fmt, expected', [('json', 'json'), ('TEXT', 'text')])
def test_log_format_from_environment(monkeypatch, fmt, expected):
    """Ensure KATAS_LOG_FORMAT overrides the default."""
    monkeypatch.setenv(APP_ENV_ENV, 'local')
    monkeypatch.setenv(LOG_FORMAT_ENV, fmt)
    assert log_format() == expected


def test_log_format_unknown(monkeypatch):
    """Ensure unknown formats raise ValueError."""
    monkeypatch.setenv(LOG_FORMAT_ENV, 'xml')
    with pytest.raises(ValueError, match='Unknown log format'):
        log_format()
