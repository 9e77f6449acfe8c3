import logging

import pytest

from katas.puzzles import UrlShortener


@pytest.fixture
def puzzle():
    """Provide the 5x7 word snaking puzzle."""
    return [
        'ANGULAR',
        'REDNCAE',
        'RFIDTCL',
        'AGNEGSA',
        'YTIRTSP',
    ]


@pytest.fixture
def shortener():
    """Provide a fresh UrlShortener instance."""
    return UrlShortener()


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level changed by initialize_logging()."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
