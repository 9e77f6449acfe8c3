"""Opt-in logging initialization

The katas only create module loggers (`logging.getLogger(__name__)`) and never
configure logging themselves. Call `initialize_logging()` once from the entry
point (a script, a notebook, a test session) to route records to stdout.

JSON format (KATAS_LOG_FORMAT=json):
{
    "timestamp": "2026-10-19T12:00:00.000Z",
    "level": "DEBUG",
    "logger": "katas.puzzles.shortener",
    "message": "Encoded URL.",
    "shortcode": "1a"
}

Text format (KATAS_LOG_FORMAT=text):
    2026-10-19 12:00:00,000 DEBUG katas.puzzles.shortener: Encoded URL. {'shortcode': '1a'}
"""

import json
import logging
import logging.config
from datetime import datetime, UTC

from katas.utils.config import log_level, log_format


# Attributes every LogRecord carries; anything else was passed via `extra`
STANDARD_ATTRS = frozenset(vars(logging.LogRecord('', 0, '', 0, '', None, None))) | {'message', 'asctime'}


def record_extras(record: logging.LogRecord) -> dict:
    return {key: value for key, value in vars(record).items() if key not in STANDARD_ATTRS}


class JsonFormatter(logging.Formatter):
    """JSON formatter that includes LogRecord extras"""

    def format(self, record: logging.LogRecord) -> str:
        # fmt: off
        timestamp = datetime.fromtimestamp(record.created, tz=UTC) \
                            .isoformat(timespec='milliseconds') \
                            .replace('+00:00', 'Z')
        # fmt: on

        log = {
            'timestamp': timestamp,
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }
        log.update(record_extras(record))

        if record.exc_info:
            log['exception'] = self.formatException(record.exc_info)

        return json.dumps(log, default=repr)


class TextFormatter(logging.Formatter):
    """Plain text formatter appending LogRecord extras as a dict"""

    def __init__(self):
        super().__init__('%(asctime)s %(levelname)s %(name)s: %(message)s')

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        extras = record_extras(record)
        return f'{line} {extras}' if extras else line


def initialize_logging() -> None:
    logging.config.dictConfig(
        {
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {
                'json': {
                    '()': JsonFormatter,
                },
                'text': {
                    '()': TextFormatter,
                },
            },
            'handlers': {
                'stdout': {
                    'class': 'logging.StreamHandler',
                    'formatter': log_format(),
                    'stream': 'ext://sys.stdout',
                }
            },
            'root': {
                'level': log_level(),
                'handlers': ['stdout'],
            },
        }
    )
