"""Application-wide logging initialization

IMPORTANT: Call `initialize_logging()` in the entry point before any other
logging is done. Library modules only ever call `logging.getLogger(__name__)`.

Logs are written to stderr so they never interleave with console output.

Logging format (LOG_FORMAT=json, the default):
{
    "timestamp": "2026-10-19T12:00:00.000Z",
    "level": "INFO",
    "logger": "urlshortener.manager.short_url_manager",
    "message": "Short URL created.",
    "shortcode": "abc123",
    "event": "SHORT_URL_CREATED"
}

LOG_FORMAT=text switches to a single human-readable line per record.
"""

import os
import json
import logging
import logging.config
from datetime import datetime, UTC

from urlshortener.constants import ENV


TEXT_FORMAT = '%(asctime)s %(levelname)-8s %(name)s: %(message)s'


class JsonFormatter(logging.Formatter):
    """JSON formatter that includes LogRecord extras"""

    STANDARD_ATTRS = frozenset(logging.makeLogRecord({}).__dict__) | {'message', 'asctime'}

    def format(self, record: logging.LogRecord) -> str:
        # fmt: off
        timestamp = datetime.fromtimestamp(record.created, tz=UTC) \
                            .isoformat(timespec="milliseconds") \
                            .replace("+00:00", "Z")
        # fmt: on

        log = {
            'timestamp': timestamp,
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }

        # Attach `extra` fields
        for key, value in record.__dict__.items():
            if key not in self.STANDARD_ATTRS:
                log[key] = value

        if record.exc_info:
            log['exception'] = self.formatException(record.exc_info)

        return json.dumps(log, default=str)


def initialize_logging(level: str | None = None, fmt: str | None = None) -> None:
    """Configure the root logger

    Args:
        level (str | None): log level name; defaults to LOG_LEVEL or 'INFO'.
        fmt (str | None): 'json' or 'text'; defaults to LOG_FORMAT or 'json'.
    """
    log_level = (level or os.getenv(ENV.App.LOG_LEVEL, 'INFO')).upper()
    log_format = (fmt or os.getenv(ENV.App.LOG_FORMAT, 'json')).lower()
    formatter = {'()': JsonFormatter} if log_format == 'json' else {'format': TEXT_FORMAT}

    logging.config.dictConfig(
        {
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {
                'default': formatter,
            },
            'handlers': {
                'stderr': {
                    'class': 'logging.StreamHandler',
                    'formatter': 'default',
                    'stream': 'ext://sys.stderr',
                }
            },
            'root': {
                'level': log_level,
                'handlers': ['stderr'],
            },
        }
    )
