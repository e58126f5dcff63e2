"""Application-wide logging initialization

Call `initialize_logging()` once at process start, before any other logging
is done (see `kvshortener.app.create_service`).

Logging format (one JSON document per line on stdout):
{
    "timestamp": "2026-10-19T12:00:00.000Z",
    "level": "INFO",
    "logger": "kvshortener.services.shortener_service",
    "message": "Short key not found.",
    "shortcode": "kPpCoVygmnp"
}
"""

import os
import json
import logging
import logging.config
from datetime import datetime, UTC

from kvshortener.constants import ENV


class JsonFormatter(logging.Formatter):
    """JSON formatter that includes LogRecord extras"""

    # Attributes every LogRecord carries; anything else came in via `extra`
    STANDARD_ATTRS = frozenset(vars(logging.LogRecord('', 0, '', 0, '', (), None))) | {'message', 'asctime'}

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

        for key, value in record.__dict__.items():
            if key not in self.STANDARD_ATTRS:
                log[key] = value

        if record.exc_info:
            log['exception'] = self.formatException(record.exc_info)

        return json.dumps(log, default=str)


def initialize_logging(level: str | None = None) -> None:
    """Route all logging to stdout as JSON lines

    Args:
        level (str | None):
            Root log level. Defaults to the LOG_LEVEL environment variable, or INFO.
    """
    log_level = (level or os.getenv(ENV.App.LOG_LEVEL, 'INFO')).upper()
    logging.config.dictConfig(
        {
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {
                'json': {
                    '()': JsonFormatter,
                }
            },
            'handlers': {
                'stdout': {
                    'class': 'logging.StreamHandler',
                    'formatter': 'json',
                    'stream': 'ext://sys.stdout',
                }
            },
            'root': {
                'level': log_level,
                'handlers': ['stdout'],
            },
        }
    )
