"""Application-wide logging initialization

IMPORTANT: Call `initialize_logging()` in the lambda package's `__init__.py` file
before any other logging is done.

Every record is written to stdout as a single JSON line (CloudWatch friendly):
{
    "timestamp": "2025-10-15T12:00:00.000Z",
    "level": "INFO",
    "logger": "cloudpaste.lambdas.paste.app",
    "message": "Paste created. Responding with 303.",
    "event": "PASTE_CREATED",
    "paste_id": "0f8fad5bd9cb469fa16570867728950e"
}

Fields passed via `extra={...}` are attached at the top level. Exception
tracebacks (logger.exception) are attached under "exception".
"""

import os
import json
import logging
import logging.config
from datetime import datetime, UTC

from cloudpaste.constants import ENV


class JsonFormatter(logging.Formatter):
    """JSON formatter that includes LogRecord extras"""

    # Attributes every LogRecord carries, anything else came from `extra`
    RESERVED_ATTRS = frozenset(vars(logging.LogRecord('', 0, '', 0, '', (), None))) | {'message', 'asctime'}

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created, tz=UTC).isoformat(timespec='milliseconds').replace('+00:00', 'Z')

        log = {
            'timestamp': timestamp,
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }
        log.update({key: value for key, value in vars(record).items() if key not in self.RESERVED_ATTRS})

        if record.exc_info:
            log['exception'] = self.formatException(record.exc_info)

        # default=str keeps datetimes and other extras serializable
        return json.dumps(log, default=str)


def initialize_logging() -> None:
    log_level = os.getenv(ENV.App.LOG_LEVEL, 'INFO').upper()
    logging.config.dictConfig(
        {
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {
                'json': {'()': JsonFormatter},
            },
            'handlers': {
                'stdout': {
                    'class': 'logging.StreamHandler',
                    'formatter': 'json',
                    'stream': 'ext://sys.stdout',
                }
            },
            'root': {'level': log_level, 'handlers': ['stdout']},
            # redis and botocore are chatty at DEBUG
            'loggers': {
                'botocore': {'level': 'WARNING'},
                'redis': {'level': 'WARNING'},
            },
        }
    )
