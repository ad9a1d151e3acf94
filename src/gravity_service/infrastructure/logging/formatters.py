"""
Logging formatters for the gravity service.

Provides a JSON formatter for log aggregation in deployed stages and a
human-readable formatter for local development. Both render the `extra`
fields passed to logger calls.
"""

import json
import logging
import socket
from datetime import datetime, timezone
from typing import Any, Dict

# Attributes every LogRecord carries; anything else came in through `extra`
_STANDARD_RECORD_FIELDS = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__.keys()
) | {"message", "asctime", "taskName"}


def extract_extra_fields(record: logging.LogRecord) -> Dict[str, Any]:
    """Return the fields attached to a record via `extra`."""
    return {
        key: value
        for key, value in record.__dict__.items()
        if key not in _STANDARD_RECORD_FIELDS and not key.startswith('_')
    }


# JSON key -> LogRecord attribute
_RECORD_ATTRIBUTES = {
    'level': 'levelname',
    'logger': 'name',
    'module': 'module',
    'function': 'funcName',
    'line': 'lineno',
    'thread_name': 'threadName',
}


class StructuredFormatter(logging.Formatter):
    """
    One JSON object per line, for log aggregation in deployed stages.

    Args:
        service_name: service the entries are attributed to
        environment: development, staging or production
    """

    def __init__(self, service_name: str, environment: str = "development"):
        super().__init__()
        self.service_name = service_name
        self.environment = environment
        self.hostname = socket.gethostname()

    def format(self, record: logging.LogRecord) -> str:
        entry: Dict[str, Any] = {
            'timestamp': datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            'service': self.service_name,
            'environment': self.environment,
            'hostname': self.hostname,
            'message': record.getMessage(),
        }
        entry.update({key: getattr(record, attr) for key, attr in _RECORD_ATTRIBUTES.items()})

        if record.exc_info and record.exc_info[0] is not None:
            entry['exception'] = {
                'type': record.exc_info[0].__name__,
                'message': str(record.exc_info[1]),
                'traceback': self.formatException(record.exc_info),
            }

        entry.update({f'extra_{key}': value for key, value in extract_extra_fields(record).items()})
        return json.dumps(entry, ensure_ascii=False, default=str)


class HumanReadableFormatter(logging.Formatter):
    """Single-line console output for local runs, `extra` fields appended in brackets."""

    def __init__(self, service_name: str):
        self.service_name = service_name
        super().__init__(
            f"%(asctime)s | %(levelname)-8s | %(name)s | {service_name} | %(message)s",
            datefmt='%Y-%m-%d %H:%M:%S',
        )

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        extra = extract_extra_fields(record)
        if not extra:
            return line
        return f"{line} [{', '.join(f'{k}={v}' for k, v in extra.items())}]"
