"""
Logging setup for the API process.

Format: 2026-01-06T14:05:52Z [polling_finder] LEVEL message
"""
import logging
import sys
from datetime import UTC, datetime


class ISO8601Formatter(logging.Formatter):
    def __init__(self, source: str = 'polling_finder'):
        self.source = source
        super().__init__()

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created, UTC).strftime('%Y-%m-%dT%H:%M:%SZ')
        message = record.getMessage()
        if record.exc_info:
            message = f'{message}\n{self.formatException(record.exc_info)}'
        return f'{timestamp} [{self.source}] {record.levelname} {message}'


def configure_logging(level: str = 'INFO', source: str = 'polling_finder') -> logging.Logger:
    root_logger = logging.getLogger()
    root_logger.setLevel(level.upper())
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ISO8601Formatter(source=source))
    root_logger.addHandler(handler)

    for uvicorn_logger_name in ('uvicorn', 'uvicorn.error', 'uvicorn.access'):
        uvicorn_logger = logging.getLogger(uvicorn_logger_name)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.propagate = True

    return root_logger
