"""
Centralized JSON logging configuration.

Structured JSON on stdout (and a rotating file when a log directory is
configured). Each record carries the current request's correlation_id.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

from pythonjsonlogger import jsonlogger

from shared.logging.correlation import get_correlation_id


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """JSON formatter with standardized field names."""

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)
        log_record['timestamp'] = self.formatTime(record)
        log_record['level'] = record.levelname
        log_record['logger'] = record.name
        cid = get_correlation_id()
        if cid:
            log_record['correlation_id'] = cid
        if record.exc_info and not log_record.get('exc_info'):
            log_record['exception'] = self.formatException(record.exc_info)
        log_record.pop('levelname', None)
        log_record.pop('name', None)


def setup_logging(level: str = "INFO", log_dir: Optional[str] = "logs") -> None:
    """
    Configure JSON structured logging for the application.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: Directory for the rotating log file; None logs to stdout only
    """
    formatter = CustomJsonFormatter(
        fmt='%(timestamp)s %(level)s %(logger)s %(message)s'
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.handlers.clear()
    root.addHandler(console_handler)

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        # 10MB per file, 5 backups
        file_handler = RotatingFileHandler(
            os.path.join(log_dir, "api.log"),
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding='utf-8',
        )
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    # uvicorn's access log duplicates the request middleware's line
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
