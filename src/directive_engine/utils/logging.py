# ============================================================================
# src/directive_engine/utils/logging.py
# ============================================================================
"""
Logging configuration and utilities for the directive engine.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Optional
from datetime import datetime, timezone
import json

# Request-scoped attributes copied into JSON records when present
CONTEXT_FIELDS = ("patient_id", "processing_tier", "event")


def setup_logging(
    level: Optional[str] = None,
    log_file: Optional[Path] = None,
    format_json: Optional[bool] = None
) -> None:
    """
    Setup logging configuration.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Defaults to LOG_LEVEL from logging settings.
        log_file: Optional file path for logging
        format_json: Whether to use JSON format. Defaults to LOG_JSON.
    """
    from ..config.logging_config import logging_settings

    level = level or logging_settings.LOG_LEVEL
    if format_json is None:
        format_json = logging_settings.LOG_JSON

    log_level = getattr(logging, level.upper())

    if format_json:
        formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

    handlers = []

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    handlers.append(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    logging.basicConfig(
        level=log_level,
        handlers=handlers,
        force=True
    )


class JsonFormatter(logging.Formatter):
    """JSON log formatter."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data = {
            'timestamp': datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno
        }

        for key in CONTEXT_FIELDS:
            if hasattr(record, key):
                log_data[key] = getattr(record, key)

        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        # Structured payload attached via extra={'payload': ...}
        if hasattr(record, 'payload'):
            log_data['payload'] = record.payload

        return json.dumps(log_data, default=str)


class LogAdapter(logging.LoggerAdapter):
    """Logger adapter for adding context to all log messages."""

    def process(self, msg, kwargs):
        """Add extra context to log message."""
        if 'extra' not in kwargs:
            kwargs['extra'] = {}

        kwargs['extra'].update(self.extra)

        return msg, kwargs


def create_audit_logger(name: str, log_file: Path) -> logging.Logger:
    """
    Create dedicated audit logger.

    Args:
        name: Logger name
        log_file: Path to audit log file

    Returns:
        Audit logger instance
    """
    logger = logging.getLogger(f"audit.{name}")
    logger.setLevel(logging.INFO)
    logger.propagate = False

    log_file.parent.mkdir(parents=True, exist_ok=True)

    # Re-creating the same audit logger must not duplicate records
    for existing in list(logger.handlers):
        if isinstance(existing, logging.FileHandler) and \
                existing.baseFilename == os.path.abspath(log_file):
            return logger

    handler = logging.FileHandler(log_file)
    handler.setFormatter(JsonFormatter())
    logger.addHandler(handler)

    return logger
