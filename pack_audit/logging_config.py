"""
Logging configuration for the packaging ratio audit.

Library modules only create module loggers (`logging.getLogger(__name__)`);
handlers are attached here, once, by entrypoints such as `run_report`.
Records can be rendered as plain text or as JSON lines with:
- timestamp
- level
- logger name
- message
"""

from __future__ import annotations

import logging
import sys

from pythonjsonlogger.json import JsonFormatter


SERVICE_NAME = "pack-audit"


class AuditJsonFormatter(JsonFormatter):
    """
    JSON formatter that adds the standard fields to every record.
    """

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)

        log_record["timestamp"] = self.formatTime(record, self.datefmt)
        log_record["level"] = record.levelname
        log_record["name"] = record.name
        log_record["service"] = SERVICE_NAME

        if "message" not in log_record:
            log_record["message"] = record.getMessage()


def setup_logging(level: int = logging.INFO, format_as_json: bool = False) -> logging.Logger:
    """
    Configure the `pack_audit` logger hierarchy.

    Args:
        level: Logging level (default: INFO)
        format_as_json: If True, emit JSON lines; otherwise a plain text format

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger("pack_audit")
    logger.setLevel(level)

    # Remove existing handlers to avoid duplicates on repeated setup
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)

    if format_as_json:
        formatter = AuditJsonFormatter(
            "%(timestamp)s %(level)s %(name)s %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    else:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.propagate = False

    return logger
