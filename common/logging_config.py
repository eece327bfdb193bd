# -*- coding: utf-8 -*-
"""
Logging configuration for the notebook bootstrap.

Log records go to stderr so that stdout carries only the banners and status
lines of the run. Set LOG_FORMAT=json to get one JSON object per record,
which is handy when the bootstrap runs inside provisioning pipelines.
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Optional

# LogRecord attributes that are not user-supplied `extra` fields.
_RESERVED_RECORD_KEYS = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__
) | {"message", "asctime", "taskName"}

CONSOLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class JSONFormatter(logging.Formatter):
    """
    JSON formatter for structured logging.

    Each record becomes an object with timestamp (ISO format, UTC), level,
    service name, logger, message and any extra fields.
    """

    def __init__(self, service_name: str = "notebook-bootstrap"):
        super().__init__()
        self.service_name = service_name
        self.hostname = os.environ.get("HOSTNAME", "unknown")

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_entry = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "service": self.service_name,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
            "hostname": self.hostname,
        }

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        extra_fields = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _RESERVED_RECORD_KEYS
        }
        if extra_fields:
            log_entry["extra"] = extra_fields

        return json.dumps(log_entry, ensure_ascii=False, default=str)


def setup_logging(
    service_name: str = "notebook-bootstrap",
    log_level: Optional[str] = None,
    verbose: bool = False,
) -> logging.Logger:
    """
    Configure the root logger for a bootstrap run.

    Args:
        service_name: Name of the service logger returned to the caller.
        log_level: Logging level name. Defaults to the LOG_LEVEL environment
            variable, then INFO. `verbose` forces DEBUG.
        verbose: Enable debug output.

    Returns:
        The configured service logger.
    """
    if verbose:
        log_level = "DEBUG"
    elif log_level is None:
        log_level = os.environ.get("LOG_LEVEL", "INFO")

    numeric_level = getattr(logging, log_level.upper(), None)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(numeric_level)
    if os.environ.get("LOG_FORMAT", "").lower() == "json":
        console_handler.setFormatter(JSONFormatter(service_name))
    else:
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    root_logger.addHandler(console_handler)

    logger = logging.getLogger(service_name)
    logger.debug(
        "Logging initialized",
        extra={"log_level": logging.getLevelName(numeric_level)},
    )
    return logger
