"""
Sparkle Structured Logging

Provides a configured logger for the SSG gateway using stdlib logging
with structured context.

Usage:
    from sparkle_ssg.logging import get_logger

    logger = get_logger("sparkle_ssg.invoker")
    logger.info("Process exited", extra={"binary": "zola", "exit_code": 0})

For machine consumption, configure JSON output:
    from sparkle_ssg.logging import configure_logging
    configure_logging(json_output=True, level="INFO")

Defaults are read from SPARKLE_LOG_LEVEL and SPARKLE_LOG_JSON.
"""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any

ROOT_LOGGER = "sparkle_ssg"

# Extra attributes lifted from LogRecord into the structured output
STRUCTURED_KEYS = ("adapter", "tool_name", "binary", "exit_code", "duration_ms", "reason")

_TRUTHY = {"1", "true", "yes", "on"}


class SparkleFormatter(logging.Formatter):
    """Structured log formatter.

    Outputs either human-readable or JSON format depending on configuration.
    """

    def __init__(self, json_output: bool = False):
        super().__init__()
        self._json_output = json_output

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for key in STRUCTURED_KEYS:
            value = getattr(record, key, None)
            if value is not None:
                log_data[key] = value

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        if self._json_output:
            return json.dumps(log_data, default=str)

        extra_keys = {
            k: v for k, v in log_data.items()
            if k not in ("timestamp", "level", "logger", "message", "exception")
        }
        extra_str = ""
        if extra_keys:
            extra_str = " | " + " ".join(f"{k}={v}" for k, v in extra_keys.items())

        line = f"[{log_data['timestamp']}] {record.levelname:8s} {record.name}: {record.getMessage()}{extra_str}"
        if "exception" in log_data:
            line = f"{line}\n{log_data['exception']}"
        return line


def configure_logging(
    level: str | None = None,
    json_output: bool | None = None,
) -> None:
    """Configure sparkle-ssg logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Falls back to SPARKLE_LOG_LEVEL, then WARNING.
        json_output: If True, output JSON lines. Falls back to SPARKLE_LOG_JSON.
    """
    if level is None:
        level = os.environ.get("SPARKLE_LOG_LEVEL", "WARNING")
    if json_output is None:
        json_output = os.environ.get("SPARKLE_LOG_JSON", "").strip().lower() in _TRUTHY

    root_logger = logging.getLogger(ROOT_LOGGER)
    root_logger.setLevel(getattr(logging, level.upper(), logging.WARNING))

    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(SparkleFormatter(json_output=json_output))
    root_logger.addHandler(handler)

    root_logger.propagate = False


def get_logger(name: str = ROOT_LOGGER) -> logging.Logger:
    """Get a sparkle-ssg logger instance.

    Args:
        name: Logger name (usually the module path, e.g. "sparkle_ssg.invoker").
    """
    return logging.getLogger(name)


configure_logging()
