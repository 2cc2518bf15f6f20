# SPDX-License-Identifier: MIT

"""Structured logging setup.

Logs go to stderr so they never interleave with the rich output printed
to stdout.
"""

import logging
import sys
from typing import Any

import structlog
from structlog.types import Processor

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("console", "json")


def configure_logging(level: str = "WARNING", format: str = "console") -> None:
    """
    Configure structlog for the whole process.

    Args:
        level: Minimum level to emit (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format: "console" for human readable output, "json" for one JSON
            object per line

    Raises:
        ValueError: If level or format is not recognised
    """
    level_upper = level.upper()
    if level_upper not in LOG_LEVELS:
        raise ValueError(
            f"Invalid log level: {level}. Must be one of: {', '.join(LOG_LEVELS)}"
        )

    format_lower = format.lower()
    if format_lower not in LOG_FORMATS:
        raise ValueError(f"Invalid log format: {format}. Must be 'console' or 'json'")

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if format_lower == "console":
        processors.append(structlog.dev.ConsoleRenderer(colors=False))
    else:
        processors.append(structlog.processors.JSONRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level_upper)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> Any:
    return structlog.get_logger(name)
