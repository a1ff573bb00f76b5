"""
Structured logging for naming-study.

The demonstration routines own standard output: the exact lines they print
are the product. Log events therefore go to standard error, and the default
level (``WARNING``) keeps a normal run silent. That default is installed on
import unless structlog was configured earlier.

Configuration Flow:
    ::

        configure_logging(level="DEBUG", json_format=False)
            ↓
        structlog processor chain:
          1. TimeStamper(fmt="iso")
          2. add_log_level
          3. add_service_metadata
          4. ConsoleRenderer (or JSONRenderer)
            ↓
        PrintLogger(file=sys.stderr)

Examples:
    >>> from naming_study.core.logging import configure_logging, get_logger
    >>> configure_logging(level="DEBUG")
    >>> logger = get_logger(__name__)
    >>> logger.debug("example_started", number=1)

Tags:
    logging, structlog, observability, naming-study
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

from naming_study.core.errors import ConfigError

# Store service name for metadata
_SERVICE_NAME = "naming-study"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _add_service_metadata(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Add service-level metadata to all logs."""
    event_dict.setdefault("service", _SERVICE_NAME)
    return event_dict


def level_number(level: str) -> int:
    """Translate a level name to its numeric value."""
    name = level.upper()
    if name not in LOG_LEVELS:
        raise ConfigError(
            f"Unknown log level: {level!r}",
            context={"level": level, "allowed": list(LOG_LEVELS)},
        )
    return getattr(logging, name)


def configure_logging(
    level: str = "WARNING",
    json_format: bool = False,
    service: str = "naming-study",
    add_timestamp: bool = True,
) -> None:
    """Configure structured logging for the application.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_format: True for JSON lines, False for console rendering
        service: Service name to include in logs
        add_timestamp: Include ISO timestamp in logs
    """
    global _SERVICE_NAME
    _SERVICE_NAME = service

    numeric_level = level_number(level)

    shared_processors: list[Processor] = [
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        _add_service_metadata,
    ]

    if add_timestamp:
        shared_processors.insert(0, structlog.processors.TimeStamper(fmt="iso"))

    if json_format:
        renderer: Processor = structlog.processors.JSONRenderer(ensure_ascii=False)
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=shared_processors + [renderer],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> Any:
    """Get a structured logger (usually ``get_logger(__name__)``)."""
    return structlog.get_logger(name)


if not structlog.is_configured():
    configure_logging()
