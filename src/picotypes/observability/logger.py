"""Structured logging for applications that log pico types.

Uses structlog for structured logging with JSON output.
Wrappers placed in an event dict are rendered through their display
strategy, so secrets stay masked and the JSON renderer never sees an
object it cannot serialize.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from picotypes.core.config import Settings, get_settings
from picotypes.core.optional import OptionalAccess


def render_pico_types(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Structlog processor: replace wrapper values with their display form."""
    for key, value in event_dict.items():
        if isinstance(value, OptionalAccess):
            event_dict[key] = str(value)
    return event_dict


def setup_logging(
    level: str = "INFO",
    format: str = "json",
) -> None:
    """Configure structured logging for the application.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR).
        format: "json" for production, "console" for development.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        render_pico_types,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=log_level,
    )


def setup_logging_from_settings(settings: Settings | None = None) -> None:
    """Configure logging from the ``observability`` settings block."""
    obs = (settings or get_settings()).observability
    setup_logging(level=obs.log_level, format=obs.log_format.value)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger for a module."""
    return structlog.get_logger(name)
