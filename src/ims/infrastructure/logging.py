"""Logging configuration.

structlog on top of the standard library: every module obtains a
logger with ``structlog.get_logger(__name__)`` and logs an event name
plus key/value context, e.g. ``logger.info("Product created", id=...)``.
"""

from __future__ import annotations

import logging
import sys

import structlog

_LEVEL_BY_ENVIRONMENT = {
    "production": "INFO",
    "staging": "INFO",
    "development": "DEBUG",
    "test": "WARNING",
}


def get_log_level(environment: str, override: str | None = None) -> str:
    if override:
        return override.upper()
    return _LEVEL_BY_ENVIRONMENT.get(environment.lower(), "INFO")


def configure_logging(environment: str = "development", level: str | None = None) -> None:
    """Configure stdlib logging and structlog for the whole process."""
    log_level = get_log_level(environment, level)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(log_level)
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers = [handler]

    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("botocore").setLevel(logging.WARNING)

    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if environment.lower() in ("production", "staging"):
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
