"""Structured logging setup for the tersargs command.

Library modules only call ``get_logger(__name__)``; configuring processors
and levels is left to the program that embeds them (here, the CLI).
"""

import logging
import sys
from typing import Optional

import structlog
from structlog.stdlib import BoundLogger

from tersargs.config import Settings, get_settings

# Silent until the host program configures logging.
logging.getLogger("tersargs").addHandler(logging.NullHandler())


def get_logger(name: str) -> BoundLogger:
    """structlog logger backed by the stdlib logger ``name``.

    Until the host program configures logging, events reach only the
    package NullHandler, so nothing is printed.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def configure_logging(settings: Optional[Settings] = None) -> BoundLogger:
    """Configure structlog on top of stdlib logging, writing to stderr."""
    settings = settings or get_settings()

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if settings.LOG_JSON:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, settings.LOG_LEVEL, logging.WARNING),
        force=True,
    )

    return structlog.stdlib.get_logger()
