"""
Logging Setup - HealthOps Tender Scoring
healthops/core/logging.py

Configures stdlib logging and structlog from Settings.LOG_LEVEL / LOG_FORMAT.
"""
import logging
import sys

import structlog

from healthops.config import Settings


def configure_logging(settings: Settings) -> None:
    """Configure stdlib logging and structlog at LOG_LEVEL, writing to stderr."""
    level = getattr(logging, settings.LOG_LEVEL)

    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
        force=True,
    )

    if settings.LOG_FORMAT == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
