"""structlog configuration."""

import logging

import structlog

from tenantnotes.config import Settings


def configure_logging(settings: Settings) -> None:
    """Configure structlog for the application.

    Production renders one JSON object per line; every other environment
    uses the console renderer. Request-scoped values bound through
    ``structlog.contextvars`` are merged into every event.

    Args:
        settings: Application settings providing environment and log level
    """
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            (
                structlog.processors.JSONRenderer()
                if settings.is_production
                else structlog.dev.ConsoleRenderer()
            ),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
