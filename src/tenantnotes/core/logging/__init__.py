"""Logging module with structured logging and request tracking."""

from tenantnotes.core.logging.middleware import RequestLoggingMiddleware
from tenantnotes.core.logging.setup import configure_logging


__all__ = [
    "RequestLoggingMiddleware",
    "configure_logging",
]
