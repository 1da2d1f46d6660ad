"""
Structured logging configuration using structlog.

Log output goes to stderr so it never mixes with the result table on stdout.
"""

from __future__ import annotations

import logging
from typing import Any

import structlog
from rich.console import Console
from rich.logging import RichHandler

from .config import settings

# Diagnostics console; stdout belongs to the results
console = Console(stderr=True)


def configure_logging(level: str | None = None) -> None:
    """
    Configure application-wide structured logging.

    Args:
        level: Log level name overriding ``settings.log_level``
    """
    level = (level or settings.log_level).upper()

    if settings.log_format == "json":
        processors: list[Any] = [
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.dev.ConsoleRenderer(colors=False),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    if settings.log_format == "console":
        handler: logging.Handler = RichHandler(
            console=console,
            rich_tracebacks=True,
            show_time=False,
            show_path=level == "DEBUG",
        )
    else:
        handler = logging.StreamHandler(console.file)
        handler.setFormatter(logging.Formatter(fmt="%(message)s"))

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, level))

    # Reduce noise from third-party libraries
    noisy_level = logging.DEBUG if level == "DEBUG" else logging.WARNING
    logging.getLogger("urllib3").setLevel(noisy_level)
    logging.getLogger("requests").setLevel(noisy_level)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.debug("requesting", url="https://pkgs.alpinelinux.org/contents")
    """
    return structlog.get_logger(name)


class LoggerMixin:
    """
    Mixin class to add logging capability to any class.

    Example:
        >>> class Fetcher(LoggerMixin):
        ...     def fetch(self):
        ...         self.logger.debug("fetching")
    """

    @property
    def logger(self) -> structlog.stdlib.BoundLogger:
        """Get logger bound to this class."""
        if not hasattr(self, "_logger"):
            self._logger = get_logger(self.__class__.__name__)
        return self._logger


# Configure logging on module import
configure_logging()
