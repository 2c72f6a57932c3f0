"""Logging configuration and utilities."""

import logging
import sys
from typing import Any

import structlog

# Name of the stdout handler installed by configure_logging
_HANDLER_NAME = "urlbat"


def get_context_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a context-aware logger backed by the stdlib logger ``name``.

    Events go through the structlog processor chain and are then handed to
    stdlib logging, so nothing is emitted until the application configures
    handlers or calls ``configure_logging``.

    Args:
        name: Logger name

    Returns:
        Structured logger instance
    """
    return structlog.wrap_logger(
        logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger
    )


def _level_number(level: str) -> int:
    number = logging.getLevelName(level.upper())
    return number if isinstance(number, int) else logging.INFO


def configure_logging(level: str = "INFO", json: bool = False) -> None:
    """Install the structlog processor chain and a stdout handler.

    Args:
        level: Minimum log level name (e.g. "DEBUG", "INFO"); unknown names
            fall back to INFO
        json: Render JSON lines instead of console output
    """
    renderer = (
        structlog.processors.JSONRenderer()
        if json
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(message)s"))

    root = logging.getLogger()
    for existing in [h for h in root.handlers if h.get_name() == _HANDLER_NAME]:
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(_level_number(level))

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )


def configure_from_settings(settings=None) -> None:
    """Install the processor chain using log_level and log_json from settings.

    Args:
        settings: Settings instance (default: cached package settings)
    """
    if settings is None:
        from ..config import get_settings

        settings = get_settings()
    configure_logging(level=settings.log_level, json=settings.log_json)


class BuildContext:
    """Context manager binding fields to every log line inside the block."""

    def __init__(self, **context: Any):
        """Initialize with context variables.

        Args:
            **context: Context key-value pairs
        """
        self.context = context

    def __enter__(self):
        """Enter context."""
        structlog.contextvars.bind_contextvars(**self.context)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Exit context."""
        structlog.contextvars.unbind_contextvars(*self.context.keys())


__all__ = [
    "get_context_logger",
    "configure_logging",
    "configure_from_settings",
    "BuildContext",
]
