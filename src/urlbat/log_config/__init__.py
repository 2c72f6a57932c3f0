"""Logging configuration package."""

from .main import (
    BuildContext,
    configure_from_settings,
    configure_logging,
    get_context_logger,
)


__all__ = [
    "get_context_logger",
    "configure_logging",
    "configure_from_settings",
    "BuildContext",
]
