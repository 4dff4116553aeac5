"""Utilities package."""

from .config import settings
from .log import LoggerMixin, configure_logging, get_logger

__all__ = [
    "settings",
    "get_logger",
    "LoggerMixin",
    "configure_logging",
]
