"""Logging facade: the configured logger, its setup helper, and the Rich handler."""

from __future__ import annotations

from .config import DEFAULT_LOG_FILE, LOGGER_NAME, logger, setup_logger
from .handlers import ClassificationRichHandler

__all__ = [
    "DEFAULT_LOG_FILE",
    "LOGGER_NAME",
    "ClassificationRichHandler",
    "logger",
    "setup_logger",
]
