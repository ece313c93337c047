"""Build the shared ``barcode_renamer`` logger.

Console output goes through ``ClassificationRichHandler`` on stderr so it never
mixes with command output on stdout. The CLI calls ``setup_logger`` again once
the configuration is known, which swaps in a rotating file handler.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final

from rich.console import Console

from barcode_renamer.config.paths import default_log_file

from .handlers import ClassificationRichHandler

DEFAULT_LOG_FILE: Final[Path] = default_log_file()
LOGGER_NAME: Final[str] = "barcode_renamer"

_FILE_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_MAX_LOG_BYTES: Final[int] = 10 * 1024 * 1024
_LOG_BACKUPS: Final[int] = 5


def _console_handler(level: int) -> ClassificationRichHandler:
    handler = ClassificationRichHandler(console=Console(stderr=True, soft_wrap=True))
    handler.setLevel(level)
    return handler


def _file_handler(log_file: Path, level: int) -> RotatingFileHandler:
    path = Path(log_file).expanduser().resolve()
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        path, maxBytes=_MAX_LOG_BYTES, backupCount=_LOG_BACKUPS, encoding="utf-8"
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_FILE_FORMAT))
    return handler


def setup_logger(
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> logging.Logger:
    """(Re)configure the application logger and return it.

    Existing handlers are closed and replaced, so calling this twice never
    duplicates output.

    Args:
        log_file: Rotating log file to attach; console only when None.
        console_level: Threshold for the Rich console handler.
        file_level: Threshold for the file handler.
    """
    app_logger = logging.getLogger(LOGGER_NAME)
    app_logger.setLevel(logging.DEBUG)

    for handler in list(app_logger.handlers):
        app_logger.removeHandler(handler)
        handler.close()

    app_logger.addHandler(_console_handler(console_level))
    if log_file is not None:
        app_logger.addHandler(_file_handler(log_file, file_level))
    return app_logger


logger: Final[logging.Logger] = setup_logger()


__all__ = ["DEFAULT_LOG_FILE", "LOGGER_NAME", "logger", "setup_logger"]
