"""
Logging for the clamped_value package.

One rich console handler sits on the ``clamped_value`` logger; module loggers are
its children and propagate to it. Applications change verbosity with
configure_logging().
"""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

PACKAGE_LOGGER = "clamped_value"


class ClampingRichHandler(RichHandler):
    """Prints ``logger:line message`` to stderr, colored by level."""

    _styles = {
        logging.DEBUG: "dim cyan",
        logging.INFO: "default",
        logging.WARNING: "yellow",
        logging.ERROR: "bold red",
        logging.CRITICAL: "bold red",
    }

    def __init__(self, level: int | str = logging.NOTSET) -> None:
        super().__init__(
            level=level,
            console=Console(stderr=True),
            show_time=False,
            show_level=False,
            show_path=False,
            markup=True,
        )

    def format(self, record: logging.LogRecord) -> str:
        style = self._styles.get(record.levelno, "default")
        # Messages carry reprs of ranges like "[0, 10]"; keep rich from reading them as tags.
        return f"[{style}]{record.name}:{record.lineno} {escape(record.getMessage())}[/{style}]"


def configure_logging(level: int | str = logging.WARNING, log_file: str | Path | None = None) -> logging.Logger:
    """
    Set the package log level and install the console handler once.

    Args:
        level: Level for the ``clamped_value`` logger and all module loggers.
        log_file: Optional file that receives the same records; replaces a file set earlier.

    Returns:
        The package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    if not any(isinstance(handler, ClampingRichHandler) for handler in logger.handlers):
        logger.addHandler(ClampingRichHandler())

    if log_file is not None:
        for handler in [h for h in logger.handlers if isinstance(h, logging.FileHandler)]:
            logger.removeHandler(handler)
            handler.close()
        file_handler = logging.FileHandler(str(log_file), encoding="utf-8")
        file_handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s:%(lineno)d %(message)s"))
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = PACKAGE_LOGGER) -> logging.Logger:
    """Return the logger *name*, configuring the package logger with defaults on first use."""
    if not logging.getLogger(PACKAGE_LOGGER).handlers:
        configure_logging()
    return logging.getLogger(name)
