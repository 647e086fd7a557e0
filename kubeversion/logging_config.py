"""
Logging setup for kubeversion.

Console records are user output: plain messages on stdout, with a colored
level marker when stdout is a terminal. An optional log file receives
everything at DEBUG with timestamps and module names.
"""

import logging
import sys
from pathlib import Path
from typing import Optional


LOGGER_NAME = "kubeversion"

_logger: Optional[logging.Logger] = None


class ConsoleFormatter(logging.Formatter):
    """Formats records as plain user-facing lines, optionally with a colored marker."""

    MARKERS = {
        logging.DEBUG: ("\033[36m", "·"),
        logging.INFO: ("\033[32m", "✓"),
        logging.WARNING: ("\033[33m", "!"),
        logging.ERROR: ("\033[31m", "✗"),
        logging.CRITICAL: ("\033[1;31m", "✗"),
    }
    RESET = "\033[0m"

    def __init__(self, use_colors: bool = False):
        super().__init__("%(message)s")
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        marker = self.MARKERS.get(record.levelno)
        if not self.use_colors or marker is None:
            return message
        color, symbol = marker
        return f"{color}{symbol}{self.RESET} {message}"


def setup_logging(
    log_file: Optional[str] = None,
    verbose: bool = False,
    quiet: bool = False,
) -> logging.Logger:
    """
    Configure the kubeversion logger for one invocation.

    Args:
        log_file: Optional file that receives DEBUG records
        verbose: Show DEBUG records on the console
        quiet: Show only warnings and errors on the console

    Returns:
        Configured logger instance
    """
    global _logger

    if verbose:
        console_level = logging.DEBUG
    elif quiet:
        console_level = logging.WARNING
    else:
        console_level = logging.INFO

    logger = logging.getLogger(LOGGER_NAME)
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.DEBUG if log_file else console_level)
    logger.propagate = False

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(ConsoleFormatter(use_colors=sys.stdout.isatty()))
    logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        ))
        logger.addHandler(file_handler)

    _logger = logger
    return logger


def get_logger() -> logging.Logger:
    """Return the kubeversion logger, configuring console defaults on first use."""
    global _logger
    if _logger is None:
        _logger = setup_logging()
    return _logger
