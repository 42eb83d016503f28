"""Handler creation for the logging system.

Console and rotating file handlers are attached directly to the root
``appimage_desktop`` logger; child loggers propagate to it.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from appimage_desktop.constants import (
    LOG_BACKUP_COUNT,
    LOG_CONSOLE_DATE_FORMAT,
    LOG_CONSOLE_FORMAT,
    LOG_FILE_DATE_FORMAT,
    LOG_FILE_FORMAT,
    LOG_ROOT_NAME,
    LOG_ROTATION_THRESHOLD_BYTES,
)
from appimage_desktop.logger.formatters import HybridConsoleFormatter
from appimage_desktop.logger.state import _LoggerState


class ConfigurationError(Exception):
    """Error in logging configuration."""


def _create_console_handler(console_level: str) -> logging.StreamHandler:
    """Create console handler with hybrid formatting.

    Args:
        console_level: Log level for console (e.g., "DEBUG", "INFO")

    Returns:
        Configured StreamHandler for console output

    """
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(
        HybridConsoleFormatter(
            LOG_CONSOLE_FORMAT,
            datefmt=LOG_CONSOLE_DATE_FORMAT,
        )
    )
    console_handler.setLevel(getattr(logging, console_level, logging.INFO))
    return console_handler


def _create_file_handler(
    log_file: Path, file_level: str
) -> RotatingFileHandler:
    """Create rotating file handler.

    Args:
        log_file: Path to log file
        file_level: Log level for file (e.g., "DEBUG", "INFO")

    Returns:
        Configured RotatingFileHandler

    Raises:
        ConfigurationError: If the log directory or file cannot be opened

    """
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            filename=str(log_file),
            maxBytes=LOG_ROTATION_THRESHOLD_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
    except OSError as e:
        msg = f"Failed to setup file logging: {e}"
        raise ConfigurationError(msg) from e

    file_handler.setFormatter(
        logging.Formatter(LOG_FILE_FORMAT, datefmt=LOG_FILE_DATE_FORMAT)
    )
    file_handler.setLevel(getattr(logging, file_level, logging.INFO))
    return file_handler


def setup_root_logger(
    state: _LoggerState,
    console_level: str,
    file_level: str,
    log_file: Path,
    enable_file_logging: bool,  # noqa: FBT001
) -> None:
    """Initialize the root logger with console and file handlers.

    Called exactly once per process (or once after clear_logger_state).

    Args:
        state: Logger state object (from logger.state module)
        console_level: Console log level (e.g., "INFO", "WARNING")
        file_level: File log level (e.g., "DEBUG", "INFO")
        log_file: Path to log file
        enable_file_logging: Whether to enable file logging

    Raises:
        ConfigurationError: If handler setup fails

    """
    root_logger = logging.getLogger(LOG_ROOT_NAME)
    root_logger.setLevel(logging.DEBUG)  # Capture all, filter at handlers
    root_logger.propagate = False

    for handler in root_logger.handlers[:]:
        handler.close()
        root_logger.removeHandler(handler)

    state.console_handler = _create_console_handler(console_level)
    root_logger.addHandler(state.console_handler)

    if enable_file_logging:
        state.file_handler = _create_file_handler(log_file, file_level)
        root_logger.addHandler(state.file_handler)

    state.root_initialized = True


def relocate_file_handler(
    state: _LoggerState, log_file: Path, file_level: str
) -> None:
    """Swap the file handler for one writing to log_file.

    The current handler stays in place if the new file cannot be opened.

    Args:
        state: Logger state object (from logger.state module)
        log_file: New log file path
        file_level: Log level for the new handler

    """
    old_handler = state.file_handler
    if old_handler is None:
        return
    if Path(old_handler.baseFilename) == log_file.absolute():
        return

    try:
        new_handler = _create_file_handler(log_file, file_level)
    except ConfigurationError as e:
        logging.getLogger(LOG_ROOT_NAME).warning(
            "Keeping log file %s: %s", old_handler.baseFilename, e
        )
        return

    root_logger = logging.getLogger(LOG_ROOT_NAME)
    root_logger.removeHandler(old_handler)
    old_handler.close()
    root_logger.addHandler(new_handler)
    state.file_handler = new_handler
