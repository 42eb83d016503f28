"""Logging utilities for appimage-desktop.

This package provides:
- Plain-message console output for INFO, colored structured output for
  everything else
- File rotation using RotatingFileHandler
- A thread-safe singleton root logger (``appimage_desktop``) with
  hierarchical child loggers (``appimage_desktop.core.install``, ...)

Usage:
    >>> from appimage_desktop.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Processing %s", app_name)  # Use %-style formatting

Environment Variables:
    APPIMAGE_DESKTOP_LOG_DIR: Override the log directory (used by tests).

RULES FOR CONTRIBUTORS:
    1. Always use: logger = get_logger(__name__)
    2. Never call logging.basicConfig()
    3. Never attach handlers to child loggers
    4. Never use f-strings in log calls; use %-formatting
"""

from appimage_desktop.logger.config import (
    update_logger_from_config as _update_config,
)
from appimage_desktop.logger.formatters import (
    ColoredConsoleFormatter,
    HybridConsoleFormatter,
    SimpleConsoleFormatter,
)
from appimage_desktop.logger.handlers import ConfigurationError
from appimage_desktop.logger.logger import (
    clear_logger_state,
    get_logger,
    setup_logging,
    temporary_console_level,
)
from appimage_desktop.logger.state import _state, get_state
from appimage_desktop.types import GlobalConfig

__all__ = [
    "ColoredConsoleFormatter",
    "ConfigurationError",
    "HybridConsoleFormatter",
    "SimpleConsoleFormatter",
    "_state",  # For testing only
    "clear_logger_state",
    "get_logger",
    "get_state",
    "setup_logging",
    "temporary_console_level",
    "update_logger_from_config",
]


def update_logger_from_config(config: GlobalConfig) -> None:
    """Apply log levels and the logs directory from the global config.

    Example:
        >>> config = ConfigManager().load_global_config()
        >>> update_logger_from_config(config)

    """
    _update_config(get_state(), config)
