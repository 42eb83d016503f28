"""Configuration loading and updating for the logging system.

The logger is set up before the INI settings are read, so bootstrap values
come from constants and the environment; update_logger_from_config()
applies the configured levels afterwards.
"""

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING

from appimage_desktop.constants import (
    CONFIG_DIR_NAME,
    DEFAULT_CONFIG_SUBDIR,
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_LOG_LEVEL,
    DEFAULT_LOGS_DIR_NAME,
    LOG_DIR_ENV_VAR,
    LOG_FILE_NAME,
)
from appimage_desktop.logger.handlers import relocate_file_handler

if TYPE_CHECKING:
    from appimage_desktop.logger.state import _LoggerState
    from appimage_desktop.types import GlobalConfig


def load_log_settings() -> tuple[str, str, Path]:
    """Load default console level, file level, and file path.

    Environment Variable Override:
        APPIMAGE_DESKTOP_LOG_DIR: Overrides the log directory. The test
        suite sets it (see pyproject.toml) so tests never write to
        ~/.config/appimage-desktop/logs.

    Returns:
        Tuple of (console_level, file_level, log_path)

    """
    env_log_dir = os.getenv(LOG_DIR_ENV_VAR)
    if env_log_dir:
        log_path = Path(env_log_dir).expanduser() / LOG_FILE_NAME
    else:
        log_path = (
            Path.home()
            / CONFIG_DIR_NAME
            / DEFAULT_CONFIG_SUBDIR
            / DEFAULT_LOGS_DIR_NAME
            / LOG_FILE_NAME
        )

    return DEFAULT_CONSOLE_LOG_LEVEL, DEFAULT_LOG_LEVEL, log_path


def update_logger_from_config(
    state: "_LoggerState", config: "GlobalConfig"
) -> None:
    """Apply log levels and the log directory from the loaded global config.

    The file handler moves to the configured logs directory unless
    APPIMAGE_DESKTOP_LOG_DIR pins it.

    Args:
        state: Logger state object (from logger.state module)
        config: Loaded global configuration

    """
    console_level = getattr(
        logging, config.get("console_log_level", ""), logging.INFO
    )
    file_level = getattr(logging, config.get("log_level", ""), logging.INFO)

    if state.console_handler is not None:
        state.console_handler.setLevel(console_level)
    if state.file_handler is not None:
        state.file_handler.setLevel(file_level)

    directory = config.get("directory")
    if directory and not os.getenv(LOG_DIR_ENV_VAR):
        relocate_file_handler(
            state,
            directory["logs"] / LOG_FILE_NAME,
            logging.getLevelName(file_level),
        )

    state.config_applied = True
