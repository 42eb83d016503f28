"""Main logger module providing public API functions.

- setup_logging(): Configure the root logger once
- get_logger(): Get a logger for a module
- temporary_console_level(): Raise or lower console verbosity for a block
- clear_logger_state(): Reset everything for test isolation
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from appimage_desktop.constants import LOG_ROOT_NAME
from appimage_desktop.logger.config import load_log_settings
from appimage_desktop.logger.handlers import setup_root_logger
from appimage_desktop.logger.state import get_state


def setup_logging(
    name: str = LOG_ROOT_NAME,
    console_level: str | None = None,
    file_level: str | None = None,
    log_file: Path | None = None,
    enable_file_logging: bool = True,  # noqa: FBT001, FBT002
) -> logging.Logger:
    """Configure logging and return the requested logger.

    The root ``appimage_desktop`` logger is initialized exactly once under
    the state lock; child loggers are plain ``logging.getLogger`` instances
    that propagate to it.

    Args:
        name: Logger name, typically __name__ for module-level loggers
        console_level: Console log level ("DEBUG", "INFO", "WARNING")
        file_level: File log level ("DEBUG", "INFO")
        log_file: Path to log file
        enable_file_logging: Whether to enable file logging

    Returns:
        Logger instance

    Raises:
        ConfigurationError: If file logging setup fails

    """
    state = get_state()
    with state.lock:
        if not state.root_initialized:
            cfg_console, cfg_file, cfg_path = load_log_settings()
            setup_root_logger(
                state,
                console_level or cfg_console,
                file_level or cfg_file,
                log_file or cfg_path,
                enable_file_logging,
            )

    return logging.getLogger(name)


def get_logger(
    name: str = LOG_ROOT_NAME,
    enable_file_logging: bool = True,  # noqa: FBT001, FBT002
) -> logging.Logger:
    """Get or create a logger instance.

    Example:
        >>> from appimage_desktop.logger import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.info("Installing %s", app_name)

    Args:
        name: Logger name, typically __name__ for module loggers
        enable_file_logging: Whether to enable file logging (default: True)

    Returns:
        Configured logger instance

    """
    return setup_logging(name=name, enable_file_logging=enable_file_logging)


@contextmanager
def temporary_console_level(level: str) -> Iterator[None]:
    """Temporarily change the console handler level.

    Args:
        level: Level name to use inside the block (e.g. "DEBUG")

    """
    state = get_state()
    handler = state.console_handler
    if handler is None:
        yield
        return

    state.saved_console_level = handler.level
    handler.setLevel(getattr(logging, level, logging.INFO))
    try:
        yield
    finally:
        handler.setLevel(state.saved_console_level)
        state.saved_console_level = None


def clear_logger_state() -> None:
    """Clear global logger state for testing purposes.

    Closes and detaches all handlers of the ``appimage_desktop`` loggers and
    resets the state flags so the next get_logger() starts fresh.

    Warning:
        Intended for tests only; it disrupts all active logging.

    """
    state = get_state()
    with state.lock:
        state.console_handler = None
        state.file_handler = None
        state.saved_console_level = None
        state.root_initialized = False
        state.config_applied = False

        for logger_name in list(logging.Logger.manager.loggerDict.keys()):
            if logger_name.startswith(LOG_ROOT_NAME):
                log_instance = logging.getLogger(logger_name)
                for handler in log_instance.handlers[:]:
                    handler.close()
                    log_instance.removeHandler(handler)
