"""Logger state management module.

Holds the single logger state object shared by the whole application so the
root ``appimage_desktop`` logger is configured exactly once.
"""

import logging
import threading
from logging.handlers import RotatingFileHandler


class _LoggerState:
    """Container for logger state (avoids module-level mutable globals).

    Attributes:
        lock: Thread lock for singleton initialization
        root_initialized: Whether root logger has been set up
        config_applied: Whether config file settings have been loaded
        console_handler: Handler writing user-facing output to stdout
        file_handler: Rotating handler writing the log file
        saved_console_level: Console level to restore after a temporary
            override, None when no override is active

    """

    def __init__(self) -> None:
        """Initialize logger state."""
        self.lock = threading.Lock()
        self.root_initialized = False
        self.config_applied = False
        self.console_handler: logging.StreamHandler | None = None
        self.file_handler: RotatingFileHandler | None = None
        self.saved_console_level: int | None = None


_state = _LoggerState()


def get_state() -> _LoggerState:
    """Get the global logger state singleton.

    Returns:
        The global logger state instance

    """
    return _state
