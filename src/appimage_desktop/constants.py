"""Centralized constants module for appimage-desktop.

This module serves as the single source of truth for constants shared across
the codebase. Constants are grouped by concern and use typing.Final
annotations to ensure immutability.

Usage:
    from appimage_desktop.constants import CONFIG_VERSION
"""

import tempfile
from typing import Final

# =============================================================================
# Configuration Constants
# =============================================================================

CONFIG_VERSION: Final[str] = "1.0.0"
CONFIG_FILE_NAME: Final[str] = "settings.conf"

# Config directory lives under ~/.config/<DEFAULT_CONFIG_SUBDIR>
CONFIG_DIR_NAME: Final[str] = ".config"
DEFAULT_CONFIG_SUBDIR: Final[str] = "appimage-desktop"
DEFAULT_RECORDS_DIR_NAME: Final[str] = "apps"
DEFAULT_LOGS_DIR_NAME: Final[str] = "logs"

DEFAULT_LOG_LEVEL: Final[str] = "INFO"
DEFAULT_CONSOLE_LOG_LEVEL: Final[str] = "INFO"
DEFAULT_PRIVILEGE_COMMAND: Final[str] = "sudo"
DEFAULT_TMP_DIR: Final[str] = tempfile.gettempdir()

ISO_DATETIME_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

SECTION_DEFAULT: Final[str] = "DEFAULT"
SECTION_DIRECTORY: Final[str] = "directory"
SECTION_INTEGRATION: Final[str] = "integration"

KEY_CONFIG_VERSION: Final[str] = "config_version"
KEY_LOG_LEVEL: Final[str] = "log_level"
KEY_CONSOLE_LOG_LEVEL: Final[str] = "console_log_level"
KEY_CATEGORY_DIRS: Final[str] = "category_dirs"
KEY_PRIVILEGE_COMMAND: Final[str] = "privilege_command"
KEY_REFRESH_DATABASE: Final[str] = "refresh_database"

DIRECTORY_KEYS: Final[tuple[str, ...]] = (
    "applications",
    "icons",
    "bin",
    "records",
    "logs",
    "tmp",
)

# Install record format version
RECORD_VERSION: Final[str] = "1.0.0"

# =============================================================================
# Desktop Integration Constants
# =============================================================================

# Where category tags are discovered (relative entries expand against home)
DEFAULT_CATEGORY_DIRS: Final[tuple[str, ...]] = (
    "/usr/share/applications",
    "/usr/local/share/applications",
    "~/.local/share/applications",
)

USER_APPLICATIONS_SUBPATH: Final[tuple[str, ...]] = (
    ".local",
    "share",
    "applications",
)
USER_ICONS_SUBPATH: Final[tuple[str, ...]] = (".local", "share", "icons")
DEFAULT_BIN_DIR: Final[str] = "/usr/local/bin"

DESKTOP_FILE_SUFFIX: Final[str] = ".desktop"
DESKTOP_FILE_GLOB: Final[str] = "*.desktop"
DESKTOP_SECTION_HEADER: Final[str] = "[Desktop Entry]"
DESKTOP_FILE_TYPE: Final[str] = "Application"
DESKTOP_FILE_MODE: Final[int] = 0o755
DESKTOP_DATABASE_COMMAND: Final[str] = "update-desktop-database"

# Image formats accepted as icons at the extraction root
ICON_EXTENSIONS: Final[tuple[str, ...]] = (
    ".png",
    ".svg",
    ".xpm",
    ".ico",
    ".bmp",
    ".jpg",
    ".jpeg",
)

# =============================================================================
# AppImage Extraction Constants
# =============================================================================

APPIMAGE_EXTRACT_FLAG: Final[str] = "--appimage-extract"
APPIMAGE_EXTRACT_DIR: Final[str] = "squashfs-root"
TEMP_DIR_PREFIX: Final[str] = "appimage-desktop-"
EXECUTABLE_MODE: Final[int] = 0o755

# =============================================================================
# Logging Constants
# =============================================================================

LOG_ROOT_NAME: Final[str] = "appimage_desktop"
LOG_FILE_NAME: Final[str] = "appimage-desktop.log"
LOG_DIR_ENV_VAR: Final[str] = "APPIMAGE_DESKTOP_LOG_DIR"

LOG_ROTATION_THRESHOLD_BYTES: Final[int] = 1024 * 1024
LOG_BACKUP_COUNT: Final[int] = 3

LOG_CONSOLE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
LOG_CONSOLE_DATE_FORMAT: Final[str] = "%H:%M:%S"
LOG_FILE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "%(funcName)s:%(lineno)d - %(message)s"
)
LOG_FILE_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

LOG_COLORS: Final[dict[str, str]] = {
    "DEBUG": "\033[36m",
    "INFO": "\033[32m",
    "WARNING": "\033[33m",
    "ERROR": "\033[31m",
    "CRITICAL": "\033[35m",
    "RESET": "\033[0m",
}
