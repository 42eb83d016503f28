"""INI parser helpers for appimage-desktop configuration.

Builds parsers with the project-wide options and supplies the comments
written into a fresh settings file.
"""

import configparser
from datetime import UTC, datetime

from appimage_desktop.constants import (
    CONFIG_VERSION,
    ISO_DATETIME_FORMAT,
    KEY_CONFIG_VERSION,
    SECTION_DEFAULT,
    SECTION_DIRECTORY,
    SECTION_INTEGRATION,
)


def create_config_parser() -> configparser.ConfigParser:
    """Return a ConfigParser configured like every settings file we read."""
    return configparser.ConfigParser(
        inline_comment_prefixes=("#", ";"),
        interpolation=None,
    )


def split_list_value(value: str) -> list[str]:
    """Split a comma or newline separated option into stripped items.

    Args:
        value: Raw option value

    Returns:
        Non-empty items in their original order

    """
    items = value.replace("\n", ",").split(",")
    return [item.strip() for item in items if item.strip()]


class ConfigCommentManager:
    """Manages configuration file comments for user-friendly documentation."""

    @staticmethod
    def get_file_header() -> str:
        """Generate file header comment with timestamp.

        Returns:
            Header comment string for the configuration file
        """
        timestamp = datetime.now(tz=UTC).strftime(ISO_DATETIME_FORMAT)
        return f"""# appimage-desktop configuration
# Settings for registering AppImages with the desktop environment.
#
# Last updated: {timestamp}
# Configuration version: {CONFIG_VERSION}

"""

    @staticmethod
    def get_section_comments() -> dict[str, str]:
        """Get comments for each configuration section.

        Returns:
            Dictionary mapping section names to their comment strings
        """
        return {
            SECTION_DEFAULT: """# ========================================
# MAIN CONFIGURATION
# ========================================
# log_level: Detail level for the log file (DEBUG, INFO, WARNING, ERROR)
# console_log_level: Console output detail level (DEBUG, INFO, WARNING)

""",
            SECTION_DIRECTORY: """
# ========================================
# DIRECTORY PATHS
# ========================================
# Use absolute paths or paths starting with ~ for home directory.
#
# applications: Where desktop entries are written
# icons: Where the chosen icon is copied
# bin: Where the launcher symlink is created (usually needs sudo)
# records: Install records used to undo an install
# logs: Log files location
# tmp: Parent directory for temporary AppImage extraction

""",
            SECTION_INTEGRATION: """
# ========================================
# DESKTOP INTEGRATION
# ========================================
# category_dirs: Comma-separated directories scanned for categories
# privilege_command: Command used when the bin directory is not writable
# refresh_database: Run update-desktop-database after changes (true/false)

""",
        }

    @staticmethod
    def get_key_comments() -> dict[str, dict[str, str]]:
        """Get inline comments for specific configuration keys.

        Returns:
            Nested dictionary mapping section -> key -> comment
        """
        return {
            SECTION_DEFAULT: {
                KEY_CONFIG_VERSION: "# DO NOT MODIFY - Config format version",
            },
            SECTION_DIRECTORY: {},
            SECTION_INTEGRATION: {},
        }
