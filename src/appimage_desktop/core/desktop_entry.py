"""Desktop entry management for AppImage applications.

Writes and removes ``.desktop`` files following the freedesktop.org desktop
entry specification. The key set is fixed: Name, Exec, Icon, Type,
Terminal, Categories.
"""

import shutil
from pathlib import Path

from appimage_desktop.constants import (
    DESKTOP_DATABASE_COMMAND,
    DESKTOP_FILE_MODE,
    DESKTOP_FILE_SUFFIX,
    DESKTOP_FILE_TYPE,
    DESKTOP_SECTION_HEADER,
)
from appimage_desktop.core.process import CommandRunner
from appimage_desktop.exceptions import UnwritableTargetError
from appimage_desktop.logger import get_logger
from appimage_desktop.types import DesktopEntryRecord

logger = get_logger(__name__)

_ESCAPES = str.maketrans(
    {"\\": "\\\\", "\n": "\\n", "\t": "\\t", "\r": "\\r"}
)


def escape_value(value: str) -> str:
    """Escape a string value so it stays on its own line."""
    return value.translate(_ESCAPES)


def render_desktop_entry(record: DesktopEntryRecord) -> str:
    """Render desktop entry file content.

    Args:
        record: Values to write

    Returns:
        Desktop file content ending with a newline

    """
    content_lines = [
        DESKTOP_SECTION_HEADER,
        f"Name={escape_value(record.name)}",
        f"Exec={escape_value(record.exec_command)}",
        f"Icon={escape_value(str(record.icon_path))}",
        f"Type={DESKTOP_FILE_TYPE}",
        f"Terminal={str(record.terminal).lower()}",
        f"Categories={escape_value(record.category)}",
        "",
    ]
    return "\n".join(content_lines)


class DesktopEntryManager:
    """Manages .desktop entry files in one applications directory."""

    def __init__(
        self,
        applications_dir: Path,
        runner: CommandRunner | None = None,
        *,
        refresh_database: bool = True,
    ) -> None:
        """Initialize desktop entry manager.

        Args:
            applications_dir: Directory the entries are written to
            runner: Runner used to refresh the desktop database
            refresh_database: Whether to run update-desktop-database

        """
        self.applications_dir = applications_dir
        self.runner = runner
        self.refresh_database = refresh_database

    def desktop_file_path(self, app_name: str) -> Path:
        """Return the desktop file path for an app."""
        return self.applications_dir / f"{app_name}{DESKTOP_FILE_SUFFIX}"

    def write(self, record: DesktopEntryRecord) -> Path:
        """Write the desktop entry, overwriting any previous one.

        Args:
            record: Values to write

        Returns:
            Path of the desktop file

        Raises:
            UnwritableTargetError: If the directory or file cannot be written

        """
        desktop_file = self.desktop_file_path(record.name)
        try:
            self.applications_dir.mkdir(parents=True, exist_ok=True)
            desktop_file.write_text(
                render_desktop_entry(record), encoding="utf-8"
            )
            desktop_file.chmod(DESKTOP_FILE_MODE)
        except OSError as e:
            msg = f"Failed to write desktop entry: {e}"
            raise UnwritableTargetError(msg, str(desktop_file)) from e

        logger.info("🖥️  Desktop entry created: %s", desktop_file)
        self.refresh_desktop_database()
        return desktop_file

    def remove(self, app_name: str) -> Path | None:
        """Remove the desktop entry for an app.

        Returns:
            Path of the removed file, or None if there was none

        Raises:
            OSError: If the file exists but cannot be removed

        """
        desktop_file = self.desktop_file_path(app_name)
        if not desktop_file.exists():
            logger.debug("No desktop file found for %s", app_name)
            return None

        desktop_file.unlink()
        logger.debug("Removed desktop file: %s", desktop_file)
        self.refresh_desktop_database()
        return desktop_file

    def refresh_desktop_database(self) -> bool:
        """Refresh the desktop database so menus pick up changes.

        Best-effort: a missing tool or a failing run is only logged.

        Returns:
            True if the refresh ran successfully

        """
        if not self.refresh_database or self.runner is None:
            return False
        if shutil.which(DESKTOP_DATABASE_COMMAND) is None:
            logger.debug("%s not available", DESKTOP_DATABASE_COMMAND)
            return False

        try:
            result = self.runner.run(
                [DESKTOP_DATABASE_COMMAND, str(self.applications_dir)]
            )
        except OSError as e:
            logger.debug("Could not refresh desktop database: %s", e)
            return False

        if result.returncode != 0:
            logger.debug(
                "Desktop database refresh failed: %s", result.stderr.strip()
            )
            return False

        logger.debug("Desktop database refreshed")
        return True
