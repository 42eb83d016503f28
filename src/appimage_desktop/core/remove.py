"""RemoveService: unregisters an AppImage from the desktop environment.

Removal is best-effort and idempotent: missing targets are skipped and a
failing step is reported as a warning without stopping the others.
"""

from pathlib import Path

from appimage_desktop.config import ConfigManager, InstallRecordManager
from appimage_desktop.core.desktop_entry import DesktopEntryManager
from appimage_desktop.core.icon import find_installed_icons
from appimage_desktop.core.naming import (
    app_name_from_path,
    sanitize_command_name,
)
from appimage_desktop.core.process import CommandRunner
from appimage_desktop.core.symlink import SymlinkManager
from appimage_desktop.exceptions import PermissionDeniedError
from appimage_desktop.logger import get_logger
from appimage_desktop.types import GlobalConfig, InstallRecord, RemovalResult

logger = get_logger(__name__)


class RemoveService:
    """Service that removes the symlink, desktop entry and icon of an app."""

    def __init__(
        self,
        global_config: GlobalConfig,
        records: InstallRecordManager,
        runner: CommandRunner | None = None,
    ) -> None:
        """Create a new RemoveService.

        Args:
            global_config: Parsed global configuration
            records: Install record manager
            runner: External process runner (created from config if None)

        """
        self.global_config = global_config
        self.records = records

        directory = global_config["directory"]
        integration = global_config["integration"]
        self.runner = runner or CommandRunner(
            integration["privilege_command"]
        )
        self.symlinks = SymlinkManager(directory["bin"], self.runner)
        self.desktop_entries = DesktopEntryManager(
            directory["applications"],
            self.runner,
            refresh_database=integration["refresh_database"],
        )

    @classmethod
    def create_default(
        cls, config_manager: ConfigManager | None = None
    ) -> "RemoveService":
        """Create RemoveService with default dependencies."""
        config_mgr = config_manager or ConfigManager()
        return cls(
            global_config=config_mgr.load_global_config(),
            records=config_mgr.records,
        )

    def remove(self, appimage_path: Path) -> RemovalResult:
        """Remove everything an install created for this AppImage.

        The AppImage itself does not need to exist. When an install record
        exists its command name is used, so custom names are not orphaned;
        otherwise the default sanitized command name is assumed.

        Args:
            appimage_path: Path (or just file name) of the AppImage

        Returns:
            What was removed and any warnings

        """
        app_name = app_name_from_path(appimage_path)
        record = self._load_record(app_name)
        command_name = (
            record["command_name"]
            if record
            else sanitize_command_name(app_name)
        )
        result = RemovalResult(app_name=app_name, command_name=command_name)

        self._remove_symlink(result, record)
        self._remove_desktop_entry(result)
        self._remove_icons(result, record)
        self._remove_record(result)
        return result

    def _load_record(self, app_name: str) -> InstallRecord | None:
        try:
            return self.records.load_record(app_name)
        except ValueError as e:
            logger.warning("Ignoring install record: %s", e)
            return None

    def _remove_symlink(
        self, result: RemovalResult, record: InstallRecord | None
    ) -> None:
        if record:
            link = Path(record["symlink_path"])
            target = self.symlinks.read_target(link)
            if target is not None and target != record["appimage_path"]:
                warning = (
                    f"Leaving {link}: it now points to {target}, "
                    f"not {record['appimage_path']}"
                )
                logger.warning("%s", warning)
                result.warnings.append(warning)
                return
        elif result.command_name:
            link = self.symlinks.link_path(result.command_name)
        else:
            logger.debug("No command name for %s; skip", result.app_name)
            return

        try:
            if self.symlinks.remove(link):
                result.symlink_removed = link
        except PermissionDeniedError as e:
            logger.warning("%s", e)
            result.warnings.append(str(e))

    def _remove_desktop_entry(self, result: RemovalResult) -> None:
        try:
            result.desktop_entry_removed = self.desktop_entries.remove(
                result.app_name
            )
        except OSError as e:
            logger.warning(
                "Failed to remove desktop entry for %s: %s",
                result.app_name,
                e,
            )
            result.warnings.append(str(e))

    def _remove_icons(
        self, result: RemovalResult, record: InstallRecord | None
    ) -> None:
        icons = find_installed_icons(
            self.global_config["directory"]["icons"], result.app_name
        )
        if record:
            recorded_icon = Path(record["icon_path"])
            if recorded_icon.exists() and recorded_icon not in icons:
                icons.append(recorded_icon)

        for icon in icons:
            try:
                icon.unlink()
            except FileNotFoundError:
                continue
            except OSError as e:
                logger.warning("Failed to remove icon %s: %s", icon, e)
                result.warnings.append(str(e))
                continue
            logger.debug("Removed icon: %s", icon)
            result.icons_removed.append(icon)

    def _remove_record(self, result: RemovalResult) -> None:
        try:
            result.record_removed = self.records.remove_record(
                result.app_name
            )
        except OSError as e:
            logger.warning(
                "Failed to remove install record for %s: %s",
                result.app_name,
                e,
            )
            result.warnings.append(str(e))


def display_removal_result(result: RemovalResult) -> None:
    """Log results of a removal operation."""
    if result.symlink_removed:
        logger.info("✅ Symlink removed: %s", result.symlink_removed)
    if result.desktop_entry_removed:
        logger.info(
            "✅ Desktop entry removed: %s", result.desktop_entry_removed
        )
    for icon in result.icons_removed:
        logger.info("✅ Icon removed: %s", icon)

    if result.removed_anything:
        logger.info(
            "Desktop entry and icon removed for %s.", result.app_name
        )
    else:
        logger.info("Nothing to remove for %s.", result.app_name)

    if result.warnings:
        logger.info(
            "⚠️  Removal finished with %d warning(s)", len(result.warnings)
        )
