"""Launcher symlink management.

Symlinks live in a system binary directory that is usually root-owned.
Direct filesystem calls are used when that directory is writable; otherwise
the operation is delegated to the privilege command through CommandRunner.
"""

import os
from pathlib import Path

from appimage_desktop.core.process import CommandRunner
from appimage_desktop.exceptions import PermissionDeniedError
from appimage_desktop.logger import get_logger

logger = get_logger(__name__)


class SymlinkManager:
    """Creates and removes ``<bin_dir>/<command>`` launcher symlinks."""

    def __init__(self, bin_dir: Path, runner: CommandRunner) -> None:
        """Initialize symlink manager.

        Args:
            bin_dir: Directory holding launcher symlinks
            runner: Runner used for privileged fallbacks

        """
        self.bin_dir = bin_dir
        self.runner = runner

    def link_path(self, command_name: str) -> Path:
        """Return the symlink path for a command name."""
        return self.bin_dir / command_name

    @staticmethod
    def occupied(path: Path) -> bool:
        """Return True if anything, including a dangling symlink, is there."""
        return path.is_symlink() or path.exists()

    @staticmethod
    def read_target(path: Path) -> str | None:
        """Return where a symlink points, or None if it is not a symlink."""
        if not path.is_symlink():
            return None
        try:
            return os.readlink(path)
        except OSError:
            return None

    def _needs_privilege(self) -> bool:
        return not os.access(self.bin_dir, os.W_OK)

    def _run_privileged(self, args: list[str], action: str) -> None:
        try:
            result = self.runner.run_privileged(args)
        except OSError as e:
            msg = f"Failed to {action}: {e}"
            raise PermissionDeniedError(msg) from e
        if result.returncode != 0:
            detail = (result.stderr or result.stdout).strip()
            msg = f"Failed to {action}. Make sure you have sudo privileges."
            if detail:
                msg = f"{msg} {detail}"
            raise PermissionDeniedError(msg)

    def create(
        self,
        command_name: str,
        target: Path,
        *,
        replace_existing: bool = False,
    ) -> Path:
        """Create a launcher symlink pointing at target.

        Args:
            command_name: Sanitized command name
            target: Absolute AppImage path
            replace_existing: Remove whatever occupies the link path first

        Returns:
            Path of the created symlink

        Raises:
            PermissionDeniedError: If removal or creation fails

        """
        link = self.link_path(command_name)

        if replace_existing and self.occupied(link):
            self.remove(link, symlink_only=False)

        if self._needs_privilege():
            logger.debug("Creating symlink with privileges: %s", link)
            self._run_privileged(
                ["ln", "-s", "--", str(target), str(link)],
                "create symlink",
            )
        else:
            try:
                link.symlink_to(target)
            except OSError as e:
                msg = f"Failed to create symlink: {e}"
                raise PermissionDeniedError(msg, str(link)) from e

        logger.info("🔗 Symlink created: %s -> %s", link, target)
        return link

    def remove(self, link: Path, *, symlink_only: bool = True) -> bool:
        """Remove a launcher symlink.

        Args:
            link: Path to remove
            symlink_only: Leave the path alone unless it is a symlink

        Returns:
            True if something was removed, False if nothing matched

        Raises:
            PermissionDeniedError: If the removal fails

        """
        if symlink_only and not link.is_symlink():
            return False
        if not self.occupied(link):
            return False

        if self._needs_privilege():
            logger.debug("Removing with privileges: %s", link)
            self._run_privileged(
                ["rm", "-f", "--", str(link)], "remove symlink"
            )
        else:
            try:
                link.unlink()
            except OSError as e:
                msg = f"Failed to remove {link}: {e}"
                raise PermissionDeniedError(msg, str(link)) from e

        logger.debug("Removed: %s", link)
        return True
