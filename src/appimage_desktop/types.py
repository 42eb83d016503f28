"""Type definitions shared across appimage-desktop.

TypedDicts describe the parsed configuration and the persisted install
record; dataclasses describe the results returned by the lifecycle services.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import TypedDict

# =============================================================================
# Configuration Types
# =============================================================================


class DirectoryConfig(TypedDict):
    """Directory paths configuration."""

    applications: Path
    icons: Path
    bin: Path
    records: Path
    logs: Path
    tmp: Path


class IntegrationConfig(TypedDict):
    """Desktop integration options."""

    category_dirs: list[Path]
    privilege_command: str
    refresh_database: bool


class GlobalConfig(TypedDict):
    """Global application configuration."""

    config_version: str
    log_level: str
    console_log_level: str
    directory: DirectoryConfig
    integration: IntegrationConfig


# =============================================================================
# Install Record
# =============================================================================


class InstallRecord(TypedDict):
    """What an install created, persisted so removal can undo it."""

    config_version: str
    app_name: str
    appimage_path: str
    command_name: str
    symlink_path: str
    desktop_file: str
    icon_path: str
    category: str
    installed_date: str


# =============================================================================
# Lifecycle Results
# =============================================================================


@dataclass(frozen=True)
class DesktopEntryRecord:
    """Values written into a desktop entry file."""

    name: str
    exec_command: str
    icon_path: Path
    category: str
    terminal: bool = False


@dataclass(frozen=True)
class InstallResult:
    """Outcome of a successful install."""

    app_name: str
    command_name: str
    symlink_path: Path
    icon_path: Path
    desktop_file: Path
    category: str


@dataclass
class RemovalResult:
    """Outcome of a removal; every field records what was actually removed."""

    app_name: str
    command_name: str
    symlink_removed: Path | None = None
    desktop_entry_removed: Path | None = None
    icons_removed: list[Path] = field(default_factory=list)
    record_removed: bool = False
    warnings: list[str] = field(default_factory=list)

    @property
    def removed_anything(self) -> bool:
        """Return True if at least one artifact was deleted."""
        return bool(
            self.symlink_removed
            or self.desktop_entry_removed
            or self.icons_removed
            or self.record_removed
        )
