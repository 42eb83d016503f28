"""Configuration facade for appimage-desktop.

Coordinates the specialized managers:
- settings.py: GlobalConfigManager for INI configuration
- records.py: InstallRecordManager for per-app JSON install records
- paths.py: Path defaults derived from an explicit home directory
"""

import logging
from pathlib import Path

from appimage_desktop.config.paths import Paths
from appimage_desktop.config.records import InstallRecordManager
from appimage_desktop.config.settings import GlobalConfigManager
from appimage_desktop.types import GlobalConfig

logger = logging.getLogger(__name__)


class ConfigManager:
    """Facade that coordinates all configuration managers."""

    def __init__(
        self, config_dir: Path | None = None, home: Path | None = None
    ) -> None:
        """Initialize configuration manager.

        Args:
            config_dir: Optional custom config directory.
                Defaults to ~/.config/appimage-desktop
            home: Home directory used to expand ``~`` and build defaults.
                Defaults to Path.home()

        """
        self.paths = Paths(home)
        self.global_config_manager = GlobalConfigManager(
            config_dir, self.paths
        )
        self._global_config: GlobalConfig | None = None
        self._record_manager: InstallRecordManager | None = None

    @property
    def config_dir(self) -> Path:
        """Get the configuration directory path."""
        return self.global_config_manager.config_dir

    @property
    def settings_file(self) -> Path:
        """Get the settings file path."""
        return self.global_config_manager.settings_file

    def load_global_config(self) -> GlobalConfig:
        """Load global configuration, caching the result."""
        if self._global_config is None:
            self._global_config = (
                self.global_config_manager.load_global_config()
            )
        return self._global_config

    def save_global_config(self, config: GlobalConfig) -> None:
        """Save global configuration to INI file."""
        self.global_config_manager.save_global_config(config)
        self._global_config = config

    @property
    def records(self) -> InstallRecordManager:
        """Install record manager for the configured records directory."""
        if self._record_manager is None:
            records_dir = self.load_global_config()["directory"]["records"]
            self._record_manager = InstallRecordManager(records_dir)
        return self._record_manager
