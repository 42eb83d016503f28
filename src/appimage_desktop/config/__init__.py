"""Configuration management.

This package provides:
- ConfigManager: Unified facade for all configuration operations
- GlobalConfigManager: INI configuration management (settings.py)
- InstallRecordManager: Per-app JSON install records (records.py)
- Paths: Path defaults for one home directory (paths.py)
"""

from appimage_desktop.config.config import ConfigManager
from appimage_desktop.config.paths import Paths
from appimage_desktop.config.records import InstallRecordManager
from appimage_desktop.config.settings import GlobalConfigManager
from appimage_desktop.types import GlobalConfig, InstallRecord

__all__ = [
    "ConfigManager",
    "GlobalConfig",
    "GlobalConfigManager",
    "InstallRecord",
    "InstallRecordManager",
    "Paths",
]
