"""Global configuration manager for INI settings."""

import configparser
import logging
from pathlib import Path

from appimage_desktop.config.parser import (
    ConfigCommentManager,
    create_config_parser,
    split_list_value,
)
from appimage_desktop.config.paths import Paths
from appimage_desktop.constants import (
    CONFIG_FILE_NAME,
    CONFIG_VERSION,
    DEFAULT_CATEGORY_DIRS,
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_LOG_LEVEL,
    DEFAULT_LOGS_DIR_NAME,
    DEFAULT_PRIVILEGE_COMMAND,
    DEFAULT_RECORDS_DIR_NAME,
    DIRECTORY_KEYS,
    KEY_CATEGORY_DIRS,
    KEY_CONFIG_VERSION,
    KEY_CONSOLE_LOG_LEVEL,
    KEY_LOG_LEVEL,
    KEY_PRIVILEGE_COMMAND,
    KEY_REFRESH_DATABASE,
    SECTION_DEFAULT,
    SECTION_DIRECTORY,
    SECTION_INTEGRATION,
)
from appimage_desktop.types import (
    DirectoryConfig,
    GlobalConfig,
    IntegrationConfig,
)

logger = logging.getLogger(__name__)

# Type alias for raw INI config dictionary
RawConfigDict = dict[str, str | dict[str, str]]


class GlobalConfigManager:
    """Manages global INI configuration."""

    def __init__(
        self, config_dir: Path | None = None, paths: Paths | None = None
    ) -> None:
        """Initialize global config manager.

        Args:
            config_dir: Configuration directory path
                (defaults to paths.config_dir)
            paths: Path defaults for the current home directory

        """
        self.paths = paths or Paths()
        self.config_dir = config_dir or self.paths.config_dir
        self.settings_file = self.config_dir / CONFIG_FILE_NAME

    def get_default_global_config(self) -> RawConfigDict:
        """Get default global configuration values.

        Returns:
            Default configuration dictionary

        """
        return {
            KEY_CONFIG_VERSION: CONFIG_VERSION,
            KEY_LOG_LEVEL: DEFAULT_LOG_LEVEL,
            KEY_CONSOLE_LOG_LEVEL: DEFAULT_CONSOLE_LOG_LEVEL,
            SECTION_DIRECTORY: {
                "applications": str(self.paths.applications_dir),
                "icons": str(self.paths.icons_dir),
                "bin": str(self.paths.bin_dir),
                "records": str(self.config_dir / DEFAULT_RECORDS_DIR_NAME),
                "logs": str(self.config_dir / DEFAULT_LOGS_DIR_NAME),
                "tmp": str(self.paths.tmp_dir),
            },
            SECTION_INTEGRATION: {
                KEY_CATEGORY_DIRS: ", ".join(DEFAULT_CATEGORY_DIRS),
                KEY_PRIVILEGE_COMMAND: DEFAULT_PRIVILEGE_COMMAND,
                KEY_REFRESH_DATABASE: "true",
            },
        }

    def _create_config_from_defaults(
        self, defaults: RawConfigDict
    ) -> configparser.ConfigParser:
        """Create ConfigParser populated with defaults.

        Args:
            defaults: Default configuration values

        Returns:
            ConfigParser populated with defaults

        """
        config = create_config_parser()
        config.read_dict(
            {
                SECTION_DEFAULT: {
                    key: value
                    for key, value in defaults.items()
                    if not isinstance(value, dict)
                }
            }
        )
        for key, value in defaults.items():
            if isinstance(value, dict):
                config.read_dict({key: value})
        return config

    def load_global_config(self) -> GlobalConfig:
        """Load global configuration from INI file.

        A missing settings file is created from defaults. Values present in
        the user's file override the defaults key by key.

        Returns:
            Loaded global configuration

        """
        defaults = self.get_default_global_config()
        config = self._create_config_from_defaults(defaults)

        if self.settings_file.exists():
            try:
                config.read(self.settings_file, encoding="utf-8")
            except configparser.Error as e:
                logger.warning(
                    "Invalid settings file %s, using defaults: %s",
                    self.settings_file,
                    e,
                )
                config = self._create_config_from_defaults(defaults)
        else:
            try:
                self.save_global_config(self._convert_to_global_config(config))
            except OSError as e:
                logger.warning(
                    "Could not write default settings to %s: %s",
                    self.settings_file,
                    e,
                )

        return self._convert_to_global_config(config)

    def save_global_config(self, config: GlobalConfig) -> None:
        """Save global configuration to INI file with comments.

        Args:
            config: Global configuration to save

        """
        comment_manager = ConfigCommentManager()
        section_comments = comment_manager.get_section_comments()
        key_comments = comment_manager.get_key_comments()

        integration = config["integration"]
        sections: dict[str, dict[str, str]] = {
            SECTION_DEFAULT: {
                KEY_CONFIG_VERSION: config["config_version"],
                KEY_LOG_LEVEL: config["log_level"],
                KEY_CONSOLE_LOG_LEVEL: config["console_log_level"],
            },
            SECTION_DIRECTORY: {
                key: str(path) for key, path in config["directory"].items()
            },
            SECTION_INTEGRATION: {
                KEY_CATEGORY_DIRS: ", ".join(
                    str(path) for path in integration["category_dirs"]
                ),
                KEY_PRIVILEGE_COMMAND: integration["privilege_command"],
                KEY_REFRESH_DATABASE: str(
                    integration["refresh_database"]
                ).lower(),
            },
        }

        self.config_dir.mkdir(parents=True, exist_ok=True)
        with self.settings_file.open("w", encoding="utf-8") as f:
            f.write(comment_manager.get_file_header())
            for section, values in sections.items():
                f.write(section_comments[section])
                f.write(f"[{section}]\n")
                for key, value in values.items():
                    inline_comment = key_comments[section].get(key, "")
                    if inline_comment:
                        f.write(f"{key} = {value}  {inline_comment}\n")
                    else:
                        f.write(f"{key} = {value}\n")

    def _convert_to_global_config(
        self, config: configparser.ConfigParser
    ) -> GlobalConfig:
        """Convert a populated ConfigParser to typed GlobalConfig.

        Args:
            config: Parser holding defaults overlaid with user values

        Returns:
            Typed global configuration

        """
        directory = DirectoryConfig(
            **{
                key: self.paths.expand_path(
                    config.get(SECTION_DIRECTORY, key)
                )
                for key in DIRECTORY_KEYS
            }
        )

        try:
            refresh_database = config.getboolean(
                SECTION_INTEGRATION, KEY_REFRESH_DATABASE
            )
        except ValueError:
            logger.warning(
                "Invalid %s value, defaulting to true", KEY_REFRESH_DATABASE
            )
            refresh_database = True

        integration = IntegrationConfig(
            category_dirs=[
                self.paths.expand_path(item)
                for item in split_list_value(
                    config.get(SECTION_INTEGRATION, KEY_CATEGORY_DIRS)
                )
            ],
            privilege_command=config.get(
                SECTION_INTEGRATION, KEY_PRIVILEGE_COMMAND
            ).strip(),
            refresh_database=refresh_database,
        )

        return GlobalConfig(
            config_version=config.get(SECTION_DEFAULT, KEY_CONFIG_VERSION),
            log_level=config.get(SECTION_DEFAULT, KEY_LOG_LEVEL).upper(),
            console_log_level=config.get(
                SECTION_DEFAULT, KEY_CONSOLE_LOG_LEVEL
            ).upper(),
            directory=directory,
            integration=integration,
        )
