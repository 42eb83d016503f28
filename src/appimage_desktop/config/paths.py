"""Path defaults for appimage-desktop.

All paths derive from an explicit home directory so nothing below the CLI
reads ``$HOME`` or depends on the current working directory.
"""

from pathlib import Path

from appimage_desktop.constants import (
    CONFIG_DIR_NAME,
    DEFAULT_BIN_DIR,
    DEFAULT_CONFIG_SUBDIR,
    DEFAULT_TMP_DIR,
    USER_APPLICATIONS_SUBPATH,
    USER_ICONS_SUBPATH,
)


class Paths:
    """Application paths and directory structure for one home directory."""

    def __init__(self, home: Path | None = None) -> None:
        """Derive default paths.

        Args:
            home: Home directory to build paths from (defaults to
                Path.home())

        """
        self.home = home or Path.home()
        self.config_dir = self.home / CONFIG_DIR_NAME / DEFAULT_CONFIG_SUBDIR
        self.applications_dir = self.home.joinpath(*USER_APPLICATIONS_SUBPATH)
        self.icons_dir = self.home.joinpath(*USER_ICONS_SUBPATH)
        self.bin_dir = Path(DEFAULT_BIN_DIR)
        self.tmp_dir = Path(DEFAULT_TMP_DIR)

    def expand_path(self, path_str: str) -> Path:
        """Expand ``~`` against this home directory and make absolute.

        Args:
            path_str: Path string to expand (e.g., "~/my-path")

        Returns:
            Absolute Path object

        Example:
            >>> Paths(Path("/home/user")).expand_path("~/Documents")
            PosixPath('/home/user/Documents')
        """
        path_str = path_str.strip()
        if path_str == "~":
            return self.home
        if path_str.startswith("~/"):
            return self.home / path_str[2:]
        return Path(path_str).absolute()
