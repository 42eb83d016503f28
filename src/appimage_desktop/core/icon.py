"""Icon discovery and installation.

Icons are taken from the root of the extracted AppImage, where the
AppImage format places the application icon (often as a symlink into
``usr/share/icons``).
"""

import shutil
from pathlib import Path

from appimage_desktop.constants import ICON_EXTENSIONS
from appimage_desktop.exceptions import UnwritableTargetError
from appimage_desktop.logger import get_logger

logger = get_logger(__name__)


def find_icon_candidates(extract_root: Path) -> list[Path]:
    """List image files directly inside the extraction root.

    Symlinks are followed; dangling ones are ignored.

    Args:
        extract_root: The extracted ``squashfs-root`` directory

    Returns:
        Image files sorted by name

    """
    candidates = [
        path
        for path in extract_root.iterdir()
        if path.suffix.lower() in ICON_EXTENSIONS and path.is_file()
    ]
    logger.debug(
        "Found %d icon candidates in %s", len(candidates), extract_root
    )
    return sorted(candidates, key=lambda path: path.name)


def install_icon(source: Path, icons_dir: Path, app_name: str) -> Path:
    """Copy an icon to ``<icons_dir>/<app_name><ext>``.

    Args:
        source: Chosen icon file
        icons_dir: Destination icon directory (created if missing)
        app_name: AppImage base name

    Returns:
        Absolute path of the installed icon

    Raises:
        UnwritableTargetError: If the directory or file cannot be written

    """
    dest = icons_dir / f"{app_name}{source.suffix}"
    try:
        icons_dir.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(source, dest)
    except OSError as e:
        msg = f"Failed to copy icon from {source}: {e}"
        raise UnwritableTargetError(msg, str(dest)) from e

    logger.info("🎨 Icon installed: %s", dest)
    return dest.absolute()


def find_installed_icons(icons_dir: Path, app_name: str) -> list[Path]:
    """Return icons in icons_dir whose name minus extension is app_name."""
    if not icons_dir.is_dir():
        return []
    return sorted(
        path
        for path in icons_dir.iterdir()
        if path.stem == app_name and path.suffix and not path.is_dir()
    )
