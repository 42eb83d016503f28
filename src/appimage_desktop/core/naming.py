"""Application and command naming helpers."""

import re
from pathlib import Path

_NON_ALPHANUMERIC = re.compile(r"[^a-zA-Z0-9]")


def app_name_from_path(appimage_path: Path) -> str:
    """Return the AppImage base name (file name without last extension).

    >>> app_name_from_path(Path("/opt/My Cool App.AppImage"))
    'My Cool App'
    """
    return appimage_path.stem


def sanitize_command_name(name: str) -> str:
    """Reduce a name to a lowercase ASCII alphanumeric command name.

    >>> sanitize_command_name("My Cool App")
    'mycoolapp'
    """
    return _NON_ALPHANUMERIC.sub("", name).lower()
