"""Top-level package for appimage-desktop.

Registers AppImage bundles with the desktop environment: launcher symlink,
icon, and a freedesktop.org desktop entry.

License: GPL-3.0
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("appimage-desktop")
except PackageNotFoundError:
    # Fallback for development environments where package isn't installed
    __version__ = "dev"
