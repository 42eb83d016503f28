"""Command-line interface for appimage-desktop."""

from appimage_desktop.cli.parser import CLIParser
from appimage_desktop.cli.runner import CLIRunner

__all__ = ["CLIParser", "CLIRunner"]
