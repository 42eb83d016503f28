"""Interactive user interface helpers."""

from appimage_desktop.ui.prompts import Prompter

__all__ = ["Prompter"]
